"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessline.core.enums import PieceType
from chessline.core.notation import STARTING_FEN
from chessline.game.messages import StatusMessages

_PROMOTION_TYPES = (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)


@dataclass(frozen=True)
class SessionSettings:
    """Knobs for a :class:`~chessline.game.session.GameSession`.

    Args:
        start_fen: Position used by ``reset`` when no FEN is given.
        promotion_type: Piece a pawn turns into on the last rank.
        strict_line_end: Reject moves played past the end of the active line.
        messages: Status texts.
    """

    start_fen: str = STARTING_FEN
    promotion_type: PieceType = PieceType.QUEEN
    strict_line_end: bool = True
    messages: StatusMessages = field(default_factory=StatusMessages)

    def __post_init__(self) -> None:
        if self.promotion_type not in _PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion_type.name}")


DEFAULT_SETTINGS = SessionSettings()
