"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessline.core.enums import MoveFlag, PieceType
from chessline.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A validated move, as produced by ``MoveGenerator.classify``."""

    src: Square
    dest: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_SHORT, MoveFlag.CASTLE_LONG)
