"""Lines (expected move sequences) and the replay guard."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessline.core.enums import Color
from chessline.core.notation.movetext import movetext_from_names, names_from_movetext
from chessline.core.position import Position


@dataclass(frozen=True, slots=True)
class Line:
    """A named opening or puzzle line, e.g. ``Line(("e4", "e5"), "King's pawn")``."""

    moves: tuple[str, ...]
    title: str

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Line title must not be empty")
        object.__setattr__(self, "moves", tuple(self.moves))

    @classmethod
    def of(cls, title: str, moves: Iterable[str]) -> Line:
        return cls(tuple(moves), title)

    @classmethod
    def from_movetext(cls, title: str, text: str) -> Line:
        """Parse ``"1. e4 e5 2. Nf3"`` style movetext."""
        return cls(tuple(names_from_movetext(text)), title)

    def movetext(self) -> str:
        return movetext_from_names(self.moves)

    def expected(self, index: int) -> str | None:
        """Move name expected at half-move *index*, or ``None`` past the end."""
        if 0 <= index < len(self.moves):
            return self.moves[index]
        return None


def half_move_index(position: Position) -> int:
    """Half-move index of the side to move: white's k-th move is ``2k-2``,
    black's ``2k-1``."""
    if position.player == Color.WHITE:
        return position.move_no * 2 - 2
    return position.move_no * 2 - 1


def line_accepts(
    line: Line | None,
    name: str,
    position: Position,
    *,
    strict_end: bool = True,
) -> bool:
    """Replay guard: whether playing *name* in *position* follows *line*.

    With no line every move is accepted.  Past the end of the line the move
    is rejected unless *strict_end* is off.
    """
    if line is None:
        return True
    expected = line.expected(half_move_index(position))
    if expected is None:
        return not strict_end
    return expected == name
