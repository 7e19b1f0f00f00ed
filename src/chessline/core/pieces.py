"""Piece model: one immutable value class per piece kind.

Each kind answers two purely geometric questions from square-index
arithmetic:

* :meth:`Piece.is_move_possible`: can the piece reach *dest* from *src*?
* :meth:`Piece.src_to_dest_path`: which squares in between must be empty?

Board occupancy enters only through the ``dest_occupied`` flag, which pawns
use to tell pushes from captures.  Castling and en passant are handled by
:class:`~chessline.core.move_generator.MoveGenerator`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from chessline.core.enums import Color, PieceType
from chessline.core.types import Square, col_of, row_of

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_TYPES_BY_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}


def _deltas(src: Square, dest: Square) -> tuple[int, int]:
    return row_of(dest) - row_of(src), col_of(dest) - col_of(src)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _line_path(src: Square, dest: Square) -> tuple[Square, ...]:
    """Squares strictly between *src* and *dest* on a straight or diagonal line."""
    d_row, d_col = _deltas(src, dest)
    step = _sign(d_row) * 8 + _sign(d_col)
    return tuple(range(src + step, dest, step))


@dataclass(frozen=True, slots=True)
class Piece(ABC):
    """Immutable chess piece; subclasses provide the movement rules."""

    color: Color

    piece_type: ClassVar[PieceType]

    # ── Movement rules ───────────────────────────────────────────────────

    @abstractmethod
    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        """Whether the piece's geometry allows moving from *src* to *dest*."""

    def src_to_dest_path(self, src: Square, dest: Square) -> tuple[Square, ...]:
        """Intermediate squares that must be empty; empty for jumping pieces."""
        return ()

    # ── Identity / serialisation ─────────────────────────────────────────

    @property
    def name(self) -> str:
        """Single letter, uppercase for white, e.g. ``"N"`` / ``"n"``."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def create(color: Color, piece_type: PieceType) -> Piece:
        return _KINDS[piece_type](color)

    @staticmethod
    def from_char(char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            piece_type = _TYPES_BY_LETTER[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return Piece.create(color, piece_type)


class Pawn(Piece):
    __slots__ = ()
    piece_type = PieceType.PAWN

    @property
    def start_row(self) -> int:
        return 6 if self.color == Color.WHITE else 1

    @property
    def last_row(self) -> int:
        return 0 if self.color == Color.WHITE else 7

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        p = self.color.direction
        d_row, d_col = _deltas(src, dest)
        if d_col == 0:
            if dest_occupied:
                return False
            if d_row == -p:
                return True
            return d_row == -2 * p and row_of(src) == self.start_row
        # Diagonal steps are captures only
        return dest_occupied and d_row == -p and abs(d_col) == 1

    def src_to_dest_path(self, src: Square, dest: Square) -> tuple[Square, ...]:
        d_row, d_col = _deltas(src, dest)
        if d_col == 0 and abs(d_row) == 2:
            return ((src + dest) // 2,)
        return ()


class Knight(Piece):
    __slots__ = ()
    piece_type = PieceType.KNIGHT

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        d_row, d_col = _deltas(src, dest)
        return {abs(d_row), abs(d_col)} == {1, 2}


class Bishop(Piece):
    __slots__ = ()
    piece_type = PieceType.BISHOP

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        d_row, d_col = _deltas(src, dest)
        return d_row != 0 and abs(d_row) == abs(d_col)

    def src_to_dest_path(self, src: Square, dest: Square) -> tuple[Square, ...]:
        if not self.is_move_possible(src, dest, False):
            return ()
        return _line_path(src, dest)


class Rook(Piece):
    __slots__ = ()
    piece_type = PieceType.ROOK

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        d_row, d_col = _deltas(src, dest)
        return (d_row == 0) != (d_col == 0)

    def src_to_dest_path(self, src: Square, dest: Square) -> tuple[Square, ...]:
        if not self.is_move_possible(src, dest, False):
            return ()
        return _line_path(src, dest)


class Queen(Piece):
    __slots__ = ()
    piece_type = PieceType.QUEEN

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        d_row, d_col = _deltas(src, dest)
        if src == dest:
            return False
        return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)

    def src_to_dest_path(self, src: Square, dest: Square) -> tuple[Square, ...]:
        if not self.is_move_possible(src, dest, False):
            return ()
        return _line_path(src, dest)


class King(Piece):
    __slots__ = ()
    piece_type = PieceType.KING

    def is_move_possible(self, src: Square, dest: Square, dest_occupied: bool) -> bool:
        d_row, d_col = _deltas(src, dest)
        return max(abs(d_row), abs(d_col)) == 1


_KINDS: dict[PieceType, type[Piece]] = {
    kind.piece_type: kind for kind in (Pawn, Knight, Bishop, Rook, Queen, King)
}
