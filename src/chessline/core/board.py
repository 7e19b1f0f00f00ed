"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessline.core.enums import Color, PieceType
from chessline.core.pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from chessline.core.types import Square, is_valid_square, make_square


class Board:
    """Immutable 64-square board.

    Moves never edit a board in place: :meth:`with_changes` returns a new
    board, so every snapshot kept in history stays valid forever.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Mapping[Square, Piece | None] | None = None) -> None:
        cells: list[Piece | None] = [None] * 64
        if squares is not None:
            for sq, piece in squares.items():
                if not is_valid_square(sq):
                    raise IndexError(f"Square out of range: {sq}")
                cells[sq] = piece
        self._squares: tuple[Piece | None, ...] = tuple(cells)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq}")
        return self._squares[sq]

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in index order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise ValueError(f"Expected one {color.name} king, found {len(kings)}")
        return kings[0]

    # -- Copy-on-write ------------------------------------------------------

    def with_changes(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied (``None`` empties a square)."""
        b = Board.__new__(Board)
        cells = list(self._squares)
        for sq, piece in changes.items():
            if not is_valid_square(sq):
                raise IndexError(f"Square out of range: {sq}")
            cells[sq] = piece
        b._squares = tuple(cells)
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        back_rank = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)
        squares: dict[Square, Piece | None] = {}
        for col, kind in enumerate(back_rank):
            squares[make_square(col, 0)] = kind(Color.BLACK)
            squares[make_square(col, 1)] = Pawn(Color.BLACK)
            squares[make_square(col, 6)] = Pawn(Color.WHITE)
            squares[make_square(col, 7)] = kind(Color.WHITE)
        return cls(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self._squares[make_square(col, row)]
                cells.append(p.name if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
