"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def direction(self) -> int:
        """Pawn direction: +1 for white (toward lower indices), -1 for black."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_SHORT = 3
    CASTLE_LONG = 4
    PROMOTION = 5


class CastlingRights(IntFlag):
    """Bitmask for castling availability.

    Rights are only ever revoked; a position never gains a flag back.
    """

    NONE = 0
    WHITE_LONG = auto()
    WHITE_SHORT = auto()
    BLACK_LONG = auto()
    BLACK_SHORT = auto()

    WHITE_BOTH = WHITE_LONG | WHITE_SHORT
    BLACK_BOTH = BLACK_LONG | BLACK_SHORT
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH
