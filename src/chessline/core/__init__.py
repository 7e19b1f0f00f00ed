"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessline.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    move = MoveGenerator(pos).classify(parse_square("e2"), parse_square("e4"))
    pos = pos.make_move(move)
"""

from chessline.core.board import Board
from chessline.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessline.core.move import Move
from chessline.core.move_generator import MoveGenerator, is_check, is_path_clear
from chessline.core.notation import (
    STARTING_FEN,
    FenError,
    find_move,
    move_name,
    move_to_san,
    position_from_fen,
    position_to_fen,
)
from chessline.core.pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from chessline.core.position import Position
from chessline.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Pieces
    "Piece",
    "Pawn",
    "Knight",
    "Bishop",
    "Rook",
    "Queen",
    "King",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Position",
    "is_check",
    "is_path_clear",
    # Notation
    "STARTING_FEN",
    "FenError",
    "find_move",
    "move_name",
    "move_to_san",
    "position_from_fen",
    "position_to_fen",
]
