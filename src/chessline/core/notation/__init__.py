"""Notation package: FEN, move names and line movetext."""

from chessline.core.notation.fen import (
    STARTING_FEN,
    FenError,
    position_from_fen,
    position_to_fen,
)
from chessline.core.notation.movetext import movetext_from_names, names_from_movetext
from chessline.core.notation.san import find_move, move_name, move_to_san

__all__ = [
    "STARTING_FEN",
    "FenError",
    "position_from_fen",
    "position_to_fen",
    "move_name",
    "move_to_san",
    "find_move",
    "movetext_from_names",
    "names_from_movetext",
]
