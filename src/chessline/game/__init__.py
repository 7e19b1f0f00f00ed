"""Game layer: history, lines and the session entry points.

Quick start::

    from chessline.game import GameSession, Line

    session = GameSession()
    session.load_line(Line(("e4", "e5"), "King's pawn"))
    session.drop(parse_square("e2"), parse_square("e4"))
"""

from chessline.game.history import MoveHistory
from chessline.game.line import Line, half_move_index, line_accepts
from chessline.game.messages import StatusMessages
from chessline.game.session import (
    GameSession,
    SessionEvents,
    Transition,
    apply_move,
    load_line,
    select_history,
    select_history_index,
    undo,
)
from chessline.game.settings import DEFAULT_SETTINGS, SessionSettings

__all__ = [
    "DEFAULT_SETTINGS",
    "GameSession",
    "Line",
    "MoveHistory",
    "SessionEvents",
    "SessionSettings",
    "StatusMessages",
    "Transition",
    "apply_move",
    "half_move_index",
    "line_accepts",
    "load_line",
    "select_history",
    "select_history_index",
    "undo",
]
