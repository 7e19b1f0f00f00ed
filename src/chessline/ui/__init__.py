"""Qt adapters for driving a :class:`~chessline.game.session.GameSession`."""

from chessline.ui.session_bridge import SessionBridge

__all__ = ["SessionBridge"]
