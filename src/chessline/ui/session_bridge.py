"""Qt bridge between a board view and a :class:`GameSession`.

A view connects its square-click / piece-drop signals to the bridge slots and
renders whatever arrives on ``position_changed`` / ``history_changed``.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessline.core.notation import FenError
from chessline.core.position import Position
from chessline.game.history import MoveHistory
from chessline.game.line import Line
from chessline.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


class SessionBridge(QObject):
    """GUI-thread adapter: interaction events in, state snapshots out."""

    position_changed = pyqtSignal(object)  # Position
    history_changed = pyqtSignal(object)  # MoveHistory
    status_changed = pyqtSignal(str)
    load_failed = pyqtSignal(str)

    def __init__(
        self, session: GameSession | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession()
        self._session.events.on_position_changed.append(self._on_position)
        self._session.events.on_history_changed.append(self._on_history)

    @property
    def session(self) -> GameSession:
        return self._session

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(int)
    def square_clicked(self, sq: int) -> None:
        self._session.click(sq)

    @pyqtSlot(int, int)
    def piece_dropped(self, src: int, dest: int) -> None:
        self._session.drop(src, dest)

    @pyqtSlot()
    def undo_move(self) -> None:
        self._session.undo()

    @pyqtSlot(int)
    def select_ply(self, index: int) -> None:
        if not (0 <= index <= self._session.history.ply_count):
            _LOGGER.debug("Ignoring history index %d", index)
            return
        self._session.select(index)

    @pyqtSlot(object, str)
    def load_line(self, line: object, start_fen: str) -> None:
        """Load *line* (a :class:`Line` or ``None``) from *start_fen*."""
        if line is not None and not isinstance(line, Line):
            self.load_failed.emit(f"Not a line: {line!r}")
            return
        try:
            self._session.load_line(line, start_fen or None)
        except FenError as exc:
            _LOGGER.warning("Could not load start position: %s", exc)
            self.load_failed.emit(str(exc))

    # ── Session listeners ────────────────────────────────────────────────

    def _on_position(self, position: Position) -> None:
        self.position_changed.emit(position)
        self.status_changed.emit(position.status)

    def _on_history(self, history: MoveHistory) -> None:
        self.history_changed.emit(history)
