"""Session: the entry points a presentation layer calls.

The module-level functions are pure: they take the current position,
history and line and return a :class:`Transition` without touching their
inputs.  :class:`GameSession` keeps the "current" values between user
interactions and notifies listeners, for views that prefer an object.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

from chessline.core.move_generator import MoveGenerator
from chessline.core.notation import STARTING_FEN, find_move, move_to_san, position_from_fen
from chessline.core.position import Position
from chessline.core.types import Square, is_valid_square, square_name
from chessline.game.history import MoveHistory
from chessline.game.line import Line, half_move_index, line_accepts
from chessline.game.settings import DEFAULT_SETTINGS, SessionSettings

_LOGGER = logging.getLogger(__name__)


class Transition(NamedTuple):
    position: Position
    history: MoveHistory


# ── Pure transitions ────────────────────────────────────────────────────────


def apply_move(
    position: Position,
    history: MoveHistory,
    line: Line | None,
    dest: Square,
    source: Square | None = None,
    settings: SessionSettings = DEFAULT_SETTINGS,
) -> Transition:
    """Handle a click on *dest* (``source`` is ``None``) or a drop from *source*.

    * No selection yet: select *dest* if it holds a piece of the side to
      move, otherwise report an invalid selection.
    * *dest* holds another piece of the side to move: switch selection.
    * Otherwise try the move.  Illegal moves and moves that leave the active
      line come back as the unchanged position with a status message and a
      cleared selection; legal ones are executed and appended to *history*.
    """
    messages = settings.messages
    selection = position.source_selection if source is None else source

    if not is_valid_square(dest):
        _LOGGER.debug("Ignoring click outside the board: %s", dest)
        return Transition(
            position.evolve(status=messages.wrong_selection, source_selection=None),
            history,
        )

    target = position.board[dest]
    if selection is None:
        if target is None or target.color != position.player:
            status = messages.invalid_selection.format(player=str(position.player))
            return Transition(
                position.evolve(status=status, source_selection=None), history
            )
        _LOGGER.debug("Selected %s", _name(dest))
        return Transition(
            position.evolve(status=messages.choose_destination, source_selection=dest),
            history,
        )

    if target is not None and target.color == position.player:
        _LOGGER.debug("Selection moved from %s to %s", _name(selection), _name(dest))
        return Transition(
            position.evolve(status=messages.choose_destination, source_selection=dest),
            history,
        )

    move = MoveGenerator(position, settings.promotion_type).classify(selection, dest)
    if move is None:
        _LOGGER.debug("Rejected move %s-%s", _name(selection), _name(dest))
        return Transition(
            position.evolve(status=messages.wrong_selection, source_selection=None),
            history,
        )

    name = move_to_san(position, move)
    if not line_accepts(line, name, position, strict_end=settings.strict_line_end):
        _LOGGER.debug(
            "Move %s deviates from line %r (expected %r)",
            name,
            line.title if line is not None else None,
            line.expected(half_move_index(position)) if line is not None else None,
        )
        return Transition(
            position.evolve(status=messages.incorrect_move, source_selection=None),
            history,
        )

    after = position.make_move(move)
    return Transition(after, history.append(name, after))


def undo(history: MoveHistory) -> Transition:
    """Drop the last ply and display the position before it."""
    if not history.move_names:
        return Transition(history.current, history)
    trimmed = history.truncated(len(history.move_names) - 1)
    trimmed = trimmed.select(len(trimmed.move_names))
    return Transition(trimmed.current, trimmed)


def select_history_index(history: MoveHistory, index: int) -> Position:
    """Cached position after ply *index* (``0`` = starting position)."""
    return history.select(index).current


def select_history(history: MoveHistory, index: int) -> Transition:
    selected = history.select(index)
    return Transition(selected.current, selected)


def load_line(line: Line | None, start_fen: str = STARTING_FEN) -> Transition:
    """Fresh position and history for practising *line* from *start_fen*.

    Raises:
        FenError: *start_fen* is malformed.
    """
    position = position_from_fen(start_fen)
    _LOGGER.debug(
        "Starting %s from %s", line.title if line is not None else "free play", start_fen
    )
    return Transition(position, MoveHistory.start(position))


def _name(sq: Square) -> str:
    return square_name(sq) if is_valid_square(sq) else str(sq)


# ── Stateful holder ─────────────────────────────────────────────────────────

PositionCallback = Callable[[Position], None]
HistoryCallback = Callable[[MoveHistory], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_history_changed: list[HistoryCallback] = field(default_factory=list)


class GameSession:
    """Owns the current position, history and line between interactions.

    Single-threaded: every call runs one synchronous transition and then
    notifies listeners.
    """

    __slots__ = (
        "_settings",
        "_position",
        "_history",
        "_line",
        "_custom_lines",
        "events",
    )

    def __init__(self, settings: SessionSettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings
        self._position = position_from_fen(settings.start_fen)
        self._history = MoveHistory.start(self._position)
        self._line: Line | None = None
        self._custom_lines: list[Line] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def position(self) -> Position:
        return self._position

    @property
    def history(self) -> MoveHistory:
        return self._history

    @property
    def line(self) -> Line | None:
        return self._line

    @property
    def custom_lines(self) -> tuple[Line, ...]:
        return tuple(self._custom_lines)

    # ── Interaction ──────────────────────────────────────────────────────

    def click(self, sq: Square) -> Position:
        return self._apply(
            apply_move(self._position, self._history, self._line, sq, None, self._settings)
        )

    def drop(self, src: Square, dest: Square) -> Position:
        return self._apply(
            apply_move(self._position, self._history, self._line, dest, src, self._settings)
        )

    def undo(self) -> Position:
        return self._apply(undo(self._history))

    def select(self, index: int) -> Position:
        return self._apply(select_history(self._history, index))

    def load_line(self, line: Line | None, start_fen: str | None = None) -> Position:
        """Start over from *start_fen* with *line* as the replay guard."""
        transition = load_line(line, start_fen or self._settings.start_fen)
        self._line = line
        if line is not None:
            _LOGGER.info("Loaded line %r (%d moves)", line.title, len(line.moves))
        return self._apply(transition)

    def reset(self, start_fen: str | None = None) -> Position:
        """New game without a line."""
        return self.load_line(None, start_fen)

    def save_line(self, title: str) -> Line:
        """Keep the moves played so far as a custom line."""
        line = Line(self._history.move_names, title)
        self._custom_lines.append(line)
        _LOGGER.info("Saved line %r (%d moves)", title, len(line.moves))
        return line

    # ── Helpers for views ────────────────────────────────────────────────

    def legal_destinations(self) -> list[Square]:
        """Legal targets for the selected piece (empty without a selection)."""
        src = self._position.source_selection
        if src is None:
            return []
        generator = MoveGenerator(self._position, self._settings.promotion_type)
        return generator.legal_destinations(src)

    def expected_move(self) -> str | None:
        """Next move name of the active line, if any."""
        if self._line is None:
            return None
        return self._line.expected(half_move_index(self._position))

    def play_expected(self) -> bool:
        """Play the next line move (e.g. the opponent's reply). True on success."""
        name = self.expected_move()
        if name is None:
            return False
        move = find_move(self._position, name, self._settings.promotion_type)
        if move is None:
            _LOGGER.warning("Line move %r is not playable in this position", name)
            return False
        self.drop(move.src, move.dest)
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _apply(self, transition: Transition) -> Position:
        history_changed = transition.history is not self._history
        self._position, self._history = transition
        for cb in self.events.on_position_changed:
            cb(self._position)
        if history_changed:
            for cb in self.events.on_history_changed:
                cb(self._history)
        return self._position
