"""Move history: cached positions and their move names."""

from __future__ import annotations

from dataclasses import dataclass

from chessline.core.position import Position


@dataclass(frozen=True, slots=True)
class MoveHistory:
    """Immutable history of a game.

    ``positions[0]`` is the starting position and ``positions[k]`` the
    position after ply *k*, so there is always one more position than move
    name.  ``selected`` is the index of the position on display.
    """

    positions: tuple[Position, ...]
    move_names: tuple[str, ...] = ()
    selected: int = 0

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.move_names) + 1:
            raise ValueError(
                f"History needs {len(self.move_names) + 1} positions, "
                f"got {len(self.positions)}"
            )
        if not (0 <= self.selected <= len(self.move_names)):
            raise IndexError(f"Selected move out of range: {self.selected}")

    @classmethod
    def start(cls, position: Position) -> MoveHistory:
        return cls(positions=(position,))

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def current(self) -> Position:
        """Position at the selected index."""
        return self.positions[self.selected]

    @property
    def latest(self) -> Position:
        return self.positions[-1]

    @property
    def ply_count(self) -> int:
        return len(self.move_names)

    @property
    def is_at_latest(self) -> bool:
        return self.selected == len(self.move_names)

    # ── Transitions ──────────────────────────────────────────────────────

    def append(self, name: str, position: Position) -> MoveHistory:
        """Add a ply after the selected position, dropping later plies."""
        base = self.truncated(self.selected)
        return MoveHistory(
            positions=base.positions + (position,),
            move_names=base.move_names + (name,),
            selected=len(base.move_names) + 1,
        )

    def truncated(self, length: int) -> MoveHistory:
        """History cut down to the first *length* plies."""
        if length < 0:
            raise ValueError(f"Negative history length: {length}")
        names = self.move_names[:length]
        return MoveHistory(
            positions=self.positions[: len(names) + 1],
            move_names=names,
            selected=min(self.selected, len(names)),
        )

    def select(self, index: int) -> MoveHistory:
        """Display the position at *index*; the lists are left alone."""
        if not (0 <= index <= len(self.move_names)):
            raise IndexError(f"Move index out of range: {index}")
        return MoveHistory(self.positions, self.move_names, index)
