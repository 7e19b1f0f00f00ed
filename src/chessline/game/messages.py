"""Status texts shown to the player.

Every rejection path has its own message so a view can tell them apart::

    from chessline.game.messages import StatusMessages

    messages = StatusMessages(incorrect_move="Not the book move")
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusMessages:
    invalid_selection: str = "Invalid selection. Choose player {player} pieces."
    choose_destination: str = "Choose destination for the selected piece"
    wrong_selection: str = "Wrong selection. Choose valid source and destination again."
    incorrect_move: str = "Incorrect move"  # move deviates from the active line
