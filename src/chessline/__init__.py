"""chessline: chess rules engine with move history and line replay."""

__version__ = "0.1.0"
