"""chesscore: chess board model with move play/undo and a PyQt6 board viewer."""

__version__ = "0.1.0"
