"""chesscore — board state and move execution for a two-player chess game."""

from chesscore.settings import GameSettings

__version__ = "0.1.0"

__all__ = ["GameSettings", "__version__"]
