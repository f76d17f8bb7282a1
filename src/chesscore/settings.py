"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.layout import STANDARD_LAYOUT, Layout
from chesscore.core.types import BOARD_SIZE


@dataclass
class GameSettings:
    """All configurable knobs of a game session."""

    # Board
    board_size: int = BOARD_SIZE
    layout: Layout = STANDARD_LAYOUT

    # Moves
    validate_moves: bool = True  # consult the injected validator, if any

    @classmethod
    def standard(cls) -> GameSettings:
        return cls()
