"""Abstract interfaces for the game layer.

The session depends on these ABCs; move legality lives in whatever concrete
validator the host application plugs in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesscore.core.board import Board
    from chesscore.core.enums import Color
    from chesscore.core.types import Cell


class IMoveValidator(ABC):
    """Decides whether a move may be executed."""

    @abstractmethod
    def is_legal(
        self,
        board: Board,
        departure: Cell,
        destination: Cell,
        turn: Color,
    ) -> bool:
        """Return True if *turn* may move from *departure* to *destination*."""
