"""Exceptions raised by the board core.

Every error signals a caller bug or a bad configuration; none is transient.
"""

from __future__ import annotations


class ChessCoreError(Exception):
    """Base class for all board-core errors."""


class LayoutError(ChessCoreError, ValueError):
    """Starting layout does not fit the declared board size."""


class CellOutOfBoundsError(ChessCoreError, IndexError):
    """A cell reference lies outside the grid."""

    def __init__(self, cell: tuple[int, int], size: int) -> None:
        super().__init__(f"Cell {cell} is outside a {size}x{size} board")
        self.cell = cell
        self.size = size


class EmptyCellError(ChessCoreError, LookupError):
    """A move was requested from a cell with no piece on it."""


class OccupiedCellError(ChessCoreError, ValueError):
    """A piece was placed on a cell whose occupant was never removed."""


class SameCellError(ChessCoreError, ValueError):
    """Departure and destination are the same cell."""
