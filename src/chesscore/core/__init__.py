"""Core domain layer — board state and move execution with zero external dependencies.

Quick start::

    from chesscore.core import Board, Color, apply_move, parse_cell

    board = Board.initialize()
    turn = apply_move(board, parse_cell("e2"), parse_cell("e4"), Color.WHITE)
"""

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.errors import (
    CellOutOfBoundsError,
    ChessCoreError,
    EmptyCellError,
    LayoutError,
    OccupiedCellError,
    SameCellError,
)
from chesscore.core.executor import apply_move
from chesscore.core.layout import (
    EMPTY_LAYOUT,
    STANDARD_LAYOUT,
    Layout,
    layout_from_rows,
)
from chesscore.core.piece import PawnState, Piece
from chesscore.core.types import (
    BOARD_SIZE,
    Cell,
    cell_name,
    is_in_bounds,
    parse_cell,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "cell_name",
    "is_in_bounds",
    "parse_cell",
    # Layouts
    "EMPTY_LAYOUT",
    "Layout",
    "STANDARD_LAYOUT",
    "layout_from_rows",
    # Domain objects
    "Board",
    "PawnState",
    "Piece",
    "apply_move",
    # Errors
    "CellOutOfBoundsError",
    "ChessCoreError",
    "EmptyCellError",
    "LayoutError",
    "OccupiedCellError",
    "SameCellError",
]
