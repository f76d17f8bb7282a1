"""Move execution: apply an already-authorised move to a board."""

from __future__ import annotations

import logging

from chesscore.core.board import Board
from chesscore.core.enums import Color
from chesscore.core.errors import EmptyCellError, SameCellError
from chesscore.core.types import Cell, cell_name, check_cell

_LOGGER = logging.getLogger(__name__)


def apply_move(board: Board, departure: Cell, destination: Cell, turn: Color) -> Color:
    """Move the piece on *departure* to *destination* and return the next turn.

    Legality is the caller's concern: whatever stands on *destination* is
    captured, whatever its color, and the mover's color is not compared with
    *turn*.  Bounds, distinct cells and an occupied departure are checked
    before anything on the board changes.
    """
    check_cell(departure, board.size)
    check_cell(destination, board.size)
    if departure == destination:
        raise SameCellError(f"Departure and destination are both {cell_name(departure)}")

    piece = board[departure]
    if piece is None:
        raise EmptyCellError(f"No piece on {cell_name(departure)}")

    victim = board[destination]
    if _LOGGER.isEnabledFor(logging.DEBUG):
        _LOGGER.debug(
            "%s %s %s %s%s",
            piece.kind.name,
            cell_name(departure),
            "x" if victim is not None else "-",
            cell_name(destination),
            f" captures {victim.kind.name}" if victim is not None else "",
        )

    if piece.needs_move_bookkeeping:
        piece.mark_moved()

    board.remove(destination)
    board.place(piece, destination)
    board.remove(departure)
    piece.reset_generated_moves()
    return turn.opposite
