"""Board - authoritative grid of cells and the pieces occupying them."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.errors import LayoutError, OccupiedCellError
from chesscore.core.layout import STANDARD_LAYOUT, Layout, iter_layout, validate_layout
from chesscore.core.piece import Piece
from chesscore.core.types import (
    BOARD_SIZE,
    Cell,
    cell_name,
    check_cell,
    file_name,
    is_in_bounds,
)

_LOGGER = logging.getLogger(__name__)

_Handle = int


class Board:
    """Mutable ``size × size`` board backed by a piece pool.

    Each cell slot stores a handle into ``_pool`` (or ``None``).  Moving a
    piece reassigns its handle to another slot; removing the piece from the
    cell it was last placed on drops it from the pool, which is how captured
    pieces are destroyed.
    """

    __slots__ = ("_size", "_slots", "_pool", "_locations", "_trailing")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise LayoutError(f"Board size must be positive, got {size}")
        self._size = size
        self._slots: list[_Handle | None] = [None] * (size * size)
        self._pool: dict[_Handle, Piece] = {}
        # handle -> cell the piece was most recently placed on
        self._locations: dict[_Handle, Cell] = {}
        # handle -> older slots still holding a piece that was placed again
        self._trailing: dict[_Handle, set[int]] = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initialize(cls, layout: Layout = STANDARD_LAYOUT, size: int = BOARD_SIZE) -> Board:
        """Build a board whose occupancy mirrors *layout*.

        Every non-empty entry gets a fresh :class:`Piece`.  Raises
        :class:`LayoutError` when the layout is not ``size × size``.
        """
        validate_layout(layout, size)
        board = cls(size)
        for cell, kind in iter_layout(layout):
            if kind is not PieceKind.EMPTY:
                board.place(Piece(kind), cell)
        _LOGGER.debug("Initialised %dx%d board with %d pieces", size, size, len(board))
        return board

    # -- Bounds ---------------------------------------------------------------

    @staticmethod
    def is_in_bounds(file: int, rank: int, size: int = BOARD_SIZE) -> bool:
        return is_in_bounds(file, rank, size)

    @property
    def size(self) -> int:
        return self._size

    def contains(self, cell: Cell) -> bool:
        """Whether *cell* lies on this board."""
        return is_in_bounds(cell[0], cell[1], self._size)

    def _index(self, cell: Cell) -> int:
        file, rank = check_cell(cell, self._size)
        return rank * self._size + file

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece | None:
        handle = self._slots[self._index(cell)]
        if handle is None:
            return None
        return self._pool[handle]

    def kind_at(self, cell: Cell) -> PieceKind:
        piece = self[cell]
        return PieceKind.EMPTY if piece is None else piece.kind

    def is_empty(self, cell: Cell) -> bool:
        return self._slots[self._index(cell)] is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, cell: Cell) -> None:
        """Put *piece* on *cell*; the cell must already be empty.

        A piece that is mid-move may still sit in its old slot; the caller
        clears that slot with :meth:`remove`.  If the piece is removed from
        *cell* first, the old slot is cleared along with it.
        """
        idx = self._index(cell)
        if self._slots[idx] is not None:
            raise OccupiedCellError(
                f"Cannot place {piece!r} on occupied cell {cell_name(cell)}"
            )
        handle = id(piece)
        previous = self._locations.get(handle)
        if previous is not None and self._pool.get(handle) is piece:
            prev_idx = self._index(previous)
            if self._slots[prev_idx] == handle:
                self._trailing.setdefault(handle, set()).add(prev_idx)
        self._pool[handle] = piece
        self._locations[handle] = cell
        self._slots[idx] = handle

    def remove(self, cell: Cell) -> Piece | None:
        """Clear *cell* and return its previous occupant (None if empty)."""
        idx = self._index(cell)
        handle = self._slots[idx]
        if handle is None:
            return None
        self._slots[idx] = None
        piece = self._pool[handle]
        trailing = self._trailing.get(handle, set())
        trailing.discard(idx)
        if self._locations[handle] == cell:
            # The piece leaves the board: drop every stale slot with it.
            for stale_idx in trailing:
                self._slots[stale_idx] = None
            trailing.clear()
            del self._pool[handle]
            del self._locations[handle]
        if not trailing:
            self._trailing.pop(handle, None)
        return piece

    # -- Query helpers ------------------------------------------------------

    def location_of(self, piece: Piece) -> Cell | None:
        """Cell *piece* was last placed on, or None if it is off the board."""
        if piece not in self:
            return None
        return self._locations[id(piece)]

    def occupied(self) -> Iterator[tuple[Cell, Piece]]:
        """Yield ``(cell, piece)`` for every occupied cell, rank by rank."""
        size = self._size
        for idx, handle in enumerate(self._slots):
            if handle is not None:
                yield (idx % size, idx // size), self._pool[handle]

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Cell]:
        """Cells holding *color*'s pieces, optionally only of *piece_type*."""
        return [
            cell
            for cell, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def kinds(self) -> tuple[tuple[PieceKind, ...], ...]:
        """Snapshot of the grid as a layout (far side first)."""
        size = self._size
        return tuple(
            tuple(self.kind_at((file, rank)) for file in range(size))
            for rank in range(size - 1, -1, -1)
        )

    # -- Dunder helpers -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pool)

    def __contains__(self, piece: object) -> bool:
        return self._pool.get(id(piece)) is piece

    def __repr__(self) -> str:
        rows: list[str] = []
        width = len(str(self._size))
        for rank in range(self._size - 1, -1, -1):
            row = [self.kind_at((file, rank)).char for file in range(self._size)]
            rows.append(f"{rank + 1:>{width}} {' '.join(row)}")
        files = " ".join(file_name(f) for f in range(self._size))
        rows.append(f"{' ' * width} {files}")
        return "\n".join(rows)
