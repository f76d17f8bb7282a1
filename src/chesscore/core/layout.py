"""Starting layouts.

A layout is a square table of :class:`PieceKind` read the way a diagram is
printed: row 0 is the far side (highest rank), the last row is the near side
(rank 0), and files run left to right from ``a``.  Entry ``layout[row][file]``
therefore lands on cell ``(file, size - 1 - row)``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeAlias

from chesscore.core.enums import PieceKind
from chesscore.core.errors import LayoutError
from chesscore.core.types import BOARD_SIZE, Cell

Layout: TypeAlias = Sequence[Sequence[PieceKind]]


def layout_from_rows(rows: Sequence[str]) -> tuple[tuple[PieceKind, ...], ...]:
    """Build a layout from one string per row, far side first.

    Pieces use FEN letters and empty cells use ``.``::

        layout_from_rows(["k..", "...", "..K"])
    """
    try:
        return tuple(tuple(PieceKind.from_char(ch) for ch in row) for row in rows)
    except ValueError as exc:
        raise LayoutError(str(exc)) from exc


def validate_layout(layout: Layout, size: int) -> None:
    """Raise :class:`LayoutError` unless *layout* is ``size × size`` PieceKinds."""
    if size < 1:
        raise LayoutError(f"Board size must be positive, got {size}")
    if len(layout) != size:
        raise LayoutError(f"Layout has {len(layout)} rows, expected {size}")
    for row_idx, row in enumerate(layout):
        if len(row) != size:
            raise LayoutError(
                f"Layout row {row_idx} has {len(row)} entries, expected {size}"
            )
        for file, kind in enumerate(row):
            if not isinstance(kind, PieceKind):
                raise LayoutError(
                    f"Layout row {row_idx}, file {file} holds {kind!r}, not a PieceKind"
                )


def iter_layout(layout: Layout) -> Iterator[tuple[Cell, PieceKind]]:
    """Yield ``(cell, kind)`` for every entry, applying the row orientation."""
    size = len(layout)
    for row_idx, row in enumerate(layout):
        rank = size - 1 - row_idx
        for file, kind in enumerate(row):
            yield (file, rank), kind


STANDARD_LAYOUT: tuple[tuple[PieceKind, ...], ...] = layout_from_rows(
    [
        "rnbqkbnr",
        "pppppppp",
        "........",
        "........",
        "........",
        "........",
        "PPPPPPPP",
        "RNBQKBNR",
    ]
)

EMPTY_LAYOUT: tuple[tuple[PieceKind, ...], ...] = layout_from_rows(
    ["." * BOARD_SIZE] * BOARD_SIZE
)
