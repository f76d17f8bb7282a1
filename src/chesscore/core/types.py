"""Cell type alias and coordinate helpers.

A cell is a ``(file, rank)`` pair with both indices in ``[0, size)``:
    file 0–7 → a–h
    rank 0–7 → 1–8
so ``(4, 1)`` is e2 and ``(3, 7)`` is d8 on a standard board.
"""

from __future__ import annotations

from typing import TypeAlias

from chesscore.core.errors import CellOutOfBoundsError

Cell: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

_FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def is_in_bounds(file: int, rank: int, size: int = BOARD_SIZE) -> bool:
    """True iff both coordinates lie in ``[0, size)``."""
    return 0 <= file < size and 0 <= rank < size


def check_cell(cell: Cell, size: int = BOARD_SIZE) -> Cell:
    """Return *cell* unchanged, raising if it lies outside the grid."""
    file, rank = cell
    if not is_in_bounds(file, rank, size):
        raise CellOutOfBoundsError(cell, size)
    return cell


def file_name(file: int) -> str:
    """Letters for a file index: 0 → 'a', 25 → 'z', 26 → 'aa', 27 → 'ab'."""
    letters = ""
    n = file + 1
    while n > 0:
        n, rem = divmod(n - 1, len(_FILE_LETTERS))
        letters = _FILE_LETTERS[rem] + letters
    return letters


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    file, rank = cell
    return file_name(file) + str(rank + 1)


def parse_cell(name: str, size: int = BOARD_SIZE) -> Cell:
    """Parse a cell name, e.g. 'e4' → (4, 3), 'ab1' → (27, 0) on a wide board."""
    letters = name.rstrip("0123456789")
    digits = name[len(letters):]
    if not letters or not digits or any(ch not in _FILE_LETTERS for ch in letters):
        raise ValueError(f"Invalid cell name: {name!r}")
    file = 0
    for ch in letters:
        file = file * len(_FILE_LETTERS) + _FILE_LETTERS.index(ch) + 1
    cell = (file - 1, int(digits) - 1)
    if not is_in_bounds(*cell, size):
        raise ValueError(f"Invalid cell name: {name!r}")
    return cell


# ── Named cell constants (standard board) ───────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((f, 7) for f in range(8))
