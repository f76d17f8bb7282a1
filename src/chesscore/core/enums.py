"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PieceKind(IntEnum):
    """Color and piece type fused into one tag, plus an explicit empty marker.

    Values are laid out as ``color * 6 + piece_type`` so both halves can be
    recovered arithmetically; ``EMPTY`` is 0.
    """

    EMPTY = 0
    WHITE_PAWN = 1
    WHITE_KNIGHT = 2
    WHITE_BISHOP = 3
    WHITE_ROOK = 4
    WHITE_QUEEN = 5
    WHITE_KING = 6
    BLACK_PAWN = 7
    BLACK_KNIGHT = 8
    BLACK_BISHOP = 9
    BLACK_ROOK = 10
    BLACK_QUEEN = 11
    BLACK_KING = 12

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> PieceKind:
        return cls(int(color) * len(PieceType) + int(piece_type))

    @classmethod
    def from_char(cls, char: str) -> PieceKind:
        """FEN letter to kind, e.g. 'N' → WHITE_KNIGHT, '.' → EMPTY."""
        try:
            return _KIND_BY_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    @property
    def is_empty(self) -> bool:
        return self is PieceKind.EMPTY

    @property
    def color(self) -> Color | None:
        if self.is_empty:
            return None
        return Color((self.value - 1) // len(PieceType))

    @property
    def piece_type(self) -> PieceType | None:
        if self.is_empty:
            return None
        return PieceType((self.value - 1) % len(PieceType) + 1)

    @property
    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    @property
    def char(self) -> str:
        """FEN letter (uppercase = white, lowercase = black, '.' = empty)."""
        return _CHAR_BY_KIND[self]


_CHAR_BY_KIND: dict[PieceKind, str] = {
    PieceKind.EMPTY: ".",
    PieceKind.WHITE_PAWN: "P",
    PieceKind.WHITE_KNIGHT: "N",
    PieceKind.WHITE_BISHOP: "B",
    PieceKind.WHITE_ROOK: "R",
    PieceKind.WHITE_QUEEN: "Q",
    PieceKind.WHITE_KING: "K",
    PieceKind.BLACK_PAWN: "p",
    PieceKind.BLACK_KNIGHT: "n",
    PieceKind.BLACK_BISHOP: "b",
    PieceKind.BLACK_ROOK: "r",
    PieceKind.BLACK_QUEEN: "q",
    PieceKind.BLACK_KING: "k",
}

_KIND_BY_CHAR: dict[str, PieceKind] = {v: k for k, v in _CHAR_BY_KIND.items()}
