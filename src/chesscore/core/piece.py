"""Piece entity with kind-specific mutable state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.types import Cell

_UNICODE: dict[PieceKind, str] = {
    PieceKind.WHITE_PAWN: "♙",
    PieceKind.WHITE_KNIGHT: "♘",
    PieceKind.WHITE_BISHOP: "♗",
    PieceKind.WHITE_ROOK: "♖",
    PieceKind.WHITE_QUEEN: "♕",
    PieceKind.WHITE_KING: "♔",
    PieceKind.BLACK_PAWN: "♟",
    PieceKind.BLACK_KNIGHT: "♞",
    PieceKind.BLACK_BISHOP: "♝",
    PieceKind.BLACK_ROOK: "♜",
    PieceKind.BLACK_QUEEN: "♛",
    PieceKind.BLACK_KING: "♚",
}


@dataclass(slots=True)
class PawnState:
    """Pawn-only payload: whether the pawn has made its first move."""

    has_moved: bool = False

    def mark_moved(self) -> None:
        self.has_moved = True


class Piece:
    """A single piece on the board.

    ``kind`` never changes.  Pawns carry a :class:`PawnState`; every other
    kind carries no extra state.  ``generated_moves`` is a cache filled by
    the external move generator and cleared whenever the piece moves.
    """

    __slots__ = ("_kind", "pawn_state", "generated_moves")

    def __init__(self, kind: PieceKind) -> None:
        if kind is PieceKind.EMPTY:
            raise ValueError("Cannot create a piece of kind EMPTY")
        self._kind = kind
        self.pawn_state: PawnState | None = PawnState() if kind.is_pawn else None
        self.generated_moves: list[Cell] = []

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        return cls(PieceKind.of(color, piece_type))

    # ── Kind accessors ───────────────────────────────────────────────────

    @property
    def kind(self) -> PieceKind:
        return self._kind

    @property
    def color(self) -> Color:
        return cast(Color, self._kind.color)

    @property
    def piece_type(self) -> PieceType:
        return cast(PieceType, self._kind.piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self._kind]

    # ── Post-move bookkeeping ────────────────────────────────────────────

    @property
    def needs_move_bookkeeping(self) -> bool:
        """Whether moving this piece must update kind-specific state."""
        return self.pawn_state is not None

    @property
    def has_moved(self) -> bool:
        """Pawn "has moved" flag; always False for other kinds."""
        return self.pawn_state is not None and self.pawn_state.has_moved

    def mark_moved(self) -> None:
        if self.pawn_state is not None:
            self.pawn_state.mark_moved()

    # ── Legal-move cache ─────────────────────────────────────────────────

    def set_generated_moves(self, cells: Iterable[Cell]) -> None:
        self.generated_moves = list(cells)

    def reset_generated_moves(self) -> None:
        self.generated_moves.clear()

    def __str__(self) -> str:
        return self._kind.char

    def __repr__(self) -> str:
        extra = f", has_moved={self.has_moved}" if self.pawn_state is not None else ""
        return f"Piece({self._kind.name}{extra})"
