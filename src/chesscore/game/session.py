"""GameSession — owns one board and the turn, and notifies listeners of moves.

The session threads the turn through :func:`apply_move`; it never decides
legality itself and defers to an optional :class:`IMoveValidator`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceKind
from chesscore.core.executor import apply_move
from chesscore.core.types import Cell, cell_name
from chesscore.game.interfaces import IMoveValidator
from chesscore.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Outcome of one executed move."""

    kind: PieceKind
    departure: Cell
    destination: Cell
    captured: PieceKind
    turn_after: Color

    @property
    def is_capture(self) -> bool:
        return self.captured is not PieceKind.EMPTY

    def __str__(self) -> str:
        return f"{cell_name(self.departure)}{cell_name(self.destination)}"


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
TurnCallback = Callable[[Color], None]
NewGameCallback = Callable[[Board], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A single game from the starting layout onwards.

    Methods are meant to be called from one thread; every call runs to
    completion before the next one starts.
    """

    __slots__ = (
        "_settings",
        "_validator",
        "_board",
        "_side_to_move",
        "_move_count",
        "events",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        validator: IMoveValidator | None = None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings.standard()
        self._validator = validator
        self._board = Board.initialize(self._settings.layout, self._settings.board_size)
        self._side_to_move = Color.WHITE
        self._move_count = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def move_count(self) -> int:
        return self._move_count

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset the board to the configured layout with White to move."""
        self._board = Board.initialize(self._settings.layout, self._settings.board_size)
        self._side_to_move = Color.WHITE
        self._move_count = 0
        _LOGGER.info("New game on a %dx%d board", self._board.size, self._board.size)
        for cb in self.events.on_new_game:
            cb(self._board)

    def submit_move(self, departure: Cell, destination: Cell) -> MoveRecord | None:
        """Execute a move. Returns None if the validator rejects it."""
        if (
            self._validator is not None
            and self._settings.validate_moves
            and not self._validator.is_legal(
                self._board, departure, destination, self._side_to_move
            )
        ):
            _LOGGER.info(
                "Rejected %s%s for %s",
                cell_name(departure),
                cell_name(destination),
                self._side_to_move,
            )
            return None

        mover = self._board.kind_at(departure)
        captured = self._board.kind_at(destination)
        self._side_to_move = apply_move(
            self._board, departure, destination, self._side_to_move
        )
        self._move_count += 1

        record = MoveRecord(
            kind=mover,
            departure=departure,
            destination=destination,
            captured=captured,
            turn_after=self._side_to_move,
        )
        _LOGGER.debug("Move %d: %s", self._move_count, record)

        for cb in self.events.on_move:
            cb(record)
        for turn_cb in self.events.on_turn_changed:
            turn_cb(self._side_to_move)
        return record
