"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chesscore.core.board import Board
from chesscore.core.layout import EMPTY_LAYOUT
from chesscore.game.session import GameSession


@pytest.fixture
def board() -> Board:
    """Standard starting position."""
    return Board.initialize()


@pytest.fixture
def empty_board() -> Board:
    return Board.initialize(EMPTY_LAYOUT)


@pytest.fixture
def session() -> GameSession:
    return GameSession()


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Capture library debug output so log assertions see every record."""
    with caplog.at_level(logging.DEBUG, logger="chesscore"):
        yield
