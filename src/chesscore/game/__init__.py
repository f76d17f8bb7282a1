"""Game management layer — session, move records and listener events.

Quick start::

    from chesscore.game import GameSession
    from chesscore.core import parse_cell

    session = GameSession()
    session.submit_move(parse_cell("e2"), parse_cell("e4"))
"""

from chesscore.game.interfaces import IMoveValidator
from chesscore.game.session import GameEvents, GameSession, MoveRecord

__all__ = [
    # Interfaces
    "IMoveValidator",
    # Concrete
    "GameEvents",
    "GameSession",
    "MoveRecord",
]
