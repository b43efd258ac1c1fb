"""Game management layer — session state and move entry.

Quick start::

    from chessgate.core import parse_square
    from chessgate.game import GameSession

    session = GameSession()
    session.attempt_move(parse_square("e2"), parse_square("e4"))
"""

from chessgate.game.selection import SquareSelection
from chessgate.game.session import GameSession, MoveOutcome, SessionEvents

__all__ = [
    "GameSession",
    "MoveOutcome",
    "SessionEvents",
    "SquareSelection",
]
