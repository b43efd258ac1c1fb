"""Exceptions raised by the chess core."""

from __future__ import annotations

from chessgate.core.types import Square, square_name


class ChessError(Exception):
    """Base class for all chessgate errors."""


class OutOfBoundsError(ChessError, IndexError):
    """A square outside the 8x8 board was looked up.

    Recoverable: the request that carried the square is simply rejected.
    """

    def __init__(self, square: Square) -> None:
        super().__init__(f"Square off the board: {square_name(square)}")
        self.square = square


class InvariantViolation(ChessError):
    """Board state is corrupt. Not meant to be caught."""


class KingNotFoundError(InvariantViolation):
    """A color has no king on the board."""
