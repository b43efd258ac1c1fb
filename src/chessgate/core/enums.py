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

    @property
    def home_rank(self) -> int:
        """Rank of the king and rooks at the start of the game."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a forward pawn step."""
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

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
