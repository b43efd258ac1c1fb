"""Move history record."""

from __future__ import annotations

from dataclasses import dataclass

from chessgate.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One completed piece relocation.

    A castling move is logged as two records: the king's, then the rook's.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
