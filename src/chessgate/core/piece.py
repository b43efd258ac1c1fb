"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgate.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# White glyphs start at U+2654 (king) and run king, queen, rook, bishop,
# knight, pawn; black glyphs follow six code points later.
_GLYPH_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: what stands on a square."""

    kind: PieceType
    color: Color

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN letter, e.g. 'N' -> white knight."""
        for kind, letter in _LETTERS.items():
            if char == letter.upper():
                return cls(kind, Color.WHITE)
            if char == letter:
                return cls(kind, Color.BLACK)
        raise ValueError(f"Invalid piece character: {char!r}")

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        offset = _GLYPH_ORDER.index(self.kind) + 6 * int(self.color)
        return chr(0x2654 + offset)
