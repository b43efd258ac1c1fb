"""Board - piece placement on an 8x8 grid of cells."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import KingNotFoundError, OutOfBoundsError
from chessgate.core.piece import Piece
from chessgate.core.types import BOARD_SIZE, Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(slots=True)
class Cell:
    """One board square and its optional occupant."""

    position: Square
    occupant: Piece | None = None

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


class Board:
    """Mutable 8x8 board indexed ``[file][rank]``.

    The board does not enforce chess rules; it only stores pieces. Every
    lookup rejects squares outside the grid with :class:`OutOfBoundsError`.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = [
            [Cell(Square(f, r)) for r in range(BOARD_SIZE)] for f in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def cell_at(self, sq: Square) -> Cell:
        """Return the (mutable) cell at *sq*."""
        if not is_valid_square(sq):
            raise OutOfBoundsError(sq)
        return self._cells[sq.file][sq.rank]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.cell_at(sq).occupant

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.cell_at(sq).occupant = piece

    def is_empty(self, sq: Square) -> bool:
        return self.cell_at(sq).occupant is None

    # -- Mutation -----------------------------------------------------------

    def take_piece(self, sq: Square) -> Piece | None:
        """Remove and return the occupant of *sq*."""
        cell = self.cell_at(sq)
        piece, cell.occupant = cell.occupant, None
        return piece

    def place_piece(self, sq: Square, piece: Piece | None) -> None:
        """Overwrite *sq*; any previous occupant is discarded."""
        self.cell_at(sq).occupant = piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, optionally by color."""
        for column in self._cells:
            for cell in column:
                piece = cell.occupant
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield cell.position, piece

    def find_king_position(self, color: Color) -> Square:
        """Locate *color*'s king.

        Raises:
            KingNotFoundError: the board has no king of that color.
        """
        for sq, piece in self.occupied(color):
            if piece.kind == PieceType.KING:
                return sq
        raise KingNotFoundError(f"No {color.name} king on board")

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        """Independent deep copy, used to simulate moves."""
        b = Board()
        for f in range(BOARD_SIZE):
            for r in range(BOARD_SIZE):
                b._cells[f][r].occupant = self._cells[f][r].occupant
        return b

    copy = clone

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b.place_piece(Square(f, 0), Piece(kind, Color.WHITE))
            b.place_piece(Square(f, 1), Piece(PieceType.PAWN, Color.WHITE))
            b.place_piece(Square(f, 6), Piece(PieceType.PAWN, Color.BLACK))
            b.place_piece(Square(f, 7), Piece(kind, Color.BLACK))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            a.occupant == b.occupant
            for col_a, col_b in zip(self._cells, other._cells)
            for a, b in zip(col_a, col_b)
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._cells[file][rank].occupant
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
