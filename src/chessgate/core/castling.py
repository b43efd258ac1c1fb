"""Castling eligibility derived from the board and the move history."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import OutOfBoundsError
from chessgate.core.move import MoveRecord
from chessgate.core.rules import MoveValidator, is_path_clear
from chessgate.core.types import Square, is_valid_square

KING_HOME_FILE = 4
KINGSIDE_KING_FILE = 6
QUEENSIDE_KING_FILE = 2


@dataclass(frozen=True, slots=True)
class CastlingSquares:
    """Origin and destination of both pieces taking part in a castling move."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square


def castling_squares(color: Color, kingside: bool) -> CastlingSquares:
    rank = color.home_rank
    if kingside:
        return CastlingSquares(
            Square(KING_HOME_FILE, rank),
            Square(KINGSIDE_KING_FILE, rank),
            Square(7, rank),
            Square(5, rank),
        )
    return CastlingSquares(
        Square(KING_HOME_FILE, rank),
        Square(QUEENSIDE_KING_FILE, rank),
        Square(0, rank),
        Square(3, rank),
    )


def castling_records(squares: CastlingSquares) -> tuple[MoveRecord, MoveRecord]:
    """History entries for a castling move: the king's, then the rook's."""
    return (
        MoveRecord(squares.king_from, squares.king_to),
        MoveRecord(squares.rook_from, squares.rook_to),
    )


def _has_left(history: Iterable[MoveRecord], home: Square) -> bool:
    return any(record.from_sq == home for record in history)


def has_king_moved(history: Iterable[MoveRecord], color: Color) -> bool:
    """Whether anything ever moved off *color*'s king home square."""
    return _has_left(history, Square(KING_HOME_FILE, color.home_rank))


def has_rook_moved(
    history: Iterable[MoveRecord], color: Color, kingside: bool
) -> bool:
    return _has_left(history, castling_squares(color, kingside).rook_from)


def castling_side(board: Board, from_sq: Square, to_sq: Square) -> bool | None:
    """``True`` for kingside, ``False`` for queenside, ``None`` if the
    request is not shaped like castling at all."""
    piece = board[from_sq]
    if not is_valid_square(to_sq):
        raise OutOfBoundsError(to_sq)
    if piece is None or piece.kind != PieceType.KING:
        return None
    rank = piece.color.home_rank
    if from_sq != Square(KING_HOME_FILE, rank) or to_sq.rank != rank:
        return None
    if to_sq.file == KINGSIDE_KING_FILE:
        return True
    if to_sq.file == QUEENSIDE_KING_FILE:
        return False
    return None


def is_castling_move(
    board: Board,
    history: Iterable[MoveRecord],
    from_sq: Square,
    to_sq: Square,
) -> bool:
    """Whether moving the king *from_sq* -> *to_sq* is a legal castling move.

    Requirements: neither the king nor the chosen rook has ever moved, the
    rook is still home, the squares between them are empty, and no square
    the king stands on or crosses (start and destination included) is
    attacked.
    """
    kingside = castling_side(board, from_sq, to_sq)
    if kingside is None:
        return False

    color = board[from_sq].color  # type: ignore[union-attr]
    history = tuple(history)
    if has_king_moved(history, color) or has_rook_moved(history, color, kingside):
        return False

    squares = castling_squares(color, kingside)
    rook = board[squares.rook_from]
    if rook is None or rook.kind != PieceType.ROOK or rook.color != color:
        return False

    if not is_path_clear(board, squares.king_from, squares.rook_from):
        return False

    validator = MoveValidator(board)
    low = min(squares.king_from.file, squares.king_to.file)
    high = max(squares.king_from.file, squares.king_to.file)
    return not any(
        validator.is_square_attacked(Square(f, squares.king_from.rank), color.opposite)
        for f in range(low, high + 1)
    )
