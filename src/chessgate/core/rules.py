"""Move legality: piece patterns, attack detection and the self-check gate.

Two notions are kept apart on purpose:

* *reach* (:meth:`MoveValidator.attacks`) ignores whether the attacker's own
  king would be exposed, and is the only thing attack detection looks at;
* a *legal* move (:meth:`MoveValidator.is_move_legal`) is a pseudo-legal move
  that does not leave the mover's king attacked.

Attack detection never calls the legality gate, so the two cannot recurse
into each other.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import OutOfBoundsError
from chessgate.core.piece import Piece
from chessgate.core.types import Square, is_valid_square, square_name

PieceRule: TypeAlias = Callable[[Board, Square, Square], bool]


# -- Helpers ----------------------------------------------------------------


def _mover(board: Board, from_sq: Square) -> Piece:
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")
    return piece


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _is_empty_or_enemy(board: Board, to_sq: Square, color: Color) -> bool:
    target = board[to_sq]
    return target is None or target.color != color


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    The two squares must share a file, a rank or a diagonal.
    """
    d_file = to_sq.file - from_sq.file
    d_rank = to_sq.rank - from_sq.rank
    if d_file and d_rank and abs(d_file) != abs(d_rank):
        raise ValueError(
            f"{square_name(from_sq)} and {square_name(to_sq)} are not on a line"
        )

    step_file, step_rank = _sign(d_file), _sign(d_rank)
    f = from_sq.file + step_file
    r = from_sq.rank + step_rank
    while (f, r) != (to_sq.file, to_sq.rank):
        if not board.is_empty(Square(f, r)):
            return False
        f += step_file
        r += step_rank
    return True


# -- Piece patterns ---------------------------------------------------------
# Each predicate assumes *from_sq* is occupied and differs from *to_sq*.


def is_pawn_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    color = _mover(board, from_sq).color
    d_rank = (to_sq.rank - from_sq.rank) * color.pawn_direction
    d_file = abs(to_sq.file - from_sq.file)

    if (d_rank, d_file) == (1, 0):
        return board.is_empty(to_sq)
    if (d_rank, d_file) == (2, 0):
        return (
            from_sq.rank == color.pawn_start_rank
            and board.is_empty(to_sq)
            and is_path_clear(board, from_sq, to_sq)
        )
    if (d_rank, d_file) == (1, 1):
        target = board[to_sq]
        return target is not None and target.color != color
    return False


def is_knight_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    color = _mover(board, from_sq).color
    jump = sorted((abs(to_sq.file - from_sq.file), abs(to_sq.rank - from_sq.rank)))
    return jump == [1, 2] and _is_empty_or_enemy(board, to_sq, color)


def is_bishop_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    color = _mover(board, from_sq).color
    d_file = abs(to_sq.file - from_sq.file)
    d_rank = abs(to_sq.rank - from_sq.rank)
    return (
        d_file == d_rank != 0
        and is_path_clear(board, from_sq, to_sq)
        and _is_empty_or_enemy(board, to_sq, color)
    )


def is_rook_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    color = _mover(board, from_sq).color
    same_file = from_sq.file == to_sq.file
    same_rank = from_sq.rank == to_sq.rank
    return (
        same_file != same_rank
        and is_path_clear(board, from_sq, to_sq)
        and _is_empty_or_enemy(board, to_sq, color)
    )


def is_queen_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return is_bishop_move_legal(board, from_sq, to_sq) or is_rook_move_legal(
        board, from_sq, to_sq
    )


def is_king_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """One step in any direction. Castling is decided elsewhere."""
    color = _mover(board, from_sq).color
    d_file = abs(to_sq.file - from_sq.file)
    d_rank = abs(to_sq.rank - from_sq.rank)
    return max(d_file, d_rank) == 1 and _is_empty_or_enemy(board, to_sq, color)


PIECE_RULES: dict[PieceType, PieceRule] = {
    PieceType.PAWN: is_pawn_move_legal,
    PieceType.KNIGHT: is_knight_move_legal,
    PieceType.BISHOP: is_bishop_move_legal,
    PieceType.ROOK: is_rook_move_legal,
    PieceType.QUEEN: is_queen_move_legal,
    PieceType.KING: is_king_move_legal,
}


# -- Validator --------------------------------------------------------------


class MoveValidator:
    """Answers legality and attack questions about one board snapshot.

    The validator never mutates its board; move simulation happens on a
    clone.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Pseudo-legal moves and reach ----------------------------------------

    def is_pseudo_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Piece pattern plus path/occupancy checks, ignoring self-check."""
        piece = _mover(self._board, from_sq)
        if not is_valid_square(to_sq):
            raise OutOfBoundsError(to_sq)
        if from_sq == to_sq:
            return False
        return PIECE_RULES[piece.kind](self._board, from_sq, to_sq)

    def attacks(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* reaches *to_sq*.

        Reach is the pseudo-legal move set for every piece, pawns included:
        a pawn reaches an empty square ahead of it and a diagonal only when
        an enemy stands there.
        """
        piece = _mover(self._board, from_sq)
        if from_sq == to_sq:
            return False
        return PIECE_RULES[piece.kind](self._board, from_sq, to_sq)

    # -- Attack detection ----------------------------------------------------

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* reached by any piece of *by_color*?"""
        if not is_valid_square(sq):
            raise OutOfBoundsError(sq)
        return any(
            self.attacks(origin, sq) for origin, _ in self._board.occupied(by_color)
        )

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.find_king_position(color)
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Legality gate -------------------------------------------------------

    def would_move_cause_self_check(self, from_sq: Square, to_sq: Square) -> bool:
        """Play the move on a clone and test the mover's king."""
        color = _mover(self._board, from_sq).color
        simulated = self._board.clone()
        simulated.place_piece(to_sq, simulated.take_piece(from_sq))
        return MoveValidator(simulated).is_in_check(color)

    def is_move_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Pseudo-legal and does not leave the mover's king attacked."""
        return self.is_pseudo_legal(
            from_sq, to_sq
        ) and not self.would_move_cause_self_check(from_sq, to_sq)


# -- Functional shortcuts ---------------------------------------------------


def is_pseudo_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return MoveValidator(board).is_pseudo_legal(from_sq, to_sq)


def is_move_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return MoveValidator(board).is_move_legal(from_sq, to_sq)


def would_move_cause_self_check(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return MoveValidator(board).would_move_cause_self_check(from_sq, to_sq)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    return MoveValidator(board).is_square_attacked(sq, by_color)


def is_in_check(board: Board, color: Color) -> bool:
    return MoveValidator(board).is_in_check(color)
