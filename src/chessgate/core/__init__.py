"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessgate.core import Board, MoveValidator, parse_square

    board = Board.initial()
    validator = MoveValidator(board)
    validator.is_move_legal(parse_square("e2"), parse_square("e4"))  # True
"""

from chessgate.core.board import Board, Cell
from chessgate.core.castling import (
    CastlingSquares,
    castling_records,
    castling_squares,
    has_king_moved,
    has_rook_moved,
    is_castling_move,
)
from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import (
    ChessError,
    InvariantViolation,
    KingNotFoundError,
    OutOfBoundsError,
)
from chessgate.core.move import MoveRecord
from chessgate.core.piece import Piece
from chessgate.core.rules import (
    MoveValidator,
    is_in_check,
    is_move_legal,
    is_path_clear,
    is_pseudo_legal,
    is_square_attacked,
    would_move_cause_self_check,
)
from chessgate.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Cell",
    "MoveRecord",
    "MoveValidator",
    "Piece",
    # Rules
    "is_in_check",
    "is_move_legal",
    "is_path_clear",
    "is_pseudo_legal",
    "is_square_attacked",
    "would_move_cause_self_check",
    # Castling
    "CastlingSquares",
    "castling_records",
    "castling_squares",
    "has_king_moved",
    "has_rook_moved",
    "is_castling_move",
    # Errors
    "ChessError",
    "InvariantViolation",
    "KingNotFoundError",
    "OutOfBoundsError",
]
