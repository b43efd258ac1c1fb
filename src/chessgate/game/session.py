"""GameSession — owns the board and move history, applies move requests.

The session is the only writer of board state. It does not enforce turn
order: any piece may be moved as long as the move itself is legal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessgate.core.board import Board
from chessgate.core.castling import (
    castling_records,
    castling_side,
    castling_squares,
    is_castling_move,
)
from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import OutOfBoundsError
from chessgate.core.move import MoveRecord
from chessgate.core.rules import MoveValidator
from chessgate.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)


class MoveOutcome(IntEnum):
    """Result of :meth:`GameSession.attempt_move`."""

    MOVED = auto()
    CASTLED = auto()
    ILLEGAL = auto()
    EMPTY_SQUARE = auto()
    OUT_OF_BOUNDS = auto()

    @property
    def succeeded(self) -> bool:
        return self in (MoveOutcome.MOVED, MoveOutcome.CASTLED)


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, MoveOutcome], None]
RejectCallback = Callable[[Square, Square, MoveOutcome], None]  # from, to, why


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """A single game: board, move history and the move dispatcher."""

    __slots__ = ("_board", "_history", "events")

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board.initial()
        self._history: list[MoveRecord] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self._history[-1] if self._history else None

    # ── Queries ──────────────────────────────────────────────────────────

    def is_castling_move(self, from_sq: Square, to_sq: Square) -> bool:
        return is_castling_move(self._board, self._history, from_sq, to_sq)

    def is_move_legal(self, from_sq: Square, to_sq: Square) -> bool:
        return MoveValidator(self._board).is_move_legal(from_sq, to_sq)

    def is_in_check(self, color: Color) -> bool:
        return MoveValidator(self._board).is_in_check(color)

    def checked_colors(self) -> list[Color]:
        """Colors whose king is on the board and attacked.

        Turn order is not enforced, so a king can be captured; colors without
        a king are skipped here rather than raising.
        """
        present = {
            piece.color
            for _, piece in self._board.occupied()
            if piece.kind == PieceType.KING
        }
        validator = MoveValidator(self._board)
        return [c for c in Color if c in present and validator.is_in_check(c)]

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset to the starting position with an empty history."""
        self._board = Board.initial()
        self._history.clear()
        _LOGGER.debug("New game started")

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Validate and, if legal, apply the move *from_sq* -> *to_sq*.

        Castling is tried first and bypasses the general legality gate.
        A rejected request leaves the board untouched.
        """
        try:
            if self._board[from_sq] is None:
                return self._reject(from_sq, to_sq, MoveOutcome.EMPTY_SQUARE)
            if self.is_castling_move(from_sq, to_sq):
                self._castle(from_sq, to_sq)
                return MoveOutcome.CASTLED
            if not self.is_move_legal(from_sq, to_sq):
                return self._reject(from_sq, to_sq, MoveOutcome.ILLEGAL)
        except OutOfBoundsError as exc:
            _LOGGER.warning("Rejected move request: %s", exc)
            return self._reject(from_sq, to_sq, MoveOutcome.OUT_OF_BOUNDS)

        self._relocate(from_sq, to_sq)
        self._emit_move(self._history[-1], MoveOutcome.MOVED)
        return MoveOutcome.MOVED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _relocate(self, from_sq: Square, to_sq: Square) -> None:
        captured = self._board[to_sq]
        self._board.place_piece(to_sq, self._board.take_piece(from_sq))
        self._history.append(MoveRecord(from_sq, to_sq))
        if captured is not None:
            _LOGGER.debug(
                "Moved %s%s capturing %s",
                square_name(from_sq),
                square_name(to_sq),
                captured,
            )
        else:
            _LOGGER.debug("Moved %s%s", square_name(from_sq), square_name(to_sq))

    def _castle(self, from_sq: Square, to_sq: Square) -> None:
        color = self._board[from_sq].color  # type: ignore[union-attr]
        kingside = castling_side(self._board, from_sq, to_sq)
        squares = castling_squares(color, bool(kingside))
        king_record, rook_record = castling_records(squares)

        for record in (king_record, rook_record):
            piece = self._board.take_piece(record.from_sq)
            self._board.place_piece(record.to_sq, piece)
            self._history.append(record)

        _LOGGER.debug(
            "%s castled %s", color.name, "kingside" if kingside else "queenside"
        )
        self._emit_move(king_record, MoveOutcome.CASTLED)

    def _reject(
        self, from_sq: Square, to_sq: Square, outcome: MoveOutcome
    ) -> MoveOutcome:
        _LOGGER.debug(
            "Rejected %s -> %s: %s",
            square_name(from_sq),
            square_name(to_sq),
            outcome.name,
        )
        for cb in self.events.on_rejected:
            cb(from_sq, to_sq, outcome)
        return outcome

    def _emit_move(self, record: MoveRecord, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(record, outcome)
