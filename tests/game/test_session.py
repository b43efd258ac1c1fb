"""Tests for GameSession."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.move import MoveRecord
from chessgate.core.piece import Piece
from chessgate.core.types import (
    A1, B1, C1, D1, E1, E2, E4, E5, E7, F1, G1, H1,
    Square,
    parse_square,
)
from chessgate.game.session import GameSession, MoveOutcome

MakeBoard = Callable[..., Board]


def play(session: GameSession, *moves: str) -> list[MoveOutcome]:
    return [
        session.attempt_move(parse_square(m[:2]), parse_square(m[2:])) for m in moves
    ]


class TestAttemptMove:
    def test_legal_move_applied(self) -> None:
        session = GameSession()
        assert session.attempt_move(E2, E4) == MoveOutcome.MOVED
        assert session.board[E4] == Piece(PieceType.PAWN, Color.WHITE)
        assert session.board[E2] is None
        assert session.history == (MoveRecord(E2, E4),)
        assert session.last_move == MoveRecord(E2, E4)

    def test_illegal_move_is_a_no_op(self) -> None:
        session = GameSession()
        assert session.attempt_move(E2, E5) == MoveOutcome.ILLEGAL
        assert session.board == Board.initial()
        assert session.history == ()
        assert session.last_move is None

    def test_empty_origin(self) -> None:
        session = GameSession()
        assert session.attempt_move(E4, E5) == MoveOutcome.EMPTY_SQUARE
        assert session.history == ()

    @pytest.mark.parametrize(
        ("from_sq", "to_sq"),
        [(Square(8, 1), E4), (E2, Square(4, 8)), (E1, Square(6, -1)), (Square(-1, 0), A1)],
    )
    def test_out_of_bounds_is_rejected_not_raised(
        self, from_sq: Square, to_sq: Square, caplog: pytest.LogCaptureFixture
    ) -> None:
        session = GameSession()
        with caplog.at_level(logging.WARNING, logger="chessgate.game.session"):
            assert session.attempt_move(from_sq, to_sq) == MoveOutcome.OUT_OF_BOUNDS
        assert session.board == Board.initial()
        assert "off the board" in caplog.text

    def test_turns_are_not_enforced(self) -> None:
        session = GameSession()
        outcomes = play(session, "e7e5", "d7d5", "e2e4", "g1f3", "b1c3")
        assert outcomes == [MoveOutcome.MOVED] * 5
        assert len(session.history) == 5

    def test_capture_discards_piece(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(e1="K", e8="k", d1="Q", d7="n"))
        assert play(session, "d1d7") == [MoveOutcome.MOVED]
        assert session.board[parse_square("d7")] == Piece(PieceType.QUEEN, Color.WHITE)
        assert len(list(session.board.occupied())) == 3

    def test_self_check_rejected(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(e1="K", e2="B", e8="r", a8="k"))
        assert play(session, "e2d3") == [MoveOutcome.ILLEGAL]
        assert session.board[E2] == Piece(PieceType.BISHOP, Color.WHITE)

    def test_is_in_check(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(e1="K", a8="k", e8="r"))
        assert session.is_in_check(Color.WHITE)
        assert not session.is_in_check(Color.BLACK)
        assert session.checked_colors() == [Color.WHITE]

    def test_checked_colors_skips_captured_king(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(e1="K", d1="Q", e8="k"))
        assert play(session, "d1d8") == [MoveOutcome.MOVED]
        assert session.checked_colors() == [Color.BLACK]

        # No turn order: white may move again and take the king.
        assert play(session, "d8e8") == [MoveOutcome.MOVED]
        assert session.checked_colors() == []


class TestCastling:
    def test_kingside_from_start(self) -> None:
        session = GameSession()
        session.board.take_piece(F1)
        session.board.take_piece(G1)
        assert session.is_castling_move(E1, G1)

        assert session.attempt_move(E1, G1) == MoveOutcome.CASTLED
        assert session.board[G1] == Piece(PieceType.KING, Color.WHITE)
        assert session.board[F1] == Piece(PieceType.ROOK, Color.WHITE)
        assert session.board[E1] is None
        assert session.board[H1] is None
        assert session.history == (MoveRecord(E1, G1), MoveRecord(H1, F1))

    def test_queenside_from_start(self) -> None:
        session = GameSession()
        for sq in (B1, C1, D1):
            session.board.take_piece(sq)

        assert session.attempt_move(E1, C1) == MoveOutcome.CASTLED
        assert session.board[C1] == Piece(PieceType.KING, Color.WHITE)
        assert session.board[D1] == Piece(PieceType.ROOK, Color.WHITE)
        assert session.board[A1] is None
        assert session.history == (MoveRecord(E1, C1), MoveRecord(A1, D1))

    def test_black_kingside(self) -> None:
        session = GameSession()
        assert play(session, "g8f6", "e7e6", "f8e7", "e8g8") == [
            MoveOutcome.MOVED,
            MoveOutcome.MOVED,
            MoveOutcome.MOVED,
            MoveOutcome.CASTLED,
        ]
        assert session.board[parse_square("g8")] == Piece(PieceType.KING, Color.BLACK)
        assert session.board[parse_square("f8")] == Piece(PieceType.ROOK, Color.BLACK)

    def test_king_round_trip_forfeits_castling(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(a1="R", e1="K", h1="R", e8="k"))
        assert play(session, "e1f1", "f1e1") == [MoveOutcome.MOVED] * 2
        assert not session.is_castling_move(E1, G1)
        assert play(session, "e1g1", "e1c1") == [MoveOutcome.ILLEGAL] * 2

    def test_castling_into_check_rejected(self, make_board: MakeBoard) -> None:
        session = GameSession(make_board(a1="R", e1="K", h1="R", g5="r", a8="k"))
        assert play(session, "e1g1") == [MoveOutcome.ILLEGAL]
        assert play(session, "e1c1") == [MoveOutcome.CASTLED]


class TestEventsAndReset:
    def test_on_move_fires_per_move(self) -> None:
        session = GameSession()
        seen: list[tuple[MoveRecord, MoveOutcome]] = []
        session.events.on_move.append(lambda rec, outcome: seen.append((rec, outcome)))

        play(session, "e2e4", "e2e3")
        assert seen == [(MoveRecord(E2, E4), MoveOutcome.MOVED)]

    def test_on_move_reports_king_record_for_castling(self) -> None:
        session = GameSession()
        session.board.take_piece(F1)
        session.board.take_piece(G1)
        seen: list[tuple[MoveRecord, MoveOutcome]] = []
        session.events.on_move.append(lambda rec, outcome: seen.append((rec, outcome)))

        session.attempt_move(E1, G1)
        assert seen == [(MoveRecord(E1, G1), MoveOutcome.CASTLED)]

    def test_on_rejected(self) -> None:
        session = GameSession()
        seen: list[tuple[Square, Square, MoveOutcome]] = []
        session.events.on_rejected.append(lambda f, t, o: seen.append((f, t, o)))

        session.attempt_move(E7, E4)
        session.attempt_move(E4, E5)
        assert seen == [
            (E7, E4, MoveOutcome.ILLEGAL),
            (E4, E5, MoveOutcome.EMPTY_SQUARE),
        ]

    def test_new_game_resets(self) -> None:
        session = GameSession()
        play(session, "e2e4", "e7e5")
        session.new_game()
        assert session.board == Board.initial()
        assert session.history == ()

    def test_outcome_success_flags(self) -> None:
        assert MoveOutcome.MOVED.succeeded
        assert MoveOutcome.CASTLED.succeeded
        assert not MoveOutcome.ILLEGAL.succeeded
        assert not MoveOutcome.EMPTY_SQUARE.succeeded
        assert not MoveOutcome.OUT_OF_BOUNDS.succeeded
