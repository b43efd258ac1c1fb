"""Two-click move entry: pick a piece, then pick its destination."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgate.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chessgate.game.session import GameSession, MoveOutcome


class SquareSelection:
    """Selection state owned by the input side, never by the core.

    Args:
        keep_selection_on_illegal: Keep the origin selected when the second
            click names an illegal destination. By default any second click
            clears the selection, legal or not.
    """

    __slots__ = ("_selected", "_keep_on_illegal")

    def __init__(self, *, keep_selection_on_illegal: bool = False) -> None:
        self._selected: Square | None = None
        self._keep_on_illegal = keep_selection_on_illegal

    @property
    def selected(self) -> Square | None:
        return self._selected

    def clear(self) -> None:
        self._selected = None

    def click(self, square: Square, session: GameSession) -> MoveOutcome | None:
        """Feed one click.

        Returns ``None`` when the click only changed the selection, or the
        outcome of the move request it completed.
        """
        if self._selected is None:
            if is_valid_square(square) and session.board[square] is not None:
                self._selected = square
            return None

        outcome = session.attempt_move(self._selected, square)
        if outcome.succeeded or not self._keep_on_illegal:
            self._selected = None
        return outcome
