"""MainWindow — top-level window hosting the board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QStatusBar

from chessgate.game.session import GameSession, MoveOutcome
from chessgate.ui.board_view import BoardView
from chessgate.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

_REJECTION_TEXT: dict[MoveOutcome, str] = {
    MoveOutcome.ILLEGAL: "Illegal move",
    MoveOutcome.EMPTY_SQUARE: "No piece on that square",
    MoveOutcome.OUT_OF_BOUNDS: "Square is off the board",
}


class MainWindow(QMainWindow):
    """Main application window for chessgate."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self.setWindowTitle("Chess")
        self.resize(self._settings.window_size, self._settings.window_size)

        self._session = GameSession()

        self._board_view = BoardView(self._session, self._settings)
        self.setCentralWidget(self._board_view)
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

        self._setup_menu()
        self._board_view.move_attempted.connect(self._on_move_attempted)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return
        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._board_view.new_game()
        self._status_bar.clearMessage()

    def _on_move_attempted(self, outcome: MoveOutcome) -> None:
        if not outcome.succeeded:
            self._status_bar.showMessage(_REJECTION_TEXT.get(outcome, outcome.name))
            return

        last = self._session.last_move
        if last is None:
            return
        text = "Castled" if outcome == MoveOutcome.CASTLED else str(last)
        for color in self._session.checked_colors():
            text += f", {color.name.capitalize()} is in check"
        self._status_bar.showMessage(text)
        _LOGGER.info("%s (%s)", text, outcome.name)
