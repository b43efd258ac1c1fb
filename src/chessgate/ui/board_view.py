"""BoardView — widget that shows a BoardScene and owns its session."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessgate.game.session import GameSession
from chessgate.ui.board_scene import BoardScene
from chessgate.ui.settings import AppSettings


class BoardView(QGraphicsView):
    """Fits the board to the widget and adds keyboard control.

    Esc drops the current selection. :meth:`new_game` resets the session
    and redraws in one step.

    Signals:
        move_attempted(MoveOutcome): every completed two-click request.
    """

    move_attempted = pyqtSignal(object)

    _MIN_TILES = 4

    def __init__(
        self,
        session: GameSession,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        self._session = session
        self._scene = BoardScene(session, settings)
        super().__init__(self._scene, parent)

        # Glyph pieces are text items, so text antialiasing matters most.
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing
        )
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        side = self._MIN_TILES * BoardScene.TILE
        self.setMinimumSize(side, side)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self._scene.move_attempted.connect(self.move_attempted)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def session(self) -> GameSession:
        return self._session

    def new_game(self) -> None:
        """Back to the starting position with an empty history."""
        self._session.new_game()
        self._scene.refresh()

    # ── Qt events ────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() == Qt.Key.Key_Escape:
            self._scene.cancel_selection()
            event.accept()
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
