"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgate.core.enums import Color
from chessgate.core.types import Square, all_squares
from chessgate.game.selection import SquareSelection
from chessgate.game.session import GameSession
from chessgate.ui.settings import AppSettings
from chessgate.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, selection outline and piece glyphs.

    Signals:
        move_attempted(MoveOutcome): Emitted when a second click completes a
            move request, legal or not.
    """

    move_attempted = pyqtSignal(object)

    TILE = 80  # px per square
    _OUTLINE_WIDTH = 3.0

    def __init__(
        self,
        session: GameSession,
        settings: AppSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._theme = BoardTheme.named(self._settings.board_theme)
        self._session = session
        self._selection = SquareSelection(
            keep_selection_on_illegal=self._settings.keep_selection_on_illegal_move
        )
        self._origin = QPointF(0.0, 0.0)

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selection(self) -> SquareSelection:
        return self._selection

    def refresh(self) -> None:
        """Drop the selection and redraw pieces from the board."""
        self._selection.clear()
        self._sync_pieces()
        self._sync_highlights()

    def cancel_selection(self) -> None:
        """Forget the selected square without attempting a move."""
        self._selection.clear()
        self._sync_highlights()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._settings.show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPointSize(max(9, t // 8))

        for sq in all_squares():
            x, y = self._square_origin(sq)
            is_light = (sq.file + sq.rank) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            if sq.file == 0:
                self._add_coord(str(sq.rank + 1), font, text_color, x + 2, y + 1)
            if sq.rank == 0:
                letter = chr(ord("a") + sq.file)
                self._add_coord(letter, font, text_color, x + t - 12, y + t - 16)

        self.setSceneRect(self._origin.x(), self._origin.y(), 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._settings.show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the session board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.8))
        for sq, piece in self._session.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.piece_white
                if piece.color == Color.WHITE
                else self._theme.piece_black
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(self._theme.piece_black, 1.0))
            bounds = item.boundingRect()
            x, y = self._square_origin(sq)
            item.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        """Selection outline plus a red overlay under any king in check."""
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        for color in self._session.checked_colors():
            king_sq = self._session.board.find_king_position(color)
            overlay = self._make_overlay(king_sq)
            overlay.setBrush(QBrush(self._theme.highlight_check))
            overlay.setZValue(0.6)

        selected = self._selection.selected
        if selected is not None:
            outline = self._make_overlay(selected)
            outline.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            outline.setPen(QPen(self._theme.selection_outline, self._OUTLINE_WIDTH))
            outline.setZValue(2)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self.cancel_selection()
            return super().mousePressEvent(event)

        self.handle_square_click(sq)
        event.accept()

    def handle_square_click(self, sq: Square) -> None:
        """Route a click on *sq* through the selection state machine."""
        outcome = self._selection.click(sq, self._session)
        if outcome is not None:
            if outcome.succeeded:
                self._sync_pieces()
            self.move_attempted.emit(outcome)
        self._sync_highlights()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _square_origin(self, sq: Square) -> tuple[float, float]:
        """Top-left scene coordinates of *sq* (rank 8 drawn at the top)."""
        t = self.TILE
        return (
            self._origin.x() + sq.file * t,
            self._origin.y() + (7 - sq.rank) * t,
        )

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square, ``None`` outside the board."""
        t = self.TILE
        col = int((pos.x() - self._origin.x()) // t)
        row = int((pos.y() - self._origin.y()) // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return Square(col, 7 - row)

    def _make_overlay(self, sq: Square) -> QGraphicsRectItem:
        t = self.TILE
        x, y = self._square_origin(sq)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        self._highlight_items.append(rect)
        return rect
