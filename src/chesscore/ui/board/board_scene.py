"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesscore.core.move import Castle, Move
from chesscore.core.piece import Piece
from chesscore.core.types import File, Rank, Square, all_squares
from chesscore.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesscore.core.board import Board


class BoardScene(QGraphicsScene):
    """Renders the board squares, coordinates, highlights and pieces.

    The scene only reads from the board it is given; it never plays moves.

    Signals:
        square_clicked(Square): Emitted when the user presses on a square.
    """

    square_clicked = pyqtSignal(Square)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True
        self._last_move: Move | None = None

        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self._last_move = None
        self._clear_items(self._highlight_items)
        self._sync_pieces()

    def refresh(self) -> None:
        """Redraw pieces after the displayed board was mutated."""
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation, keeping the last-move highlight."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        if theme == self._theme:
            return
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def highlight_last_move(self, move: Move | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._last_move = move
        self._clear_items(self._highlight_items)
        if move is None:
            return
        if isinstance(move, Castle):
            origin, target = move.king_from, move.king_to
        else:
            origin, target = move.from_sq, move.to_sq  # type: ignore[attr-defined]
        for sq, color in [
            (origin, self._theme.last_move_from),
            (target, self._theme.last_move_to),
        ]:
            self._highlight_items.append(self._make_highlight(sq, color))

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in all_squares():
            f, r = sq.indices()
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers on the left edge, file letters on the bottom edge
            if vf == 0:
                self._add_coord_label(str(sq.rank), font, label_color, vf * t + 2, vr * t + 1)
            if vr == 7:
                self._add_coord_label(
                    str(sq.file), font, label_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord_label(
        self, text: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()

        if self._board is None:
            return

        for sq, piece in self._board.occupied():
            item = self._make_piece_item(piece)
            vf, vr = self._visual_coords(*sq.indices())
            bounds = item.boundingRect()
            t = self.TILE
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            self.addItem(item)
            self._piece_items[sq] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(piece.symbol)
        item.setFont(QFont("DejaVu Sans", int(self.TILE * 0.6)))
        item.setBrush(QBrush(self._theme.piece_color))
        item.setZValue(1)
        return item

    # ── Mouse events ─────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return
        sq = self._pos_to_square(event.scenePos())
        if sq is not None and event.button() == Qt.MouseButton.LeftButton:
            self.square_clicked.emit(sq)
        super().mousePressEvent(event)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return Square(File(f), Rank(r))

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(*sq.indices())
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect
