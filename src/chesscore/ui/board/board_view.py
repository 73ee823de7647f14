"""BoardView: keeps the board scene scaled to the widget."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from chesscore.core.types import Square
from chesscore.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Frameless view that fits the whole board into the available space.

    Signals:
        square_clicked(Square): Re-emitted from the scene.
    """

    square_clicked = pyqtSignal(Square)

    def __init__(
        self, scene: BoardScene | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = scene if scene is not None else BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing
        )
        for policy_setter in (
            self.setHorizontalScrollBarPolicy,
            self.setVerticalScrollBarPolicy,
        ):
            policy_setter(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        self._scene.square_clicked.connect(self.square_clicked)
        self._scene.sceneRectChanged.connect(self._fit_scene)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def _fit_scene(self, _rect: QRectF | None = None) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit_scene()

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit_scene()
