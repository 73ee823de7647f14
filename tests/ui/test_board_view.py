"""Tests for BoardView wiring."""

from __future__ import annotations

from PyQt6.QtWidgets import QFrame

from chesscore.core.types import E4, Square
from chesscore.ui.board.board_scene import BoardScene
from chesscore.ui.board.board_view import BoardView


def test_uses_given_scene() -> None:
    scene = BoardScene()
    view = BoardView(scene)
    assert view.board_scene is scene
    assert view.scene() is scene


def test_creates_scene_when_none_given() -> None:
    view = BoardView()
    assert isinstance(view.board_scene, BoardScene)


def test_square_clicks_are_re_emitted() -> None:
    view = BoardView()
    received: list[Square] = []
    view.square_clicked.connect(received.append)

    view.board_scene.square_clicked.emit(E4)

    assert received == [E4]


def test_frameless() -> None:
    assert BoardView().frameShape() == QFrame.Shape.NoFrame
