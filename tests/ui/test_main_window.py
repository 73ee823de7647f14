"""Tests for MainWindow board ownership and menu actions."""

from __future__ import annotations

import pytest

from chesscore.core.board import Board
from chesscore.core.errors import IllegalMoveError
from chesscore.core.move import PromotionMove, QuietMove
from chesscore.core.piece import WHITE_PAWN, WHITE_QUEEN
from chesscore.core.types import A7, A8, E2, E4, E5
from chesscore.ui.main_window import MainWindow
from chesscore.ui.settings import AppSettings


class TestMainWindowBoard:
    def test_starts_with_initial_position(self) -> None:
        window = MainWindow()
        assert window.board == Board.initial()
        assert len(window._board_view.board_scene._piece_items) == 32

    def test_play_and_undo_redraw(self) -> None:
        window = MainWindow()
        move = QuietMove(E2, E4)

        window.play_move(move)
        scene = window._board_view.board_scene
        assert E4 in scene._piece_items
        assert E2 not in scene._piece_items
        assert len(scene._highlight_items) == 2

        window.undo_move(move)
        assert window.board == Board.initial()
        assert E2 in scene._piece_items
        assert scene._highlight_items == []

    def test_promotion_is_drawn_as_new_piece(self) -> None:
        window = MainWindow()
        window.board.clear()
        window.board[A7] = WHITE_PAWN
        window.play_move(PromotionMove(WHITE_QUEEN, A7, A8))
        assert window._board_view.board_scene._piece_items[A8].text() == "♕"

    def test_illegal_move_propagates(self) -> None:
        window = MainWindow()
        with pytest.raises(IllegalMoveError):
            window.play_move(QuietMove(E4, E5))

    def test_new_game_replaces_board(self) -> None:
        window = MainWindow()
        old = window.board
        window.play_move(QuietMove(E2, E4))

        window._act_new_game.trigger()

        assert window.board is not old
        assert window.board == Board.initial()
        assert old[E4] == WHITE_PAWN
        assert window._status_label.text() == "New game"


class TestMainWindowMenu:
    def test_flip_action_toggles_orientation(self) -> None:
        window = MainWindow()
        scene = window._board_view.board_scene
        assert not scene.is_flipped()

        window._act_flip.trigger()
        assert scene.is_flipped()
        assert window._settings.flip_board
        assert window._act_flip.isChecked()

        window._act_flip.trigger()
        assert not scene.is_flipped()

    def test_flip_keeps_last_move_highlight(self) -> None:
        window = MainWindow()
        window.play_move(QuietMove(E2, E4))

        window._act_flip.trigger()

        assert len(window._board_view.board_scene._highlight_items) == 2

    def test_coordinates_action_toggles_labels(self) -> None:
        window = MainWindow()
        scene = window._board_view.board_scene
        assert window._act_coords.isChecked()

        window._act_coords.trigger()
        assert not window._settings.show_coordinates
        assert all(not item.isVisible() for item in scene._coord_items)

    def test_initial_settings_are_applied(self) -> None:
        window = MainWindow(AppSettings(flip_board=True, show_coordinates=False))
        assert window._board_view.board_scene.is_flipped()
        assert window._act_flip.isChecked()
        assert not window._act_coords.isChecked()

    def test_menus_present(self) -> None:
        window = MainWindow()
        assert window._menu_game.title() == "&Game"
        assert window._menu_view.title() == "&View"
        assert window._act_new_game in window._menu_game.actions()
        assert window._act_flip in window._menu_view.actions()


class TestMainWindowStatus:
    def test_square_click_reports_occupant(self) -> None:
        window = MainWindow()
        window._board_view.square_clicked.emit(E2)
        assert window._status_label.text() == "e2: white pawn"

    def test_square_click_reports_empty(self) -> None:
        window = MainWindow()
        window._board_view.board_scene.square_clicked.emit(E4)
        assert window._status_label.text() == "e4: empty"
