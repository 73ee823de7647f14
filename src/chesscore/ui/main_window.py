"""MainWindow: top-level window hosting the board view and menus."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStatusBar, QWidget

from chesscore.core.board import Board
from chesscore.core.move import Move
from chesscore.core.types import Square
from chesscore.ui.board.board_view import BoardView
from chesscore.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Owns the single :class:`Board` of the session and hands it to the board
    scene for drawing. "New Game" replaces it with a fresh starting position.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("chesscore")
        self.setMinimumSize(480, 520)
        self.resize(700, 740)

        self._settings = settings if settings is not None else AppSettings()
        self._board = Board.initial()

        self._setup_ui()
        self._setup_menu()
        self._board_view.square_clicked.connect(self._on_square_clicked)

        self._apply_settings()
        self._board_view.board_scene.set_board(self._board)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView()
        root.addWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.setCheckable(True)
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_view.addAction(self._act_flip)

        self._act_coords = QAction("Show &Coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.triggered.connect(self._on_toggle_coordinates)
        self._menu_view.addAction(self._act_coords)

    # ── Board access ─────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The session board; mutate it only through :meth:`play_move` / :meth:`undo_move`."""
        return self._board

    def new_game(self) -> None:
        """Replace the session board with the starting position."""
        self._board = Board.initial()
        scene = self._board_view.board_scene
        scene.set_board(self._board)
        scene.highlight_last_move(None)
        self._status_label.setText("New game")
        _LOGGER.info("Started a new game")

    def play_move(self, move: Move) -> None:
        """Play *move* on the session board and redraw."""
        self._board.play(move)
        self._after_board_change(move)

    def undo_move(self, move: Move) -> None:
        """Undo *move* on the session board and redraw."""
        self._board.undo(move)
        self._after_board_change(None)

    def _after_board_change(self, last_move: Move | None) -> None:
        scene = self._board_view.board_scene
        scene.refresh()
        scene.highlight_last_move(last_move)

    # ── Menu handlers ────────────────────────────────────────────────────

    def _on_flip(self) -> None:
        self._settings.flip_board = not self._settings.flip_board
        self._apply_settings()

    def _on_toggle_coordinates(self) -> None:
        self._settings.show_coordinates = not self._settings.show_coordinates
        self._apply_settings()

    def _apply_settings(self) -> None:
        apply_settings(self)

    def _on_square_clicked(self, square: Square) -> None:
        piece = self._board.get_piece(square)
        if piece is None:
            self._status_label.setText(f"{square}: empty")
        else:
            self._status_label.setText(
                f"{square}: {piece.color.name.lower()} {piece.kind.name.lower()}"
            )
