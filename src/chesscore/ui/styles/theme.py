"""Visual theme constants and QSS styles for chesscore."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    last_move_from: QColor  # last move origin
    last_move_to: QColor  # last move destination
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares
    piece_color: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(195, 163, 113),  # sand
            dark_square=QColor(113, 78, 47),  # walnut
            last_move_from=QColor(155, 199, 0, 105),  # green
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(113, 78, 47),
            coord_dark=QColor(195, 163, 113),
            piece_color=QColor(20, 20, 20),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            last_move_from=QColor(155, 199, 0, 105),
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
            piece_color=QColor(15, 15, 25),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
