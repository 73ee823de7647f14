"""Application settings and how they are applied to the main window."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from chesscore.ui.styles.theme import BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    flip_board: bool = False

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        """Defaults, with the log level taken from ``CHESSCORE_LOG_LEVEL`` if set."""
        return cls(log_level=os.environ.get("CHESSCORE_LOG_LEVEL", "WARNING"))


def theme_for(name: str) -> BoardTheme:
    theme_map = {
        "Classic": BoardTheme.default(),
        "Slate": BoardTheme.slate(),
    }
    return theme_map.get(name, BoardTheme.default())


def apply_settings(host: Any) -> None:
    """Push *host*'s settings into its board scene and menu state."""
    s = host._settings
    scene = host._board_view.board_scene

    scene.set_theme(theme_for(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_flipped(s.flip_board)

    host._act_flip.setChecked(s.flip_board)
    host._act_coords.setChecked(s.show_coordinates)
