"""pytest configuration: headless Qt and per-test widget cleanup."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

_DISPLAY_VARS = ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "ui: test builds Qt widgets or scenes")
    if sys.platform.startswith("linux") and not any(v in os.environ for v in _DISPLAY_VARS):
        os.environ["QT_QPA_PLATFORM"] = "offscreen"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    # Everything under tests/ui needs a QApplication.
    for item in items:
        if "ui" in item.path.parts:
            item.add_marker(pytest.mark.ui)


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The process-wide QApplication, created on first use."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _qt_cleanup(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close and delete windows a ui test left open."""
    if request.node.get_closest_marker("ui") is None:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in app.topLevelWidgets():
        widget.close()
        widget.deleteLater()
    app.processEvents()
