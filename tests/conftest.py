"""Pytest configuration and fixtures for SpectrogramViewer tests."""

import os

# Qt must pick the platform plugin before the first QGuiApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


class RecordingSurface:
    """Surface that records draw calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def blit(self, src, dst):
        self.calls.append(("blit", src, dst))

    def set_draw_color(self, rgba):
        self.calls.append(("set_draw_color", tuple(rgba)))

    def fill_rect(self, rect):
        self.calls.append(("fill_rect", rect))

    def present(self):
        self.calls.append(("present",))

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication running on the offscreen platform."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
