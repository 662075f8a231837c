"""Main viewer window.

This module provides the ViewerWindow class, which hosts the fixed-size
canvas and wires it to the tracker, the menus and the status bar.

Features:
- Left-drag to select a region, release to zoom into it
- Ctrl+0 to return to the full image
- Esc or closing the window to quit
- Status bar showing pointer position, current view and live selection
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStatusBar, QLabel, QLayout

from ...core.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from ...core.image_io import planar_to_qimage
from ...core.raster import PlanarImage, make_uv_gradient
from ...core.renderer import ViewRenderer
from ...core.tracker import ViewTracker
from ..canvas import CanvasWidget
from ..dialogs import HelpDialog

from .menu_builder import create_menus
from .status_updater import StatusUpdater

logger = logging.getLogger(__name__)


class ViewerWindow(QMainWindow):
    """Main application window.

    Mouse Controls:
        - Left-drag: Select a region (translucent highlight follows the pointer)
        - Release: Zoom the selected region to fill the canvas

    Keyboard Shortcuts:
        - Ctrl+0: Zoom out to the full image
        - Esc: Quit
        - F1: Help

    Attributes:
        source: Immutable planar source image
        tracker: Selection/viewport state machine
        renderer: Frame composer for the canvas
        canvas: CanvasWidget displaying the current view
    """

    def __init__(self, source: Optional[PlanarImage] = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        if source is None:
            source = make_uv_gradient(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.source = source
        self.tracker = ViewTracker()
        self.renderer = ViewRenderer(source.width, source.height)

        self.canvas = CanvasWidget(self.tracker, self.renderer, planar_to_qimage(source), self)
        self.setCentralWidget(self.canvas)

        self.status = QStatusBar()
        self.setStatusBar(self.status)
        self.status.setSizeGripEnabled(False)
        self.status_pixel = QLabel()
        self.status_view = QLabel()
        self.status_selection = QLabel()
        self.status.addPermanentWidget(self.status_pixel, 1)
        self.status.addPermanentWidget(self.status_selection, 2)
        self.status.addPermanentWidget(self.status_view, 2)

        self.help_dialog = HelpDialog(self)
        self.status_updater = StatusUpdater(self)

        create_menus(self)
        self.layout().setSizeConstraint(QLayout.SetFixedSize)

        self.canvas.state_changed.connect(self.update_status)
        self.canvas.pointer_moved.connect(self.update_pointer_status)
        self.canvas.pointer_left.connect(self.status_updater.clear_pointer_status)
        self.update_status()
        logger.debug("Viewer created for %dx%d source", source.width, source.height)

    def reset_view(self):
        self.canvas.reset_view()

    def update_status(self):
        self.status_updater.update_status()

    def update_pointer_status(self, x: int, y: int):
        self.status_updater.update_pointer_status(x, y)

    def closeEvent(self, event):
        """Stop the tracker and close the help dialog before the window goes away."""
        self.tracker.on_quit_signal()
        if self.help_dialog.isVisible():
            self.help_dialog.close()
        event.accept()
