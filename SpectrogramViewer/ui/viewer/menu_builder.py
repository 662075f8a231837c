"""Menu and keyboard shortcut configuration for ViewerWindow.

Shortcuts are matched by Qt against the live modifier state of each key
event, so Ctrl+0 fires with either Control key and Esc fires only when no
modifier is held.
"""

from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

from ...core.constants import RESET_SHORTCUT, QUIT_SHORTCUT, HELP_SHORTCUT


def create_menus(viewer):
    """Create all menus and keyboard shortcuts for the viewer.

    Args:
        viewer: ViewerWindow instance
    """
    menubar = viewer.menuBar()

    viewer.quit_action = QAction("Quit", viewer, shortcut=QUIT_SHORTCUT)
    viewer.quit_action.setShortcutContext(Qt.WindowShortcut)
    viewer.quit_action.triggered.connect(viewer.close)
    viewer.addAction(viewer.quit_action)

    viewer.reset_view_action = QAction("Zoom out to full image", viewer, shortcut=RESET_SHORTCUT)
    viewer.reset_view_action.setShortcutContext(Qt.WindowShortcut)
    viewer.reset_view_action.triggered.connect(viewer.reset_view)
    viewer.addAction(viewer.reset_view_action)

    viewer.help_action = QAction("Shortcuts", viewer, shortcut=HELP_SHORTCUT)
    viewer.help_action.setShortcutContext(Qt.WindowShortcut)
    viewer.help_action.triggered.connect(viewer.help_dialog.show)
    viewer.addAction(viewer.help_action)

    file_menu = menubar.addMenu("File")
    file_menu.addAction(viewer.quit_action)

    view_menu = menubar.addMenu("View")
    view_menu.addAction(viewer.reset_view_action)

    help_menu = menubar.addMenu("Help")
    help_menu.addAction(viewer.help_action)
