"""Viewer main window package.

- viewer.py: ViewerWindow coordinating canvas, tracker and status bar
- menu_builder.py: Menu and keyboard shortcut setup
- status_updater.py: Status bar update logic
"""

from .viewer import ViewerWindow

__all__ = ["ViewerWindow"]
