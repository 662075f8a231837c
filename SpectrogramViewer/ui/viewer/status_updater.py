"""Status bar update logic for ViewerWindow.

This module handles:
- Pointer position display
- Current view display (full image or crop rectangle)
- Live selection size while dragging
"""

from ...core.region import Rect


def format_rect(rect: Rect) -> str:
    return "({}, {}) {}x{}".format(*rect.as_tuple())


class StatusUpdater:
    """Keeps the viewer's status bar labels in sync with the tracker."""

    def __init__(self, viewer):
        """Initialize status updater.

        Args:
            viewer: ViewerWindow instance
        """
        self.viewer = viewer

    def update_pointer_status(self, x: int, y: int):
        """Show the pointer position, or nothing when it is outside the canvas."""
        bounds = self.viewer.renderer.bounds
        if 0 <= x < bounds.width and 0 <= y < bounds.height:
            self.viewer.status_pixel.setText(f"x={x} y={y}")
        else:
            self.clear_pointer_status()

    def clear_pointer_status(self):
        self.viewer.status_pixel.setText("")

    def update_status(self):
        tracker = self.viewer.tracker
        crop = tracker.crop_rect
        if crop is None:
            self.viewer.status_view.setText("View: full image")
        else:
            self.viewer.status_view.setText(f"View: {format_rect(crop)}")

        if tracker.is_selecting:
            self.viewer.status_selection.setText(f"Selection: {format_rect(tracker.selection_rect)}")
        else:
            self.viewer.status_selection.setText("")
