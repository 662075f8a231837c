"""Selection and viewport state machine.

ViewTracker turns pointer and keyboard intents into state changes. It has
no knowledge of Qt; the canvas widget calls it with plain integers.

States:
    selection: ``Idle`` or ``Selecting(region)``
    viewport:  ``FullView`` or ``CroppedView(rect)``

Transitions:
    Idle      --pointer_down--> Selecting
    Selecting --pointer_move--> Selecting (second corner follows the pointer)
    Selecting --pointer_up-->   Idle      (commits CroppedView)
    any       --reset-->        Idle      (viewport back to FullView)
    any       --quit-->         terminal  (all further events ignored)

Every handler returns True when the displayed frame needs a redraw.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .region import Rect, Region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Selecting:
    """Primary button held; ``region`` holds the press and current corners."""

    region: Region


@dataclass(frozen=True)
class FullView:
    """Whole source image stretched over the window."""


@dataclass(frozen=True)
class CroppedView:
    """Only ``rect`` (source coordinates) stretched over the window."""

    rect: Rect


SelectionState = Union[Idle, Selecting]
Viewport = Union[FullView, CroppedView]

IDLE = Idle()
FULL_VIEW = FullView()


class ViewTracker:
    """Tracks the in-progress selection and the committed viewport.

    Attributes:
        selection: Current SelectionState
        viewport: Current Viewport; the single source of truth for what is drawn
        running: False once the quit signal has been received
    """

    def __init__(self):
        self.selection: SelectionState = IDLE
        self.viewport: Viewport = FULL_VIEW
        self.running = True

    @property
    def is_selecting(self) -> bool:
        return isinstance(self.selection, Selecting)

    @property
    def selection_rect(self) -> Optional[Rect]:
        """Normalized rectangle of the drag in progress, or None."""
        if isinstance(self.selection, Selecting):
            return self.selection.region.normalized()
        return None

    @property
    def crop_rect(self) -> Optional[Rect]:
        """Committed crop rectangle, or None when showing the full image."""
        if isinstance(self.viewport, CroppedView):
            return self.viewport.rect
        return None

    def on_pointer_down(self, x: int, y: int) -> bool:
        """Start a new selection at ``(x, y)``, discarding any previous one."""
        if not self.running:
            return False
        self.selection = Selecting(Region.at(x, y))
        return True

    def on_pointer_move(self, x: int, y: int) -> bool:
        """Move the second corner of the selection, if a drag is active."""
        if not self.running or not isinstance(self.selection, Selecting):
            return False
        self.selection = Selecting(self.selection.region.with_end(x, y))
        return True

    def on_pointer_up(self, x: int, y: int) -> bool:
        """Finish the drag and zoom into the selected rectangle.

        Zero-area rectangles are committed unchanged.
        """
        if not self.running or not isinstance(self.selection, Selecting):
            return False
        rect = self.selection.region.with_end(x, y).normalized()
        self.selection = IDLE
        self.viewport = CroppedView(rect)
        logger.debug("Zoomed into %s", rect)
        return True

    def on_reset_shortcut(self) -> bool:
        """Return to the full image and abandon any drag in progress."""
        if not self.running:
            return False
        self.selection = IDLE
        self.viewport = FULL_VIEW
        logger.debug("View reset to full image")
        return True

    def on_quit_signal(self) -> bool:
        if self.running:
            logger.info("Quit requested")
        self.running = False
        return False
