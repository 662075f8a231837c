"""Frame composition for the viewer.

ViewRenderer reads the tracker state and issues one frame of draw calls
against a Surface. It never touches pixels itself, which keeps it
independent of Qt; ``ui.canvas.QtSurface`` maps the calls onto a QPainter.

Render modes:
- Full view: whole source stretched over the window
- Selecting: whole source, then the translucent highlight over the selection
- Cropped view: the committed crop rectangle stretched over the window
"""

from typing import Optional, Protocol

from .constants import HIGHLIGHT_COLOR
from .region import Rect
from .tracker import ViewTracker


class Surface(Protocol):
    """Drawing target for one frame.

    ``blit`` copies the ``src`` rectangle of the source image into the
    ``dst`` rectangle of the window, scaling as needed. ``None`` means the
    whole source or the whole window respectively.
    """

    def clear(self) -> None: ...

    def blit(self, src: Optional[Rect], dst: Optional[Rect]) -> None: ...

    def set_draw_color(self, rgba: tuple[int, int, int, int]) -> None: ...

    def fill_rect(self, rect: Rect) -> None: ...

    def present(self) -> None: ...


def draw_rect(rect: Rect) -> Rect:
    """Return ``rect`` with zero dimensions raised to one pixel."""
    return Rect(rect.left, rect.top, max(1, rect.width), max(1, rect.height))


def clip_crop(src: Rect, bounds: Rect, dst: Rect) -> Optional[tuple[Rect, Rect]]:
    """Clip a crop rectangle to the source bounds.

    The part of ``src`` outside ``bounds`` is removed and ``dst`` shrinks by
    the same proportion, so the visible pixels keep the scale they would
    have had without clipping.

    Args:
        src: Requested source rectangle (non-empty)
        bounds: Source image extent
        dst: Destination rectangle for the unclipped ``src``

    Returns:
        ``(src, dst)`` after clipping, or None when ``src`` lies entirely
        outside ``bounds``.
    """
    visible = src.intersected(bounds)
    if visible.is_empty():
        return None
    if visible == src:
        return src, dst

    sx = dst.width / src.width
    sy = dst.height / src.height
    left = dst.left + round((visible.left - src.left) * sx)
    top = dst.top + round((visible.top - src.top) * sy)
    right = dst.left + round((visible.right - src.left) * sx)
    bottom = dst.top + round((visible.bottom - src.top) * sy)
    return visible, Rect(left, top, right - left, bottom - top)


class ViewRenderer:
    """Draws the current view of a fixed-size source image.

    The window is the same size as the source, so rectangles recorded by the
    tracker are used both as overlay rectangles and as source crop rectangles.

    Args:
        source_width: Source (and window) width in pixels
        source_height: Source (and window) height in pixels
        highlight: RGBA colour of the selection overlay
    """

    def __init__(self, source_width: int, source_height: int, highlight=HIGHLIGHT_COLOR):
        self.bounds = Rect(0, 0, source_width, source_height)
        self.highlight = tuple(highlight)

    def render(self, tracker: ViewTracker, surface: Surface) -> None:
        """Issue one complete frame for the tracker's current state."""
        surface.clear()

        selection = tracker.selection_rect
        crop = tracker.crop_rect
        if selection is not None:
            surface.blit(None, None)
            surface.set_draw_color(self.highlight)
            surface.fill_rect(draw_rect(selection))
        elif crop is not None:
            clipped = clip_crop(draw_rect(crop), self.bounds, self.bounds)
            if clipped is not None:
                surface.blit(*clipped)
        else:
            surface.blit(None, None)

        surface.present()
