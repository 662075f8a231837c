"""UI-independent core: rectangles, selection state, source raster, rendering."""

from .region import Rect, Region, normalize
from .tracker import ViewTracker, Idle, Selecting, FullView, CroppedView
from .raster import PlanarImage, make_uv_gradient
from .renderer import ViewRenderer, Surface, clip_crop, draw_rect
from .image_io import numpy_to_qimage, planar_to_qimage

__all__ = [
    "Rect",
    "Region",
    "normalize",
    "ViewTracker",
    "Idle",
    "Selecting",
    "FullView",
    "CroppedView",
    "PlanarImage",
    "make_uv_gradient",
    "ViewRenderer",
    "Surface",
    "clip_crop",
    "draw_rect",
    "numpy_to_qimage",
    "planar_to_qimage",
]
