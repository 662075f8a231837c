"""SpectrogramViewer - drag-to-zoom viewer for a planar YUV image.

The viewer shows a synthetic I420 gradient in a fixed 640x480 window.
Dragging with the left mouse button selects a region; releasing the button
stretches that region over the whole window. Ctrl+0 returns to the full
image and Esc quits.

Package Structure:
    - core/: UI-independent logic
        - region.py: Region and Rect value types, corner normalization
        - tracker.py: Selection/viewport state machine
        - renderer.py: Frame composition against an abstract Surface
        - raster.py: Immutable planar source image and the synthetic gradient
        - image_io.py: NumPy to QImage conversion
    - ui/: Qt components (main window, canvas, help dialog)

Quick Start:
    from SpectrogramViewer import main
    main()

Dependencies:
    - PySide6: Qt for Python
    - numpy: Array operations
"""

from .app import main
from .core import Rect, Region, normalize, ViewTracker, ViewRenderer, PlanarImage, make_uv_gradient

__version__ = "0.1.0"
__all__ = [
    "main",
    "Rect",
    "Region",
    "normalize",
    "ViewTracker",
    "ViewRenderer",
    "PlanarImage",
    "make_uv_gradient",
]
