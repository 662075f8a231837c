"""Conversion of image arrays to Qt images.

This module provides:
- numpy_to_qimage: NumPy array -> detached QImage
- planar_to_qimage: PlanarImage -> RGB QImage for display
"""

import numpy as np
from PySide6.QtGui import QImage

from .raster import PlanarImage


def numpy_to_qimage(arr: np.ndarray) -> QImage:
    """Convert a NumPy image array to a QImage suitable for display.

    The returned QImage owns a copy of the pixels, so the caller does not
    need to keep the array alive.

    Supported input shapes:
      - (H, W) -> 8-bit grayscale
      - (H, W, 3) -> RGB (8-bit per channel)
      - (H, W, 4) -> RGBA (8-bit per channel)

    Args:
        arr: Numeric image array. Values outside [0,255] are clipped.

    Returns:
        QImage: A freshly allocated QImage.

    Raises:
        ValueError: If ``arr`` has an unsupported shape.
    """
    a = np.asarray(arr)
    disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
    if disp.ndim == 2:
        h, w = disp.shape
        return QImage(disp.data, w, h, w, QImage.Format_Grayscale8).copy()
    if disp.ndim == 3 and disp.shape[2] in (3, 4):
        h, w, c = disp.shape
        fmt = QImage.Format_RGB888 if c == 3 else QImage.Format_RGBA8888
        return QImage(disp.data, w, h, c * w, fmt).copy()
    raise ValueError(f"Unsupported array shape {disp.shape}")


def planar_to_qimage(image: PlanarImage) -> QImage:
    """Convert the planar source raster to an RGB QImage."""
    return numpy_to_qimage(image.to_rgb())
