"""Planar YUV source raster.

The viewer displays a single synthetic image held in planar I420 form: a
full-resolution luma (Y) plane followed by two chroma planes (U, V) at half
resolution in each direction. The image is built once at startup and is
read-only from then on.

This module provides:
- PlanarImage: immutable Y/U/V plane container
- make_uv_gradient: the synthetic U-V gradient shown by the viewer
- I420 buffer unpacking
- BT.601 conversion to an RGB array for display
"""

from dataclasses import dataclass

import numpy as np

from .constants import GRADIENT_LUMA


def chroma_size(width: int, height: int) -> tuple[int, int]:
    """Return ``(chroma_width, chroma_height)`` for a luma plane of the given size."""
    return (width + 1) // 2, (height + 1) // 2


def _frozen_plane(arr, shape: tuple[int, int], name: str) -> np.ndarray:
    plane = np.array(arr, dtype=np.uint8, copy=True)
    if plane.shape != shape:
        raise ValueError(f"{name} plane has shape {plane.shape}, expected {shape}")
    plane.flags.writeable = False
    return plane


@dataclass(frozen=True)
class PlanarImage:
    """Immutable I420 image.

    Attributes:
        y: Luma plane, shape (H, W), uint8
        u: Blue-difference chroma plane, shape (ceil(H/2), ceil(W/2)), uint8
        v: Red-difference chroma plane, same shape as ``u``

    The planes are copied on construction and marked read-only, so the
    caller's arrays can be reused freely.

    Raises:
        ValueError: If the Y plane is not 2-D and non-empty, or the chroma
            planes do not match it.
    """

    y: np.ndarray
    u: np.ndarray
    v: np.ndarray

    def __post_init__(self):
        y = np.asarray(self.y)
        if y.ndim != 2 or y.size == 0:
            raise ValueError(f"Y plane must be a non-empty 2-D array, got shape {y.shape}")
        h, w = y.shape
        cw, ch = chroma_size(w, h)
        object.__setattr__(self, "y", _frozen_plane(y, (h, w), "Y"))
        object.__setattr__(self, "u", _frozen_plane(self.u, (ch, cw), "U"))
        object.__setattr__(self, "v", _frozen_plane(self.v, (ch, cw), "V"))

    @property
    def width(self) -> int:
        return self.y.shape[1]

    @property
    def height(self) -> int:
        return self.y.shape[0]

    @classmethod
    def from_i420(cls, data: bytes, width: int, height: int) -> "PlanarImage":
        """Unpack a contiguous I420 buffer.

        Args:
            data: Buffer holding ``W*H`` luma bytes followed by the U and V planes
            width: Luma width in pixels
            height: Luma height in pixels

        Raises:
            ValueError: If the buffer length does not match the dimensions.
        """
        cw, ch = chroma_size(width, height)
        y_size = width * height
        c_size = cw * ch
        if len(data) != y_size + 2 * c_size:
            raise ValueError(
                f"I420 buffer of {len(data)} bytes does not match {width}x{height} "
                f"(expected {y_size + 2 * c_size})"
            )
        buf = np.frombuffer(data, dtype=np.uint8)
        y = buf[:y_size].reshape(height, width)
        u = buf[y_size : y_size + c_size].reshape(ch, cw)
        v = buf[y_size + c_size :].reshape(ch, cw)
        return cls(y, u, v)

    def to_rgb(self) -> np.ndarray:
        """Convert to an (H, W, 3) uint8 RGB array.

        Uses BT.601 limited-range coefficients with nearest-neighbour chroma
        upsampling.
        """
        h, w = self.y.shape
        u = np.repeat(np.repeat(self.u, 2, axis=0), 2, axis=1)[:h, :w]
        v = np.repeat(np.repeat(self.v, 2, axis=0), 2, axis=1)[:h, :w]

        c = self.y.astype(np.float32) - 16.0
        d = u.astype(np.float32) - 128.0
        e = v.astype(np.float32) - 128.0

        r = 1.164 * c + 1.596 * e
        g = 1.164 * c - 0.392 * d - 0.813 * e
        b = 1.164 * c + 2.017 * d
        rgb = np.stack([r, g, b], axis=-1)
        return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


def make_uv_gradient(width: int, height: int, luma: int = GRADIENT_LUMA) -> PlanarImage:
    """Build the synthetic image shown by the viewer.

    The planes are written into a single I420 buffer, the layout a
    streaming YUV texture expects, and unpacked from it. Luma is constant.
    U ramps from 0 to 255 left to right and V ramps from 0 to 255 top to
    bottom across the chroma planes.

    Args:
        width: Image width in pixels (positive)
        height: Image height in pixels (positive)
        luma: Constant Y value

    Returns:
        PlanarImage of the requested size.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    cw, ch = chroma_size(width, height)
    y_size = width * height
    c_size = cw * ch
    buf = np.empty(y_size + 2 * c_size, dtype=np.uint8)

    buf[:y_size] = luma
    u_row = (np.arange(cw) * 256 // cw).astype(np.uint8)
    v_col = (np.arange(ch) * 256 // ch).astype(np.uint8)
    buf[y_size : y_size + c_size].reshape(ch, cw)[:] = u_row[np.newaxis, :]
    buf[y_size + c_size :].reshape(ch, cw)[:] = v_col[:, np.newaxis]
    return PlanarImage.from_i420(buf.tobytes(), width, height)
