"""Rectangle value types used by the selection tracker and the renderer.

Two shapes of rectangle appear in the viewer:

- Region: the raw drag, two corners in click order. The first corner is
  the press point and the second is the current (or release) point, so
  either corner may be the top-left one.
- Rect: the normalized form, ``left/top/width/height``, which is what the
  renderer draws and what a committed zoom stores.

``normalize`` is the single place where two arbitrary corners are turned
into a Rect.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """Normalized rectangle in pixel coordinates.

    Width and height are never negative but may be zero; a zero-sized
    rectangle is valid and describes an empty crop.
    """

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def intersected(self, other: "Rect") -> "Rect":
        """Return the overlap of two rectangles (zero-sized if disjoint)."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(left, top, max(0, right - left), max(0, bottom - top))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.width, self.height)


def normalize(x0: int, y0: int, x1: int, y1: int) -> Rect:
    """Build a Rect from two corners given in any order.

    Args:
        x0, y0: First corner
        x1, y1: Opposite corner

    Returns:
        Rect with ``left=min(x0, x1)``, ``top=min(y0, y1)``,
        ``width=|x1 - x0|`` and ``height=|y1 - y0|``.

    Example:
        >>> normalize(30, 40, 10, 5)
        Rect(left=10, top=5, width=20, height=35)
    """
    left = min(x0, x1)
    top = min(y0, y1)
    return Rect(left, top, max(x0, x1) - left, max(y0, y1) - top)


@dataclass(frozen=True)
class Region:
    """A drag in progress: press corner ``(x0, y0)`` and moving corner ``(x1, y1)``."""

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def at(cls, x: int, y: int) -> "Region":
        """Region with both corners at the same point (a fresh press)."""
        return cls(x, y, x, y)

    def with_end(self, x: int, y: int) -> "Region":
        """Return a copy whose second corner is moved to ``(x, y)``."""
        return replace(self, x1=x, y1=y)

    def normalized(self) -> Rect:
        return normalize(self.x0, self.y0, self.x1, self.y1)
