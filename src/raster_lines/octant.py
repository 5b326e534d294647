"""
Octant Normalization

Every 2D line direction falls into one of eight octants. Reflecting (and,
where needed, transposing) both endpoints into octant 0 - where
``dx >= 0``, ``dy >= 0`` and ``dx >= dy`` - lets a line algorithm be written
for a single shallow, rising direction. Points produced while walking in
normalized space are mapped back with the inverse transform.

Octants are named by the compass sector of the direction vector with the
y axis pointing up (ENE covers 0 to 45 degrees, NNE 45 to 90, and so on).
"""

from enum import IntEnum

from .numeric import Point


class Octant(IntEnum):
    """One of the eight reflection/transpose transforms of the plane."""
    ENE = 0  # (x, y)
    NNE = 1  # (y, x)
    NNW = 2  # (y, -x)
    WNW = 3  # (-x, y)
    WSW = 4  # (-x, -y)
    SSW = 5  # (-y, -x)
    SSE = 6  # (-y, x)
    ESE = 7  # (x, -y)

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Octant":
        """
        Classify the direction from ``start`` to ``end``.

        A zero-length delta falls into octant 0.

        Args:
            start: Line start point
            end: Line end point

        Returns:
            The octant whose ``to_octant`` maps the delta into
            ``dx >= dy >= 0``
        """
        value = 0
        dx = end[0] - start[0]
        dy = end[1] - start[1]

        if dy < 0:
            dx, dy = -dx, -dy
            value += 4

        if dx < 0:
            dx, dy = dy, -dx
            value += 2

        if dx < dy:
            value += 1

        return cls(value)

    def to_octant(self, point: Point) -> Point:
        """Map a point into normalized (octant 0) space."""
        return _TO_OCTANT[self](point[0], point[1])

    def from_octant(self, point: Point) -> Point:
        """Map a point from normalized space back to this octant."""
        return _FROM_OCTANT[self](point[0], point[1])


# Indexed by octant value
_TO_OCTANT = (
    lambda x, y: (x, y),
    lambda x, y: (y, x),
    lambda x, y: (y, -x),
    lambda x, y: (-x, y),
    lambda x, y: (-x, -y),
    lambda x, y: (-y, -x),
    lambda x, y: (-y, x),
    lambda x, y: (x, -y),
)

_FROM_OCTANT = (
    lambda x, y: (x, y),
    lambda x, y: (y, x),
    lambda x, y: (-y, x),
    lambda x, y: (-x, y),
    lambda x, y: (-x, -y),
    lambda x, y: (-y, -x),
    lambda x, y: (y, -x),
    lambda x, y: (x, -y),
)
