"""
Bresenham's Line Algorithm (3D)

Driving-axis voxel walker: the axis with the longest run advances every
step, and each of the other axes keeps an error accumulator that decides
when it follows. No axis is special-cased; all three share the same update.

A walk always visits exactly ``max(|dx|, |dy|, |dz|) + 1`` voxels,
including both endpoints.

Example:
    >>> list(Bresenham3d((0, 0, 0), (5, 6, 7)))
    [(0, 0, 0), (1, 1, 1), (1, 2, 2), (2, 3, 3), (3, 3, 4), (4, 4, 5), (4, 5, 6), (5, 6, 7)]
"""

from typing import List

from .numeric import Voxel, signum
from .steps import Traversal


class Bresenham3d(Traversal):
    """Iterator over the voxels of an integer 3D Bresenham line."""

    ndim = 3

    def __init__(self, start: Voxel[int], end: Voxel[int]):
        """
        Initialize the walk.

        Args:
            start: First voxel (always emitted)
            end: Last voxel (always emitted)
        """
        deltas = [e - s for s, e in zip(start, end)]

        self._lengths = [abs(d) for d in deltas]
        self._signs = [signum(d) for d in deltas]
        self._longest = max(self._lengths)
        self._errors = [self._longest // 2] * 3
        self._count = self._longest
        self._voxel = list(start)

    def __next__(self) -> Voxel[int]:
        if self._count < 0:
            raise StopIteration

        self._count -= 1
        voxel = tuple(self._voxel)

        for axis in range(3):
            self._errors[axis] -= self._lengths[axis]
            if self._errors[axis] < 0:
                self._errors[axis] += self._longest
                self._voxel[axis] += self._signs[axis]

        return voxel


def bresenham_3d(start: Voxel[int], end: Voxel[int]) -> List[Voxel[int]]:
    """Collect a 3D Bresenham line into a list."""
    return Bresenham3d(start, end).collect()
