"""
JIT-Compiled Line Kernels

Whole-line rasterizers compiled with Numba. They produce exactly the same
cells as the iterator classes (``Bresenham``, ``Bresenham3d`` and
``Supercover``) but write them straight into a preallocated ``int64``
array, which is what bulk consumers such as occupancy-grid ray casting or
visibility sweeps want.

Performance: Numba JIT removes the per-point interpreter overhead of the
iterators; the first call per signature pays the compilation cost (cached
on disk afterwards).
"""

from typing import Sequence
import numpy as np
from numba import njit


@njit(cache=True)
def _octant_of(dx: int, dy: int) -> int:
    """Octant index of a direction vector (see ``octant.Octant``)."""
    value = 0
    if dy < 0:
        dx = -dx
        dy = -dy
        value += 4
    if dx < 0:
        tmp = dx
        dx = dy
        dy = -tmp
        value += 2
    if dx < dy:
        value += 1
    return value


@njit(cache=True)
def _to_octant(octant: int, x: int, y: int):
    """Map a point into octant 0."""
    if octant == 0:
        return x, y
    elif octant == 1:
        return y, x
    elif octant == 2:
        return y, -x
    elif octant == 3:
        return -x, y
    elif octant == 4:
        return -x, -y
    elif octant == 5:
        return -y, -x
    elif octant == 6:
        return -y, x
    return x, -y


@njit(cache=True)
def _from_octant(octant: int, x: int, y: int):
    """Map a point from octant 0 back to ``octant``."""
    if octant == 0:
        return x, y
    elif octant == 1:
        return y, x
    elif octant == 2:
        return -y, x
    elif octant == 3:
        return -x, y
    elif octant == 4:
        return -x, -y
    elif octant == 5:
        return -y, -x
    elif octant == 6:
        return y, -x
    return x, -y


@njit(cache=True)
def _bresenham_kernel(x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    octant = _octant_of(x1 - x0, y1 - y0)
    sx, sy = _to_octant(octant, x0, y0)
    ex, ey = _to_octant(octant, x1, y1)

    delta_x = ex - sx
    delta_y = ey - sy
    error = delta_y - delta_x

    out = np.empty((delta_x + 1, 2), dtype=np.int64)
    x = sx
    y = sy

    for i in range(delta_x + 1):
        px, py = _from_octant(octant, x, y)
        out[i, 0] = px
        out[i, 1] = py

        if error >= 0:
            y += 1
            error -= delta_x

        x += 1
        error += delta_y

    return out


@njit(cache=True)
def _bresenham_3d_kernel(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    lengths = np.abs(end - start)
    signs = np.sign(end - start)
    longest = lengths.max()

    errors = np.full(3, longest // 2, dtype=np.int64)
    voxel = start.copy()
    out = np.empty((longest + 1, 3), dtype=np.int64)

    for i in range(longest + 1):
        out[i] = voxel
        for axis in range(3):
            errors[axis] -= lengths[axis]
            if errors[axis] < 0:
                errors[axis] += longest
                voxel[axis] += signs[axis]

    return out


@njit(cache=True)
def _supercover_kernel(x0: int, y0: int, x1: int, y1: int) -> np.ndarray:
    dx = x1 - x0
    dy = y1 - y0
    nx = abs(dx)
    ny = abs(dy)
    sign_x = 1 if dx > 0 else (-1 if dx < 0 else 0)
    sign_y = 1 if dy > 0 else (-1 if dy < 0 else 0)

    # Worst case: no diagonal steps at all
    out = np.empty((nx + ny + 1, 2), dtype=np.int64)
    count = 0
    x = x0
    y = y0
    ix = 0
    iy = 0

    while ix <= nx and iy <= ny:
        out[count, 0] = x
        out[count, 1] = y
        count += 1

        if nx == 0:
            comparison = 1
        elif ny == 0:
            comparison = -1
        else:
            comparison = (1 + 2 * ix) * ny - (1 + 2 * iy) * nx

        if comparison <= 0:
            x += sign_x
            ix += 1
        if comparison >= 0:
            y += sign_y
            iy += 1

    return out[:count]


def bresenham_array(start: Sequence[int], end: Sequence[int]) -> np.ndarray:
    """
    Rasterize a 2D Bresenham line into an array.

    Args:
        start: (x, y) start pixel
        end: (x, y) end pixel

    Returns:
        Array of shape (N, 2), identical to ``list(Bresenham(start, end))``
    """
    return _bresenham_kernel(int(start[0]), int(start[1]), int(end[0]), int(end[1]))


def bresenham_3d_array(start: Sequence[int], end: Sequence[int]) -> np.ndarray:
    """
    Rasterize a 3D Bresenham line into an array.

    Args:
        start: (x, y, z) start voxel
        end: (x, y, z) end voxel

    Returns:
        Array of shape (N, 3), identical to ``list(Bresenham3d(start, end))``
    """
    return _bresenham_3d_kernel(
        np.asarray(start, dtype=np.int64),
        np.asarray(end, dtype=np.int64)
    )


def supercover_array(start: Sequence[int], end: Sequence[int]) -> np.ndarray:
    """
    Rasterize a supercover walk into an array.

    Args:
        start: (x, y) start cell
        end: (x, y) end cell

    Returns:
        Array of shape (N, 2), identical to ``list(Supercover(start, end))``
    """
    return _supercover_kernel(int(start[0]), int(start[1]), int(end[0]), int(end[1]))
