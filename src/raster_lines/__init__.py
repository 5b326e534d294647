"""
Raster Lines
============

Discrete line and voxel rasterization algorithms for graphics, games and
grid simulations.

Every algorithm is a lazy iterator over coordinate tuples: construct it with
its endpoints (or center and radii) and pull points one at a time, collect
them with ``.collect()``, export them with ``.to_array()`` or turn them into
``(from, to)`` pairs with ``.steps()``.

Algorithms:
- Bresenham / Bresenham3d: integer incremental-error lines in 2D and 3D
- BresenhamCircle / BresenhamEllipse: integer conic outlines, 4-way symmetric
- WalkGrid / Supercover: orthogonal grid walks (supercover adds exact diagonals)
- Midpoint: real endpoints, integer pixels
- XiaolinWu: anti-aliased line with per-pixel coverage
- WalkVoxels: fast voxel traversal through every voxel a segment crosses

Example Usage:
    from raster_lines import Bresenham, Canvas

    canvas = Canvas(64, 64)
    canvas.draw(Bresenham((2, 3), (60, 41)))
    canvas.save("line.png")
"""

__version__ = "1.0.0"
__author__ = "Raster Lines Team"

from .octant import Octant
from .steps import Steps, Traversal
from .bresenham import Bresenham, bresenham
from .bresenham_3d import Bresenham3d, bresenham_3d
from .bresenham_circle import BresenhamCircle, bresenham_circle
from .bresenham_ellipse import BresenhamEllipse, bresenham_ellipse
from .grid_walking import WalkGrid, Supercover, walk_grid, supercover
from .midpoint import Midpoint, midpoint
from .xiaolin_wu import XiaolinWu, xiaolin_wu
from .walk_voxels import VoxelOrigin, WalkVoxels, walk_voxels
from .canvas import Canvas

__all__ = [
    "Octant",
    "Steps",
    "Traversal",
    "Bresenham",
    "bresenham",
    "Bresenham3d",
    "bresenham_3d",
    "BresenhamCircle",
    "bresenham_circle",
    "BresenhamEllipse",
    "bresenham_ellipse",
    "WalkGrid",
    "Supercover",
    "walk_grid",
    "supercover",
    "Midpoint",
    "midpoint",
    "XiaolinWu",
    "xiaolin_wu",
    "VoxelOrigin",
    "WalkVoxels",
    "walk_voxels",
    "Canvas",
]
