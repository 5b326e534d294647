"""
Command-Line Interface for Raster Lines

Usage:
    rasterline bresenham 0 0 5 3
    rasterline walk-voxels 0.472 -1.1 0.179 1.114 -0.391 0.927 --origin center
    rasterline xiaolin-wu 0 0 6 3 --format json
    rasterline circle 32 32 20 --png circle.png --size 64 64 --scale 4

"""

import argparse
import json
import sys
import time
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from . import __version__
from .bresenham import Bresenham
from .bresenham_3d import Bresenham3d
from .bresenham_circle import BresenhamCircle
from .bresenham_ellipse import BresenhamEllipse
from .canvas import Canvas
from .grid_walking import Supercover, WalkGrid
from .midpoint import Midpoint
from .steps import Steps, Traversal
from .walk_voxels import VoxelOrigin, WalkVoxels
from .xiaolin_wu import XiaolinWu


class Algorithm(NamedTuple):
    """How to build one traversal from a flat list of numbers."""
    factory: Callable[..., Traversal]
    arity: int
    integer: bool
    dims: int
    weighted: bool = False
    usage: str = "x0 y0 x1 y1"


def _line_2d(cls):
    return lambda c, origin: cls((c[0], c[1]), (c[2], c[3]))


def _line_3d(cls):
    return lambda c, origin: cls((c[0], c[1], c[2]), (c[3], c[4], c[5]))


ALGORITHMS = {
    "bresenham": Algorithm(_line_2d(Bresenham), 4, True, 2),
    "bresenham-3d": Algorithm(_line_3d(Bresenham3d), 6, True, 3, usage="x0 y0 z0 x1 y1 z1"),
    "circle": Algorithm(lambda c, origin: BresenhamCircle(*c), 3, True, 2, usage="cx cy r"),
    "ellipse": Algorithm(lambda c, origin: BresenhamEllipse(*c), 4, True, 2, usage="cx cy rx ry"),
    "walk-grid": Algorithm(_line_2d(WalkGrid), 4, True, 2),
    "supercover": Algorithm(_line_2d(Supercover), 4, True, 2),
    "midpoint": Algorithm(_line_2d(Midpoint), 4, False, 2),
    "xiaolin-wu": Algorithm(_line_2d(XiaolinWu), 4, False, 2, weighted=True),
    "walk-voxels": Algorithm(
        lambda c, origin: WalkVoxels((c[0], c[1], c[2]), (c[3], c[4], c[5]), origin),
        6, False, 3, usage="x0 y0 z0 x1 y1 z1"
    ),
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rasterline",
        description="Raster Lines - Print or render discrete line, circle and voxel traversals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rasterline bresenham 0 0 5 3
      Print the pixels of a Bresenham line

  rasterline supercover 0 0 5 3 --steps
      Print each (from, to) step of a supercover walk

  rasterline xiaolin-wu 0 0 60 25 --png line.png --scale 8
      Render an anti-aliased line to an 8x upscaled PNG

Algorithms and coordinates:
  bresenham, walk-grid, supercover  x0 y0 x1 y1 (integers)
  midpoint, xiaolin-wu              x0 y0 x1 y1 (reals)
  bresenham-3d                      x0 y0 z0 x1 y1 z1 (integers)
  walk-voxels                       x0 y0 z0 x1 y1 z1 (reals)
  circle                            cx cy r (integers)
  ellipse                           cx cy rx ry (integers)
        """
    )

    parser.add_argument(
        "algorithm",
        choices=sorted(ALGORITHMS),
        help="Rasterization algorithm"
    )

    parser.add_argument(
        "coords",
        nargs="+",
        type=float,
        help="Endpoint coordinates, or center and radii"
    )

    parser.add_argument(
        "--origin",
        choices=["corner", "center"],
        default="center",
        help="Voxel origin for walk-voxels (default: center)"
    )

    # Output settings
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print consecutive (from, to) pairs instead of single points"
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format (default: text)"
    )

    # Rendering
    parser.add_argument(
        "--png",
        help="Render a 2D traversal to this PNG file"
    )

    parser.add_argument(
        "--size",
        nargs=2,
        type=int,
        metavar=("WIDTH", "HEIGHT"),
        help="Canvas size for --png (default: fit the traversal)"
    )

    parser.add_argument(
        "--color",
        nargs="+",
        type=int,
        default=[255, 255, 255],
        help="Drawing color as R G B [A] (default: 255 255 255)"
    )

    parser.add_argument(
        "--scale",
        type=int,
        default=1,
        help="Nearest-neighbor upscale factor for --png (default: 1)"
    )

    # Misc
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with statistics"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def get_voxel_origin(name: str) -> VoxelOrigin:
    """Convert string to VoxelOrigin enum."""
    return {
        "corner": VoxelOrigin.CORNER,
        "center": VoxelOrigin.CENTER,
    }[name]


def build_traversal(
    name: str,
    coords: Sequence[float],
    origin: VoxelOrigin = VoxelOrigin.CENTER
) -> Traversal:
    """
    Construct a traversal from an algorithm name and flat coordinates.

    Args:
        name: Key of ``ALGORITHMS``
        coords: Flat list of numbers in the algorithm's usage order
        origin: Voxel origin, only used by walk-voxels

    Returns:
        A fresh traversal

    Raises:
        ValueError: Unknown algorithm, wrong number of coordinates, or
            non-integral values for an integer algorithm
    """
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {name}")

    algorithm = ALGORITHMS[name]
    if len(coords) != algorithm.arity:
        raise ValueError(
            f"{name} takes {algorithm.arity} numbers ({algorithm.usage}), got {len(coords)}"
        )

    if algorithm.integer:
        if any(float(c) != int(c) for c in coords):
            raise ValueError(f"{name} requires integer coordinates: {list(coords)}")
        coords = [int(c) for c in coords]
    else:
        coords = [float(c) for c in coords]

    return algorithm.factory(coords, origin)


def _format_item(item: Any, weighted: bool) -> List[Any]:
    """Flatten a point or a (point, coverage) pair into a row."""
    if weighted:
        point, coverage = item
        return [*point, coverage]
    return list(item)


def format_items(items: List[Any], fmt: str, weighted: bool = False, steps: bool = False) -> str:
    """
    Render collected traversal items as text, JSON or CSV.

    Args:
        items: Points, (point, coverage) pairs, or (from, to) pairs of those
        fmt: "text", "json" or "csv"
        weighted: Items carry a coverage value
        steps: Items are (from, to) pairs

    Returns:
        The formatted output, one record per line for text and CSV
    """
    if steps:
        rows = [
            (_format_item(a, weighted), _format_item(b, weighted))
            for a, b in items
        ]
    else:
        rows = [_format_item(item, weighted) for item in items]

    if fmt == "json":
        return json.dumps(rows)

    if fmt == "csv":
        if steps:
            return "\n".join(",".join(str(v) for v in a + b) for a, b in rows)
        return "\n".join(",".join(str(v) for v in row) for row in rows)

    if steps:
        return "\n".join(
            f"{' '.join(str(v) for v in a)} -> {' '.join(str(v) for v in b)}"
            for a, b in rows
        )
    return "\n".join(" ".join(str(v) for v in row) for row in rows)


def render_png(args, items: List[Any], weighted: bool) -> Canvas:
    """Draw collected 2D items onto a canvas and save it."""
    pixels = [item[0] for item in items] if weighted else items

    if args.size:
        width, height = args.size
    else:
        width = max([x for x, _ in pixels] + [0]) + 1
        height = max([y for _, y in pixels] + [0]) + 1

    canvas = Canvas(width, height)
    color = tuple(args.color)

    if weighted:
        drawn = canvas.draw_coverage(items, color)
    else:
        drawn = canvas.draw(items, color)

    output_path = canvas.save(args.png, scale=args.scale)
    if args.verbose:
        print(f"Drew {drawn} of {len(items)} pixels on a {width}x{height} canvas")
        print(f"Saved: {output_path}")

    return canvas


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    start_time = time.time()

    try:
        algorithm = ALGORITHMS[args.algorithm]

        if args.png and algorithm.dims != 2:
            print(f"Error: --png only supports 2D algorithms, not {args.algorithm}",
                  file=sys.stderr)
            return 1

        traversal = build_traversal(
            args.algorithm,
            args.coords,
            get_voxel_origin(args.origin)
        )
        items = traversal.collect()

        if args.png:
            render_png(args, items, algorithm.weighted)

        output_items = list(Steps(items)) if args.steps else items
        output = format_items(output_items, args.format, algorithm.weighted, args.steps)
        if output:
            print(output)

        elapsed = time.time() - start_time
        if args.verbose:
            print(f"\n{args.algorithm}: {len(items)} points in {elapsed:.4f}s")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
