#!/usr/bin/env python3
"""
Raster Lines Demo Script

This script demonstrates the library by:
1. Drawing every 2D algorithm side by side on one canvas
2. Saving the result as an upscaled PNG
3. Walking a 3D ray through a voxel grid
4. Comparing the JIT kernels with the pure-Python iterators

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import random
import time

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from raster_lines import (
    Bresenham,
    BresenhamCircle,
    BresenhamEllipse,
    Canvas,
    Midpoint,
    Supercover,
    WalkGrid,
    WalkVoxels,
    XiaolinWu,
    bresenham,
    bresenham_3d,
    supercover,
)
from raster_lines.kernels import bresenham_3d_array, bresenham_array, supercover_array

PANEL = 40


def draw_panels(canvas: Canvas):
    """Draw one shape per panel, left to right."""
    panels = [
        ("bresenham", Bresenham((2, 2), (37, 21)), (230, 80, 80)),
        ("walk-grid", WalkGrid((2, 2), (37, 21)), (80, 200, 120)),
        ("supercover", Supercover((2, 2), (37, 21)), (80, 140, 230)),
        ("midpoint", Midpoint((2.3, 2.8), (37.6, 21.1)), (230, 200, 60)),
        ("circle", BresenhamCircle(20, 20, 16), (200, 120, 220)),
        ("ellipse", BresenhamEllipse(20, 20, 17, 9), (90, 210, 210)),
    ]

    for i, (name, traversal, color) in enumerate(panels):
        offset = i * PANEL
        points = [(x + offset, y) for x, y in traversal]
        drawn = canvas.draw(points, color)
        print(f"  {name}: {drawn} pixels")

    # Anti-aliased line gets the last panel
    offset = len(panels) * PANEL
    items = [((x + offset, y), c) for (x, y), c in XiaolinWu((2.0, 2.0), (37.0, 21.0))]
    drawn = canvas.draw_coverage(items, (255, 255, 255))
    print(f"  xiaolin-wu: {drawn} pixels")


def run_demo():
    """Run the demonstration."""
    print("=" * 60)
    print("Raster Lines - Demo")
    print("=" * 60)
    print()

    # Create output directory
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    total_start = time.time()

    print("--- Drawing 2D algorithms ---")
    canvas = Canvas(PANEL * 7, PANEL, background=(20, 20, 28))
    draw_panels(canvas)

    output_path = canvas.save(output_dir / "algorithms.png", scale=4)
    print(f"\n  Saved: {output_path}")

    print("\n--- Walking a ray through voxels ---")
    start, end = (0.5, 0.2, 0.9), (6.3, 3.7, -2.4)
    voxels = WalkVoxels(start, end).collect()
    print(f"  {start} -> {end}")
    print(f"  Visited {len(voxels)} voxels: {voxels[0]} ... {voxels[-1]}")

    total_time = time.time() - total_start

    print("\n" + "=" * 60)
    print(f"Demo complete! Total time: {total_time:.2f}s")
    print(f"Output files in: {output_dir}")
    print("=" * 60)

    return 0


def benchmark_kernels():
    """Benchmark JIT kernels against the iterators."""
    print("\n--- Kernel Benchmark ---\n")

    rng = random.Random(0)
    lengths = [16, 256, 4096]

    # Warm up so compilation is not timed
    bresenham_array((0, 0), (1, 1))
    bresenham_3d_array((0, 0, 0), (1, 1, 1))
    supercover_array((0, 0), (1, 1))

    cases = [
        ("bresenham", bresenham, bresenham_array, 2),
        ("bresenham-3d", bresenham_3d, bresenham_3d_array, 3),
        ("supercover", supercover, supercover_array, 2),
    ]

    for length in lengths:
        print(f"Line length: ~{length}")
        for name, python_fn, kernel_fn, ndim in cases:
            pairs = [
                (
                    tuple(rng.randint(-length, length) for _ in range(ndim)),
                    tuple(rng.randint(-length, length) for _ in range(ndim)),
                )
                for _ in range(100)
            ]

            start = time.time()
            for a, b in pairs:
                python_fn(a, b)
            python_time = time.time() - start

            start = time.time()
            for a, b in pairs:
                kernel_fn(a, b)
            kernel_time = time.time() - start

            print(f"  {name}: python {python_time*1000:.1f}ms, jit {kernel_time*1000:.1f}ms")
        print()


if __name__ == "__main__":
    run_demo()

    # Uncomment to run benchmark
    # benchmark_kernels()
