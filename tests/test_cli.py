"""
Unit tests for the command-line interface.
"""

import io
import json
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
import unittest

from PIL import Image

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from raster_lines import Bresenham, WalkVoxels
from raster_lines.cli import ALGORITHMS, build_traversal, format_items, main
from raster_lines.walk_voxels import VoxelOrigin


def run_cli(*argv):
    """Run main() and capture (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestBuildTraversal(unittest.TestCase):
    """Tests for build_traversal."""

    def test_every_algorithm(self):
        """Each registered algorithm builds from its usage arity."""
        for name, algorithm in ALGORITHMS.items():
            coords = [1] * algorithm.arity
            traversal = build_traversal(name, coords)
            assert traversal.ndim == algorithm.dims, name

    def test_integer_coordinates(self):
        """Integer algorithms receive ints."""
        traversal = build_traversal("bresenham", [0.0, 0.0, 5.0, 3.0])
        assert isinstance(traversal, Bresenham)
        assert traversal.collect()[-1] == (5, 3)

    def test_rejects_fractions(self):
        """Integer algorithms reject non-integral values."""
        with self.assertRaises(ValueError):
            build_traversal("bresenham", [0, 0, 5.5, 3])

    def test_rejects_arity(self):
        """Wrong coordinate count is an error."""
        with self.assertRaises(ValueError):
            build_traversal("circle", [0, 0])

    def test_unknown(self):
        """Unknown names are an error."""
        with self.assertRaises(ValueError):
            build_traversal("dda", [0, 0, 1, 1])

    def test_origin(self):
        """The voxel origin is passed to walk-voxels."""
        traversal = build_traversal("walk-voxels", [0, 0, 0, 1, 1, 1], VoxelOrigin.CORNER)
        assert isinstance(traversal, WalkVoxels)
        assert traversal.origin == VoxelOrigin.CORNER


class TestFormatItems(unittest.TestCase):
    """Tests for format_items."""

    def test_text(self):
        """Text output is one point per line."""
        assert format_items([(0, 0), (1, 1)], "text") == "0 0\n1 1"

    def test_csv_weighted(self):
        """Coverage is appended as a column."""
        assert format_items([((0, 0), 1.0)], "csv", weighted=True) == "0,0,1.0"

    def test_steps(self):
        """Steps print as from -> to."""
        out = format_items([((0, 0), (1, 0))], "text", steps=True)
        assert out == "0 0 -> 1 0"


class TestMain(unittest.TestCase):
    """Tests for main()."""

    def test_text_output(self):
        """Bresenham prints its pixels."""
        code, out, _ = run_cli("bresenham", "0", "0", "5", "3")
        assert code == 0
        assert out.splitlines() == ["0 0", "1 0", "2 1", "3 1", "4 2", "5 3"]

    def test_json_output(self):
        """JSON output parses back to the points."""
        code, out, _ = run_cli("supercover", "0", "0", "3", "1", "--format", "json")
        assert code == 0
        assert json.loads(out) == [[0, 0], [1, 0], [2, 1], [3, 1]]

    def test_weighted_json(self):
        """Anti-aliased rows carry coverage."""
        code, out, _ = run_cli("xiaolin-wu", "0", "0", "4", "2", "-f", "json")
        assert code == 0
        assert json.loads(out) == [
            [0, 0, 1.0], [1, 0, 0.5], [1, 1, 0.5], [2, 1, 1.0],
            [3, 1, 0.5], [3, 2, 0.5], [4, 2, 1.0],
        ]

    def test_weighted_json_flat(self):
        """A flat anti-aliased line is walked with gradient 1."""
        code, out, _ = run_cli("xiaolin-wu", "0", "0", "2", "0", "-f", "json")
        assert code == 0
        assert json.loads(out) == [[0, 0, 1.0], [1, 1, 1.0], [2, 2, 1.0]]

    def test_steps_output(self):
        """--steps prints one line per move."""
        code, out, _ = run_cli("walk-grid", "0", "0", "2", "0", "--steps")
        assert code == 0
        assert out.splitlines() == ["0 0 -> 1 0", "1 0 -> 2 0"]

    def test_walk_voxels(self):
        """Negative real coordinates are accepted."""
        code, out, _ = run_cli(
            "walk-voxels", "0.472", "-1.1", "0.179", "1.114", "-0.391", "0.927",
            "--origin", "corner", "-f", "json"
        )
        assert code == 0
        voxels = json.loads(out)
        assert voxels[0] == [0, -2, 0]
        assert voxels[-1] == [1, -1, 0]

    def test_bad_arity(self):
        """Wrong coordinate counts exit with 1."""
        code, out, err = run_cli("circle", "0", "0")
        assert code == 1
        assert out == ""
        assert "Error" in err

    def test_non_integer(self):
        """Fractional input to an integer algorithm exits with 1."""
        code, _, err = run_cli("bresenham", "0", "0", "1.5", "2")
        assert code == 1
        assert "integer" in err

    def test_png_3d_rejected(self):
        """PNG rendering is 2D only."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.png"
            code, _, err = run_cli("bresenham-3d", "0", "0", "0", "1", "1", "1", "--png", str(path))
            assert code == 1
            assert "2D" in err
            assert not path.exists()

    def test_png_written(self):
        """--png writes a scaled image."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "circle.png"
            code, _, _ = run_cli(
                "circle", "8", "8", "5", "--png", str(path),
                "--size", "16", "16", "--scale", "2"
            )
            assert code == 0
            assert path.exists()
            with Image.open(path) as img:
                assert img.size == (32, 32)

    def test_png_fit(self):
        """Without --size the canvas fits the traversal."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "line.png"
            code, _, _ = run_cli("bresenham", "0", "0", "9", "4", "--png", str(path))
            assert code == 0
            with Image.open(path) as img:
                assert img.size == (10, 5)


if __name__ == "__main__":
    unittest.main(verbosity=2)
