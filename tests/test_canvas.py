"""
Unit tests for the raster canvas.
"""

import sys
import tempfile
from pathlib import Path
import unittest

import numpy as np
from PIL import Image

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from raster_lines import Bresenham, BresenhamCircle, Canvas, XiaolinWu


class TestCanvas(unittest.TestCase):
    """Tests for Canvas."""

    def test_create_canvas(self):
        """Test canvas creation."""
        canvas = Canvas(16, 8)
        assert canvas.shape == (16, 8)
        assert canvas.data.shape == (8, 16, 4)
        assert canvas.count_pixels() == 0

    def test_invalid_size(self):
        """Non-positive sizes are rejected."""
        with self.assertRaises(ValueError):
            Canvas(0, 10)
        with self.assertRaises(ValueError):
            Canvas(10, -1)

    def test_set_get_pixel(self):
        """Test setting and getting pixels."""
        canvas = Canvas(8, 8)
        assert canvas.set_pixel(1, 2, (255, 128, 64))

        pixel = canvas.get_pixel(1, 2)
        assert pixel is not None
        assert list(pixel) == [255, 128, 64, 255]
        assert canvas.data[2, 1].tolist() == [255, 128, 64, 255]

    def test_out_of_bounds(self):
        """Test out-of-bounds access."""
        canvas = Canvas(8, 8)
        assert not canvas.set_pixel(100, 0, (255, 0, 0))  # Should not crash
        assert not canvas.set_pixel(-1, 3, (255, 0, 0))
        assert canvas.get_pixel(100, 0) is None
        assert canvas.count_pixels() == 0

    def test_invalid_color(self):
        """Colors need 3 or 4 components in 0-255."""
        canvas = Canvas(4, 4)
        with self.assertRaises(ValueError):
            canvas.set_pixel(0, 0, (1, 2))
        with self.assertRaises(ValueError):
            canvas.set_pixel(0, 0, (1, 2, 300))

    def test_draw_line(self):
        """Drawing a traversal paints every on-canvas point."""
        canvas = Canvas(8, 8)
        drawn = canvas.draw(Bresenham((0, 0), (7, 3)), (0, 255, 0))
        assert drawn == 8
        assert canvas.count_pixels() == 8
        assert canvas.get_pixel(7, 3).tolist() == [0, 255, 0, 255]

    def test_draw_clips(self):
        """Points off the canvas are dropped, not wrapped."""
        canvas = Canvas(10, 10)
        drawn = canvas.draw(BresenhamCircle(0, 0, 4))
        assert 0 < drawn < 16
        assert canvas.data[9, 9].tolist() == [0, 0, 0, 0]

    def test_draw_coverage(self):
        """Coverage scales opacity."""
        canvas = Canvas(8, 8, background=(0, 0, 0, 255))
        drawn = canvas.draw_coverage(XiaolinWu((0.0, 0.0), (6.0, 3.0)), (255, 255, 255))
        assert drawn == 10

        # Full coverage replaces, half coverage blends halfway
        assert canvas.get_pixel(0, 0).tolist() == [255, 255, 255, 255]
        assert canvas.get_pixel(1, 0).tolist() == [128, 128, 128, 255]

    def test_blend_on_transparent(self):
        """Blending onto a transparent pixel adds alpha."""
        canvas = Canvas(2, 2)
        assert canvas.blend_pixel(0, 0, (255, 0, 0), 0.5)
        assert canvas.get_pixel(0, 0)[3] == 128

    def test_clear(self):
        """Clearing restores the background."""
        canvas = Canvas(4, 4, background=(10, 20, 30))
        canvas.draw([(0, 0), (1, 1)], (255, 0, 0))
        assert canvas.count_pixels() == 2
        canvas.clear()
        assert canvas.count_pixels() == 0
        assert canvas.get_pixel(3, 3).tolist() == [10, 20, 30, 255]

    def test_save_png(self):
        """Saving writes a readable PNG, optionally upscaled."""
        canvas = Canvas(5, 4)
        canvas.set_pixel(2, 1, (255, 0, 0))

        with tempfile.TemporaryDirectory() as tmp:
            path = canvas.save(Path(tmp) / "line.png", scale=3)
            assert path.exists()

            with Image.open(path) as img:
                assert img.size == (15, 12)
                assert img.mode == "RGBA"
                pixels = np.array(img)

        assert pixels[4, 7].tolist() == [255, 0, 0, 255]
        assert pixels[0, 0].tolist() == [0, 0, 0, 0]

    def test_save_invalid_scale(self):
        """Scale must be at least 1."""
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                Canvas(2, 2).save(Path(tmp) / "x.png", scale=0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
