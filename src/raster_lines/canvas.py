"""
Raster Canvas

A dense RGBA pixel buffer for previewing traversals, with PNG export
through Pillow. Coordinates follow the image convention: x to the right,
y down, ``(0, 0)`` in the top-left corner.

Memory consideration: a 1024 x 1024 canvas is 1024² × 4 bytes = 4 MB.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union
import numpy as np
from PIL import Image

from .numeric import Point

Color = Tuple[int, ...]

TRANSPARENT: Color = (0, 0, 0, 0)
WHITE: Color = (255, 255, 255, 255)


def _rgba(color: Color) -> np.ndarray:
    """Normalize an RGB or RGBA tuple to a 4-element uint8 array."""
    if len(color) == 3:
        color = (*color, 255)
    if len(color) != 4:
        raise ValueError(f"Color must have 3 or 4 components, got {len(color)}")
    if any(c < 0 or c > 255 for c in color):
        raise ValueError(f"Color components must be in 0-255: {color}")
    return np.array(color, dtype=np.uint8)


@dataclass
class Canvas:
    """
    Dense 2D RGBA raster.

    Writes outside the canvas are silently dropped, so a line may run off
    the edge without any clipping on the caller's side.
    """

    width: int
    height: int
    background: Color = TRANSPARENT
    _data: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        """Allocate the pixel buffer."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        self._data = np.empty((self.height, self.width, 4), dtype=np.uint8)
        self._data[:, :] = _rgba(self.background)

    @property
    def shape(self) -> Tuple[int, int]:
        """Get canvas dimensions (width, height)."""
        return (self.width, self.height)

    @property
    def data(self) -> np.ndarray:
        """Get the raw (height, width, 4) RGBA array."""
        return self._data

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color = WHITE) -> bool:
        """
        Paint a single pixel.

        Returns:
            True if the pixel was on the canvas
        """
        if not self._in_bounds(x, y):
            return False
        self._data[y, x] = _rgba(color)
        return True

    def get_pixel(self, x: int, y: int) -> Optional[np.ndarray]:
        """Get the RGBA value at (x, y), or None outside the canvas."""
        if not self._in_bounds(x, y):
            return None
        return self._data[y, x].copy()

    def blend_pixel(self, x: int, y: int, color: Color, coverage: float) -> bool:
        """
        Alpha-blend a color over a pixel, weighted by coverage.

        Args:
            x, y: Pixel coordinates
            color: RGB or RGBA color
            coverage: Weight in [0, 1], e.g. from ``XiaolinWu``

        Returns:
            True if the pixel was on the canvas
        """
        if not self._in_bounds(x, y):
            return False

        src = _rgba(color).astype(np.float64)
        dst = self._data[y, x].astype(np.float64)
        alpha = min(max(coverage, 0.0), 1.0) * src[3] / 255.0

        out = dst * (1.0 - alpha) + src * alpha
        # Coverage adds opacity rather than replacing it
        out[3] = min(255.0, dst[3] + alpha * 255.0 * (1.0 - dst[3] / 255.0))
        self._data[y, x] = np.round(out).astype(np.uint8)
        return True

    def draw(self, points: Iterable[Point[int]], color: Color = WHITE) -> int:
        """
        Paint every point of a traversal.

        Args:
            points: Any iterable of (x, y) pixels
            color: RGB or RGBA color

        Returns:
            Number of points that landed on the canvas
        """
        rgba = _rgba(color)
        drawn = 0
        for x, y in points:
            if self._in_bounds(x, y):
                self._data[y, x] = rgba
                drawn += 1
        return drawn

    def draw_coverage(
        self,
        items: Iterable[Tuple[Point[int], float]],
        color: Color = WHITE
    ) -> int:
        """
        Blend an anti-aliased traversal onto the canvas.

        Args:
            items: Iterable of ((x, y), coverage) pairs
            color: RGB or RGBA color

        Returns:
            Number of points that landed on the canvas
        """
        drawn = 0
        for (x, y), coverage in items:
            if self.blend_pixel(x, y, color, coverage):
                drawn += 1
        return drawn

    def count_pixels(self) -> int:
        """Count pixels that differ from the background."""
        background = _rgba(self.background)
        return int(np.sum(np.any(self._data != background, axis=2)))

    def clear(self):
        """Reset every pixel to the background color."""
        self._data[:, :] = _rgba(self.background)

    def to_image(self) -> Image.Image:
        """Convert to a Pillow RGBA image."""
        return Image.fromarray(self._data)

    def save(self, output_path: Union[str, Path], scale: int = 1) -> Path:
        """
        Save the canvas as a PNG.

        Args:
            output_path: Destination file
            scale: Integer upscale factor, nearest-neighbor so pixels stay sharp

        Returns:
            The path written
        """
        if scale < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}")

        output_path = Path(output_path)
        image = self.to_image()
        if scale > 1:
            image = image.resize(
                (self.width * scale, self.height * scale),
                Image.Resampling.NEAREST
            )
        image.save(output_path, format="PNG")
        return output_path
