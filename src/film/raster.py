"""Pillow-backed raster that frame visualizations draw into.

`BitmapImage` is the default export target of `film.visualize`. Any class
with the same ``(width, height)`` constructor and a ``set_pixel(x, y, color)``
method can be passed as ``raster_factory`` instead.
"""
from typing import Tuple
import logging

from PIL import Image

from film import config
from film.errors import PreconditionError

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class BitmapImage:
    """RGB image of fixed size, initially black."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise PreconditionError(f'raster dimensions must be non-negative, got {width}x{height}')
        self.width = int(width)
        self.height = int(height)
        self.image = Image.new(config.RASTER['mode'], (self.width, self.height))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PreconditionError(f'pixel ({x}, {y}) is outside a {self.width}x{self.height} raster')
        r, g, b = (int(c) for c in color)
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise PreconditionError(f'colour {tuple(color)!r} has a channel outside 0..255')
        self.image.putpixel((x, y), (r, g, b))

    def get_pixel(self, x: int, y: int) -> Color:
        return tuple(self.image.getpixel((x, y)))

    def save(self, fp, format: str = None) -> None:
        """Serialize the image with Pillow (BMP unless `format` says otherwise)."""
        format = config.RASTER['format'] if format is None else format
        self.image.save(fp, format=format)
        logger.debug('saved %dx%d raster as %s', self.width, self.height, format)
