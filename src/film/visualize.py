"""Normalize-and-colorize pipeline turning scalar frames into RGB rasters.

Every adapter runs the same two phases:

1. one sequential scan of the frame for ``(lo, hi)``, skipping sentinel
   values; fewer than two usable values, or a zero-width range, raises
   `DegenerateFrameError`
2. a colour for every pixel from ``color(value, lo, hi)`` (or the adapter's
   sentinel colour), written into the raster only once all colours exist

Adapters:
- `Depthmap`: float32 distances, ``+inf`` means "no hit" and is drawn blue;
  near is bright, far is dark.
- `Heatmap`: uint32 counts drawn on the red channel; low is dark, high is
  bright.
"""
from typing import Any, Callable, Optional, Tuple
import logging

import numpy as np

from film import config
from film.errors import DegenerateFrameError, PreconditionError
from film.frame import Frame
from film.interp import inv_lerp, to_level
from film.raster import BitmapImage, Color

logger = logging.getLogger(__name__)


class ScalarMap:
    """Base class wrapping a `Frame` of one scalar type for display.

    Subclasses set `dtype` and `sentinel_color` and override `color`, and
    optionally `is_sentinel` and `validate`.
    """

    dtype = None
    sentinel_color: Optional[Color] = None

    def __init__(self, frame: Frame):
        if self.dtype is not None and frame.dtype != np.dtype(self.dtype):
            raise PreconditionError(
                f'{type(self).__name__} needs a {np.dtype(self.dtype)} frame, got {frame.dtype}')
        self.frame = frame

    def is_sentinel(self, value) -> bool:
        return False

    def validate(self, value) -> None:
        """Raise `PreconditionError` for values that cannot be ordered."""

    def color(self, value, lo, hi) -> Color:
        raise NotImplementedError

    def bounds(self) -> Tuple[Any, Any]:
        """Return ``(min, max)`` over all non-sentinel pixel values."""
        lo = hi = None
        count = 0
        for v in self.frame.pixel_values():
            if self.is_sentinel(v):
                continue
            self.validate(v)
            if count == 0:
                lo = hi = v
            else:
                if v < lo:
                    lo = v
                if v > hi:
                    hi = v
            count += 1

        name = type(self).__name__
        if count < 2:
            logger.warning('%s: %d usable pixel(s) in %r, nothing to normalize', name, count, self.frame)
            raise DegenerateFrameError(f'{name} has {count} usable pixel(s); at least 2 are needed')
        if lo == hi:
            logger.warning('%s: every usable pixel equals %r, nothing to normalize', name, lo)
            raise DegenerateFrameError(f'{name} values span no range (all equal {lo!r})')
        logger.debug('%s bounds: (%r, %r) over %d pixels', name, lo, hi, count)
        return lo, hi

    def colors(self) -> np.ndarray:
        """Return an ``(N, 3)`` uint8 array of pixel colours in buffer order."""
        lo, hi = self.bounds()
        out = np.empty((len(self.frame), 3), dtype=np.uint8)
        for i, v in enumerate(self.frame.pixel_values()):
            out[i] = self.sentinel_color if self.is_sentinel(v) else self.color(v, lo, hi)
        return out

    def to_raster(self, raster_factory: Optional[Callable[[int, int], Any]] = None):
        """Draw the frame into a new raster and return it.

        The raster is constructed only after every colour has been computed,
        so a failing conversion never leaves a half-drawn image behind.
        """
        raster_factory = BitmapImage if raster_factory is None else raster_factory
        colors = self.colors()
        raster = raster_factory(self.frame.width, self.frame.height)
        for i, (x, y, _) in enumerate(self.frame.pixels()):
            r, g, b = colors[i]
            raster.set_pixel(x, y, (int(r), int(g), int(b)))
        return raster


class Depthmap(ScalarMap):
    """Distance per pixel; ``+inf`` marks a miss."""

    dtype = np.float32

    @property
    def sentinel_color(self) -> Color:
        return config.COLORS['miss']

    @classmethod
    def empty(cls, width: int, height: int, layout: Optional[str] = None) -> 'Depthmap':
        return cls(Frame(width, height, np.inf, dtype=np.float32, layout=layout))

    def is_sentinel(self, value) -> bool:
        return value == np.inf

    def validate(self, value) -> None:
        if np.isnan(value) or value == -np.inf:
            raise PreconditionError(f'depth frame contains {value!r}; depths must be finite or +inf')

    def color(self, value, lo, hi) -> Color:
        s = to_level(1.0 - inv_lerp(value, lo, hi))
        return s, s, s


class Heatmap(ScalarMap):
    """Non-negative count per pixel, drawn on the red channel."""

    dtype = np.uint32

    @classmethod
    def empty(cls, width: int, height: int, layout: Optional[str] = None) -> 'Heatmap':
        return cls(Frame(width, height, 0, dtype=np.uint32, layout=layout))

    def color(self, value, lo, hi) -> Color:
        return to_level(inv_lerp(value, lo, hi)), 0, 0
