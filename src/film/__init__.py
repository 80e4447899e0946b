"""Scalar frame buffers for a renderer and their raster visualization."""
from film.errors import FilmError, PreconditionError, DegenerateFrameError
from film.frame import Frame
from film.interp import inv_lerp, to_level
from film.raster import BitmapImage
from film.visualize import ScalarMap, Depthmap, Heatmap

__all__ = [
    'FilmError', 'PreconditionError', 'DegenerateFrameError',
    'Frame', 'inv_lerp', 'to_level', 'BitmapImage',
    'ScalarMap', 'Depthmap', 'Heatmap',
]
