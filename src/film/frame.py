"""Fixed-size 2-D buffer of per-pixel scalars filled by a renderer.

A `Frame` stores ``width * height`` values in one flat numpy array. The
mapping between a flat index and pixel coordinates is selected by the frame's
``layout`` (see `film.config.FRAME`) and is shared by every accessor, so
values written by `Frame.set_pixels` are read back at the same (x, y) by
`Frame.for_each_pixel`.

`Frame.set_pixels` is the only parallel operation: the buffer is split into
disjoint contiguous chunks and each chunk becomes one dask task that writes
into its own slice. Everything else walks the buffer sequentially.
"""
from typing import Any, Callable, Iterator, Optional, Tuple
import logging

import numpy as np
from dask import compute, delayed

from film import config
from film.errors import PreconditionError

logger = logging.getLogger(__name__)


def _fill_chunk(out: np.ndarray, start: int, generate: Callable, coords: Callable) -> int:
    # `out` is a view of the frame buffer covering [start, start + len(out))
    for k in range(out.shape[0]):
        x, y = coords(start + k)
        out[k] = generate(x, y)
    return out.shape[0]


class Frame:
    """Exclusively owned pixel buffer of a single scalar type.

    Parameters
    - width, height: non-negative dimensions; zero gives an empty frame
    - value: initial value copied into every pixel
    - dtype: numpy dtype of the buffer (inferred from `value` when omitted;
      non-scalar values are stored in an ``object`` buffer)
    - layout: 'column' or 'row' (default from `config.FRAME`)
    """

    def __init__(self, width: int, height: int, value: Any, dtype=None, layout: Optional[str] = None):
        if width < 0 or height < 0:
            raise PreconditionError(f'frame dimensions must be non-negative, got {width}x{height}')
        layout = config.FRAME['layout'] if layout is None else layout
        if layout not in config.LAYOUTS:
            raise PreconditionError(f'unknown frame layout {layout!r}; expected one of {config.LAYOUTS}')
        if dtype is None:
            probe = np.asarray(value)
            dtype = probe.dtype if probe.ndim == 0 else np.dtype(object)

        self._width = int(width)
        self._height = int(height)
        self._layout = layout
        self._buffer = np.empty(self._width * self._height, dtype=dtype)
        self._buffer.fill(value)
        logger.debug('allocated %dx%d %s frame (%s layout)', self._width, self._height,
                     self._buffer.dtype, layout)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def layout(self) -> str:
        return self._layout

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    def __len__(self) -> int:
        return self._buffer.shape[0]

    def __repr__(self) -> str:
        return f'Frame(width={self._width}, height={self._height}, dtype={self._buffer.dtype}, layout={self._layout!r})'

    # -- coordinate mapping -------------------------------------------------

    def coords(self, i: int) -> Tuple[int, int]:
        """Return (x, y) of flat buffer index `i`."""
        if self._layout == 'column':
            x, y = divmod(i, self._height)
        else:
            y, x = divmod(i, self._width)
        return x, y

    def index_of(self, x: int, y: int) -> int:
        """Return the flat buffer index of pixel (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise PreconditionError(f'pixel ({x}, {y}) is outside a {self._width}x{self._height} frame')
        if self._layout == 'column':
            return x * self._height + y
        return y * self._width + x

    # -- reading ------------------------------------------------------------

    def get_pixel(self, x: int, y: int):
        return self._buffer[self.index_of(x, y)]

    def pixel_values(self) -> Iterator:
        """Iterate stored values in flat buffer order. Each call starts over."""
        return iter(self._buffer)

    def pixels(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield ``(x, y, value)`` for every pixel, in flat buffer order."""
        for i, px in enumerate(self.pixel_values()):
            x, y = self.coords(i)
            yield x, y, px

    def for_each_pixel(self, visit: Callable[[int, int, Any], None]) -> None:
        """Call ``visit(x, y, value)`` once per pixel, sequentially."""
        for x, y, px in self.pixels():
            visit(x, y, px)

    def as_array(self) -> np.ndarray:
        """Read-only 2-D view of the buffer indexed as ``[x, y]``."""
        view = self._buffer.view()
        view.flags.writeable = False
        if self._layout == 'column':
            return view.reshape(self._width, self._height)
        return view.reshape(self._height, self._width).T

    # -- writing ------------------------------------------------------------

    def set_pixels(self, generate: Callable[[int, int], Any], num_workers: Optional[int] = None,
                   chunk_size: Optional[int] = None, scheduler: Optional[str] = None) -> None:
        """Store ``generate(x, y)`` at every pixel, computing chunks in parallel.

        `generate` must be a pure function of its coordinates: it is called
        from several threads at once and in no particular order. Blocks until
        every pixel has been written. Exceptions raised by `generate`
        propagate to the caller.
        """
        scheduler = config.SYNTHESIS['scheduler'] if scheduler is None else scheduler
        if scheduler not in config.SCHEDULERS:
            raise PreconditionError(f'unsupported scheduler {scheduler!r}; expected one of {config.SCHEDULERS}')
        chunk_size = config.SYNTHESIS['chunk_size'] if chunk_size is None else int(chunk_size)
        if chunk_size < 1:
            raise PreconditionError(f'chunk_size must be positive, got {chunk_size}')
        num_workers = config.SYNTHESIS['num_workers'] if num_workers is None else num_workers

        n = len(self)
        if n == 0:
            return

        fill = delayed(_fill_chunk, pure=False)
        tasks = [fill(self._buffer[start:start + chunk_size], start, generate, self.coords)
                 for start in range(0, n, chunk_size)]
        logger.debug('synthesizing %d pixels in %d chunks (scheduler=%s, workers=%s)',
                     n, len(tasks), scheduler, num_workers)

        kwargs = {'scheduler': scheduler}
        if num_workers is not None:
            kwargs['num_workers'] = int(num_workers)
        written = compute(*tasks, **kwargs)
        assert sum(written) == n
