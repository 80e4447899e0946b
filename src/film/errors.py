"""Exception types raised by the film package.

Two kinds of failure are kept apart so callers can react differently:

- ``PreconditionError``: the caller broke a contract (value outside the
  interpolation bounds, NaN depth, coordinates off the frame, wrong dtype).
  It subclasses ``AssertionError`` because it is a programming error and is
  not meant to be caught and retried.
- ``DegenerateFrameError``: the frame data has no usable range to normalize
  (empty, single pixel, all sentinels, constant values). Callers may skip
  the visualization and carry on.
"""


class FilmError(Exception):
    """Base class for film errors."""


class PreconditionError(FilmError, AssertionError):
    """A contract on the arguments of an operation was violated."""


class DegenerateFrameError(FilmError, ValueError):
    """A frame cannot be normalized for display."""
