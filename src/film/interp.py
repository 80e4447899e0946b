"""Scalar normalization helpers used to turn raw frame values into intensities."""
import math

from film.errors import PreconditionError


def inv_lerp(x, x0, x1) -> float:
    """Return the interpolation coefficient ``t`` with ``x = (1 - t) * x0 + t * x1``.

    All three values are converted to float before dividing. Raises
    ``PreconditionError`` unless ``x0 <= x <= x1`` (NaN never satisfies this).
    ``x0 == x1`` is outside the contract and must be ruled out by the caller.
    """
    if not (x0 <= x <= x1):
        raise PreconditionError(f'inv_lerp: {x!r} is not within [{x0!r}, {x1!r}]')
    t = (float(x) - float(x0)) / (float(x1) - float(x0))
    assert 0.0 <= t <= 1.0, t
    return t


def to_level(intensity: float) -> int:
    """Map an intensity in [0, 1] to an 8-bit channel level.

    Rounds half away from zero, then clamps to 0..255.
    """
    level = int(math.floor(intensity * 255.0 + 0.5))
    return min(255, max(0, level))
