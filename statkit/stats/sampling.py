"""Random draws of floats, sequence elements, and calendar dates.

Each function takes an optional ``rng`` keyword, either a
:class:`numpy.random.Generator` or an integer seed, so results can be made
reproducible without touching numpy's global random state.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Sequence, TypeVar

import numpy as np

from ..errors import InvalidInputError, InvalidRangeError

T = TypeVar("T")

RngLike = np.random.Generator | int | None


def _as_generator(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_float(min_value: float, max_value: float, *, rng: RngLike = None) -> float:
    """Draw a uniform float from ``[min_value, max_value)``.

    Args:
        min_value (float): Inclusive lower bound.
        max_value (float): Exclusive upper bound.
        rng: Generator or integer seed. Defaults to a fresh generator.

    Returns:
        float: The sampled value. Equal bounds return ``min_value``.

    Raises:
        InvalidInputError: If either bound is not finite.
        InvalidRangeError: If ``min_value > max_value``.
    """
    lo = float(min_value)
    hi = float(max_value)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidInputError(f"Range bounds must be finite, got [{lo}, {hi}).")
    if lo > hi:
        raise InvalidRangeError(f"min ({lo}) must not exceed max ({hi}).")
    if lo == hi:
        return lo
    u = float(_as_generator(rng).random())
    # Interpolate instead of lo + (hi - lo) * u; the width can overflow.
    value = lo * (1.0 - u) + hi * u
    return min(value, float(np.nextafter(hi, lo)))


def random_sample(seq: Sequence[T], n: int, *, rng: RngLike = None) -> list[T]:
    """Draw ``n`` elements of ``seq`` independently, with replacement."""
    if n < 0:
        raise InvalidInputError(f"Sample size must be >= 0, got {n}.")
    items = list(seq)
    if n == 0:
        return []
    if not items:
        raise InvalidInputError("Cannot sample from an empty sequence.")
    idx = _as_generator(rng).integers(0, len(items), size=n)
    return [items[int(i)] for i in idx]


def random_date(start: dt.date, end: dt.date, *, rng: RngLike = None) -> dt.date:
    """Draw a date uniformly from the inclusive range ``[start, end]``.

    Raises:
        InvalidRangeError: If ``end`` is before ``start``.
    """
    span = (end - start).days
    if span < 0:
        raise InvalidRangeError(f"End date {end} is before start date {start}.")
    offset = int(_as_generator(rng).integers(0, span + 1))
    return start + dt.timedelta(days=offset)
