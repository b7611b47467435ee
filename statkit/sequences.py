"""
Array and sequence transforms.

Generic transforms return plain lists; numeric ones return numpy arrays.
"""

from __future__ import annotations

import itertools
import warnings
from collections import Counter
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple, TypeVar

import numpy as np

from .constants import DEFAULT_TOLERANCE
from .errors import InvalidInputError

T = TypeVar("T")


def normalize(seq: Sequence[float]) -> np.ndarray:
    """Rescale ``seq`` linearly onto ``[0, 1]`` via ``(x - min) / (max - min)``.

    Args:
        seq (sequence of float): Values to rescale.

    Returns:
        numpy.ndarray: Rescaled values. The minimum maps to 0 and the maximum
        to 1.

    Raises:
        InvalidInputError: If ``seq`` is empty.

    Note:
        Constant input has no range to rescale by; it returns all zeros and
        emits a ``UserWarning`` instead of dividing by zero.
    """
    x = np.asarray(seq, dtype=float)
    if x.size == 0:
        raise InvalidInputError("Cannot normalize an empty sequence.")
    lo = float(np.min(x))
    hi = float(np.max(x))
    if hi == lo:
        warnings.warn(
            f"normalize() received constant input ({lo}); returning zeros.",
            UserWarning,
            stacklevel=2,
        )
        return np.zeros_like(x)
    return (x - lo) / (hi - lo)


def remove_duplicates(seq: Iterable[Hashable]) -> list:
    """Return the unique elements of ``seq``. Order is not part of the contract."""
    return list(dict.fromkeys(seq))


def flatten(nested: Iterable[Iterable[T]]) -> List[T]:
    """Concatenate a sequence of sequences, preserving relative order."""
    return list(itertools.chain.from_iterable(nested))


def partition(seq: Sequence[T], n: int) -> List[List[T]]:
    """Split ``seq`` into consecutive chunks of size ``n``; the last may be shorter.

    >>> partition([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]
    """
    if n <= 0:
        raise InvalidInputError(f"Chunk size must be positive, got {n}.")
    items = list(seq)
    return [items[i : i + n] for i in range(0, len(items), n)]


def find_duplicates(seq: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Map each element occurring more than once to its count."""
    return {value: count for value, count in Counter(seq).items() if count > 1}


def approx_equal(a: Sequence[float], b: Sequence[float], tol: float = DEFAULT_TOLERANCE) -> bool:
    """Return True when ``|a_i - b_i| < tol`` for every element.

    Raises:
        InvalidInputError: If ``a`` and ``b`` differ in shape.
    """
    x = np.asarray(a, dtype=float)
    y = np.asarray(b, dtype=float)
    if x.shape != y.shape:
        raise InvalidInputError(f"Shapes differ: {x.shape} vs {y.shape}.")
    return bool(np.all(np.abs(x - y) < tol))


def string_to_vector(s: str) -> List[str]:
    return list(s)


def to_snake_case(s: str) -> str:
    """Lowercase ``s`` and replace spaces with underscores.

    camelCase boundaries are not split: ``"Price Euros"`` becomes
    ``"price_euros"`` but ``"PriceEuros"`` becomes ``"priceeuros"``.
    """
    return s.replace(" ", "_").lower()


def cartesian_product(sets: Sequence[Iterable[T]]) -> List[Tuple[T, ...]]:
    """All tuples taking one element from each input, first input varying slowest."""
    return list(itertools.product(*sets))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``.

    Raises:
        InvalidInputError: If ``n`` is negative.
    """
    if n < 0:
        raise InvalidInputError(f"Fibonacci index must be >= 0, got {n}.")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a
