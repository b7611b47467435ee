"""Descriptive statistics over one-dimensional samples.

Weighted statistics carry the weights through the same sort permutation as
the values. Moment statistics follow the sample-standard-deviation convention
(``ddof=1``) used throughout the analysis scripts.
"""

from __future__ import annotations

from collections import Counter
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import pandas as pd

from ..constants import MEDIAN_WEIGHT_FRACTION
from ..errors import DivisionByZeroError, InvalidInputError

T = TypeVar("T")


def mode(seq: Iterable[Hashable]) -> Hashable:
    """Return the most frequent value of ``seq``.

    Ties resolve to whichever tied value appears first in the input.

    Raises:
        InvalidInputError: If ``seq`` is empty.
    """
    counts = Counter(seq)
    if not counts:
        raise InvalidInputError("mode() requires at least one value.")
    # Counter preserves first-insertion order and max() keeps the first maximum.
    return max(counts, key=counts.__getitem__)


def _centered_moment_ratio(seq: Sequence[float], power: int) -> float:
    x = np.asarray(seq, dtype=float)
    x = x[np.isfinite(x)]
    n = len(x)
    if n < 2:
        raise InvalidInputError(
            f"At least two finite values are required, got {n}."
        )
    s = float(np.std(x, ddof=1))
    if s == 0:
        raise DivisionByZeroError("Sample has zero variance.")
    m = float(np.mean(x))
    return float(np.sum((x - m) ** power) / (n * s**power))


def skewness(seq: Sequence[float]) -> float:
    """Third standardized moment of ``seq``.

    Computed as ``sum((x - mean)**3) / (n * s**3)`` where ``s`` is the sample
    standard deviation. Non-finite values are ignored.

    Raises:
        InvalidInputError: If fewer than two finite values remain.
        DivisionByZeroError: If all values are equal.
    """
    return _centered_moment_ratio(seq, 3)


def kurtosis(seq: Sequence[float]) -> float:
    """Excess kurtosis of ``seq`` (fourth standardized moment minus 3).

    Raises:
        InvalidInputError: If fewer than two finite values remain.
        DivisionByZeroError: If all values are equal.
    """
    return _centered_moment_ratio(seq, 4) - 3.0


def _paired_arrays(values, weights) -> Tuple[np.ndarray, np.ndarray]:
    w = np.asarray(weights, dtype=float)
    if len(values) != len(w):
        raise InvalidInputError(
            f"values and weights must be the same length, got {len(values)} and {len(w)}."
        )
    if len(w) == 0:
        raise InvalidInputError("values and weights must not be empty.")
    return np.asarray(values), w


def weighted_average(values: Sequence[float], weights: Sequence[float]) -> float:
    """Return ``sum(v * w) / sum(w)``.

    Raises:
        InvalidInputError: On empty or mismatched inputs, or zero total weight.
    """
    v, w = _paired_arrays(values, weights)
    total = float(np.sum(w))
    if total == 0:
        raise InvalidInputError("Total weight must be non-zero.")
    return float(np.sum(v.astype(float) * w) / total)


def weighted_median(values: Sequence[T], weights: Sequence[float]) -> T:
    """Return the value at which cumulative weight first reaches half the total.

    Values are sorted with a stable sort and weights follow the same
    permutation. With uniform weights and an odd count this is the ordinary
    median; with an even count it is the lower of the two middle values.

    Args:
        values: Sortable values.
        weights: Non-negative weights, one per value.

    Returns:
        The selected element of ``values`` (original object, not a copy).

    Raises:
        InvalidInputError: On empty or mismatched inputs, negative weights, or
            a non-positive total weight.
    """
    items = list(values)
    v, w = _paired_arrays(items, weights)
    if np.any(w < 0) or not np.all(np.isfinite(w)):
        raise InvalidInputError("Weights must be finite and non-negative.")
    total = float(np.sum(w))
    if total <= 0:
        raise InvalidInputError("Total weight must be positive.")

    order = np.argsort(v, kind="stable")
    cumulative = np.cumsum(w[order])
    pos = int(np.argmax(cumulative >= MEDIAN_WEIGHT_FRACTION * total))
    return items[int(order[pos])]


def cumulative_distribution(seq: Iterable[T]) -> List[Tuple[T, float]]:
    """Pair each sorted value with its empirical CDF value ``i / n``.

    >>> cumulative_distribution([3, 1, 2])
    [(1, 0.3333333333333333), (2, 0.6666666666666666), (3, 1.0)]
    """
    ordered = sorted(seq)
    n = len(ordered)
    return [(value, (i + 1) / n) for i, value in enumerate(ordered)]


def correlation_matrix(
    table: pd.DataFrame, columns: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """Pearson correlation matrix of the numeric columns of ``table``.

    Args:
        table (pandas.DataFrame): Source data.
        columns (sequence of str, optional): Restrict to these columns.
            Defaults to every numeric column.

    Returns:
        pandas.DataFrame: Square correlation matrix labelled by column name.

    Raises:
        InvalidInputError: If fewer than two numeric columns are selected or a
            requested column does not exist.
    """
    if columns is not None:
        missing = [c for c in columns if c not in table.columns]
        if missing:
            raise InvalidInputError(f"Unknown columns for correlation: {missing}")
        table = table[list(columns)]
    numeric = table.select_dtypes(include="number")
    if numeric.shape[1] < 2:
        raise InvalidInputError(
            "Correlation requires at least two numeric columns."
        )
    return numeric.corr(method="pearson")
