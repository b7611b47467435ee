"""Matrix inversion with explicit singularity detection."""

from __future__ import annotations

import numpy as np

from ..constants import SINGULAR_CONDITION_LIMIT
from ..errors import InvalidInputError, SingularMatrixError


def matrix_inverse(matrix) -> np.ndarray:
    """Invert a square, non-singular matrix.

    Args:
        matrix (array-like): Square 2-D numeric array.

    Returns:
        numpy.ndarray: The inverse, as a float array.

    Raises:
        InvalidInputError: If the input is not a square 2-D array or holds
            non-finite entries.
        SingularMatrixError: If the matrix is singular or so ill-conditioned
            that its determinant is numerically zero.

    Note:
        ``numpy.linalg.inv`` only fails on exactly singular input; the
        condition-number check also rejects matrices whose inverse would be
        dominated by rounding error.
    """
    a = np.asarray(matrix, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.size == 0:
        raise InvalidInputError(f"Expected a non-empty square matrix, got shape {a.shape}.")
    if not np.all(np.isfinite(a)):
        raise InvalidInputError("Matrix entries must be finite.")

    cond = float(np.linalg.cond(a))
    if not np.isfinite(cond) or cond > SINGULAR_CONDITION_LIMIT:
        raise SingularMatrixError(f"Matrix is singular (condition number {cond:.3g}).")
    try:
        return np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc
