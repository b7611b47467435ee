"""Ordinary least-squares regression on tabular data.

This module supports:
- multi-feature OLS fits of a target column against feature columns,
- coefficient standard errors and two-sided p-values, and
- prediction from a fitted model on new rows.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.stats import t as student_t

from ..errors import DivisionByZeroError, InvalidInputError, SchemaMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearModel:
    """Fitted OLS model ``target = intercept + sum(coef_i * feature_i)``.

    Attributes:
        target: Name of the dependent column.
        features: Names of the regressor columns, in coefficient order.
        intercept: Fitted intercept.
        coefficients: Fitted slope per feature.
        se: Standard error per parameter, intercept first.
        p_values: Two-sided p-value per parameter, intercept first.
        r2: Coefficient of determination.
        n: Number of rows used in the fit.
        dof: Residual degrees of freedom.
    """

    target: str
    features: Tuple[str, ...]
    intercept: float
    coefficients: Tuple[float, ...]
    se: Tuple[float, ...]
    p_values: Tuple[float, ...]
    r2: float
    n: int
    dof: int

    def coef(self) -> Dict[str, float]:
        """Return parameters keyed by name, with ``"(Intercept)"`` first."""
        out = {"(Intercept)": self.intercept}
        out.update(zip(self.features, self.coefficients))
        return out


def _design_matrix(table: pd.DataFrame, features: Sequence[str]) -> np.ndarray:
    missing = [c for c in features if c not in table.columns]
    if missing:
        raise SchemaMismatchError(f"Table is missing feature columns: {missing}")
    x = table[list(features)].apply(pd.to_numeric, errors="coerce").to_numpy(dtype=float)
    return np.column_stack([np.ones(len(x)), x])


def fit_linear_model(
    table: pd.DataFrame,
    target: str,
    features: Sequence[str],
    min_points: Optional[int] = None,
) -> LinearModel:
    """Fit ``target ~ features`` by ordinary least squares with an intercept.

    Args:
        table (pandas.DataFrame): Source data.
        target (str): Dependent column.
        features (sequence of str): Regressor columns.
        min_points (int, optional): Minimum number of complete rows. Defaults
            to ``len(features) + 2`` so at least one residual degree of freedom
            remains.

    Returns:
        LinearModel: Coefficients with standard errors and p-values.

    Raises:
        InvalidInputError: If no features are given or too few complete rows
            remain.
        SchemaMismatchError: If ``target`` or a feature column is missing.
        DivisionByZeroError: If the target has no variance.

    Note:
        Rows with a non-finite target or feature are dropped before fitting.
        Standard errors describe statistical scatter only.
    """
    features = tuple(features)
    if not features:
        raise InvalidInputError("At least one feature column is required.")
    if target not in table.columns:
        raise SchemaMismatchError(f"Table is missing target column '{target}'.")

    x = _design_matrix(table, features)
    y = pd.to_numeric(table[target], errors="coerce").to_numpy(dtype=float)
    mask = np.isfinite(y) & np.all(np.isfinite(x), axis=1)
    x = x[mask]
    y = y[mask]

    n = int(len(y))
    p = x.shape[1]
    required = p + 1 if min_points is None else max(int(min_points), p + 1)
    if n < required:
        raise InvalidInputError(
            f"Insufficient valid data for regression: {n} rows, {required} required."
        )

    beta, _, rank, _ = np.linalg.lstsq(x, y, rcond=None)
    if rank < p:
        logger.warning(
            "Design matrix for '%s' is rank deficient (%d < %d)", target, rank, p
        )

    resid = y - x @ beta
    sse = float(np.sum(resid**2))
    sst = float(np.sum((y - y.mean()) ** 2))
    if sst <= 0:
        raise DivisionByZeroError("Insufficient target variance for regression.")
    r2 = 1.0 - sse / sst

    dof = n - p
    mse = sse / dof
    se = [math.nan] * p
    p_values = [math.nan] * p
    if rank == p:
        cov = mse * np.linalg.inv(x.T @ x)
        se = [float(s) for s in np.sqrt(np.clip(np.diag(cov), 0.0, None))]
        for i, (b, s) in enumerate(zip(beta, se)):
            if s > 0:
                p_values[i] = float(2 * student_t.sf(abs(b / s), dof))
            else:
                p_values[i] = 0.0

    logger.debug("Fitted %s ~ %s on %d rows (R^2=%.4f)", target, " + ".join(features), n, r2)

    return LinearModel(
        target=target,
        features=features,
        intercept=float(beta[0]),
        coefficients=tuple(float(b) for b in beta[1:]),
        se=tuple(se),
        p_values=tuple(p_values),
        r2=float(r2),
        n=n,
        dof=int(dof),
    )


def predict(model: LinearModel, table: pd.DataFrame) -> np.ndarray:
    """Evaluate ``model`` on each row of ``table``.

    Raises:
        SchemaMismatchError: If a feature column is missing from ``table``.
    """
    x = _design_matrix(table, model.features)
    beta = np.asarray((model.intercept,) + model.coefficients, dtype=float)
    return x @ beta
