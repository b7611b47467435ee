"""
Statistical utilities for exploratory analysis.

This subpackage provides numerical routines over samples, matrices and tables.
All functions are stateless and operate on arrays, sequences and DataFrames.

Modules:
    sampling:
        Uniform random floats, sampling with replacement, and random dates,
        each reproducible through an optional ``rng`` seed or generator.

    descriptive:
        Mode, skewness, kurtosis, weighted average and median, empirical
        CDF, and correlation matrices.

    linalg:
        Matrix inversion with singularity detection.

    regression:
        Multi-feature ordinary least-squares fits with standard errors,
        p-values and prediction.

Design Principle:
    This subpackage has no dependencies on the table conversion or
    persistence modules. It can be tested independently.
"""

from .descriptive import (
    correlation_matrix,
    cumulative_distribution,
    kurtosis,
    mode,
    skewness,
    weighted_average,
    weighted_median,
)
from .linalg import matrix_inverse
from .regression import LinearModel, fit_linear_model, predict
from .sampling import random_date, random_float, random_sample

__all__ = [
    "LinearModel",
    "correlation_matrix",
    "cumulative_distribution",
    "fit_linear_model",
    "kurtosis",
    "matrix_inverse",
    "mode",
    "predict",
    "random_date",
    "random_float",
    "random_sample",
    "skewness",
    "weighted_average",
    "weighted_median",
]
