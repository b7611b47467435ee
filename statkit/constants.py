"""Centralized numerical defaults shared across statkit modules."""

from __future__ import annotations

import pickle

import numpy as np

# Element-wise tolerance used by ``approx_equal``.
DEFAULT_TOLERANCE: float = 1e-5

# Matrices with a condition number above this are treated as singular.
SINGULAR_CONDITION_LIMIT: float = 1.0 / np.finfo(float).eps

# Cumulative weight fraction that defines the weighted median.
MEDIAN_WEIGHT_FRACTION: float = 0.5

PICKLE_PROTOCOL: int = pickle.HIGHEST_PROTOCOL
