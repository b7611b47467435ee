"""
A Python package of statistical and data-wrangling helpers for exploratory analysis.

Every function is stateless and independent: it takes plain sequences,
mappings, numpy arrays or DataFrames and returns a new value.

Modules:
    - stats: Random sampling, descriptive statistics, matrix inversion, and regression.
    - sequences: Normalization, chunking, de-duplication, and combinatorics.
    - tables: Conversions between nested mappings and DataFrames, time series, group summaries.
    - persistence: Binary save/load of in-memory values.
    - errors: Exception types raised by all of the above.
"""

__version__ = "1.0.0"

from .errors import (
    DeserializationError,
    DivisionByZeroError,
    InvalidInputError,
    InvalidRangeError,
    SchemaMismatchError,
    SerializationError,
    SingularMatrixError,
    StatkitError,
)
from .persistence import load_from_binary_file, save_to_binary_file
from .sequences import (
    approx_equal,
    cartesian_product,
    fibonacci,
    find_duplicates,
    flatten,
    normalize,
    partition,
    remove_duplicates,
    string_to_vector,
    to_snake_case,
)
from .stats import (
    LinearModel,
    correlation_matrix,
    cumulative_distribution,
    fit_linear_model,
    kurtosis,
    matrix_inverse,
    mode,
    predict,
    random_date,
    random_float,
    random_sample,
    skewness,
    weighted_average,
    weighted_median,
)
from .tables import (
    create_time_series,
    dataframe_to_nested_dict,
    dict_to_dataframe,
    get_nested_keys,
    group_summary,
    transpose_dataframe,
)

__all__ = [
    # Errors
    "StatkitError",
    "InvalidInputError",
    "InvalidRangeError",
    "DivisionByZeroError",
    "SingularMatrixError",
    "SchemaMismatchError",
    "SerializationError",
    "DeserializationError",
    # Random generation
    "random_float",
    "random_sample",
    "random_date",
    # Descriptive statistics
    "mode",
    "skewness",
    "kurtosis",
    "weighted_average",
    "weighted_median",
    "cumulative_distribution",
    "correlation_matrix",
    # Sequence transforms
    "normalize",
    "remove_duplicates",
    "flatten",
    "partition",
    "find_duplicates",
    "approx_equal",
    "string_to_vector",
    "to_snake_case",
    "cartesian_product",
    "fibonacci",
    # Tables
    "dict_to_dataframe",
    "dataframe_to_nested_dict",
    "transpose_dataframe",
    "get_nested_keys",
    "create_time_series",
    "group_summary",
    # Linear algebra and regression
    "matrix_inverse",
    "LinearModel",
    "fit_linear_model",
    "predict",
    # Persistence
    "save_to_binary_file",
    "load_from_binary_file",
]
