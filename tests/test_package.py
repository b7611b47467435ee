"""Test the public package surface."""

import numpy as np
import pytest

import statkit
from statkit import errors


def test_all_exports_resolve():
    for name in statkit.__all__:
        assert hasattr(statkit, name), name


@pytest.mark.parametrize(
    "exc, builtin",
    [
        (errors.InvalidInputError, ValueError),
        (errors.InvalidRangeError, ValueError),
        (errors.DivisionByZeroError, ZeroDivisionError),
        (errors.SingularMatrixError, np.linalg.LinAlgError),
        (errors.SchemaMismatchError, ValueError),
        (errors.SerializationError, TypeError),
        (errors.DeserializationError, ValueError),
    ],
)
def test_errors_share_base_and_builtin(exc, builtin):
    assert issubclass(exc, errors.StatkitError)
    assert issubclass(exc, builtin)


def test_top_level_functions_are_usable():
    assert statkit.fibonacci(10) == 55
    assert statkit.partition([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert statkit.find_duplicates([1, 1, 2, 3, 3, 3]) == {1: 2, 3: 3}
