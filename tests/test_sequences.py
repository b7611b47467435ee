"""Test array and sequence transforms."""

import numpy as np
import pytest

from statkit.errors import InvalidInputError
from statkit.sequences import (
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


class TestNormalize:
    def test_maps_min_to_zero_and_max_to_one(self):
        out = normalize([3.0, -1.0, 7.0, 5.0])
        assert np.allclose(out, [0.5, 0.0, 1.0, 0.75])

    def test_values_within_unit_interval(self):
        data = np.random.default_rng(11).normal(size=200)
        out = normalize(data)
        assert out.min() == 0.0
        assert out.max() == 1.0
        assert np.all((out >= 0.0) & (out <= 1.0))

    def test_constant_input_returns_zeros_with_warning(self):
        with pytest.warns(UserWarning, match="constant input"):
            out = normalize([2, 2, 2])
        assert np.array_equal(out, np.zeros(3))

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            normalize([])


def test_remove_duplicates():
    out = remove_duplicates([3, 1, 3, 2, 1])
    assert sorted(out) == [1, 2, 3]


def test_flatten_preserves_order():
    assert flatten([[1, 2], [], [3], (4, 5)]) == [1, 2, 3, 4, 5]


def test_partition():
    assert partition([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert partition([1, 2, 3], 5) == [[1, 2, 3]]
    assert partition([], 3) == []


@pytest.mark.parametrize("n", [0, -2])
def test_partition_non_positive_size_raises(n):
    with pytest.raises(InvalidInputError, match="positive"):
        partition([1, 2, 3], n)


def test_find_duplicates():
    assert find_duplicates([1, 1, 2, 3, 3, 3]) == {1: 2, 3: 3}
    assert find_duplicates(["a", "b"]) == {}


def test_approx_equal():
    assert approx_equal([1.0, 2.0], [1.0 + 1e-7, 2.0 - 1e-7])
    assert not approx_equal([1.0, 2.0], [1.0, 2.1])
    assert approx_equal([1.0], [1.05], tol=0.1)


def test_approx_equal_length_mismatch_raises():
    with pytest.raises(InvalidInputError, match="Shapes differ"):
        approx_equal([1.0, 2.0], [1.0])


def test_string_helpers():
    assert string_to_vector("abc") == ["a", "b", "c"]
    assert to_snake_case("Price Euros") == "price_euros"
    # camelCase boundaries are not split.
    assert to_snake_case("PriceEuros") == "priceeuros"


def test_cartesian_product_order():
    assert cartesian_product([[1, 2], [3, 4]]) == [(1, 3), (1, 4), (2, 3), (2, 4)]
    assert len(cartesian_product([[1, 2], "ab", (True, False, None)])) == 12


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1), (10, 55), (50, 12586269025)])
def test_fibonacci(n, expected):
    assert fibonacci(n) == expected


def test_fibonacci_negative_raises():
    with pytest.raises(InvalidInputError):
        fibonacci(-1)
