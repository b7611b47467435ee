"""Test reproducible random draws."""

import datetime as dt

import numpy as np
import pytest

from statkit.errors import InvalidInputError, InvalidRangeError
from statkit.stats.sampling import random_date, random_float, random_sample


class TestRandomFloat:
    def test_within_half_open_range(self):
        rng = np.random.default_rng(7)
        draws = [random_float(1.5, 2.5, rng=rng) for _ in range(500)]
        assert all(1.5 <= d < 2.5 for d in draws)

    def test_same_seed_same_value(self):
        assert random_float(0.0, 10.0, rng=42) == random_float(0.0, 10.0, rng=42)

    def test_equal_bounds_return_bound(self):
        assert random_float(3.0, 3.0) == 3.0

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidRangeError, match="must not exceed"):
            random_float(5.0, 1.0)

    def test_non_finite_bound_raises(self):
        with pytest.raises(InvalidInputError, match="finite"):
            random_float(0.0, float("inf"))


class TestRandomSample:
    def test_draws_from_population_with_replacement(self):
        out = random_sample(["a", "b"], 50, rng=0)
        assert len(out) == 50
        assert set(out) <= {"a", "b"}
        # 50 draws from two items must repeat.
        assert len(set(out)) < len(out)

    def test_preserves_element_objects(self):
        pop = [(1, 2), (3, 4)]
        out = random_sample(pop, 5, rng=1)
        assert all(item in pop for item in out)
        assert all(isinstance(item, tuple) for item in out)

    def test_zero_size(self):
        assert random_sample([], 0) == []

    def test_empty_population_raises(self):
        with pytest.raises(InvalidInputError, match="empty"):
            random_sample([], 3)

    def test_negative_size_raises(self):
        with pytest.raises(InvalidInputError):
            random_sample([1, 2], -1)


class TestRandomDate:
    def test_range_is_inclusive(self):
        start = dt.date(2024, 2, 28)
        end = dt.date(2024, 3, 1)
        rng = np.random.default_rng(3)
        seen = {random_date(start, end, rng=rng) for _ in range(300)}
        assert seen == {dt.date(2024, 2, 28), dt.date(2024, 2, 29), dt.date(2024, 3, 1)}

    def test_single_day_range(self):
        day = dt.date(2020, 1, 1)
        assert random_date(day, day) == day

    def test_end_before_start_raises(self):
        with pytest.raises(InvalidRangeError, match="before start"):
            random_date(dt.date(2024, 1, 2), dt.date(2024, 1, 1))


def test_float_range_wider_than_max_float():
    rng = np.random.default_rng(0)
    draws = [random_float(-1e308, 1e308, rng=rng) for _ in range(100)]
    assert all(-1e308 <= d < 1e308 for d in draws)


def test_float_stays_below_upper_bound_on_tiny_range():
    lo = 1.0
    hi = float(np.nextafter(1.0, 2.0))
    assert all(random_float(lo, hi, rng=s) == lo for s in range(20))


def test_global_random_state_untouched():
    np.random.seed(123)
    expected = np.random.random(5)

    np.random.seed(123)
    random_float(0.0, 1.0)
    random_float(0.0, 1.0, rng=9)
    random_sample([1, 2, 3], 4)
    random_date(dt.date(2024, 1, 1), dt.date(2024, 12, 31), rng=2)
    assert np.array_equal(np.random.random(5), expected)
