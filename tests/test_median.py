from random import Random
from statistics import median as reference_median

import pytest

from order_statistics.algorithms.impl.median import median, median_deterministic_pivot, median_uniform_random_pivot
from order_statistics.pivots import deterministic_median_pivot

from .conftest import generate_test_arrays

MEDIANS = [median_deterministic_pivot, lambda v: median_uniform_random_pivot(v, Random(5)), median_uniform_random_pivot]


@pytest.mark.parametrize("func", MEDIANS)
@pytest.mark.parametrize("values, expected", [([1], 1), ([1, 2], 1.5), ([3, 4, 4], 4), ([-3, 1], -1.0), ([5, 1, 4, 2], 3.0)])
def test_median_examples(func, values, expected):
    result = func(values)
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize("func", MEDIANS)
def test_median_preserves_input(func):
    values = [9, 1, 8, 2, 7, 3]
    func(values)
    assert values == [9, 1, 8, 2, 7, 3]


@pytest.mark.parametrize("func", MEDIANS)
def test_median_empty(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("array_length", [1, 2, 3, 10, 11, 64])
def test_median_random(rng, array_length):
    for values in generate_test_arrays(array_length, 10, rng):
        expected = reference_median(values)
        assert median_deterministic_pivot(values) == expected
        assert median_uniform_random_pivot(values, rng) == expected
        assert median(values, deterministic_median_pivot) == expected


def test_median_accepts_iterables():
    assert median_deterministic_pivot(iter([4, 1, 3])) == 3.0


@pytest.mark.parametrize("func", MEDIANS)
def test_median_rejects_missing_input(func):
    with pytest.raises(ValueError):
        func(None)
