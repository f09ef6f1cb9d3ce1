from random import Random

import pytest

from order_statistics.algorithms.impl.quick_select import quick_select
from order_statistics.errors import SelectionInvariantError
from order_statistics.pivots import PivotPolicy, pivot_function

from .conftest import generate_test_arrays


@pytest.fixture(params=list(PivotPolicy), ids=str)
def pivot(request):
    return pivot_function(request.param, Random(42))


@pytest.mark.parametrize("arr, k, expected", [([3, 2, 5, 4], 2, 3), ([5, 7, 6, 5], 2, 5), ([4, 5, 6, 0, 2], 1, 0), ([8], 1, 8)])
def test_quick_select_examples(pivot, arr, k, expected):
    assert quick_select(arr, k, pivot) == expected


@pytest.mark.parametrize("array_length", [1, 2, 10, 57])
def test_quick_select_every_rank(pivot, rng, array_length):
    for arr in generate_test_arrays(array_length, 5, rng):
        expected = sorted(arr)
        for k in range(1, array_length + 1):
            work = arr.copy()
            assert quick_select(work, k, pivot) == expected[k - 1]
            assert sorted(work) == expected


def test_quick_select_sorted_deterministic_large():
    arr = list(range(2000))
    assert quick_select(arr, 2000, pivot_function(PivotPolicy.Deterministic)) == 1999


@pytest.mark.parametrize("arr, k", [([], 1), ([1, 2, 3], 0), ([1, 2, 3], 4), ([1, 2, 3], -1)])
def test_quick_select_invalid_rank(pivot, arr, k):
    with pytest.raises(ValueError):
        quick_select(arr, k, pivot)


def test_quick_select_requires_pivot():
    with pytest.raises(ValueError):
        quick_select([1, 2, 3], 1, None)
    with pytest.raises(ValueError):
        quick_select(None, 1, pivot_function(PivotPolicy.Deterministic))


def test_quick_select_narrows_window_each_round():
    calls = []

    def last(arr, lo, n):
        calls.append(n)
        return n - 1

    arr = [1, 2, 3, 4, 5]
    assert quick_select(arr, 1, last) == 1
    assert calls == [5, 4, 3, 2, 1]


def test_selection_invariant_error_message():
    err = SelectionInvariantError(3, 2)
    assert isinstance(err, RuntimeError)
    assert "rank 3" in str(err)
