"Pivot strategies: pivot(arr, lo, n) returns an offset in [0, n - 1] relative to lo"
import random
from collections.abc import Callable, MutableSequence
from enum import Enum
from functools import partial
from typing import Optional

from .partition import partition

PivotFn = Callable[[MutableSequence[int], int, int], int]


class PivotPolicy(Enum):
    Deterministic = "deterministic"
    UniformRandom = "uniform random"
    MedianDeterministic = "median deterministic"
    MedianUniformRandom = "median uniform random"

    def __str__(self) -> str:
        return self.value


SIMPLE_POLICIES = (PivotPolicy.Deterministic, PivotPolicy.UniformRandom)
MEDIAN_POLICIES = (PivotPolicy.MedianDeterministic, PivotPolicy.MedianUniformRandom)


def _check(name: str, arr: Optional[MutableSequence[int]], n: int) -> None:
    if arr is None or n <= 0:
        raise ValueError(f"Invalid input for {name}")


def deterministic_pivot(arr: MutableSequence[int], lo: int, n: int) -> int:
    _check("deterministic_pivot", arr, n)
    return 0


def uniform_random_pivot(arr: MutableSequence[int], lo: int, n: int, rng: Optional[random.Random] = None) -> int:
    _check("uniform_random_pivot", arr, n)
    return (rng or random).randrange(n)


def deterministic_median_pivot(arr: MutableSequence[int], lo: int, n: int) -> int:
    """Partition the window until the pivot rests on its middle slot.

    Leaves ``arr[lo:lo + n]`` partially partitioned around that slot.
    """
    _check("deterministic_median_pivot", arr, n)
    left, right = lo, lo + n - 1
    target = lo + n // 2
    while left < right:
        p = partition(arr, left, right, left)
        if p == target:
            return p - lo
        if p < target:
            left = p + 1
        else:
            right = p - 1
    return left - lo


def uniform_random_median_pivot(arr: MutableSequence[int], lo: int, n: int, rng: Optional[random.Random] = None) -> int:
    _check("uniform_random_median_pivot", arr, n)
    i = lo + (rng or random).randrange(n)
    last = lo + n - 1
    arr[i], arr[last] = arr[last], arr[i]
    return n - 1


def pivot_function(policy: PivotPolicy, rng: Optional[random.Random] = None) -> PivotFn:
    if policy is PivotPolicy.Deterministic:
        return deterministic_pivot
    if policy is PivotPolicy.UniformRandom:
        return partial(uniform_random_pivot, rng=rng)
    if policy is PivotPolicy.MedianDeterministic:
        return deterministic_median_pivot
    if policy is PivotPolicy.MedianUniformRandom:
        return partial(uniform_random_median_pivot, rng=rng)
    raise ValueError(f"Unknown pivot policy: {policy!r}")
