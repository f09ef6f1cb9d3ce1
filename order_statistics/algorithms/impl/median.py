import random
from collections.abc import Iterable, Sequence
from functools import partial
from statistics import median as reference_median
from typing import Optional

from ...pivots import PivotFn, deterministic_pivot, uniform_random_pivot
from ..StatAlgorithm import StatAlgorithm
from .quick_select import quick_select


def median(values: Iterable[int], pivot: PivotFn) -> float:
    """Median of ``values`` via quick select on a private copy.

    For an even count the two middle ranks are selected independently over
    the same working copy.
    """
    if values is None:
        raise ValueError("Input is None")
    arr = list(values)
    if not arr:
        raise ValueError("Input is empty")
    n = len(arr)
    if n % 2:
        return float(quick_select(arr, n // 2 + 1, pivot))
    return (quick_select(arr, n // 2, pivot) + quick_select(arr, n // 2 + 1, pivot)) / 2


def median_deterministic_pivot(values: Iterable[int]) -> float:
    return median(values, deterministic_pivot)


def median_uniform_random_pivot(values: Iterable[int], rng: Optional[random.Random] = None) -> float:
    return median(values, partial(uniform_random_pivot, rng=rng))


def _validator(before: Sequence[int], after: Sequence[int], ret: float) -> bool:
    return list(before) == list(after) and ret == reference_median(before)


algorithm = StatAlgorithm("median", median, validator=_validator)
