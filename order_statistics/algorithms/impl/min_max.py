from collections.abc import Sequence

from ..StatAlgorithm import StatAlgorithm


def min_max_element(values: Sequence[int]) -> tuple[int, int]:
    if not values:
        raise ValueError("Input is empty")
    lo = hi = values[0]
    for x in values[1:]:
        if x < lo:
            lo = x
        elif x > hi:
            hi = x
    return lo, hi


algorithm = StatAlgorithm(
    "min max element",
    lambda arr, _: min_max_element(arr),
    validator=lambda before, _, ret: ret == (min(before), max(before)),
    policies=(None,),
)
