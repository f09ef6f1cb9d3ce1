from collections.abc import MutableSequence, Sequence
from typing import Optional

from ...partition import partition
from ...pivots import MEDIAN_POLICIES, SIMPLE_POLICIES, PivotFn
from ..StatAlgorithm import StatAlgorithm


def quick_sort(arr: MutableSequence[int], pivot: Optional[PivotFn]) -> None:
    """Sort ``arr`` in place, ascending. Not stable.

    Pending ranges are kept on an explicit stack, smaller range on top, so
    sorted input with a first-element pivot does not exhaust the call stack.
    """
    if arr is None or pivot is None:
        raise ValueError("Invalid input for quick_sort: buffer and pivot are required")
    if not arr:
        return
    stack = [(0, len(arr) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        p = partition(arr, left, right, left + pivot(arr, left, right - left + 1))
        lower = (left, p - 1) if left < p else None
        upper = (p + 1, right) if p < right else None
        if lower and upper and p - left < right - p:
            lower, upper = upper, lower
        stack.extend(r for r in (lower, upper) if r is not None)


def quick_sort_simple_pivot(arr: MutableSequence[int], pivot: PivotFn) -> None:
    """Quick sort with a first-element or uniform random pivot."""
    quick_sort(arr, pivot)


def quick_sort_median_pivot(arr: MutableSequence[int], pivot: PivotFn) -> None:
    """Quick sort with a median pivot strategy.

    The strategy may rearrange the window before the partition runs on the
    index it returns.
    """
    quick_sort(arr, pivot)


def _validator(before: Sequence[int], after: Sequence[int], _) -> bool:
    return list(after) == sorted(before)


algorithm = StatAlgorithm(
    "quick sort",
    quick_sort,
    validator=_validator,
    policies=SIMPLE_POLICIES + MEDIAN_POLICIES,
    min_N=0,
)
