from collections.abc import MutableSequence, Sequence
from typing import Optional

from ...errors import SelectionInvariantError
from ...partition import partition
from ...pivots import PivotFn
from ..StatAlgorithm import StatAlgorithm


def quick_select(arr: MutableSequence[int], k: int, pivot: Optional[PivotFn]) -> int:
    """Return the ``k``-th smallest (1-based) element of ``arr``.

    ``arr`` is partially reordered in place.
    """
    if not arr or not 1 <= k <= len(arr) or pivot is None:
        raise ValueError(f"Invalid input for quick_select: k={k}, len={0 if arr is None else len(arr)}")
    left, right = 0, len(arr) - 1
    while left <= right:
        p = partition(arr, left, right, left + pivot(arr, left, right - left + 1))
        if p == k - 1:
            return arr[p]
        if p > k - 1:
            right = p - 1
        else:
            left = p + 1
    raise SelectionInvariantError(k, len(arr))


def _rank(N: int) -> int:
    return (N + 1) // 2


def _validator(before: Sequence[int], _, ret: int) -> bool:
    return ret == sorted(before)[_rank(len(before)) - 1]


algorithm = StatAlgorithm(
    "quick select",
    lambda arr, pivot: quick_select(arr, _rank(len(arr)), pivot),
    validator=_validator,
)
