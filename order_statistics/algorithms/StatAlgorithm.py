from collections.abc import Callable, Sequence
from typing import Any, NamedTuple, Optional

from ..pivots import SIMPLE_POLICIES, PivotFn, PivotPolicy


class StatAlgorithm(NamedTuple):
    name: str
    func: Callable[[list[int], Optional[PivotFn]], Any]
    # (input before the call, input after the call, returned value)
    validator: Callable[[Sequence[int], Sequence[int], Any], bool]
    policies: Sequence[Optional[PivotPolicy]] = SIMPLE_POLICIES
    min_N: int = 1
