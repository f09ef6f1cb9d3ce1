from .algorithms.impl.median import median, median_deterministic_pivot, median_uniform_random_pivot
from .algorithms.impl.min_max import min_max_element
from .algorithms.impl.quick_select import quick_select
from .algorithms.impl.quick_sort import quick_sort, quick_sort_median_pivot, quick_sort_simple_pivot
from .errors import InvalidResultError, SelectionInvariantError
from .inputs import InputData, make_input
from .partition import partition
from .pivots import (
    PivotFn,
    PivotPolicy,
    deterministic_median_pivot,
    deterministic_pivot,
    pivot_function,
    uniform_random_median_pivot,
    uniform_random_pivot,
)
