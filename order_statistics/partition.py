from collections.abc import MutableSequence


def partition(arr: MutableSequence[int], low: int, high: int, pivot_index: int) -> int:
    """Lomuto partition of ``arr[low:high + 1]`` around ``arr[pivot_index]``.

    Elements strictly less than the pivot end up left of the returned index,
    the rest to its right.
    """
    arr[pivot_index], arr[high] = arr[high], arr[pivot_index]
    pivot = arr[high]
    i = low
    for j in range(low, high):
        if arr[j] < pivot:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
    arr[i], arr[high] = arr[high], arr[i]
    return i
