import random
from enum import Enum
from typing import Optional

from .Config import RANDOM_VALUE_MAX


class InputData(Enum):
    SortedArray = "sorted"
    ReversedSortedArray = "reversed"
    RandomArray = "random"

    def __str__(self) -> str:
        return self.value


def make_input(shape: InputData, n: int, rng: Optional[random.Random] = None) -> list[int]:
    if shape is InputData.SortedArray:
        return list(range(n))
    if shape is InputData.ReversedSortedArray:
        return list(range(n - 1, -1, -1))
    r = rng or random
    return [r.randint(-RANDOM_VALUE_MAX, RANDOM_VALUE_MAX) for _ in range(n)]
