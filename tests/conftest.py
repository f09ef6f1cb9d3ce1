from random import Random

import pytest


@pytest.fixture
def rng() -> Random:
    return Random(1234)


def generate_test_arrays(n: int, num_arrays: int, r: Random) -> list[list[int]]:
    arrays = []
    for _ in range(num_arrays):
        array_type = r.choice(["random", "sorted", "reverse_sorted", "few_unique", "negative"])
        if array_type == "random":
            arrays.append([r.randint(0, n * 10) for _ in range(n)])
        elif array_type == "sorted":
            arrays.append(list(range(n)))
        elif array_type == "reverse_sorted":
            arrays.append(list(range(n - 1, -1, -1)))
        elif array_type == "few_unique":
            arrays.append([r.randint(0, 3) for _ in range(n)])
        else:
            arrays.append([r.randint(-n, n) for _ in range(n)])
    return arrays
