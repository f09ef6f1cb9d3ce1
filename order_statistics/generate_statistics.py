import logging
from collections.abc import Sequence
from itertools import product
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional

import pandas as pd
import plotly.express as px
from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from .algorithms.algorithms import stat_algorithms
from .Config import *
from .errors import InvalidResultError
from .inputs import InputData, make_input
from .pivots import PivotPolicy, pivot_function

logger = logging.getLogger(__name__)

COLUMNS = ("name", "policy", "input", "N", "best", "worst", "avg")

Task = tuple[int, Optional[PivotPolicy], InputData, int, int, int]


def measure(algorithm_idx: int, policy: Optional[PivotPolicy], shape: InputData, N: int, repeats: int, seed: int) -> tuple[float, float, float]:
    algorithm = stat_algorithms[algorithm_idx]
    r = Random(f"{seed}:{algorithm.name}:{policy}:{shape}:{N}")
    pivot = None if policy is None else pivot_function(policy, r)
    source = make_input(shape, N, r)
    best = float("inf")
    worst = 0.0
    total = 0.0
    for _ in range(repeats):
        arr = source.copy()
        start_time = thread_time()
        ret = algorithm.func(arr, pivot)
        elapsed = thread_time() - start_time
        if not algorithm.validator(source, arr, ret):
            raise InvalidResultError(algorithm.name, str(policy))
        best = min(best, elapsed)
        worst = max(worst, elapsed)
        total += elapsed
    return best, worst, total / repeats


def _work(task: Task) -> str:
    algorithm_idx, policy, shape, N, repeats, seed = task
    best, worst, avg = measure(algorithm_idx, policy, shape, N, repeats, seed)
    name = stat_algorithms[algorithm_idx].name
    return ",".join(map(str, (name, "" if policy is None else policy, shape, N, best, worst, avg)))


def make_tasks(Ns: Sequence[int], repeats: int, seed: int) -> list[Task]:
    tasks = []
    for i, algorithm in enumerate(stat_algorithms):
        for policy, shape, N in product(algorithm.policies, InputData, Ns):
            if N >= algorithm.min_N:
                tasks.append((i, policy, shape, N, repeats, seed))
    return tasks


def generate_statistics(
    Ns: Sequence[int] = BENCHMARK_NS,
    result_path: Path = RESULT_DIR,
    repeats: int = REPEATS,
    seed: int = SAMPLE_SEED,
    processes: Optional[int] = None,
) -> None:
    tasks = make_tasks(Ns, repeats, seed)
    logger.info("Running %d benchmark tasks into %s", len(tasks), result_path)
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with Pool(processes) as pool, open(result_path, "w") as f, logging_redirect_tqdm():
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result(result_path: Path = RESULT_DIR) -> pd.DataFrame:
    df = pd.read_csv(result_path, keep_default_na=False)
    df = df.sort_values(["name", "policy", "input", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_path.parent / f"{name}.csv", index=False)
    return df


def plot_result(result_path: Path = RESULT_DIR) -> list[Path]:
    df = pd.read_csv(result_path, keep_default_na=False)
    df["series"] = [f"{p}, {i}" if p else i for p, i in zip(df["policy"], df["input"])]
    written = []
    for name, group in df.groupby("name"):
        fig = px.line(
            group.sort_values("N"),
            x="N",
            y="avg",
            color="series",
            markers=True,
            log_x=True,
            title=f"{name}: average time",
            labels={"avg": "seconds", "series": "pivot, input"},
        )
        path = result_path.parent / f"{name}.html"
        fig.write_html(path)
        logger.info("Wrote %s", path)
        written.append(path)
    return written


if __name__ == "__main__":
    generate_statistics()
    sort_result()
    plot_result()
