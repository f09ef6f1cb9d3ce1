import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from random import Random
from typing import List, Optional

import typer
from rich import print
from rich.logging import RichHandler

from .algorithms.impl.median import median
from .algorithms.impl.min_max import min_max_element
from .algorithms.impl.quick_select import quick_select
from .algorithms.impl.quick_sort import quick_sort
from .Config import BENCHMARK_NS, REPEATS, RESULT_DIR, SAMPLE_SEED
from .generate_statistics import generate_statistics, plot_result, sort_result
from .pivots import PivotPolicy, pivot_function

app = typer.Typer(add_completion=False, help="Order statistics: selection, median and quick sort.")

POLICIES = {p.name: p for p in PivotPolicy}


def _pivot(policy: str, seed: Optional[int]):
    if policy not in POLICIES:
        raise typer.BadParameter(f"expected one of {', '.join(POLICIES)}", param_hint="--pivot")
    return pivot_function(POLICIES[policy], None if seed is None else Random(seed))


@contextmanager
def _usage_errors() -> Iterator[None]:
    try:
        yield
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


@app.command()
def bench(
    sizes: Optional[List[int]] = typer.Option(None, "--sizes", "-n", help="Input sizes (repeatable)."),
    output: Path = typer.Option(RESULT_DIR, "--output", "-o"),
    repeats: int = typer.Option(REPEATS, min=1),
    seed: int = typer.Option(SAMPLE_SEED),
    processes: Optional[int] = typer.Option(None, min=1),
    plot: bool = typer.Option(True),
) -> None:
    """Time every algorithm over sorted, reversed and random inputs."""
    generate_statistics(sizes or BENCHMARK_NS, output, repeats, seed, processes)
    df = sort_result(output)
    print(df.groupby(["name", "policy"])["avg"].mean())
    if plot:
        plot_result(output)


@app.command()
def minmax(values: List[int]) -> None:
    with _usage_errors():
        print(min_max_element(values))


@app.command()
def select(
    k: int,
    values: List[int],
    pivot: str = typer.Option("Deterministic", "--pivot"),
    seed: Optional[int] = None,
) -> None:
    """Print the k-th smallest value (1-based)."""
    with _usage_errors():
        print(quick_select(list(values), k, _pivot(pivot, seed)))


@app.command(name="median")
def median_cmd(
    values: List[int],
    pivot: str = typer.Option("Deterministic", "--pivot"),
    seed: Optional[int] = None,
) -> None:
    with _usage_errors():
        print(median(values, _pivot(pivot, seed)))


@app.command(name="sort")
def sort_cmd(
    values: List[int],
    pivot: str = typer.Option("Deterministic", "--pivot"),
    seed: Optional[int] = None,
) -> None:
    arr = list(values)
    with _usage_errors():
        quick_sort(arr, _pivot(pivot, seed))
    print(arr)


if __name__ == "__main__":
    app()
