from importlib import import_module
from pathlib import Path

from .StatAlgorithm import StatAlgorithm

stat_algorithms: list[StatAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package=f"{__package__}.impl")
    stat_algorithms.append(module.algorithm)
