from pathlib import Path

SAMPLE_SEED = 20231101
BENCHMARK_NS = [1, 2, 5, 10, 20, 100, 1000]
REPEATS = 5
RESULT_DIR = Path("logs/statistics.csv")
# upper bound for values in RandomArray inputs
RANDOM_VALUE_MAX = 1_000_000
