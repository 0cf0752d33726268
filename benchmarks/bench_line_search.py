"""Benchmark line-search methods on the registered test functions."""

import time
from dataclasses import fields
from typing import Dict

import numpy as np

from lnsearch.functions import FUNCTION_NAMES, get_function
from lnsearch.line_search import METHODS, default_options, line_search

# Keeps the unbounded methods from stalling a benchmark run.
MAX_ITER = 200


class _Counted:
    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.fn(x)


def _overrides(method: str) -> Dict[str, int]:
    names = {f.name for f in fields(default_options(method))}
    if "max_iter" in names and method != "goldstein":
        return {"max_iter": MAX_ITER}
    return {}


def benchmark_line_search(
    method: str,
    function_name: str,
    n: int = 100,
    repeats: int = 20,
    dtype=np.float64,
) -> Dict[str, float]:
    """Time one steepest-descent line search from the canonical start point.

    Args:
        method: Line-search method name.
        function_name: Benchmark function name.
        n: Problem dimension.
        repeats: Number of timed runs.
        dtype: Floating dtype of the start point.

    Returns:
        Dictionary with timing results, the chosen step and the decrease.
    """
    bench = get_function(function_name)
    x0 = bench.start_point(n, dtype=dtype)
    d = -bench.gradient(x0)
    f = _Counted(bench.value)
    g = _Counted(bench.gradient)
    overrides = _overrides(method)

    # Warmup
    step = line_search(method, x0, d, f, g, overrides)
    nfev, njev = f.calls, g.calls

    start = time.perf_counter()
    for _ in range(repeats):
        line_search(method, x0, d, bench.value, bench.gradient, overrides)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n": n,
        "step": float(step),
        "decrease": bench.value(x0) - bench.value(x0 + step * d),
        "nfev": nfev,
        "njev": njev,
        "time_per_search_sec": total_time / repeats,
    }


if __name__ == "__main__":
    with np.errstate(over="ignore", invalid="ignore"):
        for function_name in FUNCTION_NAMES:
            print(f"{function_name} (n=100):")
            for method in METHODS:
                results = benchmark_line_search(method, function_name)
                print(
                    f"  {method:<18} step={results['step']:.3e} "
                    f"decrease={results['decrease']:.3e} "
                    f"nfev={results['nfev']:<4} njev={results['njev']:<4} "
                    f"{results['time_per_search_sec']*1e3:.3f} ms"
                )
