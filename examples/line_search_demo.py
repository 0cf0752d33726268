"""
Example: Choosing a step length with lnsearch

Takes the steepest-descent direction at the canonical start point of each
benchmark function and compares the step chosen by every line-search method,
together with the resulting decrease in the objective.
"""

import numpy as np

from lnsearch import FUNCTION_NAMES, METHODS, get_function, line_search

N = 10


def compare_methods(function_name: str) -> None:
    bench = get_function(function_name)
    x0 = bench.start_point(N)
    grad = bench.gradient(x0)
    d = -grad
    f0 = bench.value(x0)

    print("=" * 60)
    print(f"{function_name}: f(x0) = {f0:.6g}, |g(x0)| = {np.linalg.norm(grad):.3g}")
    print("=" * 60)
    for method in METHODS:
        overrides = {}
        if method not in ("fixed_line_search", "goldstein"):
            overrides["max_iter"] = 100
        step = line_search(method, x0, d, bench.value, bench.gradient, overrides)
        decrease = f0 - bench.value(x0 + step * d)
        print(f"  {method:<18} step = {step:.4e}   decrease = {decrease:.4e}")
    print()


def main() -> None:
    with np.errstate(over="ignore", invalid="ignore"):
        for function_name in FUNCTION_NAMES:
            compare_methods(function_name)
    print("Line search comparison complete")


if __name__ == "__main__":
    main()
