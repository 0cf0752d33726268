"""Benchmark objectives for unconstrained optimization.

Example
-------
>>> from lnsearch.functions import get_function
>>> fh2 = get_function("full_hessian_fh2")
>>> x0 = fh2.start_point(4)
>>> fh2.gradient(x0).shape
(4,)
"""

from .core import (
    FUNCTION_NAMES,
    BenchmarkFunction,
    BenchmarkKind,
    function,
    get_function,
    gradient,
    hessian,
    starting_point,
)
from .library import quadratic, quadratic_gradient

__all__ = [
    "BenchmarkFunction",
    "BenchmarkKind",
    "FUNCTION_NAMES",
    "function",
    "get_function",
    "gradient",
    "hessian",
    "quadratic",
    "quadratic_gradient",
    "starting_point",
]
