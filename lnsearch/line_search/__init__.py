"""Step-length selection along a descent direction.

Example
-------
>>> import numpy as np
>>> from lnsearch.line_search import line_search
>>> x0 = np.array([1.0, -2.0])
>>> f = lambda x: float(x @ x)
>>> g = lambda x: 2 * x
>>> float(line_search("strong_wolfe", x0, -g(x0), f, g))
0.5
"""

from .backtracking import armijo
from .baselines import binary, fixed_line_search
from .bisection import goldstein
from .bracketing import strong_wolfe, wolfe
from .core import LineFunction
from .dispatch import METHODS, default_options, line_search, resolve_options
from .interpolation import cubic_interpolate
from .options import (
    ArmijoOptions,
    BinaryOptions,
    FixedStepOptions,
    GoldsteinOptions,
    StrongWolfeOptions,
    WolfeOptions,
)

__all__ = [
    "ArmijoOptions",
    "BinaryOptions",
    "FixedStepOptions",
    "GoldsteinOptions",
    "LineFunction",
    "METHODS",
    "StrongWolfeOptions",
    "WolfeOptions",
    "armijo",
    "binary",
    "cubic_interpolate",
    "default_options",
    "fixed_line_search",
    "goldstein",
    "line_search",
    "resolve_options",
    "strong_wolfe",
    "wolfe",
]
