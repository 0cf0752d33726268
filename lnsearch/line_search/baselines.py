"""Reference step-length strategies with no optimality guarantee."""

from __future__ import annotations

from typing import Optional

from ..linalg import Array, Objective
from ..logging import get_logger
from .core import LineFunction
from .options import BinaryOptions

logger = get_logger(__name__)


def fixed_line_search(initial_step: float = 1.0):
    """Return ``initial_step`` unchanged. Disables line search."""
    return initial_step


def binary(
    x0: Array,
    d: Array,
    f: Objective,
    initial_step: float = 1.0,
    max_iter: Optional[int] = None,
):
    """Naive doubling/halving search.

    Compares ``f`` at ``a`` and ``2a``. If the longer step is better, keeps
    doubling while the value still drops; otherwise keeps halving while it
    drops. This only finds a local dip along the ray and exists as an example
    of a poor strategy.
    """
    opts = BinaryOptions(initial_step, max_iter)
    line = LineFunction(x0, d, f)
    a = float(opts.initial_step)
    fa = line.value(a)
    f2a = line.value(2.0 * a)
    factor = 2.0 if f2a < fa else 0.5
    if factor == 2.0:
        a *= 2.0
        best = f2a
    else:
        best = fa

    nit = 0
    trial = line.value(a * factor)
    while trial < best:
        nit += 1
        if opts.max_iter is not None and nit > opts.max_iter:
            logger.warning("binary: iteration ceiling %d reached at a=%g", opts.max_iter, a)
            break
        best = trial
        a *= factor
        trial = line.value(a * factor)
    return line.real(a)


__all__ = ["binary", "fixed_line_search"]
