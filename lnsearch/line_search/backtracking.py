"""Armijo backtracking with quadratic/cubic step reduction."""

from __future__ import annotations

import math
from typing import Optional

from ..linalg import Array, Gradient, Objective
from ..logging import get_logger
from .core import LineFunction
from .options import ArmijoOptions

logger = get_logger(__name__)


def _quadratic_step(a: float, f0: float, fa: float, pad0: float) -> float:
    """Minimizer of the quadratic through ``f0``, ``pad0`` and ``f(a)``."""
    return -pad0 * a * a / (2.0 * (fa - f0 - pad0 * a))


def _cubic_step(
    a_prev: float, a: float, f0: float, f_prev: float, fa: float, pad0: float
) -> float:
    """Minimizer of the cubic through ``f0``, ``pad0``, ``f(a_prev)`` and ``f(a)``."""
    r_cur = fa - f0 - pad0 * a
    r_prev = f_prev - f0 - pad0 * a_prev
    cubic = (a_prev * a_prev * r_cur - a * a * r_prev) / (
        a * a * a_prev * a_prev * (a - a_prev)
    )
    quad = (r_cur - cubic * a * a * a) / (a * a)
    if cubic == 0:
        return -pad0 / (2.0 * quad)
    return (-quad + math.sqrt(quad * quad - 3.0 * cubic * pad0)) / (3.0 * cubic)


def _next_step(
    a_prev: Optional[float], a: float, f0: float, f_prev: float, fa: float, pad0: float
) -> float:
    try:
        if a_prev is None:
            a_new = _quadratic_step(a, f0, fa, pad0)
        else:
            a_new = _cubic_step(a_prev, a, f0, f_prev, fa, pad0)
    except (ValueError, ZeroDivisionError):
        a_new = math.nan
    if not math.isfinite(a_new) or not 0 < a_new < a:
        logger.debug("interpolated step unusable at a=%g; halving", a)
        return 0.5 * a
    return a_new


def armijo(
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    steepness: float = 1e-4,
    initial_step: float = 1.0,
    max_iter: Optional[int] = None,
):
    """Backtracking line search enforcing the sufficient-decrease condition.

    Accepts the first trial step ``a`` with
    ``f(x0 + a d) <= f(x0) + steepness * a * (g(x0) · d)``. The first
    reduction minimizes the quadratic model built from ``f(x0)``, the
    directional derivative and the rejected trial; later reductions use the
    cubic model through the two most recent trials.

    There is no lower bound on the step: on a pathological objective the
    search may not terminate unless ``max_iter`` is given, in which case the
    last trial step is returned once the ceiling is reached.
    """
    opts = ArmijoOptions(steepness, initial_step, max_iter)
    line = LineFunction(x0, d, f, g)
    f0 = float(line.value(0.0))
    pad0 = float(line.slope(0.0))

    a = float(opts.initial_step)
    fa = float(line.value(a))
    a_prev: Optional[float] = None
    f_prev = f0
    nit = 1
    while fa > f0 + opts.steepness * a * pad0:
        if opts.max_iter is not None and nit >= opts.max_iter:
            logger.warning(
                "armijo: no sufficient decrease after %d trials; returning a=%g",
                nit,
                a,
            )
            break
        a_new = _next_step(a_prev, a, f0, f_prev, fa, pad0)
        a_prev, f_prev = a, fa
        a = a_new
        fa = float(line.value(a))
        nit += 1
    else:
        logger.debug("armijo: accepted a=%g after %d trials", a, nit)
    return line.real(a)


__all__ = ["armijo"]
