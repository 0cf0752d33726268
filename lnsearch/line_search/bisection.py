"""Goldstein line search by expansion and bisection."""

from __future__ import annotations

from ..linalg import Array, Gradient, Objective
from ..logging import get_logger
from .core import LineFunction
from .options import GoldsteinOptions

logger = get_logger(__name__)

_TOO_LONG = 1
_TOO_SHORT = -1
_ACCEPTABLE = 0


def _classify(fa: float, a: float, f0: float, pad: float, steepness: float) -> int:
    if fa > f0 + steepness * a * pad:
        return _TOO_LONG
    if fa < f0 + (1.0 - steepness) * a * pad:
        return _TOO_SHORT
    return _ACCEPTABLE


def goldstein(
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    steepness: float = 1e-4,
    initial_step: float = 1.0,
    gamma: float = 1.1,
    max_iter: int = 52,
):
    """Find a step satisfying both Goldstein inequalities.

    ``f0 + (1 - steepness) a pad <= f(x0 + a d) <= f0 + steepness a pad``
    where ``pad = g(x0) · d``. A step that is too long becomes the upper end
    of the search interval and the next trial is the midpoint; a step that is
    too short becomes the lower end and the trial is either the midpoint (once
    an upper end exists) or ``gamma`` times longer.

    At most ``max_iter`` trial steps are evaluated. If none is acceptable the
    last trial is returned anyway and a warning is logged.
    """
    opts = GoldsteinOptions(steepness, initial_step, gamma, max_iter)
    line = LineFunction(x0, d, f, g)
    pad = float(line.slope(0.0))
    f0 = float(line.value(0.0))

    lower = 0.0
    upper = None
    a = float(opts.initial_step)
    fa = float(line.value(a))
    for _ in range(opts.max_iter - 1):
        state = _classify(fa, a, f0, pad, opts.steepness)
        if state == _TOO_LONG:
            upper = a
            a = 0.5 * (lower + upper)
        elif state == _TOO_SHORT:
            lower = a
            a = a * opts.gamma if upper is None else 0.5 * (lower + upper)
        else:
            logger.debug("goldstein: accepted a=%g", a)
            return line.real(a)
        fa = float(line.value(a))

    if _classify(fa, a, f0, pad, opts.steepness) != _ACCEPTABLE:
        logger.warning(
            "goldstein: no acceptable step within %d trials; returning a=%g",
            opts.max_iter,
            a,
        )
    return line.real(a)


__all__ = ["goldstein"]
