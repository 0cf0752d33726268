"""Weak and strong Wolfe line searches via bracketing and zoom.

Both searches share one two-phase procedure (Nocedal & Wright, Alg. 3.5 and
3.6). The bracketing phase grows the trial step until it either satisfies the
curvature condition or brackets an acceptable step; the zoom phase then
shrinks the bracket by cubic interpolation. The variants differ only in the
curvature test and in how the strong variant keeps its bracket oriented.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..linalg import Array, Gradient, Objective
from ..logging import get_logger
from .core import LineFunction
from .interpolation import cubic_interpolate
from .options import StrongWolfeOptions, WolfeOptions

logger = get_logger(__name__)


@dataclass
class _Sample:
    """Step length with its function value and directional derivative."""

    a: float
    f: float
    pad: float


class _IterationBudget:
    def __init__(self, max_iter: Optional[int]) -> None:
        self.max_iter = max_iter
        self.nit = 0

    def spend(self) -> bool:
        """Count one iteration; False once the ceiling has been reached."""
        self.nit += 1
        return self.max_iter is None or self.nit <= self.max_iter


def _curvature_ok(pad: float, pad0: float, sigma: float, strong: bool) -> bool:
    if strong:
        return abs(pad) <= -sigma * pad0
    return pad >= sigma * pad0


def _progress_stalled(ff: float, lo: _Sample, hi: _Sample, xi: float) -> bool:
    scale = 1.0 + abs(ff)
    return abs(ff - lo.f) / scale < xi or abs(ff - hi.f) / scale < xi


def _zoom(
    line: LineFunction,
    lo: _Sample,
    hi: _Sample,
    f0: float,
    pad0: float,
    opts: WolfeOptions,
    strong: bool,
    budget: _IterationBudget,
) -> float:
    """Shrink the bracket ``[lo, hi]`` until a trial step is acceptable.

    ``lo`` is the endpoint with the lower function value; it may lie on
    either side of ``hi``.
    """
    a = lo.a
    while budget.spend():
        if lo.a < hi.a:
            a = cubic_interpolate(lo.a, hi.a, lo.f, hi.f, lo.pad, hi.pad)
        else:
            a = cubic_interpolate(hi.a, lo.a, hi.f, lo.f, hi.pad, lo.pad)
        ff = float(line.value(a))
        pad = float(line.slope(a))

        if _progress_stalled(ff, lo, hi, opts.xi):
            logger.debug("zoom: insufficient progress, returning a=%g", a)
            return a

        if ff > f0 + opts.steepness * a * pad0 or ff >= lo.f:
            hi = _Sample(a, ff, pad)
            continue
        if _curvature_ok(pad, pad0, opts.sigma, strong):
            logger.debug("zoom: accepted a=%g", a)
            return a
        if strong and pad * (hi.a - lo.a) >= 0:
            hi = lo
        lo = _Sample(a, ff, pad)

    logger.warning(
        "zoom: iteration ceiling %s reached; returning a=%g", budget.max_iter, a
    )
    return a


def _bracket_and_zoom(
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    opts: WolfeOptions,
    strong: bool,
):
    line = LineFunction(x0, d, f, g)
    f0 = float(line.value(0.0))
    pad0 = float(line.slope(0.0))
    budget = _IterationBudget(opts.max_iter)

    prev = _Sample(0.0, f0, pad0)
    a = float(opts.initial_step)
    cur = _Sample(a, float(line.value(a)), float(line.slope(a)))
    first = True
    while budget.spend():
        if cur.f > f0 + opts.steepness * cur.a * pad0 or (
            not first and cur.f >= prev.f
        ):
            logger.debug("bracketed [%g, %g]; zooming", prev.a, cur.a)
            return line.real(_zoom(line, prev, cur, f0, pad0, opts, strong, budget))
        if _curvature_ok(cur.pad, pad0, opts.sigma, strong):
            logger.debug("accepted a=%g while bracketing", cur.a)
            return line.real(cur.a)
        if strong and cur.pad >= 0:
            logger.debug("derivative changed sign at a=%g; zooming", cur.a)
            return line.real(_zoom(line, cur, prev, f0, pad0, opts, strong, budget))
        prev = cur
        a = min(opts.max_step, cur.a * opts.step_factor)
        cur = _Sample(a, float(line.value(a)), float(line.slope(a)))
        first = False

    logger.warning(
        "bracketing: iteration ceiling %s reached; returning a=%g",
        budget.max_iter,
        cur.a,
    )
    return line.real(cur.a)


def wolfe(
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    steepness: float = 1e-4,
    initial_step: float = 1.0,
    sigma: float = 0.9,
    xi: float = 1e-3,
    max_step: float = 1e10,
    step_factor: float = 10.0,
    max_iter: Optional[int] = None,
):
    """Line search for a step satisfying the weak Wolfe conditions.

    The accepted step ``a`` satisfies sufficient decrease and
    ``g(x0 + a d) · d >= sigma * (g(x0) · d)``, unless zoom stops early
    because the trial value is within relative tolerance ``xi`` of a bracket
    endpoint, or the optional ``max_iter`` ceiling is reached.
    """
    opts = WolfeOptions(
        steepness, initial_step, sigma, xi, max_step, step_factor, max_iter
    )
    return _bracket_and_zoom(x0, d, f, g, opts, strong=False)


def strong_wolfe(
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    steepness: float = 1e-4,
    initial_step: float = 1.0,
    sigma: float = 0.1,
    xi: float = 1e-3,
    max_step: float = 1e10,
    step_factor: float = 10.0,
    max_iter: Optional[int] = None,
):
    """Line search for a step satisfying the strong Wolfe conditions.

    Same as :func:`wolfe` except the curvature condition bounds the magnitude
    of the directional derivative: ``|g(x0 + a d) · d| <= -sigma * (g(x0) · d)``.
    """
    opts = StrongWolfeOptions(
        steepness, initial_step, sigma, xi, max_step, step_factor, max_iter
    )
    return _bracket_and_zoom(x0, d, f, g, opts, strong=True)


__all__ = ["strong_wolfe", "wolfe"]
