"""Safeguarded cubic interpolation used by the zoom phase.

Given two samples ``(t1, val1, der1)`` and ``(t2, val2, der2)`` of a scalar
function and its derivative, the minimizer of the matching cubic is (Nocedal
& Wright, eq. 3.59)::

    d1 = der1 + der2 - 3 (val1 - val2) / (t1 - t2)
    d2 = sqrt(d1² - der1 der2)
    t  = t2 - (t2 - t1) (der2 + d2 - d1) / (der2 - der1 + 2 d2)
"""

from __future__ import annotations

import math

from ..logging import get_logger

logger = get_logger(__name__)


def _cubic_minimizer(
    t1: float, t2: float, val1: float, val2: float, der1: float, der2: float
) -> tuple[float, bool]:
    """Return ``(t, ok)``; ``ok`` is False when the cubic fit is unusable."""
    if t1 == t2:
        return t1, False
    d1 = der1 + der2 - 3.0 * (val1 - val2) / (t1 - t2)
    disc = d1 * d1 - der1 * der2
    # NaN fails this test as well.
    if not disc >= 0:
        return t1, False
    d2 = math.sqrt(disc)
    denom = der2 - der1 + 2.0 * d2
    if denom == 0:
        return t1, False
    t = t2 - (t2 - t1) * (der2 + d2 - d1) / denom
    if not math.isfinite(t) or t < 0:
        return t1, False
    return t, True


def cubic_interpolate(
    t1: float, t2: float, val1: float, val2: float, der1: float, der2: float
) -> float:
    """Estimate the minimizer of the cubic through two samples, inside ``[t1, t2]``.

    Parameters
    ----------
    t1, t2:
        Interval endpoints with ``t1 <= t2``.
    val1, val2:
        Function values at ``t1`` and ``t2``.
    der1, der2:
        Derivatives at ``t1`` and ``t2``.

    Returns
    -------
    float
        The cubic minimizer when the fit is valid and lies in ``[t1, t2]``;
        otherwise the boundary ``t1``.
    """
    t1, t2 = float(t1), float(t2)
    t, ok = _cubic_minimizer(
        t1, t2, float(val1), float(val2), float(der1), float(der2)
    )
    if not ok:
        logger.debug("cubic fit on [%g, %g] invalid; falling back to %g", t1, t2, t1)
        return t1
    if t < t1 or t > t2:
        return t1
    return t


__all__ = ["cubic_interpolate"]
