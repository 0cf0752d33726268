"""Oracle wrapper shared by the line-search routines."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..linalg import (
    Array,
    Gradient,
    Objective,
    as_point,
    check_same_shape,
    dot,
    step_point,
    working_dtype,
)


class LineFunction:
    """Restriction of an objective and its gradient to the ray ``x0 + a d``.

    ``value(a)`` is ``f(x0 + a d)`` and ``slope(a)`` is the directional
    derivative ``g(x0 + a d) · d``. Both are returned in the working dtype of
    ``x0`` and ``d``; evaluations are counted in ``nfev`` and ``njev``.
    """

    def __init__(
        self,
        x0,
        d,
        f: Objective,
        g: Optional[Gradient] = None,
    ) -> None:
        self.dtype = working_dtype(x0, d)
        self.real = self.dtype.type
        self.x0 = as_point(x0, self.dtype)
        self.d = as_point(d, self.dtype)
        check_same_shape(self.x0, self.d)
        self.f = f
        self.g = g
        self.nfev = 0
        self.njev = 0

    def point(self, a) -> Array:
        return step_point(self.x0, self.d, self.real(a))

    def value(self, a):
        self.nfev += 1
        return self.real(self.f(self.point(a)))

    def slope(self, a):
        if self.g is None:
            raise ValueError("this line search needs a gradient oracle")
        self.njev += 1
        grad = np.asarray(self.g(self.point(a)), dtype=self.dtype)
        return self.real(dot(grad, self.d))


__all__ = ["LineFunction"]
