"""Vector primitives and shared type aliases.

Points and directions are one-dimensional NumPy arrays of a floating dtype.
``float32`` inputs stay ``float32``; anything else is promoted to
``float64``. Shape disagreements raise :class:`DimensionMismatch` instead of
broadcasting.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .errors import DimensionMismatch

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
Hessian = Callable[[Array], Array]


def as_point(x, dtype=None) -> Array:
    """Return ``x`` as a 1-D floating array without copying when possible.

    Raises :class:`DimensionMismatch` for anything that is not one-dimensional;
    a matrix or scalar is never flattened into a point.
    """
    arr = np.asarray(x)
    if dtype is None:
        dtype = arr.dtype if arr.dtype in (np.float32, np.float64) else np.float64
    arr = np.asarray(arr, dtype=dtype)
    if arr.ndim != 1:
        raise DimensionMismatch((arr.size,), arr.shape)
    return arr


def check_same_shape(u: Array, v: Array) -> None:
    if np.shape(u) != np.shape(v):
        raise DimensionMismatch(np.shape(u), np.shape(v))


def working_dtype(x0, d) -> np.dtype:
    """Common floating dtype in which a line search along ``d`` runs."""
    dtype = np.result_type(np.asarray(x0), np.asarray(d))
    if dtype == np.float32:
        return np.dtype(np.float32)
    return np.dtype(np.float64)


def step_point(x0: Array, d: Array, a) -> Array:
    """Trial point ``x0 + a * d`` as a new array."""
    check_same_shape(x0, d)
    return x0 + d * a


def dot(u: Array, v: Array):
    check_same_shape(u, v)
    return np.dot(u, v)


__all__ = [
    "Array",
    "Gradient",
    "Hessian",
    "Objective",
    "as_point",
    "check_same_shape",
    "dot",
    "step_point",
    "working_dtype",
]
