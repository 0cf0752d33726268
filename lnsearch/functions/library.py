"""Closed-form benchmark objectives with gradients and Hessians.

The functions come from the unconstrained test set of Andrei, *An
Unconstrained Optimization Test Functions Collection* (2008). Each is defined
for every positive dimension ``n`` (``extended_psc1`` additionally requires an
even ``n``). Below, ``S_i = x_0 + ... + x_i`` denotes the prefix sums.

These helpers assume the dimension has already been validated; the public
entry points live on :class:`lnsearch.functions.core.BenchmarkFunction`.
"""

from __future__ import annotations

import numpy as np

from ..linalg import Array


def _suffix_sum(v: Array) -> Array:
    """``out[j] = v[j] + v[j+1] + ... + v[n-1]``."""
    return np.ascontiguousarray(np.cumsum(v[::-1])[::-1])


def _max_index_matrix(n: int) -> Array:
    idx = np.arange(n)
    return np.maximum.outer(idx, idx)


def quadratic(x: Array) -> float:
    """Plain ``‖x‖²``, handy as a sanity oracle."""
    return float(np.dot(x, x))


def quadratic_gradient(x: Array) -> Array:
    return 2.0 * np.asarray(x)


# Extended PSC1
# f = sum over pairs (a, b) of (a² + ab + b²)² + sin²(a) + cos²(b)


def extended_psc1_value(x: Array) -> float:
    a, b = x[0::2], x[1::2]
    t = a * a + b * b + a * b
    return float(np.sum(t * t + np.sin(a) ** 2 + np.cos(b) ** 2))


def extended_psc1_gradient(x: Array) -> Array:
    a, b = x[0::2], x[1::2]
    t = a * a + b * b + a * b
    grad = np.empty_like(x)
    grad[0::2] = 2 * t * (2 * a + b) + 2 * np.sin(a) * np.cos(a)
    grad[1::2] = 2 * t * (2 * b + a) - 2 * np.cos(b) * np.sin(b)
    return grad


def extended_psc1_hessian(x: Array) -> Array:
    n = x.size
    a, b = x[0::2], x[1::2]
    t = a * a + a * b + b * b
    hess = np.zeros((n, n), dtype=x.dtype)
    even = np.arange(0, n, 2)
    odd = even + 1
    hess[even, even] = (
        2 * (2 * a + b) ** 2 + 4 * t + 2 * np.cos(a) ** 2 - 2 * np.sin(a) ** 2
    )
    cross = 2 * (2 * a + b) * (a + 2 * b) + 2 * t
    hess[even, odd] = cross
    hess[odd, even] = cross
    hess[odd, odd] = (
        2 * (a + 2 * b) ** 2 + 4 * t - 2 * np.cos(b) ** 2 + 2 * np.sin(b) ** 2
    )
    return hess


def extended_psc1_start(n: int, dtype=np.float64) -> Array:
    x = np.empty(n, dtype=dtype)
    x[0::2] = 3.0
    x[1::2] = 0.1
    return x


# Full Hessian FH2
# f = (x_0 - 5)² + sum_{i>=1} (S_i - 1)²


def full_hessian_fh2_value(x: Array) -> float:
    s = np.cumsum(x)
    return float((x[0] - 5) ** 2 + np.sum((s[1:] - 1) ** 2))


def full_hessian_fh2_gradient(x: Array) -> Array:
    # Treat the first term as (S_0 - 1)² and correct for the 5 afterwards.
    grad = _suffix_sum(2 * (np.cumsum(x) - 1))
    grad[0] -= 8
    return grad


def full_hessian_fh2_hessian(x: Array) -> Array:
    n = x.size
    return (2 * (n - _max_index_matrix(n))).astype(x.dtype)


def full_hessian_fh2_start(n: int, dtype=np.float64) -> Array:
    return np.full(n, 0.01, dtype=dtype)


# Extended quadratic penalty QP2
# f = sum_{i<n-1} (x_i² - sin x_i)² + (sum x_i² - 100)²


def extended_qp2_value(x: Array) -> float:
    head = x[:-1]
    penalty = np.dot(x, x) - 100
    return float(np.sum((head * head - np.sin(head)) ** 2) + penalty * penalty)


def extended_qp2_gradient(x: Array) -> Array:
    head = x[:-1]
    grad = 4 * x * (np.dot(x, x) - 100)
    grad[:-1] += 2 * (2 * head - np.cos(head)) * (head * head - np.sin(head))
    return grad


def extended_qp2_hessian(x: Array) -> Array:
    penalty = np.dot(x, x) - 100
    hess = 8 * np.outer(x, x)
    hess[np.diag_indices_from(hess)] += 4 * penalty
    head = x[:-1]
    idx = np.arange(head.size)
    hess[idx, idx] += 2 * (2 * head - np.cos(head)) ** 2 + 2 * (
        head * head - np.sin(head)
    ) * (2 + np.sin(head))
    return hess


def extended_qp2_start(n: int, dtype=np.float64) -> Array:
    return np.full(n, 0.5, dtype=dtype)


# Partial perturbed quadratic
# f = x_0² + sum_i [(i + 1) x_i² + S_i² / 100]


def pp_quad_value(x: Array) -> float:
    s = np.cumsum(x)
    weights = np.arange(1, x.size + 1)
    return float(x[0] ** 2 + np.sum(weights * x * x) + np.dot(s, s) / 100)


def pp_quad_gradient(x: Array) -> Array:
    weights = np.arange(1, x.size + 1)
    grad = _suffix_sum(2 * np.cumsum(x)) / 100 + 2 * weights * x
    grad[0] += 2 * x[0]
    return grad


def pp_quad_hessian(x: Array) -> Array:
    n = x.size
    hess = 2.0 * (n - _max_index_matrix(n))
    hess[np.diag_indices(n)] += 200.0 * np.arange(1, n + 1)
    hess[0, 0] += 200.0
    return (hess / 100).astype(x.dtype)


def pp_quad_start(n: int, dtype=np.float64) -> Array:
    return np.full(n, 0.5, dtype=dtype)


# EXPLIN1
# f = sum_{i<n-1} exp(x_i x_{i+1} / 10) - sum_i 10 (i + 1) x_i


def explin1_value(x: Array) -> float:
    weights = np.arange(1, x.size + 1)
    return float(np.sum(np.exp(0.1 * x[:-1] * x[1:])) - 10 * np.dot(weights, x))


def explin1_gradient(x: Array) -> Array:
    left, right = x[:-1], x[1:]
    e = np.exp(0.1 * left * right)
    grad = -10.0 * np.arange(1, x.size + 1, dtype=x.dtype)
    grad[:-1] += e * right / 10
    grad[1:] += e * left / 10
    return grad


def explin1_hessian(x: Array) -> Array:
    n = x.size
    left, right = x[:-1], x[1:]
    e = np.exp(0.1 * left * right)
    hess = np.zeros((n, n), dtype=x.dtype)
    idx = np.arange(n - 1)
    hess[idx, idx] += right * right * e
    hess[idx + 1, idx + 1] += left * left * e
    off = (10 + left * right) * e
    hess[idx, idx + 1] = off
    hess[idx + 1, idx] = off
    return hess / 100


def explin1_start(n: int, dtype=np.float64) -> Array:
    return np.zeros(n, dtype=dtype)


__all__ = [
    "explin1_gradient",
    "explin1_hessian",
    "explin1_start",
    "explin1_value",
    "extended_psc1_gradient",
    "extended_psc1_hessian",
    "extended_psc1_start",
    "extended_psc1_value",
    "extended_qp2_gradient",
    "extended_qp2_hessian",
    "extended_qp2_start",
    "extended_qp2_value",
    "full_hessian_fh2_gradient",
    "full_hessian_fh2_hessian",
    "full_hessian_fh2_start",
    "full_hessian_fh2_value",
    "pp_quad_gradient",
    "pp_quad_hessian",
    "pp_quad_start",
    "pp_quad_value",
    "quadratic",
    "quadratic_gradient",
]
