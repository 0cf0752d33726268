"""Benchmark function container and registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

import numpy as np

from ..errors import InvalidDimension, UnknownFunction
from ..linalg import Array, as_point
from . import library as lib


class BenchmarkKind(Enum):
    """One tag per registered benchmark function."""

    EXTENDED_PSC1 = "extended_psc1"
    FULL_HESSIAN_FH2 = "full_hessian_fh2"
    EXTENDED_QP2 = "extended_qp2"
    PP_QUAD = "pp_quad"
    EXPLIN1 = "explin1"


def _require_positive(name: str, n: int) -> None:
    if n <= 0:
        raise InvalidDimension(name, "positive", n)


def _require_even_positive(name: str, n: int) -> None:
    if n <= 0 or n % 2:
        raise InvalidDimension(name, "even and positive", n)


@dataclass(frozen=True)
class BenchmarkFunction:
    """Objective, gradient, Hessian and canonical start point of one function.

    All four entry points validate the dimension first and raise
    :class:`~lnsearch.errors.InvalidDimension` when it is unsupported.
    """

    kind: BenchmarkKind
    _value: Callable[[Array], float]
    _gradient: Callable[[Array], Array]
    _hessian: Callable[[Array], Array]
    _start: Callable[..., Array]
    _check: Callable[[str, int], None] = _require_positive

    @property
    def name(self) -> str:
        return self.kind.value

    def _point(self, x) -> Array:
        x = as_point(x)
        self._check(self.name, x.size)
        return x

    def value(self, x) -> float:
        return self._value(self._point(x))

    def gradient(self, x) -> Array:
        return self._gradient(self._point(x))

    def hessian(self, x) -> Array:
        return self._hessian(self._point(x))

    def start_point(self, n: int, dtype=np.float64) -> Array:
        self._check(self.name, int(n))
        return self._start(int(n), dtype=dtype)

    def __call__(self, x) -> float:
        return self.value(x)


_REGISTRY: dict[BenchmarkKind, BenchmarkFunction] = {
    BenchmarkKind.EXTENDED_PSC1: BenchmarkFunction(
        BenchmarkKind.EXTENDED_PSC1,
        lib.extended_psc1_value,
        lib.extended_psc1_gradient,
        lib.extended_psc1_hessian,
        lib.extended_psc1_start,
        _require_even_positive,
    ),
    BenchmarkKind.FULL_HESSIAN_FH2: BenchmarkFunction(
        BenchmarkKind.FULL_HESSIAN_FH2,
        lib.full_hessian_fh2_value,
        lib.full_hessian_fh2_gradient,
        lib.full_hessian_fh2_hessian,
        lib.full_hessian_fh2_start,
    ),
    BenchmarkKind.EXTENDED_QP2: BenchmarkFunction(
        BenchmarkKind.EXTENDED_QP2,
        lib.extended_qp2_value,
        lib.extended_qp2_gradient,
        lib.extended_qp2_hessian,
        lib.extended_qp2_start,
    ),
    BenchmarkKind.PP_QUAD: BenchmarkFunction(
        BenchmarkKind.PP_QUAD,
        lib.pp_quad_value,
        lib.pp_quad_gradient,
        lib.pp_quad_hessian,
        lib.pp_quad_start,
    ),
    BenchmarkKind.EXPLIN1: BenchmarkFunction(
        BenchmarkKind.EXPLIN1,
        lib.explin1_value,
        lib.explin1_gradient,
        lib.explin1_hessian,
        lib.explin1_start,
    ),
}

FUNCTION_NAMES: tuple[str, ...] = tuple(kind.value for kind in BenchmarkKind)


def get_function(name: str | BenchmarkKind) -> BenchmarkFunction:
    """Look up a benchmark function by name or tag.

    Raises:
        UnknownFunction: If ``name`` is not registered.
    """
    if isinstance(name, BenchmarkKind):
        return _REGISTRY[name]
    try:
        kind = BenchmarkKind(name)
    except ValueError:
        raise UnknownFunction(str(name), FUNCTION_NAMES) from None
    return _REGISTRY[kind]


def function(name: str) -> Callable[[Array], float]:
    return get_function(name).value


def gradient(name: str) -> Callable[[Array], Array]:
    return get_function(name).gradient


def hessian(name: str) -> Callable[[Array], Array]:
    return get_function(name).hessian


def starting_point(name: str, n: int, dtype=np.float64) -> Array:
    return get_function(name).start_point(n, dtype=dtype)


__all__ = [
    "BenchmarkFunction",
    "BenchmarkKind",
    "FUNCTION_NAMES",
    "function",
    "get_function",
    "gradient",
    "hessian",
    "starting_point",
]
