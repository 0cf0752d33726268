"""Name-based dispatch over the line-search methods."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Mapping, Optional

from ..errors import UnknownMethod
from ..linalg import Array, Gradient, Objective
from .backtracking import armijo
from .baselines import binary, fixed_line_search
from .bisection import goldstein
from .bracketing import strong_wolfe, wolfe
from .options import (
    ArmijoOptions,
    BinaryOptions,
    FixedStepOptions,
    GoldsteinOptions,
    StrongWolfeOptions,
    WolfeOptions,
    with_overrides,
)


@dataclass(frozen=True)
class _Method:
    options: type
    run: Callable[[Array, Array, Objective, Gradient, Any], Any]


_REGISTRY: dict[str, _Method] = {
    "armijo": _Method(
        ArmijoOptions, lambda x0, d, f, g, o: armijo(x0, d, f, g, **asdict(o))
    ),
    "wolfe": _Method(
        WolfeOptions, lambda x0, d, f, g, o: wolfe(x0, d, f, g, **asdict(o))
    ),
    "strong_wolfe": _Method(
        StrongWolfeOptions,
        lambda x0, d, f, g, o: strong_wolfe(x0, d, f, g, **asdict(o)),
    ),
    "goldstein": _Method(
        GoldsteinOptions, lambda x0, d, f, g, o: goldstein(x0, d, f, g, **asdict(o))
    ),
    "fixed_line_search": _Method(
        FixedStepOptions, lambda x0, d, f, g, o: fixed_line_search(o.initial_step)
    ),
    "binary": _Method(
        BinaryOptions, lambda x0, d, f, g, o: binary(x0, d, f, **asdict(o))
    ),
}

METHODS: tuple[str, ...] = tuple(_REGISTRY)


def _lookup(method_name: str) -> _Method:
    try:
        return _REGISTRY[method_name]
    except (KeyError, TypeError):
        raise UnknownMethod(str(method_name), METHODS) from None


def default_options(method_name: str):
    """Default option dataclass for ``method_name``."""
    return _lookup(method_name).options()


def resolve_options(
    method_name: str, option_overrides: Optional[Mapping[str, Any]] = None
):
    """Defaults for ``method_name`` with ``option_overrides`` applied."""
    return with_overrides(
        default_options(method_name), option_overrides, method_name
    )


def line_search(
    method_name: str,
    x0: Array,
    d: Array,
    f: Objective,
    g: Gradient,
    option_overrides: Optional[Mapping[str, Any]] = None,
):
    """Pick a step length along ``d`` from ``x0`` with the named method.

    Parameters
    ----------
    method_name:
        One of ``armijo``, ``wolfe``, ``strong_wolfe``, ``goldstein``,
        ``fixed_line_search`` or ``binary``.
    x0, d:
        Starting point and descent direction, same shape.
    f, g:
        Objective and gradient oracles.
    option_overrides:
        Option values replacing the method's defaults; keys not given keep
        their defaults.

    Raises
    ------
    UnknownMethod
        If ``method_name`` is not registered.
    UnknownOption
        If an override key is not an option of the method.
    """
    method = _lookup(method_name)
    opts = resolve_options(method_name, option_overrides)
    return method.run(x0, d, f, g, opts)


__all__ = ["METHODS", "default_options", "line_search", "resolve_options"]
