"""Per-method line-search options.

Each method has a frozen dataclass holding its tunable constants with the
defaults below. Caller overrides replace only the fields they name:

================= ============================================================
method            fields (default)
================= ============================================================
armijo            steepness (1e-4), initial_step (1), max_iter (None)
wolfe             steepness (1e-4), initial_step (1), sigma (0.9), xi (1e-3),
                  max_step (1e10), step_factor (10), max_iter (None)
strong_wolfe      as wolfe, with sigma (0.1)
goldstein         steepness (1e-4), initial_step (1), gamma (1.1),
                  max_iter (52)
fixed_line_search initial_step (1)
binary            initial_step (1), max_iter (None)
================= ============================================================

``max_iter=None`` leaves a search unbounded.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, TypeVar

from ..errors import UnknownOption

OptionsT = TypeVar("OptionsT")


def _check_steepness(steepness: float) -> None:
    if not (0 < steepness < 1):
        raise ValueError(f"steepness must lie in (0, 1), got {steepness}.")


def _check_initial_step(initial_step: float) -> None:
    if not initial_step > 0:
        raise ValueError(f"initial_step must be positive, got {initial_step}.")


def _check_max_iter(max_iter: Optional[int]) -> None:
    if max_iter is not None and max_iter < 1:
        raise ValueError(f"max_iter must be >= 1 or None, got {max_iter}.")


@dataclass(frozen=True)
class ArmijoOptions:
    """Options for Armijo backtracking."""

    steepness: float = 1e-4
    initial_step: float = 1.0
    max_iter: Optional[int] = None

    def __post_init__(self) -> None:
        _check_steepness(self.steepness)
        _check_initial_step(self.initial_step)
        _check_max_iter(self.max_iter)


@dataclass(frozen=True)
class WolfeOptions:
    """Options for the weak Wolfe bracket-and-zoom search.

    ``sigma`` is the curvature constant, ``xi`` the relative tolerance below
    which zoom stops for lack of progress, and each bracketing round grows
    the step by ``step_factor`` up to ``max_step``.
    """

    steepness: float = 1e-4
    initial_step: float = 1.0
    sigma: float = 0.9
    xi: float = 1e-3
    max_step: float = 1e10
    step_factor: float = 10.0
    max_iter: Optional[int] = None

    def __post_init__(self) -> None:
        _check_steepness(self.steepness)
        _check_initial_step(self.initial_step)
        if not (self.steepness < self.sigma < 1):
            raise ValueError(
                f"Require steepness < sigma < 1, got steepness={self.steepness}, "
                f"sigma={self.sigma}."
            )
        if self.xi < 0:
            raise ValueError(f"xi must be non-negative, got {self.xi}.")
        if not self.max_step > 0:
            raise ValueError(f"max_step must be positive, got {self.max_step}.")
        if not self.step_factor > 1:
            raise ValueError(f"step_factor must exceed 1, got {self.step_factor}.")
        _check_max_iter(self.max_iter)


@dataclass(frozen=True)
class StrongWolfeOptions(WolfeOptions):
    """Options for the strong Wolfe search; only the ``sigma`` default differs."""

    sigma: float = 0.1


@dataclass(frozen=True)
class GoldsteinOptions:
    """Options for the Goldstein search. ``gamma`` is the expansion factor."""

    steepness: float = 1e-4
    initial_step: float = 1.0
    gamma: float = 1.1
    max_iter: int = 52

    def __post_init__(self) -> None:
        _check_steepness(self.steepness)
        _check_initial_step(self.initial_step)
        if not self.gamma > 1:
            raise ValueError(f"gamma must exceed 1, got {self.gamma}.")
        if self.max_iter is None or self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}.")


@dataclass(frozen=True)
class FixedStepOptions:
    initial_step: float = 1.0


@dataclass(frozen=True)
class BinaryOptions:
    initial_step: float = 1.0
    max_iter: Optional[int] = None

    def __post_init__(self) -> None:
        _check_initial_step(self.initial_step)
        _check_max_iter(self.max_iter)


def with_overrides(
    options: OptionsT, overrides: Optional[Mapping[str, Any]], method: str
) -> OptionsT:
    """Return ``options`` with the fields named in ``overrides`` replaced.

    Raises:
        UnknownOption: If a key is not a field of ``options``.
    """
    if not overrides:
        return options
    allowed = [f.name for f in fields(options)]
    for key in overrides:
        if key not in allowed:
            raise UnknownOption(method, key, allowed)
    return replace(options, **dict(overrides))


__all__ = [
    "ArmijoOptions",
    "BinaryOptions",
    "FixedStepOptions",
    "GoldsteinOptions",
    "StrongWolfeOptions",
    "WolfeOptions",
    "with_overrides",
]
