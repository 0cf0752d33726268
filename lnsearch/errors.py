"""Error types raised by lnsearch.

Every error derives from :class:`LnsearchError`, itself a ``ValueError``, and
carries an :class:`ErrorKind` tag plus the structured context that caused it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence


class ErrorKind(Enum):
    """Closed set of failure categories."""

    INVALID_DIMENSION = "invalid_dimension"
    UNKNOWN_METHOD = "unknown_method"
    UNKNOWN_FUNCTION = "unknown_function"
    DIMENSION_MISMATCH = "dimension_mismatch"
    UNKNOWN_OPTION = "unknown_option"


class LnsearchError(ValueError):
    """Base class for lnsearch errors."""

    kind: ErrorKind


class InvalidDimension(LnsearchError):
    """A benchmark function received a point whose size it cannot handle."""

    kind = ErrorKind.INVALID_DIMENSION

    def __init__(self, name: str, expected: str, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = int(actual)
        super().__init__(f"{name}: n must be {expected}, got n={self.actual}")


class UnknownMethod(LnsearchError):
    """The dispatcher was asked for a line-search method it does not know."""

    kind = ErrorKind.UNKNOWN_METHOD

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"unknown line search method {name!r}; "
            f"expected one of {', '.join(self.available)}"
        )


class UnknownFunction(LnsearchError):
    """No benchmark function is registered under the requested name."""

    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"unknown benchmark function {name!r}; "
            f"expected one of {', '.join(self.available)}"
        )


class DimensionMismatch(LnsearchError):
    """Two vectors combined elementwise have different shapes."""

    kind = ErrorKind.DIMENSION_MISMATCH

    def __init__(self, expected: Sequence[int], actual: Sequence[int]) -> None:
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            f"dimension mismatch: expected shape {self.expected}, got {self.actual}"
        )


class UnknownOption(LnsearchError):
    """An option override names a field the method does not define."""

    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, method: str, key: str, allowed: Iterable[str] = ()) -> None:
        self.method = method
        self.key = key
        self.allowed = tuple(allowed)
        super().__init__(
            f"{method}: unknown option {key!r}; "
            f"recognized options are {', '.join(self.allowed)}"
        )


__all__ = [
    "DimensionMismatch",
    "ErrorKind",
    "InvalidDimension",
    "LnsearchError",
    "UnknownFunction",
    "UnknownMethod",
    "UnknownOption",
]
