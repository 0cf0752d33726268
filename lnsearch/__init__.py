"""lnsearch - line searches and benchmark objectives for nonlinear optimization."""

__version__ = "0.1.0"

from .errors import (
    DimensionMismatch,
    ErrorKind,
    InvalidDimension,
    LnsearchError,
    UnknownFunction,
    UnknownMethod,
    UnknownOption,
)
from .functions import (
    FUNCTION_NAMES,
    BenchmarkFunction,
    BenchmarkKind,
    get_function,
    quadratic,
    quadratic_gradient,
    starting_point,
)
from .line_search import (
    METHODS,
    armijo,
    binary,
    cubic_interpolate,
    default_options,
    fixed_line_search,
    goldstein,
    line_search,
    strong_wolfe,
    wolfe,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "BenchmarkFunction",
    "BenchmarkKind",
    "DimensionMismatch",
    "ErrorKind",
    "FUNCTION_NAMES",
    "InvalidDimension",
    "LnsearchError",
    "METHODS",
    "UnknownFunction",
    "UnknownMethod",
    "UnknownOption",
    "armijo",
    "binary",
    "configure_logging",
    "cubic_interpolate",
    "default_options",
    "fixed_line_search",
    "get_function",
    "get_logger",
    "goldstein",
    "line_search",
    "quadratic",
    "quadratic_gradient",
    "set_log_level",
    "starting_point",
    "strong_wolfe",
    "wolfe",
]
