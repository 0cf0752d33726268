"""Logging utilities for lnsearch.

The line-search routines report accepted steps and interpolation fallbacks at
DEBUG level and iteration-cap exhaustion at WARNING level. Output goes to
stderr and stays out of the root logger unless configured otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_ROOT_NAME = "lnsearch"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level: int = logging.WARNING
_format: str = _DEFAULT_FORMAT
_stream: Optional[IO[str]] = None

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a cached logger namespaced under ``lnsearch``.

    Args:
        name: Logger name, typically ``__name__``. ``None`` returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from lnsearch.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("accepted step %g", 0.5)
    """
    if name is None or name == _ROOT_NAME:
        logger_name = _ROOT_NAME
    elif name.startswith(_ROOT_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT_NAME}.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        _attach_handler(logger)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every lnsearch logger, existing and future.

    Args:
        level: ``logging`` level constant or its name (``"DEBUG"``, ...).
            Unknown names fall back to WARNING.
    """
    global _level
    _level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Reconfigure level, format and output stream for lnsearch loggers.

    Existing loggers get a fresh handler; loggers created later pick up the
    same settings.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _level, _format, _stream
    _level = _resolve_level(level)
    _format = format_string if format_string is not None else _DEFAULT_FORMAT
    _stream = stream
    for logger in _loggers.values():
        _attach_handler(logger)


__all__ = ["configure_logging", "get_logger", "set_log_level"]
