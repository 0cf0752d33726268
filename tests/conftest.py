"""Pytest configuration and shared fixtures for lnsearch tests.

This module provides:
- A deterministic numpy RNG fixture
- A counting oracle wrapper used to check evaluation counts
- A fixture that captures lnsearch log output
"""

import logging
import os
from io import StringIO
from typing import Callable, Iterator

import numpy as np
import pytest

from lnsearch.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


class CountingOracle:
    """Wrap a callable and count how often it is evaluated."""

    def __init__(self, fn: Callable) -> None:
        self.fn = fn
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.fn(x)


@pytest.fixture
def counting() -> Callable[[Callable], CountingOracle]:
    return CountingOracle


@pytest.fixture
def log_stream() -> Iterator[StringIO]:
    """Route lnsearch logs at DEBUG level into a StringIO for the test."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        yield stream
    finally:
        configure_logging(level=logging.WARNING)
