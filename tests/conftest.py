"""
Shared pytest fixtures for the envspaces test suite.

Provides canonical seeds, a couple of ready-made boxes, and a guard that
restores stdlib/loguru logging state after tests that reconfigure sinks.
"""

import logging
import sys

import numpy as np
import pytest

from envspaces.core.constants import DEFAULT_TEST_SEEDS
from envspaces.spaces import Box


@pytest.fixture(params=DEFAULT_TEST_SEEDS)
def test_seed(request) -> int:
    return request.param


@pytest.fixture
def unit_box() -> Box:
    """A bounded 3-element float32 box in [-1, 1]."""
    return Box(low=-1.0, high=1.0, shape=(3,), dtype=np.float32, seed=42)


@pytest.fixture
def half_open_box() -> Box:
    """Bounded below everywhere, unbounded above in the last element."""
    return Box(
        low=np.array([0.0, 0.0, 0.0]),
        high=np.array([1.0, 2.0, np.inf]),
        dtype=np.float32,
        seed=7,
    )


@pytest.fixture
def restore_logging():
    """Restore root handlers and loguru sinks after a test reconfigures them."""
    from loguru import logger

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        yield
    finally:
        logger.remove()
        logger.add(sys.stderr)
        root.handlers = saved_handlers
        root.setLevel(saved_level)
