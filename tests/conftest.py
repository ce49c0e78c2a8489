"""Pytest configuration for all tests."""

import pytest

from diff_object_comparer import DiffObjectComparer
from diff_object_comparer.core.utils.logging import logger


@pytest.fixture
def comparer():
    """Create DiffObjectComparer instance with default configuration."""
    return DiffObjectComparer()


@pytest.fixture
def restore_logger():
    """Restore the package logger state changed by a test."""
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def clean_env(monkeypatch):
    """Remove comparer environment variables for the duration of a test."""
    for name in ("DIFF_COMPARER_ROOT_NAME", "DIFF_COMPARER_NULL_PLACEHOLDER", "DIFF_COMPARER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
