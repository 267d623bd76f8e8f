"""
Shared pytest fixtures and utilities for testing vecmat Components.

This module provides:
- Fixtures for comparing Components against expected values
- Fresh settings for configuration-sensitive tests
- Isolation of the library's logger and message policy
"""

import logging
from decimal import Decimal
from typing import Any, Sequence

import pytest

from vecmat.core.config import get_settings
from vecmat.math.component import Component
from vecmat.math.validation import ErrorMessages, set_error_messages


@pytest.fixture
def assert_components_close():
    """Helper to assert that a Component holds the expected values."""
    def _assert_close(component: Component, expected: Sequence[Any], tolerance: float = 1e-9) -> None:
        """
        Assert that the raw values of a Component match, within tolerance.

        Args:
            component: The Component under test
            expected: Expected values, flat and row-major for matrices
            tolerance: Absolute tolerance per value
        """
        values = component.get_raw_components()
        assert len(values) == len(expected), f"Expected {len(expected)} values, got {len(values)}"
        for index, (actual, wanted) in enumerate(zip(values, expected)):
            if isinstance(actual, Decimal):
                assert actual == Decimal(str(wanted)), f"Value {index}: {actual} != {wanted}"
            else:
                assert abs(float(actual) - float(wanted)) <= tolerance, f"Value {index}: {actual} != {wanted}"

    return _assert_close


@pytest.fixture
def fresh_settings():
    """Clear the cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_error_messages():
    """Restore the default message policy after each test."""
    yield
    set_error_messages(ErrorMessages())


@pytest.fixture
def vecmat_logger():
    """The package logger, restored to its original state after the test."""
    logger = logging.getLogger("vecmat")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
