"""Pytest configuration and fixtures."""

import pytest
from structlog.testing import capture_logs

from fixedpoint.math.fixed_point import FixedPoint
from tests.helpers import CENTS


@pytest.fixture
def log_output():
    """Capture structlog events emitted during a test."""
    with capture_logs() as captured:
        yield captured


@pytest.fixture
def two_fifty() -> FixedPoint:
    """2.50 at two decimals."""
    return FixedPoint.from_raw(250, CENTS)


@pytest.fixture
def one_fifty() -> FixedPoint:
    """1.50 at two decimals."""
    return FixedPoint.from_raw(150, CENTS)
