"""Factory functions for creating test values.

Usage:
    from tests.helpers import make_fp

    price = make_fp(250)  # 2.50 at two decimals
"""

from fixedpoint.math.fixed_point import FixedPoint
from tests.helpers.constants import CENTS


def make_fp(raw_value: int, decimals: int = CENTS) -> FixedPoint:
    """Create a canonical FixedPoint from a raw scaled integer."""
    return FixedPoint.from_raw(raw_value, decimals)


def assert_normalized(value: FixedPoint) -> None:
    """Assert the display fields are derived from raw_value."""
    scale = 10**value.decimals
    assert value.fractional_part < scale
    assert value.raw_value == value.integer_part * scale + value.fractional_part
