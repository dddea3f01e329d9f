"""Comparison strategies for fixed-point values.

Three comparators answer different questions:
- compare: same-scale total order on raw values (ScaleMismatch otherwise)
- compare_display: lexicographic on (integer_part, fractional_part),
  ignoring scale. Coarse: 0.5 at 1 decimal and 0.05 at 2 decimals both have
  fractional_part 5 and compare EQUAL.
- compare_numeric: exact cross-scale order, rescaling both raw values to
  the larger scale first
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import structlog

from fixedpoint.errors import ScaleMismatch
from fixedpoint.math.digits import pow10

if TYPE_CHECKING:
    from fixedpoint.math.fixed_point import FixedPoint

logger = structlog.get_logger()


class Ordering(Enum):
    """Tri-state result of a three-way comparison."""

    BELOW = -1
    EQUAL = 0
    ABOVE = 1


def _order(left: int, right: int) -> Ordering:
    if left < right:
        return Ordering.BELOW
    if left > right:
        return Ordering.ABOVE
    return Ordering.EQUAL


def require_same_scale(a: FixedPoint, b: FixedPoint, operation: str) -> None:
    """Raise ScaleMismatch unless a and b share decimals."""
    if a.decimals != b.decimals:
        raise ScaleMismatch(a.decimals, b.decimals, operation)


def compare(a: FixedPoint, b: FixedPoint) -> Ordering:
    """Three-way compare of two values with identical decimals.

    Raises:
        ScaleMismatch: If decimals differ
    """
    require_same_scale(a, b, "compare")
    return _order(a.raw_value, b.raw_value)


def compare_display(a: FixedPoint, b: FixedPoint) -> Ordering:
    """Three-way compare on the display decomposition, across any scales.

    Compares integer_part first and fractional_part only on a tie. The
    fractional digits are not aligned to a common scale, so the result is
    not numerically sound when decimals differ.
    """
    if a.decimals != b.decimals:
        logger.debug(
            "cross_scale_display_compare",
            left_decimals=a.decimals,
            right_decimals=b.decimals,
        )
    ordering = _order(a.integer_part, b.integer_part)
    if ordering is not Ordering.EQUAL:
        return ordering
    return _order(a.fractional_part, b.fractional_part)


def compare_numeric(a: FixedPoint, b: FixedPoint) -> Ordering:
    """Three-way compare of the represented rationals, across any scales.

    Uses integer cross-multiplication: both raw values are brought to the
    larger of the two scales, so no precision is lost.
    """
    target = max(a.decimals, b.decimals)
    left = a.raw_value * pow10(target - a.decimals)
    right = b.raw_value * pow10(target - b.decimals)
    return _order(left, right)
