"""Mathematical utilities for fixed-point values.

This package provides the decimal fixed-point primitives:
- FixedPoint: unsigned value type scaled by 10^decimals
- Ordering and the same-scale, display and numeric comparators
- num_digits / pow10 digit helpers
"""

from fixedpoint.math.comparison import Ordering, compare, compare_display, compare_numeric
from fixedpoint.math.digits import num_digits, pow10
from fixedpoint.math.fixed_point import FixedPoint

__all__ = [
    "FixedPoint",
    "Ordering",
    "compare",
    "compare_display",
    "compare_numeric",
    "num_digits",
    "pow10",
]
