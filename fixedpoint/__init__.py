"""Deterministic, overflow-checked decimal fixed-point arithmetic."""

from fixedpoint.config import DEFAULT_CONFIG, ArithmeticConfig
from fixedpoint.errors import (
    DivisionByZero,
    FixedPointError,
    InvalidDecimals,
    Overflow,
    SafeIntError,
    ScaleMismatch,
    Underflow,
)
from fixedpoint.math import (
    FixedPoint,
    Ordering,
    compare,
    compare_display,
    compare_numeric,
    num_digits,
)
from fixedpoint.safe_int import S, SafeInt

__version__ = "0.1.0"
__all__ = [
    "FixedPoint",
    "Ordering",
    "compare",
    "compare_display",
    "compare_numeric",
    "num_digits",
    "SafeInt",
    "S",
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
    "SafeIntError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "FixedPointError",
    "ScaleMismatch",
    "InvalidDecimals",
    "__version__",
]
