"""Error taxonomy for fixed-point arithmetic.

Checked-arithmetic failures come from the SafeInt collaborator and are
re-exported here so callers can branch on cause from one place:
- Overflow: result exceeds the configured unsigned width
- Underflow: subtraction would go negative
- DivisionByZero: divisor is zero
- ScaleMismatch: same-scale operation on values with different decimals
"""

from fixedpoint.safe_int import DivisionByZero, Overflow, SafeIntError, Underflow

__all__ = [
    "SafeIntError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "FixedPointError",
    "ScaleMismatch",
    "InvalidDecimals",
]


class FixedPointError(Exception):
    """Base error for FixedPoint value operations."""

    pass


class ScaleMismatch(FixedPointError, ValueError):
    """Two operands of a same-scale operation have different decimals."""

    def __init__(self, left: int, right: int, operation: str) -> None:
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Scale mismatch in {operation}: decimals {left} vs {right}")


class InvalidDecimals(FixedPointError, ValueError):
    """Decimals is not an unsigned 8-bit integer."""

    pass
