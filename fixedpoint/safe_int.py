"""Checked unsigned integer wrapper for raw fixed-point values.

This module provides SafeInt, a lightweight wrapper that makes arithmetic
on unsigned integers fail loudly instead of wrapping:
- Addition, multiplication and powers above UINT_MAX raise Overflow
- Subtraction below zero raises Underflow
- Division or modulo by zero raises DivisionByZero

Usage pattern:
    from fixedpoint.safe_int import SafeInt, S

    def scaled_quotient(a: int, b: int, scale: int) -> int:
        # Wrap at entry
        sa, sb = S(a), S(b)

        # Natural arithmetic - automatically checked
        result = (sa * scale) // sb  # Raises if sb == 0 or the product overflows
        return result.value
"""

from __future__ import annotations

from fixedpoint.constants import UINT_BITS, UINT_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division or modulo by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class Overflow(SafeIntError):
    """Result exceeds the unsigned integer maximum."""

    pass


class SafeInt:
    """Unsigned integer with checked arithmetic operations.

    Wraps a non-negative integer no larger than UINT_MAX and provides
    arithmetic operators that raise descriptive errors instead of producing
    invalid results:
    - Results above UINT_MAX raise Overflow
    - Negative results from subtraction raise Underflow
    - Division by zero raises DivisionByZero

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Args:
            value: Integer value to wrap, or SafeInt to copy

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            Overflow: If value exceeds UINT_MAX
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("SafeInt requires int, got bool")
        elif isinstance(value, int):
            self._value = _check_range(value)
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            Overflow: If result exceeds UINT_MAX
        """
        other_val = _extract_value(other)
        result = self._value + other_val
        if result > UINT_MAX:
            raise Overflow(f"Overflow: {self._value} + {other_val} exceeds uint{UINT_BITS}")
        return SafeInt(result)

    def __radd__(self, other: int) -> SafeInt:
        return self.__add__(other)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        """Subtract self from other (other - self).

        Raises:
            Underflow: If result would be negative
        """
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If result exceeds UINT_MAX
        """
        other_val = _extract_value(other)
        result = self._value * other_val
        if result > UINT_MAX:
            raise Overflow(f"Overflow: {self._value} * {other_val} exceeds uint{UINT_BITS}")
        return SafeInt(result)

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        """Integer division (other // self).

        Raises:
            DivisionByZero: If self is zero
        """
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    def __mod__(self, other: SafeInt | int) -> SafeInt:
        """Modulo operation.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return SafeInt(self._value % other_val)

    def __rmod__(self, other: int) -> SafeInt:
        """Modulo operation (other % self).

        Raises:
            DivisionByZero: If self is zero
        """
        if self._value == 0:
            raise DivisionByZero(f"Modulo by zero: {other} % 0")
        return SafeInt(other % self._value)

    def __divmod__(self, other: SafeInt | int) -> tuple[SafeInt, SafeInt]:
        """Quotient and remainder in one step.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: divmod({self._value}, 0)")
        quotient, remainder = divmod(self._value, other_val)
        return SafeInt(quotient), SafeInt(remainder)

    def __pow__(self, exponent: int) -> SafeInt:
        """Raise to a non-negative integer power.

        Raises:
            ValueError: If exponent is negative
            Overflow: If result exceeds UINT_MAX
        """
        exponent = _extract_value(exponent)
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        if exponent == 0:
            return SafeInt(1)
        if self._value <= 1:
            return SafeInt(self._value)
        result = SafeInt(1)
        for _ in range(exponent):
            result = result * self
        return result

    def __truediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division, use floor division (//)")

    def __rtruediv__(self, other: object) -> SafeInt:
        raise TypeError("SafeInt does not support true division, use floor division (//)")

    def __pos__(self) -> SafeInt:
        """Unary positive (returns self)."""
        return self

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        """Convert to int."""
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        """Support use in slices and as array index."""
        return self._value


def _check_range(value: int) -> int:
    """Validate an int against the unsigned range."""
    if value < 0:
        raise Underflow(f"Negative value cannot be unsigned: {value}")
    if value > UINT_MAX:
        raise Overflow(f"Value exceeds uint{UINT_BITS} max: {value}")
    return value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    raise TypeError(f"SafeInt operand must be int or SafeInt, got {type(x).__name__}")


# Convenience alias for concise code
S = SafeInt
