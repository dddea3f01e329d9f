"""Decimal fixed-point value type over checked unsigned integers.

A FixedPoint represents the non-negative rational raw_value / 10^decimals.
The raw value is authoritative; integer_part and fractional_part are the
display decomposition computed once at construction.

All arithmetic runs through SafeInt, so results fail loudly:
- Overflow when a result exceeds the configured unsigned width
- Underflow when a subtraction would go negative
- DivisionByZero when a divisor is zero
- ScaleMismatch when two values with different decimals meet in a
  same-scale operation

Example (decimals = 2):
    price = FixedPoint.from_raw(250, 2)   # 2.50
    price.integer_part                    # 2
    price.fractional_part                 # 50
    price.add(100).raw_value              # 350
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from fixedpoint.constants import BASE
from fixedpoint.math.comparison import (
    Ordering,
    compare,
    compare_display,
    compare_numeric,
    require_same_scale,
)
from fixedpoint.math.digits import num_digits, pow10, validate_decimals
from fixedpoint.safe_int import DivisionByZero, S, SafeInt

__all__ = ["FixedPoint"]

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class FixedPoint:
    """Unsigned decimal fixed-point number with a per-value scale.

    Build values with the classmethod constructors (from_raw, zero, one,
    ratio) rather than the dataclass initializer; they keep the display
    fields consistent with raw_value.

    Attributes:
        raw_value: Scaled integer, raw_value = integer_part * 10^decimals + fractional_part
        decimals: Number of fractional digits (0..255)
        integer_part: raw_value // 10^decimals
        fractional_part: raw_value % 10^decimals
    """

    raw_value: int
    decimals: int
    integer_part: int
    fractional_part: int

    def __post_init__(self) -> None:
        validate_decimals(self.decimals)
        scale = pow10(self.decimals)
        for field_value in (self.raw_value, self.integer_part, self.fractional_part):
            S(field_value)
        if self.fractional_part >= scale:
            raise ValueError(
                f"fractional_part {self.fractional_part} must be below 10^{self.decimals}"
            )

    # --- Construction ---

    @classmethod
    def from_raw(cls, raw_value: int | SafeInt, decimals: int) -> FixedPoint:
        """Create from a raw scaled integer (canonical constructor).

        Args:
            raw_value: Integer already scaled by 10^decimals
            decimals: Number of fractional digits

        Raises:
            InvalidDecimals: If decimals is outside [0, 255]
            Overflow: If raw_value or 10^decimals exceeds UINT_MAX
            Underflow: If raw_value is negative
        """
        validate_decimals(decimals)
        integer_part, fractional_part = divmod(S(raw_value), pow10(decimals))
        return cls(
            raw_value=int(raw_value),
            decimals=decimals,
            integer_part=integer_part.value,
            fractional_part=fractional_part.value,
        )

    # Building from an unsigned int is the same decomposition
    from_uint = from_raw

    @classmethod
    def zero(cls, decimals: int) -> FixedPoint:
        """Create the value 0 at the given scale."""
        return cls.from_raw(0, decimals)

    @classmethod
    def one(cls, decimals: int) -> FixedPoint:
        """Create the value 1 (raw 10^decimals) at the given scale."""
        validate_decimals(decimals)
        return cls.from_raw(pow10(decimals), decimals)

    @classmethod
    def ratio(
        cls, numerator: int | SafeInt, denominator: int | SafeInt, decimals: int
    ) -> FixedPoint:
        """Create numerator / denominator truncated to decimals digits.

        Computes floor(numerator * 10^decimals / denominator).

        Raises:
            DivisionByZero: If denominator is zero
            Overflow: If numerator * 10^decimals exceeds UINT_MAX
        """
        validate_decimals(decimals)
        divisor = S(denominator)
        if not divisor:
            raise DivisionByZero(f"Division by zero: ratio({int(numerator)}, 0)")
        scaled = S(numerator) * pow10(decimals)
        return cls.from_raw(scaled // divisor, decimals)

    @classmethod
    def _build_display_only(
        cls, raw_value: int, integer_part: int, fractional_part: int, decimals: int
    ) -> FixedPoint:
        """Create a value whose display fields are NOT derived from raw_value.

        Only div_rounding uses this. The raw value is stored as given and the
        integer/fractional fields are whatever the caller computed, so
        to_raw() on the result does not match raw_value.
        """
        return cls(
            raw_value=raw_value,
            decimals=decimals,
            integer_part=integer_part,
            fractional_part=fractional_part,
        )

    # --- Conversion ---

    @property
    def scale(self) -> int:
        """The scale factor 10^decimals."""
        return pow10(self.decimals)

    def to_raw(self) -> int:
        """Reconstruct the scaled integer from the display fields."""
        return (S(self.integer_part) * self.scale + self.fractional_part).value

    def rescale(self, decimals: int) -> FixedPoint:
        """Return this value at another scale.

        Increasing decimals is exact. Decreasing decimals truncates the
        dropped digits.

        Raises:
            Overflow: If the rescaled raw value exceeds UINT_MAX
        """
        validate_decimals(decimals)
        if decimals >= self.decimals:
            raw = S(self.raw_value) * pow10(decimals - self.decimals)
        else:
            raw = S(self.raw_value) // pow10(self.decimals - decimals)
        return FixedPoint.from_raw(raw, decimals)

    # --- Arithmetic ---

    def _operand(self, other: FixedPoint | SafeInt | int, operation: str) -> int:
        if isinstance(other, FixedPoint):
            require_same_scale(self, other, operation)
            return other.raw_value
        return _scalar(other, operation)

    def add(self, other: FixedPoint | SafeInt | int) -> FixedPoint:
        """Add a raw scaled integer or a FixedPoint of the same scale.

        Raises:
            ScaleMismatch: If other is a FixedPoint with different decimals
            Overflow: If the sum exceeds UINT_MAX
        """
        raw = S(self.raw_value) + self._operand(other, "add")
        return FixedPoint.from_raw(raw, self.decimals)

    def sub(self, other: FixedPoint | SafeInt | int) -> FixedPoint:
        """Subtract a raw scaled integer or a FixedPoint of the same scale.

        Raises:
            ScaleMismatch: If other is a FixedPoint with different decimals
            Underflow: If the result would be negative
        """
        raw = S(self.raw_value) - self._operand(other, "sub")
        return FixedPoint.from_raw(raw, self.decimals)

    def add_decimal(self, other: FixedPoint) -> FixedPoint:
        """Add another FixedPoint of the same scale."""
        if not isinstance(other, FixedPoint):
            raise TypeError(f"add_decimal requires FixedPoint, got {type(other).__name__}")
        return self.add(other)

    def sub_decimal(self, other: FixedPoint) -> FixedPoint:
        """Subtract another FixedPoint of the same scale."""
        if not isinstance(other, FixedPoint):
            raise TypeError(f"sub_decimal requires FixedPoint, got {type(other).__name__}")
        return self.sub(other)

    def mul(self, scalar: SafeInt | int) -> FixedPoint:
        """Multiply the raw value by an integer scalar.

        Multiplying two FixedPoint values would apply the scale twice, so
        only scalars are accepted.

        Raises:
            TypeError: If scalar is a FixedPoint
            Overflow: If the product exceeds UINT_MAX
        """
        raw = S(self.raw_value) * _scalar(scalar, "mul")
        return FixedPoint.from_raw(raw, self.decimals)

    def div(self, scalar: SafeInt | int) -> FixedPoint:
        """Floor-divide the raw value by an integer scalar, discarding the remainder.

        Raises:
            TypeError: If scalar is a FixedPoint
            DivisionByZero: If scalar is zero
        """
        raw = S(self.raw_value) // _scalar(scalar, "div")
        return FixedPoint.from_raw(raw, self.decimals)

    def div_rounding(self, scalar: SafeInt | int) -> FixedPoint:
        """Divide by an integer scalar, keeping one digit of the remainder.

        The floor quotient becomes both raw_value and integer_part. When the
        division is inexact, the first decimal digit of remainder / scalar
        is fitted to the scale width and shown as fractional_part:
        - digit count equal to decimals: digit used as is
        - fewer digits than decimals: digit shifted left (zero padded)
        - more digits than decimals: digit shifted right (truncated)

        Only a single digit of the remainder is kept, so this approximates
        the quotient; it is not correctly rounded. The result is built with
        _build_display_only, so its to_raw() differs from raw_value.

        Raises:
            TypeError: If scalar is a FixedPoint
            DivisionByZero: If scalar is zero
            Overflow: If remainder * 10 exceeds UINT_MAX
        """
        divisor = _scalar(scalar, "div_rounding")
        quotient, remainder = divmod(S(self.raw_value), divisor)
        if not remainder:
            return FixedPoint.from_raw(quotient, self.decimals)

        digit = (remainder * BASE) // divisor
        digit_count = num_digits(digit)
        if digit_count == self.decimals:
            fraction = digit
        elif digit_count < self.decimals:
            fraction = digit * pow10(self.decimals - digit_count)
        else:
            fraction = digit // pow10(digit_count - self.decimals)

        logger.debug(
            "div_rounding_display_only",
            raw_value=self.raw_value,
            divisor=divisor,
            quotient=quotient.value,
            remainder_digit=digit.value,
            fractional_part=fraction.value,
        )
        return FixedPoint._build_display_only(
            raw_value=quotient.value,
            integer_part=quotient.value,
            fractional_part=fraction.value,
            decimals=self.decimals,
        )

    def pow(self, exponent: int) -> FixedPoint:
        """Raise the raw value to an integer power by repeated checked multiplication.

        This computes raw_value^exponent at the original decimals; the scale
        is not divided back out, so for exponent > 1 the effective scale
        drifts. Use pow_fixed for true fixed-point exponentiation.
        exponent == 0 returns one(decimals).

        Raises:
            ValueError: If exponent is negative
            Overflow: If the power exceeds UINT_MAX
        """
        exponent = _exponent(exponent)
        if exponent == 0:
            return FixedPoint.one(self.decimals)
        return FixedPoint.from_raw(S(self.raw_value) ** exponent, self.decimals)

    def pow_fixed(self, exponent: int) -> FixedPoint:
        """Raise the represented number to an integer power, truncated to decimals.

        Computes raw_value^exponent // 10^(decimals * (exponent - 1)), so
        (x / 10^d)^e keeps scale 10^d. The power is formed with checked
        multiplication before the scale is divided out.

        Raises:
            ValueError: If exponent is negative
            Overflow: If raw_value^exponent exceeds UINT_MAX
        """
        exponent = _exponent(exponent)
        if exponent == 0:
            return FixedPoint.one(self.decimals)
        power = S(self.raw_value) ** exponent
        if self.decimals == 0 or not power:
            return FixedPoint.from_raw(power, self.decimals)
        # 10^(d*(e-1)) may exceed UINT_MAX while the quotient still fits
        for _ in range(exponent - 1):
            power = power // self.scale
            if not power:
                break
        return FixedPoint.from_raw(power, self.decimals)

    # --- Predicates ---

    def is_zero(self) -> bool:
        """True if the raw value is zero."""
        return self.raw_value == 0

    def is_partial(self) -> bool:
        """True if the value lies strictly between 0 and 1."""
        return self.integer_part == 0 and self.fractional_part > 0

    # --- Same-scale comparison ---

    def compare(self, other: FixedPoint) -> Ordering:
        return compare(self, other)

    def equals(self, other: FixedPoint) -> bool:
        return compare(self, other) is Ordering.EQUAL

    def greater_than(self, other: FixedPoint) -> bool:
        return compare(self, other) is Ordering.ABOVE

    def less_than(self, other: FixedPoint) -> bool:
        return compare(self, other) is Ordering.BELOW

    def greater_than_or_equal_to(self, other: FixedPoint) -> bool:
        return compare(self, other) is not Ordering.BELOW

    def less_than_or_equal_to(self, other: FixedPoint) -> bool:
        return compare(self, other) is not Ordering.ABOVE

    # --- Cross-scale comparison on display fields (coarse) ---

    def equals_different(self, other: FixedPoint) -> bool:
        return compare_display(self, other) is Ordering.EQUAL

    def greater_than_different(self, other: FixedPoint) -> bool:
        return compare_display(self, other) is Ordering.ABOVE

    def less_than_different(self, other: FixedPoint) -> bool:
        return compare_display(self, other) is Ordering.BELOW

    def greater_than_or_equal_to_different(self, other: FixedPoint) -> bool:
        return compare_display(self, other) is not Ordering.BELOW

    def less_than_or_equal_to_different(self, other: FixedPoint) -> bool:
        return compare_display(self, other) is not Ordering.ABOVE

    # --- Cross-scale comparison on represented value (exact) ---

    def compare_numeric(self, other: FixedPoint) -> Ordering:
        return compare_numeric(self, other)

    # --- Operators ---

    def __add__(self, other: FixedPoint | SafeInt | int) -> FixedPoint:
        return self.add(other)

    def __radd__(self, other: SafeInt | int) -> FixedPoint:
        return self.add(other)

    def __sub__(self, other: FixedPoint | SafeInt | int) -> FixedPoint:
        return self.sub(other)

    def __mul__(self, other: SafeInt | int) -> FixedPoint:
        return self.mul(other)

    def __rmul__(self, other: SafeInt | int) -> FixedPoint:
        return self.mul(other)

    def __floordiv__(self, other: SafeInt | int) -> FixedPoint:
        return self.div(other)

    def __pow__(self, exponent: int) -> FixedPoint:
        return self.pow(exponent)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.less_than_or_equal_to(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return self.greater_than_or_equal_to(other)


def _scalar(value: object, operation: str) -> int:
    """Unwrap a raw integer operand, rejecting FixedPoint and other types."""
    if isinstance(value, FixedPoint):
        raise TypeError(
            f"{operation} takes a raw integer scalar, not FixedPoint (would apply the scale twice)"
        )
    if isinstance(value, SafeInt):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool):
        return S(value).value
    raise TypeError(f"{operation} requires int or SafeInt, got {type(value).__name__}")


def _exponent(exponent: int) -> int:
    if not isinstance(exponent, int) or isinstance(exponent, bool):
        raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return exponent
