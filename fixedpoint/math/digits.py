"""Decimal digit helpers for fixed-point scaling."""

from __future__ import annotations

from functools import lru_cache

from fixedpoint.constants import BASE, MAX_DECIMALS, MIN_DECIMALS
from fixedpoint.errors import InvalidDecimals
from fixedpoint.safe_int import S, SafeInt


def num_digits(n: int | SafeInt) -> int:
    """Count the decimal digits of a non-negative integer.

    Zero has no significant digits, so num_digits(0) == 0.

    Raises:
        ValueError: If n is negative
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"num_digits requires a non-negative integer, got {n}")
    count = 0
    while n > 0:
        n //= BASE
        count += 1
    return count


def validate_decimals(decimals: int) -> int:
    """Return decimals if it is an unsigned 8-bit count.

    Raises:
        InvalidDecimals: If decimals is not an int in [0, 255]
    """
    if not isinstance(decimals, int) or isinstance(decimals, bool):
        raise InvalidDecimals(f"decimals must be an int, got {type(decimals).__name__}")
    if not MIN_DECIMALS <= decimals <= MAX_DECIMALS:
        raise InvalidDecimals(
            f"decimals must be in [{MIN_DECIMALS}, {MAX_DECIMALS}], got {decimals}"
        )
    return decimals


@lru_cache(maxsize=None)
def pow10(exponent: int) -> int:
    """Compute 10^exponent with overflow checking.

    Raises:
        Overflow: If 10^exponent exceeds UINT_MAX
    """
    return (S(BASE) ** exponent).value
