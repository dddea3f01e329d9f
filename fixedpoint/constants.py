"""Numeric limits for fixed-point values.

Centralizes the decimal-scale bounds and the configured integer width.
"""

from fixedpoint.config import DEFAULT_CONFIG

# Decimals are an unsigned 8-bit count of fractional digits
MIN_DECIMALS = 0
MAX_DECIMALS = 255

# Largest raw value (2^uint_bits - 1, uint256 unless overridden by env)
UINT_BITS = DEFAULT_CONFIG.uint_bits
UINT_MAX = DEFAULT_CONFIG.uint_max

# Radix of the decimal scale
BASE = 10
