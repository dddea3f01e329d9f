"""Shared scale constants for tests.

Usage:
    from tests.helpers import CENTS, MILLIS
"""

# Common decimal scales
CENTS = 2  # 0.01 resolution
MILLIS = 3  # 0.001 resolution
WEI = 18  # 1e-18 resolution (ERC-20 style)
