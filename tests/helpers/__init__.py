"""Test helpers module for shared test utilities.

- constants: common decimal scales
- factories: FixedPoint factory and invariant assertions
"""

from tests.helpers.constants import CENTS, MILLIS, WEI
from tests.helpers.factories import assert_normalized, make_fp

__all__ = [
    "CENTS",
    "MILLIS",
    "WEI",
    "assert_normalized",
    "make_fp",
]
