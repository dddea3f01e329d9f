"""Arithmetic configuration for fixed-point values."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import structlog

logger = structlog.get_logger()

# Environment variable selecting the unsigned integer width
UINT_BITS_ENV = "FIXEDPOINT_UINT_BITS"

DEFAULT_UINT_BITS = 256


@dataclass(frozen=True)
class ArithmeticConfig:
    """Configuration for the checked unsigned integer backing FixedPoint.

    Attributes:
        uint_bits: Width of the unsigned integer holding raw values
            (default: 256). Must be a positive multiple of 8.
    """

    uint_bits: int = DEFAULT_UINT_BITS

    def __post_init__(self) -> None:
        if not isinstance(self.uint_bits, int) or isinstance(self.uint_bits, bool):
            raise ValueError(f"uint_bits must be an int, got {type(self.uint_bits).__name__}")
        if self.uint_bits <= 0 or self.uint_bits % 8 != 0:
            raise ValueError(f"uint_bits must be a positive multiple of 8, got {self.uint_bits}")

    @property
    def uint_max(self) -> int:
        """Largest representable raw value."""
        return 2**self.uint_bits - 1

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ArithmeticConfig:
        """Build a config from environment variables.

        Configuration via environment variables:
        - FIXEDPOINT_UINT_BITS: unsigned integer width (default: 256)

        Raises:
            ValueError: If the variable is not a positive multiple of 8
        """
        env = os.environ if environ is None else environ
        raw_bits = env.get(UINT_BITS_ENV)
        if raw_bits is None or raw_bits.strip() == "":
            config = cls()
        else:
            try:
                bits = int(raw_bits)
            except ValueError as err:
                raise ValueError(f"{UINT_BITS_ENV} must be an integer: '{raw_bits}'") from err
            config = cls(uint_bits=bits)

        logger.debug("arithmetic_config_loaded", uint_bits=config.uint_bits)
        return config


# Default configuration instance, read once at import
DEFAULT_CONFIG = ArithmeticConfig.from_env()
