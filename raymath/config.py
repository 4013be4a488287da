"""Configuration for the fixed-point engine."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Environment variable names
ENV_PRECISION = "RAYMATH_PRECISION"
ENV_BINOMIAL_TERMS = "RAYMATH_BINOMIAL_TERMS"


@dataclass(frozen=True)
class MathConfig:
    """Centralized configuration for fixed-point arithmetic.

    Holds the numeric parameters shared by every operator so tests can run
    the engine under alternative settings without touching global state.

    Attributes:
        precision: Minimum significant digits of the Decimal context
            (default: 1024). Operators widen it to fit their operands.
        default_decimals: Decimals used by amount conversions (default: 18)
        binomial_terms: Number of binomial coefficients used by
            binomial_compound (default: 5, matching the on-chain term budget)
        compound_result_decimals: Digits truncated off the RAY-scaled
            compound result (default: 9)
    """

    precision: int = 1024
    default_decimals: int = 18
    binomial_terms: int = 5
    compound_result_decimals: int = 9

    def __post_init__(self) -> None:
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.default_decimals < 0:
            raise ValueError(f"default_decimals must be non-negative, got {self.default_decimals}")
        if self.binomial_terms < 1:
            raise ValueError(f"binomial_terms must be at least 1, got {self.binomial_terms}")
        if self.compound_result_decimals < 0:
            raise ValueError(
                f"compound_result_decimals must be >= 0, got {self.compound_result_decimals}"
            )

    @classmethod
    def from_env(cls) -> MathConfig:
        """Build a config from environment variables with defaults.

        Configuration via environment variables:
        - RAYMATH_PRECISION: Decimal context precision (default: 1024)
        - RAYMATH_BINOMIAL_TERMS: Default binomial term count (default: 5)

        Raises:
            ValueError: If a variable is not an integer or fails validation
        """
        precision = int(os.environ.get(ENV_PRECISION, str(cls.precision)))
        binomial_terms = int(os.environ.get(ENV_BINOMIAL_TERMS, str(cls.binomial_terms)))
        return cls(precision=precision, binomial_terms=binomial_terms)


# Default configuration instance
DEFAULT_MATH_CONFIG = MathConfig()
