"""Test helpers module for shared test utilities.

- constants: Reference values computed independently of the engine
"""

from tests.helpers.constants import (
    ONE_THIRD_RAY,
    ONE_THIRD_WAD,
    TWO_THIRDS_RAY,
    USDC_DECIMALS,
    reference_div_half_up,
    reference_mul_half_up,
)

__all__ = [
    "ONE_THIRD_RAY",
    "ONE_THIRD_WAD",
    "TWO_THIRDS_RAY",
    "USDC_DECIMALS",
    "reference_mul_half_up",
    "reference_div_half_up",
]
