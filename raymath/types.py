"""Shared pydantic types for models that carry fixed-point values.

Simulation fixtures are usually loaded from JSON where large integers arrive
as decimal strings. These annotated types validate and normalize them at the
model boundary.

Usage:
    class ReserveState(BaseModel):
        liquidity_index: ScaledValue
        total_supply: Uint256
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator

from raymath.errors import Uint256Overflow
from raymath.math.conversion import from_raw, to_uint256


def validate_scaled_value(value: Any) -> Decimal:
    """Validate a raw scaled value (int, decimal string, float or Decimal).

    Raises:
        ValueError: If value is not a finite decimal number
    """
    try:
        return from_raw(value)
    except TypeError as err:
        raise ValueError(str(err)) from err


def validate_uint256(value: Any) -> int:
    """Validate that a value fits in uint256.

    Strings must be decimal integers; fractional values are rejected rather
    than truncated.

    Raises:
        ValueError: If value is not an integer within uint256 range
    """
    try:
        scaled = from_raw(value)
    except TypeError as err:
        raise ValueError(str(err)) from err
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Uint256 must be an integer: {value}")
    try:
        return to_uint256(scaled)
    except Uint256Overflow as err:
        raise ValueError(str(err)) from err


# Arbitrary-precision decimal with no implied scale
ScaledValue = Annotated[Decimal, BeforeValidator(validate_scaled_value)]

# 256-bit unsigned integer (accepts int or decimal string)
Uint256 = Annotated[int, BeforeValidator(validate_uint256)]
