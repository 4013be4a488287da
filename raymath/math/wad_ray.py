"""WAD/RAY/percentage fixed-point math.

Reproduces the WadRayMath and PercentageMath libraries of lending-protocol
contracts bit-for-bit. Every multiply and divide rounds half-up the way an
integer-only VM does:

    wad_mul(a, b) = (a * b + HALF_WAD) // WAD
    wad_div(a, b) = (a * WAD + b // 2) // b

The half-addend of a division is truncated first (b // 2) and only then is the
sum floor divided. These are two separate truncations and must not be merged
into a single rounding step: for odd divisors they differ from mathematical
round-half-up.

Values are Decimals tagged with a scale by convention only; see
raymath.math.scaled for wrapper types that enforce the scale.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from raymath.config import MathConfig
from raymath.constants import (
    HALF_PERCENT,
    HALF_RAY,
    HALF_WAD,
    HALF_WAD_RAY_RATIO,
    ONE_HUNDRED_PERCENT,
    RAY,
    WAD,
    WAD_RAY_RATIO,
)
from raymath.errors import DivisionByZero, NegativeValueError
from raymath.math.context import arithmetic, truncate
from raymath.math.conversion import RawValue, from_raw

__all__ = [
    "wad_mul",
    "wad_div",
    "ray_mul",
    "ray_div",
    "percent_mul",
    "percent_div",
    "wad_to_ray",
    "ray_to_wad",
    "half_wad",
    "half_ray",
    "half_percent",
]

logger = structlog.get_logger()


def _mul_half_up(
    a: RawValue,
    b: RawValue,
    scale: int,
    half_scale: int,
    config: MathConfig | None,
) -> Decimal:
    """(a * b + half_scale) // scale"""
    x, y = from_raw(a), from_raw(b)
    with arithmetic(config, x, y, scale):
        return (x * y + half_scale) // scale


def _div_half_up(
    a: RawValue,
    b: RawValue,
    scale: int,
    operation: str,
    config: MathConfig | None,
) -> Decimal:
    """(a * scale + b // 2) // b

    Raises:
        DivisionByZero: If b is zero
        NegativeValueError: If b is negative
    """
    numerator, divisor = from_raw(a), from_raw(b)
    with arithmetic(config, numerator, divisor, scale):
        if divisor.is_zero():
            logger.debug("fixed_point_division_by_zero", operation=operation, numerator=str(a))
            raise DivisionByZero(f"{operation}: division by zero ({a} / 0)")
        if divisor < 0:
            logger.debug("fixed_point_negative_divisor", operation=operation, divisor=str(divisor))
            raise NegativeValueError(f"{operation}: divisor must be non-negative, got {divisor}")

        half_divisor = divisor // 2
        return (numerator * scale + half_divisor) // divisor


def wad_mul(a: RawValue, b: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Multiply two wads, rounding half up to the nearest wad.

    Example:
        wad_mul(2 * WAD, 3 * WAD) == 6 * WAD
    """
    return _mul_half_up(a, b, WAD, HALF_WAD, config)


def wad_div(a: RawValue, b: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Divide two wads, rounding half up to the nearest wad.

    Raises:
        DivisionByZero: If b is zero
    """
    return _div_half_up(a, b, WAD, "wad_div", config)


def ray_mul(a: RawValue, b: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Multiply two rays, rounding half up to the nearest ray."""
    return _mul_half_up(a, b, RAY, HALF_RAY, config)


def ray_div(a: RawValue, b: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Divide two rays, rounding half up to the nearest ray.

    Example:
        ray_div(RAY, 3 * RAY) == 333333333333333333333333333

    Raises:
        DivisionByZero: If b is zero
    """
    return _div_half_up(a, b, RAY, "ray_div", config)


def percent_mul(
    value: RawValue,
    percentage: RawValue,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Apply a percentage (10000 = 100%) to value, rounding half up.

    Example:
        percent_mul(1000, 250) == 25  # 2.50% of 1000
    """
    return _mul_half_up(value, percentage, ONE_HUNDRED_PERCENT, HALF_PERCENT, config)


def percent_div(
    value: RawValue,
    percentage: RawValue,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Divide value by a percentage (10000 = 100%), rounding half up.

    Raises:
        DivisionByZero: If percentage is zero
    """
    return _div_half_up(value, percentage, ONE_HUNDRED_PERCENT, "percent_div", config)


def wad_to_ray(a: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Convert a wad to a ray. Exact for integer input since the ratio is integral."""
    value = from_raw(a)
    with arithmetic(config, value, WAD_RAY_RATIO):
        return truncate(value * WAD_RAY_RATIO)


def ray_to_wad(a: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Convert a ray to a wad, rounding half up: (a + 5e8) // 1e9"""
    value = from_raw(a)
    with arithmetic(config, value, WAD_RAY_RATIO):
        return (value + HALF_WAD_RAY_RATIO) // WAD_RAY_RATIO


def half_wad() -> Decimal:
    """HALF_WAD as a Decimal."""
    return Decimal(HALF_WAD)


def half_ray() -> Decimal:
    """HALF_RAY as a Decimal."""
    return Decimal(HALF_RAY)


def half_percent() -> Decimal:
    """HALF_PERCENT as a Decimal."""
    return Decimal(HALF_PERCENT)
