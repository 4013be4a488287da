"""Construction and decimals conversion for scaled values.

Values are plain Decimals; the scale (wad, ray, percentage, token decimals)
is tracked by the caller. Conversions truncate toward zero exactly where an
integer-only contract would.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import structlog

from raymath.config import DEFAULT_MATH_CONFIG, MathConfig
from raymath.constants import MAX_UINT256, PERCENTAGE_FACTOR, RAY, WAD
from raymath.errors import InvalidScale, Uint256Overflow
from raymath.math.context import arithmetic, truncate, truncate_places

__all__ = [
    "RawValue",
    "from_raw",
    "to_integer_amount",
    "from_integer_amount",
    "to_human_string",
    "to_ray_amount",
    "from_ray_amount",
    "ray",
    "wad",
    "percent",
    "amount",
    "to_int_string",
    "to_uint256",
]

logger = structlog.get_logger()

# Inputs accepted wherever a scaled value is expected
RawValue = int | str | float | Decimal

RAY_DECIMALS = 27


def from_raw(value: RawValue) -> Decimal:
    """Wrap a raw value as a Decimal without scaling.

    Args:
        value: int, decimal string, Decimal, or float. Floats go through their
            shortest repr, so 1.5 becomes exactly Decimal("1.5").

    Returns:
        The value as a finite Decimal

    Raises:
        TypeError: If value is not one of the accepted types (bool included)
        ValueError: If a string is not a decimal number, or value is NaN/Infinity
    """
    if isinstance(value, bool):
        raise TypeError("Scaled value cannot be a bool")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Scaled value must be finite, got {value}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as err:
            raise ValueError(f"Scaled value must be a decimal string: '{value}'") from err
    else:
        raise TypeError(
            f"Scaled value must be int, str, float or Decimal, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise ValueError(f"Scaled value must be finite, got {result}")
    return result


def _check_decimals(decimals: int, name: str = "decimals") -> int:
    """Validate a decimals argument.

    Raises:
        InvalidScale: If decimals is not a non-negative int
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidScale(f"{name} must be an int, got {type(decimals).__name__}")
    if decimals < 0:
        logger.debug("fixed_point_invalid_scale", argument=name, decimals=decimals)
        raise InvalidScale(f"{name} must be non-negative, got {decimals}")
    return decimals


def _plain(value: Decimal) -> Decimal:
    """Strip trailing fractional zeros, keeping integers at exponent 0."""
    if value == value.to_integral_value():
        return value.quantize(Decimal(1))
    return value.normalize()


def to_integer_amount(
    value: RawValue,
    decimals: int | None = None,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Scale a human number up to an integer amount.

    Computes value * 10^decimals, truncated toward zero.

    Example:
        to_integer_amount(1.5, 6) == 1500000

    Args:
        value: Human-readable number
        decimals: Token decimals (default: config.default_decimals, i.e. 18)
        config: Engine configuration

    Raises:
        InvalidScale: If decimals is negative
    """
    cfg = config or DEFAULT_MATH_CONFIG
    places = _check_decimals(cfg.default_decimals if decimals is None else decimals)
    raw = from_raw(value)
    with arithmetic(cfg, raw):
        return truncate(raw.scaleb(places))


def from_integer_amount(
    value: RawValue,
    decimals: int | None = None,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Scale an integer amount down to a human number.

    The value is first truncated to `decimals` fractional digits, then divided
    by 10^decimals. Sub-unit remainders below that precision are discarded,
    not rounded.

    Example:
        from_integer_amount(1500000, 6) == Decimal("1.5")

    Raises:
        InvalidScale: If decimals is negative
    """
    cfg = config or DEFAULT_MATH_CONFIG
    places = _check_decimals(cfg.default_decimals if decimals is None else decimals)
    raw = from_raw(value)
    with arithmetic(cfg, raw, Decimal(f"1E{places}")):
        return _plain(truncate_places(raw, places).scaleb(-places))


def to_human_string(
    value: RawValue,
    decimals: int | None = None,
    display_digits: int | None = None,
    *,
    config: MathConfig | None = None,
) -> str:
    """Render an integer amount as a human-readable string.

    Applies from_integer_amount, then rounds half-up to `display_digits`
    fractional places. Rendering is plain notation without trailing zeros.

    Example:
        to_human_string(1234567, 6, 2) == "1.23"

    Args:
        value: Integer amount
        decimals: Token decimals (default: config.default_decimals)
        display_digits: Fractional digits to keep (default: decimals)
        config: Engine configuration

    Raises:
        InvalidScale: If decimals or display_digits is negative
    """
    cfg = config or DEFAULT_MATH_CONFIG
    places = _check_decimals(cfg.default_decimals if decimals is None else decimals)
    digits = _check_decimals(places if display_digits is None else display_digits, "display_digits")
    human = from_integer_amount(value, places, config=cfg)
    with arithmetic(cfg, human):
        rounded = human.scaleb(digits).to_integral_value(rounding=ROUND_HALF_UP).scaleb(-digits)
        if rounded.is_zero():
            return "0"
        return format(rounded.normalize(), "f")


def to_ray_amount(
    value: RawValue,
    decimals: int = RAY_DECIMALS,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Scale a human number up to RAY precision (27 decimals by default)."""
    return to_integer_amount(value, decimals, config=config)


def from_ray_amount(
    value: RawValue,
    decimals: int = RAY_DECIMALS,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Scale a RAY-precision amount down to a human number."""
    return from_integer_amount(value, decimals, config=config)


def ray(n: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Return n expressed in RAY units (RAY * n), exact."""
    value = from_raw(n)
    with arithmetic(config, value, RAY):
        return value * RAY


def wad(n: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Return n expressed in WAD units (WAD * n), exact."""
    value = from_raw(n)
    with arithmetic(config, value, WAD):
        return value * WAD


def percent(n: RawValue, *, config: MathConfig | None = None) -> Decimal:
    """Return n percent in percentage-factor units (100 * n), exact.

    Example:
        percent(2.5) == 250  # 2.50% where 10000 is 100%
    """
    value = from_raw(n)
    with arithmetic(config, value, PERCENTAGE_FACTOR):
        return value * PERCENTAGE_FACTOR


def amount(
    n: RawValue,
    decimals: int | None = None,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Return n scaled by 10^decimals, exact (no truncation).

    Raises:
        InvalidScale: If decimals is negative
    """
    cfg = config or DEFAULT_MATH_CONFIG
    places = _check_decimals(cfg.default_decimals if decimals is None else decimals)
    value = from_raw(n)
    with arithmetic(cfg, value):
        return value.scaleb(places)


def to_int_string(value: RawValue) -> str:
    """Render value as an integer string, truncating toward zero."""
    return str(int(from_raw(value)))


def to_uint256(value: RawValue) -> int:
    """Convert to int, validating uint256 bounds.

    The fractional part is truncated toward zero first.

    Raises:
        Uint256Overflow: If value is negative or exceeds 2^256-1
    """
    result = int(from_raw(value))
    if result < 0:
        logger.debug("fixed_point_uint256_negative", value=result)
        raise Uint256Overflow(f"Negative value cannot be uint256: {result}")
    if result > MAX_UINT256:
        logger.debug("fixed_point_uint256_overflow", value=result)
        raise Uint256Overflow(f"Value exceeds uint256 max: {result}")
    return result
