"""Binomial approximation of compound interest.

On-chain lending pools cannot afford a true power function, so they expand
(1 + r)^n as a truncated binomial series:

    (1 + r)^n ~= 1 + n*r + C(n,2)*r^2 + C(n,3)*r^3 + ...

Each term is derived from the previous one:

    el_1 = n * r
    el_{i+1} = ray_mul(el_i * (n - i), r) // (i + 1)

The series stops after `terms` coefficients, or earlier once n <= i (all
remaining binomial coefficients are zero).
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from raymath.config import DEFAULT_MATH_CONFIG, MathConfig
from raymath.constants import RAY, SECONDS_PER_YEAR
from raymath.errors import NegativeValueError
from raymath.math.context import arithmetic, truncate
from raymath.math.conversion import RawValue, from_integer_amount, from_raw, ray
from raymath.math.wad_ray import ray_mul

__all__ = ["binomial_compound", "compound_annual_rate"]

logger = structlog.get_logger()


def binomial_compound(
    rate_per_period: RawValue,
    number_of_periods: RawValue,
    terms: int | None = None,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Approximate the growth factor (1 + rate_per_period)^number_of_periods.

    The series is accumulated in RAY units starting from RAY (1.0), then the
    result is truncated with from_integer_amount(result, 9). With the default
    configuration a zero rate therefore yields 10^18.

    Zero periods return raw zero (ray(0)), not the multiplicative identity.
    Callers that need "no growth" as 1.0 must add it back themselves.

    Args:
        rate_per_period: Plain (unscaled) rate per period, e.g. 0.0001
        number_of_periods: Number of compounding periods
        terms: Binomial coefficients to use (default: config.binomial_terms, 5)
        config: Engine configuration

    Returns:
        Truncated RAY-scaled growth factor

    Raises:
        ValueError: If terms < 1
        NegativeValueError: If number_of_periods is negative
    """
    cfg = config or DEFAULT_MATH_CONFIG
    n_terms = cfg.binomial_terms if terms is None else terms
    if n_terms < 1:
        raise ValueError(f"terms must be at least 1, got {n_terms}")

    exp = from_raw(number_of_periods)
    if exp < 0:
        logger.debug("binomial_compound_negative_periods", periods=str(exp))
        raise NegativeValueError(f"number_of_periods must be non-negative, got {exp}")
    if exp.is_zero():
        logger.debug("binomial_compound_zero_periods", rate=str(rate_per_period))
        return ray(0, config=cfg)

    rate = ray(rate_per_period, config=cfg)
    # the k-th term is bounded by (rate * exp)^k, so k copies of each operand cover it
    with arithmetic(cfg, *([rate, exp, RAY] * (n_terms + 1))):
        el = rate * exp
        result = RAY + el

        for i in range(1, n_terms):
            if exp <= i:
                break
            el = ray_mul(el * (exp - i), rate, config=cfg) // (i + 1)
            result += el

    return from_integer_amount(result, cfg.compound_result_decimals, config=cfg)


def compound_annual_rate(
    rate_per_year: RawValue,
    seconds: RawValue,
    terms: int | None = None,
    *,
    config: MathConfig | None = None,
) -> Decimal:
    """Compound an annual rate per second over `seconds`.

    The annual rate is scaled to RAY and divided by SECONDS_PER_YEAR with
    integer truncation, as a contract derives its per-second rate, before
    being handed to binomial_compound.

    Example:
        compound_annual_rate(0.05, SECONDS_PER_YEAR)  # ~1.0513 in WAD units
    """
    annual = truncate(ray(rate_per_year, config=config))
    with arithmetic(config, annual):
        rate_per_second = annual // SECONDS_PER_YEAR
        plain_rate = rate_per_second.scaleb(-27)
    return binomial_compound(plain_rate, seconds, terms, config=config)
