"""Decimal context for exact fixed-point arithmetic.

Every operator runs inside a thread-local copy of the context built here, so
the caller's global decimal context is never read or mutated.

The configured precision is a floor: arithmetic() widens it to fit the
operands it is given, so sums and products of those operands are always
exact. The context traps Inexact, and any result that still would be rounded
raises PrecisionExceeded. All documented truncations go through int() or
integer division, which are exact and never signal.
"""

from __future__ import annotations

import decimal
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import ROUND_DOWN, Context, Decimal

import structlog

from raymath.config import DEFAULT_MATH_CONFIG, MathConfig
from raymath.errors import PrecisionExceeded

__all__ = [
    "arithmetic",
    "fixed_point_context",
    "required_precision",
    "truncate",
    "truncate_places",
]

logger = structlog.get_logger()


def fixed_point_context(config: MathConfig | None = None, precision: int = 0) -> Context:
    """Build the Decimal context used by the engine.

    Args:
        config: Engine configuration. Uses DEFAULT_MATH_CONFIG if not provided.
        precision: Minimum precision; the larger of this and config.precision wins

    Returns:
        A fresh Context with the resulting precision and strict traps
    """
    cfg = config or DEFAULT_MATH_CONFIG
    return Context(
        prec=max(cfg.precision, precision),
        rounding=ROUND_DOWN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[
            decimal.InvalidOperation,
            decimal.DivisionByZero,
            decimal.Overflow,
            decimal.Inexact,
        ],
    )


def required_precision(*operands: Decimal | int) -> int:
    """Digits needed to hold any product, quotient or sum of the operands exactly.

    Each operand contributes the width of its digit span, from its most
    significant integer digit down to its last fractional digit.
    """
    digits = 2
    for operand in operands:
        value = Decimal(operand)
        if value.is_zero():
            digits += 1
            continue
        exponent = int(value.as_tuple().exponent)
        digits += max(value.adjusted(), 0) - min(exponent, 0) + 1
    return digits


@contextmanager
def arithmetic(config: MathConfig | None = None, *operands: Decimal | int) -> Iterator[Context]:
    """Run a block under a thread-local copy of the fixed-point context.

    Args:
        config: Engine configuration
        *operands: Values the block combines; precision is widened to fit them

    Raises:
        PrecisionExceeded: If a result inside the block would be rounded
    """
    ctx = fixed_point_context(config, required_precision(*operands) if operands else 0)
    with decimal.localcontext(ctx) as local:
        try:
            yield local
        except decimal.Inexact as err:
            logger.debug("fixed_point_precision_exceeded", precision=local.prec)
            raise PrecisionExceeded(
                f"Result needs more than {local.prec} significant digits"
            ) from err


def truncate(value: Decimal) -> Decimal:
    """Drop the fractional part, rounding toward zero.

    Equivalent to floor for the non-negative values the engine works with.
    The result always has exponent 0.
    """
    return Decimal(int(value))


def truncate_places(value: Decimal, places: int) -> Decimal:
    """Truncate value to `places` fractional digits, rounding toward zero."""
    return truncate(value.scaleb(places)).scaleb(-places)
