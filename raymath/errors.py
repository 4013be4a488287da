"""Fixed-point error classes.

These errors map to the revert conditions of the on-chain math libraries.
Each is fatal to the call and propagates to the caller unchanged.
"""


class FixedPointError(ArithmeticError):
    """Base error for fixed-point operations."""

    pass


class DivisionByZero(FixedPointError):
    """Divisor of a scaled division is zero (contract reverts)."""

    pass


class InvalidScale(FixedPointError, ValueError):
    """Decimals argument is negative or not an integer."""

    pass


class NegativeValueError(FixedPointError, ValueError):
    """Value is negative where the unsigned on-chain domain requires >= 0."""

    pass


class Uint256Overflow(FixedPointError):
    """Value does not fit in uint256."""

    pass


class ScaleMismatchError(FixedPointError, TypeError):
    """Operands carry different scales (e.g. Wad combined with Ray)."""

    pass


class PrecisionExceeded(FixedPointError):
    """Exact result needs more digits than the working Decimal precision."""

    pass
