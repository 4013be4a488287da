"""Scale-tagged wrappers around the fixed-point operators.

The free functions in raymath.math.wad_ray take untagged Decimals and trust
the caller to keep scales straight. Wad, Ray and Percent carry the scale in
their type, so mixing them raises ScaleMismatchError instead of silently
producing a value off by 10^9.

Example:
    debt = Wad.from_decimal("1500.25")
    index = Ray.from_decimal("1.02")
    scaled = debt.to_ray().mul(index).to_wad()
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import ClassVar, TypeVar

from raymath.constants import ONE_HUNDRED_PERCENT, RAY, WAD
from raymath.errors import NegativeValueError, ScaleMismatchError
from raymath.math.conversion import (
    RawValue,
    from_integer_amount,
    from_raw,
    percent,
    to_human_string,
    to_integer_amount,
)
from raymath.math.wad_ray import (
    percent_div,
    percent_mul,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_div,
    wad_mul,
    wad_to_ray,
)

__all__ = ["Scaled", "Wad", "Ray", "Percent"]

T = TypeVar("T", bound="Scaled")


class Scaled:
    """Immutable fixed-point value with a scale fixed by its class.

    Subclasses set DECIMALS and the operator pair used for mul/div.

    Attributes:
        value: The underlying scaled Decimal (e.g. 1.5 wad is 1.5e18)
    """

    DECIMALS: ClassVar[int]
    ONE: ClassVar[int]
    _mul_op: ClassVar[Callable[..., Decimal]]
    _div_op: ClassVar[Callable[..., Decimal]]

    __slots__ = ("_value",)
    _value: Decimal

    def __init__(self, value: RawValue | Scaled) -> None:
        if isinstance(value, Scaled):
            self._require_same_scale(value, "construct")
            self._value = value._value
        else:
            self._value = from_raw(value)

    @property
    def value(self) -> Decimal:
        """The underlying scaled value."""
        return self._value

    @classmethod
    def from_decimal(cls: type[T], d: RawValue) -> T:
        """Create from a human number, truncating below the scale's precision."""
        return cls(to_integer_amount(d, cls.DECIMALS))

    @classmethod
    def one(cls: type[T]) -> T:
        """The scaled representation of 1.0."""
        return cls(cls.ONE)

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(0)

    def to_decimal(self) -> Decimal:
        """Convert to a human number."""
        return from_integer_amount(self._value, self.DECIMALS)

    def human(self, digits: int | None = None) -> str:
        """Render as a human-readable string rounded to `digits` places."""
        return to_human_string(self._value, self.DECIMALS, digits)

    def _require_same_scale(self, other: object, operation: str) -> None:
        if type(other) is not type(self):
            raise ScaleMismatchError(
                f"Cannot {operation} {type(self).__name__} with {type(other).__name__}"
            )

    # --- Arithmetic ---

    def mul(self: T, other: T) -> T:
        """Scaled multiply with half-up rounding."""
        self._require_same_scale(other, "multiply")
        return type(self)(type(self)._mul_op(self._value, other._value))

    def div(self: T, other: T) -> T:
        """Scaled divide with half-up rounding.

        Raises:
            DivisionByZero: If other is zero
        """
        self._require_same_scale(other, "divide")
        return type(self)(type(self)._div_op(self._value, other._value))

    def add(self: T, other: T) -> T:
        self._require_same_scale(other, "add")
        return type(self)(self._value + other._value)

    def sub(self: T, other: T) -> T:
        """Subtract other from self.

        Raises:
            NegativeValueError: If the result would be negative
        """
        self._require_same_scale(other, "subtract")
        result = self._value - other._value
        if result < 0:
            raise NegativeValueError(f"Underflow: {self._value} - {other._value} = {result}")
        return type(self)(result)

    def percent_mul(self: T, pct: Percent) -> T:
        """Apply a percentage to this value, keeping its scale."""
        if not isinstance(pct, Percent):
            raise ScaleMismatchError(f"percent_mul expects Percent, got {type(pct).__name__}")
        return type(self)(percent_mul(self._value, pct._value))

    def percent_div(self: T, pct: Percent) -> T:
        """Divide this value by a percentage, keeping its scale."""
        if not isinstance(pct, Percent):
            raise ScaleMismatchError(f"percent_div expects Percent, got {type(pct).__name__}")
        return type(self)(percent_div(self._value, pct._value))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __lt__(self: T, other: T) -> bool:
        self._require_same_scale(other, "compare")
        return self._value < other._value

    def __le__(self: T, other: T) -> bool:
        self._require_same_scale(other, "compare")
        return self._value <= other._value

    def __gt__(self: T, other: T) -> bool:
        self._require_same_scale(other, "compare")
        return self._value > other._value

    def __ge__(self: T, other: T) -> bool:
        self._require_same_scale(other, "compare")
        return self._value >= other._value

    def __bool__(self) -> bool:
        return not self._value.is_zero()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return self.human()


class Wad(Scaled):
    """18-decimal fixed-point value. 1.5 is stored as 1_500_000_000_000_000_000."""

    DECIMALS = 18
    ONE = WAD
    _mul_op = staticmethod(wad_mul)
    _div_op = staticmethod(wad_div)

    __slots__ = ()

    def to_ray(self) -> Ray:
        """Widen to RAY precision (exact)."""
        return Ray(wad_to_ray(self._value))


class Ray(Scaled):
    """27-decimal fixed-point value, used for rates and indexes."""

    DECIMALS = 27
    ONE = RAY
    _mul_op = staticmethod(ray_mul)
    _div_op = staticmethod(ray_div)

    __slots__ = ()

    def to_wad(self) -> Wad:
        """Narrow to WAD precision, rounding half up."""
        return Wad(ray_to_wad(self._value))


class Percent(Scaled):
    """Percentage where 10000 is 100.00%."""

    DECIMALS = 4
    ONE = ONE_HUNDRED_PERCENT
    _mul_op = staticmethod(percent_mul)
    _div_op = staticmethod(percent_div)

    __slots__ = ()

    @classmethod
    def from_percentage(cls, n: RawValue) -> Percent:
        """Create from a percentage number: from_percentage(2.5) is 2.50%."""
        return cls(percent(n))
