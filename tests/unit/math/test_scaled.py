"""Tests for the Wad/Ray/Percent wrapper types."""

from decimal import Decimal

import pytest

from raymath.constants import RAY, WAD
from raymath.errors import DivisionByZero, NegativeValueError, ScaleMismatchError
from raymath.math.scaled import Percent, Ray, Wad
from tests.helpers import ONE_THIRD_RAY


class TestScaledConstruction:
    """Tests for constructing wrapper values."""

    def test_from_decimal(self):
        """Human numbers are scaled by the type's decimals."""
        assert Wad.from_decimal("1.5").value == 15 * 10**17
        assert Ray.from_decimal(1).value == RAY

    def test_from_decimal_truncates(self):
        """Digits below the scale are discarded."""
        assert Wad.from_decimal("0.0000000000000000019").value == 1

    def test_one_and_zero(self):
        """one() and zero() helpers."""
        assert Wad.one().value == WAD
        assert Ray.one().value == RAY
        assert Percent.one().value == 10_000
        assert Wad.zero().value == 0

    def test_copy_same_scale(self):
        """A wrapper can be built from another of the same scale."""
        assert Wad(Wad(5)) == Wad(5)

    def test_copy_other_scale_raises(self):
        """Building a Wad from a Ray is a scale mismatch."""
        with pytest.raises(ScaleMismatchError):
            Wad(Ray(5))

    def test_percent_from_percentage(self):
        """2.5 percent is 250 under the 10000 = 100% convention."""
        assert Percent.from_percentage(2.5) == Percent(250)
        assert Percent.from_decimal("0.025") == Percent(250)


class TestScaledArithmetic:
    """Tests for wrapper arithmetic."""

    def test_wad_mul(self):
        """2.0 * 3.0 = 6.0."""
        assert Wad(2 * WAD).mul(Wad(3 * WAD)) == Wad(6 * WAD)

    def test_ray_div(self):
        """1 / 3 in RAY."""
        assert Ray.one().div(Ray(3 * RAY)) == Ray(ONE_THIRD_RAY)

    def test_div_by_zero_raises(self):
        """Dividing by a zero wrapper raises DivisionByZero."""
        with pytest.raises(DivisionByZero):
            Wad.one().div(Wad.zero())

    def test_add_and_sub(self):
        """Addition and subtraction keep the scale."""
        assert Wad(5).add(Wad(3)) == Wad(8)
        assert Wad(5).sub(Wad(3)) == Wad(2)

    def test_sub_underflow_raises(self):
        """Going below zero raises NegativeValueError."""
        with pytest.raises(NegativeValueError, match="Underflow"):
            Wad(3).sub(Wad(5))

    def test_percent_mul(self):
        """1000 * 2.50% = 25, result keeps the caller's scale."""
        result = Wad(1000).percent_mul(Percent(250))
        assert isinstance(result, Wad)
        assert result == Wad(25)

    def test_percent_div(self):
        """25 / 2.50% = 1000."""
        assert Ray(25).percent_div(Percent(250)) == Ray(1000)

    def test_percent_mul_requires_percent(self):
        """percent_mul rejects non-Percent arguments."""
        with pytest.raises(ScaleMismatchError):
            Wad(1000).percent_mul(Wad(250))  # type: ignore[arg-type]

    def test_wad_to_ray_and_back(self):
        """Conversions between scales."""
        assert Wad(1).to_ray() == Ray(10**9)
        assert Ray(1_500_000_000).to_wad() == Wad(2)
        assert Wad(WAD).to_ray().to_wad() == Wad(WAD)

    def test_debt_times_index(self):
        """Typical flow: wad balance through a ray index back to wad."""
        debt = Wad.from_decimal("1500.25")
        index = Ray.from_decimal("1.02")
        assert debt.to_ray().mul(index).to_wad() == Wad.from_decimal("1530.255")


class TestScaleMismatch:
    """Mixing scales is rejected."""

    def test_mul_mismatch(self):
        """Wad * Ray raises ScaleMismatchError."""
        with pytest.raises(ScaleMismatchError, match="multiply Wad with Ray"):
            Wad(1).mul(Ray(1))  # type: ignore[arg-type]

    def test_add_mismatch(self):
        """Wad + Ray raises."""
        with pytest.raises(ScaleMismatchError):
            Wad(1).add(Ray(1))  # type: ignore[arg-type]

    def test_mismatch_is_type_error(self):
        """ScaleMismatchError can be caught as TypeError."""
        with pytest.raises(TypeError):
            Ray(1).div(Percent(1))  # type: ignore[arg-type]

    def test_compare_mismatch(self):
        """Ordering across scales raises."""
        with pytest.raises(ScaleMismatchError):
            _ = Wad(1) < Ray(1)  # type: ignore[operator]

    def test_equality_across_scales_is_false(self):
        """Equal raw values of different scales are not equal."""
        assert Wad(1) != Ray(1)


class TestScaledProtocol:
    """Tests for comparison, hashing and rendering."""

    def test_ordering(self):
        """Same-scale values sort by value."""
        assert sorted([Wad(3), Wad(1), Wad(2)]) == [Wad(1), Wad(2), Wad(3)]
        assert Wad(1) <= Wad(1)
        assert Wad(2) >= Wad(1)
        assert Wad(2) > Wad(1)

    def test_hashable(self):
        """Wrappers can be dict keys."""
        d = {Wad(1): "value"}
        assert d[Wad(1)] == "value"

    def test_bool(self):
        """Zero is falsy."""
        assert not Wad.zero()
        assert Wad(1)

    def test_repr(self):
        """repr shows the scaled value."""
        assert repr(Wad.from_decimal("1.5")) == "Wad(1500000000000000000)"

    def test_str_is_human(self):
        """str renders the human number."""
        assert str(Wad.from_decimal("1.5")) == "1.5"
        assert str(Percent(250)) == "0.025"

    def test_human_digits(self):
        """human() rounds to the requested digits."""
        assert Wad.from_decimal("1.23456").human(2) == "1.23"

    def test_to_decimal(self):
        """to_decimal returns the human number."""
        assert Ray(RAY // 2).to_decimal() == Decimal("0.5")
