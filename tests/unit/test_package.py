"""Tests for the top-level package API."""

from decimal import Decimal

import raymath


class TestPackageExports:
    """The package root re-exports the operator surface."""

    def test_version(self):
        """Package exposes a version string."""
        assert raymath.__version__ == "0.1.0"

    def test_operators_reexported(self):
        """Core operators are reachable from the package root."""
        assert raymath.wad_mul(2 * raymath.WAD, 3 * raymath.WAD) == 6 * raymath.WAD
        assert raymath.percent_mul(1000, 250) == 25
        assert raymath.to_integer_amount(1.5, 6) == 1_500_000
        assert raymath.from_integer_amount(1_500_000, 6) == Decimal("1.5")

    def test_all_names_resolve(self):
        """Every name in __all__ exists."""
        for name in raymath.__all__:
            assert hasattr(raymath, name), name

    def test_lending_pool_aliases(self):
        """Test-suite aliases match the scale constants."""
        assert raymath.ONE_ETHER == raymath.WAD
        assert raymath.ONE_RAY == raymath.RAY
        assert raymath.MAX_UINT_AMOUNT == raymath.MAX_UINT256 == 2**256 - 1

    def test_compounding_reexported(self):
        """Both compounding entry points are reachable from the package root."""
        assert raymath.binomial_compound("0.05", 1) == 1_050_000_000_000_000_000
        assert raymath.compound_annual_rate("0.05", 0) == 0
