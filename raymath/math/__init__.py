"""Fixed-point math primitives.

This package provides the lending-protocol arithmetic layer:
- wad_ray: WAD/RAY/percentage multiply, divide and scale conversion
- conversion: construction and token-decimals conversion
- compounding: binomial approximation of compound interest
- scaled: Wad/Ray/Percent wrapper types that enforce scale
"""

from raymath.math.compounding import binomial_compound, compound_annual_rate
from raymath.math.conversion import (
    RawValue,
    amount,
    from_integer_amount,
    from_ray_amount,
    from_raw,
    percent,
    ray,
    to_human_string,
    to_int_string,
    to_integer_amount,
    to_ray_amount,
    to_uint256,
    wad,
)
from raymath.math.scaled import Percent, Ray, Scaled, Wad
from raymath.math.wad_ray import (
    half_percent,
    half_ray,
    half_wad,
    percent_div,
    percent_mul,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_div,
    wad_mul,
    wad_to_ray,
)

__all__ = [
    # Operators
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
    # Conversion
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
    # Compounding
    "binomial_compound",
    "compound_annual_rate",
    # Wrapper types
    "Scaled",
    "Wad",
    "Ray",
    "Percent",
]
