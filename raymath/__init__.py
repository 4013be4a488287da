"""raymath - lending-protocol fixed-point math for off-chain simulation."""

from raymath.config import DEFAULT_MATH_CONFIG, MathConfig
from raymath.constants import (
    HALF_PERCENT,
    HALF_RAY,
    HALF_WAD,
    MAX_UINT256,
    MAX_UINT_AMOUNT,
    ONE_ETHER,
    ONE_HUNDRED_PERCENT,
    ONE_RAY,
    PERCENTAGE_FACTOR,
    RAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_YEAR,
    WAD,
    WAD_RAY_RATIO,
)
from raymath.errors import (
    DivisionByZero,
    FixedPointError,
    InvalidScale,
    NegativeValueError,
    PrecisionExceeded,
    ScaleMismatchError,
    Uint256Overflow,
)
from raymath.math import (
    Percent,
    Ray,
    Wad,
    binomial_compound,
    compound_annual_rate,
    from_integer_amount,
    from_raw,
    percent_div,
    percent_mul,
    ray_div,
    ray_mul,
    ray_to_wad,
    to_human_string,
    to_integer_amount,
    wad_div,
    wad_mul,
    wad_to_ray,
)

__version__ = "0.1.0"
__all__ = [
    # Config
    "MathConfig",
    "DEFAULT_MATH_CONFIG",
    # Constants
    "PERCENTAGE_FACTOR",
    "ONE_HUNDRED_PERCENT",
    "HALF_PERCENT",
    "WAD",
    "HALF_WAD",
    "RAY",
    "HALF_RAY",
    "WAD_RAY_RATIO",
    "MAX_UINT256",
    "SECONDS_PER_YEAR",
    "SECONDS_PER_HOUR",
    "ONE_ETHER",
    "ONE_RAY",
    "MAX_UINT_AMOUNT",
    # Errors
    "FixedPointError",
    "DivisionByZero",
    "InvalidScale",
    "NegativeValueError",
    "Uint256Overflow",
    "ScaleMismatchError",
    "PrecisionExceeded",
    # Operators
    "wad_mul",
    "wad_div",
    "ray_mul",
    "ray_div",
    "percent_mul",
    "percent_div",
    "wad_to_ray",
    "ray_to_wad",
    "binomial_compound",
    "compound_annual_rate",
    # Conversion
    "from_raw",
    "to_integer_amount",
    "from_integer_amount",
    "to_human_string",
    # Wrapper types
    "Wad",
    "Ray",
    "Percent",
    "__version__",
]
