"""Scale and protocol constants for fixed-point math.

Centralizes the integer scales used by lending-protocol contracts. All values
are plain Python ints; the engine lifts them into Decimal where needed.
"""

# Percentage math: 10000 represents 100.00%
PERCENTAGE_FACTOR = 100
ONE_HUNDRED_PERCENT = 10_000
HALF_PERCENT = ONE_HUNDRED_PERCENT // 2  # = 5_000

# Wad: decimal numbers with 18 digits of precision
WAD = 10**18
HALF_WAD = WAD // 2  # = 5 * 10**17

# Ray: decimal numbers with 27 digits of precision
RAY = 10**27
HALF_RAY = RAY // 2  # = 5 * 10**26

# Ratio to convert between wad and ray
WAD_RAY_RATIO = 10**9
HALF_WAD_RAY_RATIO = WAD_RAY_RATIO // 2

# Maximum uint256 value (type(uint256).max in Solidity)
MAX_UINT256 = 2**256 - 1

# Time constants (seconds)
SECONDS_PER_YEAR = 31_536_000  # 365 days
SECONDS_PER_HOUR = 3_600

# Aliases used by lending-pool test suites
ONE_ETHER = WAD
ONE_RAY = RAY
MAX_UINT_AMOUNT = MAX_UINT256
