"""Pool constants.

Centralizes the fixed-point bases and bounds used by the pool math.
"""

from amm_pool.safe_int import UINT256_MAX

# Fee basis: fees are expressed in basis points of 1/10000
FEE_BASE_BPS = 10_000

# Default swap fee. Zero reproduces the plain constant-product formula
# amount_out = reserve_out * amount_in // (reserve_in + amount_in)
DEFAULT_FEE_BPS = 0

# Largest amount any reserve, balance or share supply may hold
MAX_AMOUNT = UINT256_MAX

# Default LP token metadata for a freshly created pool
DEFAULT_POOL_NAME = "USDc / USDt"
DEFAULT_POOL_SYMBOL = "USDc/USDt"
DEFAULT_ASSET_A = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USDC
DEFAULT_ASSET_B = "0xdac17f958d2ee523a2206206994597c13d831ec7"  # USDT
DEFAULT_POOL_ADDRESS = "0x00000000000000000000000000000000000a11ce"
