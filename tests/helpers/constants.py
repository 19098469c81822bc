"""Shared identifiers and amounts for tests.

Usage:
    from tests.helpers import USDC, USDT, USER1
"""

# =============================================================================
# Pooled assets (lowercase, as normalize_identity() returns them)
# =============================================================================

USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Not in the test pool

# =============================================================================
# Accounts
# =============================================================================

POOL_ADDRESS = "0x00000000000000000000000000000000000a11ce"
USER1 = "0x1111111111111111111111111111111111111111"
USER2 = "0x2222222222222222222222222222222222222222"
USER3 = "0x3333333333333333333333333333333333333333"

# Starting balance of each asset for every funded user
STARTING_BALANCE = 100_000

__all__ = [
    "USDC",
    "USDT",
    "DAI",
    "POOL_ADDRESS",
    "USER1",
    "USER2",
    "USER3",
    "STARTING_BALANCE",
]
