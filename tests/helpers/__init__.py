"""Test helpers module for shared test utilities.

- constants: Asset identifiers, accounts and amounts
- factories: Pool and account factory functions
"""

from tests.helpers.constants import (
    DAI,
    POOL_ADDRESS,
    STARTING_BALANCE,
    USDC,
    USDT,
    USER1,
    USER2,
    USER3,
)
from tests.helpers.factories import fund, held_balances, make_config, make_pool

__all__ = [
    # Constants
    "USDC",
    "USDT",
    "DAI",
    "POOL_ADDRESS",
    "USER1",
    "USER2",
    "USER3",
    "STARTING_BALANCE",
    # Factories
    "make_config",
    "make_pool",
    "fund",
    "held_balances",
]
