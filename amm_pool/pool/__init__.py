"""The liquidity pool: aggregate, liquidity manager and swap engine."""

from amm_pool.pool.liquidity import LiquidityManager
from amm_pool.pool.pool import Pool, PoolSnapshot, create_in_memory_pool
from amm_pool.pool.swap import SwapEngine, SwapQuote

__all__ = [
    "Pool",
    "PoolSnapshot",
    "create_in_memory_pool",
    "LiquidityManager",
    "SwapEngine",
    "SwapQuote",
]
