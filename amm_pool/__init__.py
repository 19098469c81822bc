"""Two-asset constant-product AMM liquidity pool."""

from amm_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from amm_pool.pool import Pool, PoolSnapshot, SwapQuote, create_in_memory_pool

__version__ = "0.1.0"
__all__ = [
    "Pool",
    "PoolConfig",
    "PoolSnapshot",
    "SwapQuote",
    "DEFAULT_POOL_CONFIG",
    "create_in_memory_pool",
    "__version__",
]
