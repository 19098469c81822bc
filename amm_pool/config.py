"""Pool configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from amm_pool.constants import (
    DEFAULT_ASSET_A,
    DEFAULT_ASSET_B,
    DEFAULT_FEE_BPS,
    DEFAULT_POOL_ADDRESS,
    DEFAULT_POOL_NAME,
    DEFAULT_POOL_SYMBOL,
    FEE_BASE_BPS,
)
from amm_pool.errors import InvalidArgument
from amm_pool.models.types import normalize_identity


@dataclass(frozen=True)
class PoolConfig:
    """Immutable parameters of one pool, fixed at creation.

    Attributes:
        name: LP token name (e.g. "USDc / USDt")
        symbol: LP token symbol (e.g. "USDc/USDt")
        asset_a: Identifier of the first pooled asset
        asset_b: Identifier of the second pooled asset, distinct from asset_a
        address: The pool's own holder identity at the asset ledgers
        fee_bps: Swap fee kept in reserves, in basis points (default: 0)
    """

    name: str = DEFAULT_POOL_NAME
    symbol: str = DEFAULT_POOL_SYMBOL
    asset_a: str = DEFAULT_ASSET_A
    asset_b: str = DEFAULT_ASSET_B
    address: str = DEFAULT_POOL_ADDRESS
    fee_bps: int = DEFAULT_FEE_BPS

    def __post_init__(self) -> None:
        # Frozen: normalized identifiers are written through object.__setattr__
        for field_name in ("asset_a", "asset_b", "address"):
            object.__setattr__(self, field_name, normalize_identity(getattr(self, field_name)))

        if self.asset_a == self.asset_b:
            raise InvalidArgument(f"Pool assets must differ, both are {self.asset_a}")
        if self.address in (self.asset_a, self.asset_b):
            raise InvalidArgument("Pool address must differ from the pooled assets")
        if not self.name or not self.symbol:
            raise InvalidArgument("Pool name and symbol must be non-empty")
        if isinstance(self.fee_bps, bool) or not isinstance(self.fee_bps, int):
            raise InvalidArgument(f"fee_bps must be an integer, got {self.fee_bps!r}")
        if not 0 <= self.fee_bps < FEE_BASE_BPS:
            raise InvalidArgument(f"fee_bps must be in [0, {FEE_BASE_BPS}), got {self.fee_bps}")

    @classmethod
    def from_env(cls) -> PoolConfig:
        """Build a config from POOL_* environment variables, with defaults.

        - POOL_NAME, POOL_SYMBOL: LP token metadata
        - POOL_ASSET_A, POOL_ASSET_B: pooled asset identifiers
        - POOL_ADDRESS: the pool's holder identity
        - POOL_FEE_BPS: swap fee in basis points
        """
        raw_fee = os.environ.get("POOL_FEE_BPS", str(DEFAULT_FEE_BPS))
        try:
            fee_bps = int(raw_fee)
        except ValueError as err:
            raise InvalidArgument(f"POOL_FEE_BPS must be an integer: '{raw_fee}'") from err

        return cls(
            name=os.environ.get("POOL_NAME", DEFAULT_POOL_NAME),
            symbol=os.environ.get("POOL_SYMBOL", DEFAULT_POOL_SYMBOL),
            asset_a=os.environ.get("POOL_ASSET_A", DEFAULT_ASSET_A),
            asset_b=os.environ.get("POOL_ASSET_B", DEFAULT_ASSET_B),
            address=os.environ.get("POOL_ADDRESS", DEFAULT_POOL_ADDRESS),
            fee_bps=fee_bps,
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
