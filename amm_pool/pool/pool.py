"""The Pool aggregate: one two-asset constant-product liquidity pool.

Pool owns the reserve and share ledgers, the liquidity manager and the
swap engine, and serializes every operation on them behind one lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

import structlog

from amm_pool.assets.base import AssetLink
from amm_pool.assets.memory import InMemoryAssetLink, InMemoryToken
from amm_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from amm_pool.ledgers.reserves import ReserveLedger
from amm_pool.ledgers.shares import ShareLedger
from amm_pool.models.types import normalize_identity
from amm_pool.pool.liquidity import LiquidityManager
from amm_pool.pool.swap import SwapEngine, SwapQuote

logger = structlog.get_logger()


@dataclass(frozen=True)
class PoolSnapshot:
    """Point-in-time copy of pool state, for display and estimation only."""

    address: str
    name: str
    symbol: str
    asset_a: str
    asset_b: str
    fee_bps: int
    reserve_a: int
    reserve_b: int
    total_shares: int

    @property
    def is_empty(self) -> bool:
        return self.total_shares == 0


class Pool:
    """Two-asset AMM liquidity pool.

    Every mutating operation runs to completion under the pool lock,
    including its asset transfers: either the whole operation commits or
    nothing changes. Reads take the lock only to copy state and may be
    stale by the time the caller acts on them.

    Usage:
        pool = Pool(link, config)
        minted = pool.add_liquidity(alice, 1000, 1000)
        out = pool.swap(bob, 100, config.asset_a, config.asset_b)
        out_a, out_b = pool.remove_liquidity(alice, minted)
    """

    def __init__(self, link: AssetLink, config: PoolConfig | None = None) -> None:
        self.config = config or DEFAULT_POOL_CONFIG
        self.link = link
        self._lock = threading.RLock()

        cfg = self.config
        self._reserves = ReserveLedger(link, cfg.address, cfg.asset_a, cfg.asset_b)
        self._shares = ShareLedger(cfg.name, cfg.symbol)
        self._liquidity = LiquidityManager(
            self._reserves, self._shares, link, cfg.asset_a, cfg.asset_b
        )
        self._engine = SwapEngine(
            self._reserves, self._shares, link, cfg.asset_a, cfg.asset_b, cfg.fee_bps
        )

    def __repr__(self) -> str:
        return f"Pool({self.config.symbol}, reserves={self.reserves()})"

    # --- Immutable metadata ---

    @property
    def name(self) -> str:
        return self._shares.name

    @property
    def symbol(self) -> str:
        return self._shares.symbol

    @property
    def address(self) -> str:
        return self.config.address

    @property
    def fee_bps(self) -> int:
        return self.config.fee_bps

    def pair_identity(self) -> tuple[str, str]:
        """Return (asset_a, asset_b)."""
        return self.config.asset_a, self.config.asset_b

    # --- Queries ---

    def reserves(self) -> tuple[int, int]:
        """Return (reserve_a, reserve_b)."""
        with self._lock:
            return self._reserves.reserves()

    def total_shares(self) -> int:
        with self._lock:
            return self._shares.total_supply

    def share_balance_of(self, holder: str) -> int:
        with self._lock:
            return self._shares.balance_of(holder)

    def share_allowance(self, owner: str, spender: str) -> int:
        with self._lock:
            return self._shares.allowance(owner, spender)

    def share_holders(self) -> dict[str, int]:
        """Return a copy of every holder's non-zero share balance."""
        with self._lock:
            return self._shares.holders()

    def snapshot(self) -> PoolSnapshot:
        with self._lock:
            reserve_a, reserve_b = self._reserves.reserves()
            return PoolSnapshot(
                address=self.address,
                name=self.name,
                symbol=self.symbol,
                asset_a=self.config.asset_a,
                asset_b=self.config.asset_b,
                fee_bps=self.fee_bps,
                reserve_a=reserve_a,
                reserve_b=reserve_b,
                total_shares=self._shares.total_supply,
            )

    # --- Quotes (no side effects) ---

    def quote_add_liquidity(self, amount_a: int, amount_b: int) -> int:
        with self._lock:
            return self._liquidity.quote_add_liquidity(amount_a, amount_b)

    def quote_remove_liquidity(self, share_amount: int) -> tuple[int, int]:
        with self._lock:
            return self._liquidity.quote_remove_liquidity(share_amount)

    def quote_deposit(self, amount: int, asset: str) -> int:
        with self._lock:
            return self._liquidity.quote_deposit(amount, asset)

    def quote_swap(self, amount_in: int, asset_in: str, asset_out: str) -> SwapQuote:
        with self._lock:
            return self._engine.quote_swap(amount_in, asset_in, asset_out)

    # --- Mutations ---

    def add_liquidity(self, caller: str, amount_a: int, amount_b: int) -> int:
        """Deposit both assets; returns the shares minted to the caller."""
        with self._lock:
            return self._liquidity.add_liquidity(caller, amount_a, amount_b)

    def remove_liquidity(self, caller: str, share_amount: int) -> tuple[int, int]:
        """Burn the caller's shares; returns (out_a, out_b) paid out."""
        with self._lock:
            return self._liquidity.remove_liquidity(caller, share_amount)

    def swap(self, caller: str, amount_in: int, asset_in: str, asset_out: str) -> int:
        """Swap `amount_in` of `asset_in` for `asset_out`; returns amount out."""
        with self._lock:
            return self._engine.swap(caller, amount_in, asset_in, asset_out)

    def sync(self) -> tuple[int, int]:
        """Reset reserves to the pool's actually held balances."""
        with self._lock:
            return self._reserves.sync()

    def transfer_shares(self, sender: str, recipient: str, amount: int) -> None:
        """Move LP shares between holders. Total shares are unchanged."""
        with self._lock:
            self._shares.transfer(sender, recipient, amount)
            logger.info(
                "shares_transferred",
                sender=normalize_identity(sender),
                recipient=normalize_identity(recipient),
                amount=amount,
            )

    def approve_shares(self, owner: str, spender: str, amount: int) -> None:
        """Allow `spender` to move up to `amount` of `owner`'s shares."""
        with self._lock:
            self._shares.approve(owner, spender, amount)

    def transfer_shares_from(self, spender: str, owner: str, recipient: str, amount: int) -> None:
        """Move `owner`'s shares to `recipient` using `spender`'s allowance."""
        with self._lock:
            self._shares.transfer_from(spender, owner, recipient, amount)
            logger.info(
                "shares_transferred",
                sender=normalize_identity(owner),
                recipient=normalize_identity(recipient),
                spender=normalize_identity(spender),
                amount=amount,
            )


def create_in_memory_pool(
    config: PoolConfig | None = None,
    asset_symbols: tuple[str, str] = ("USDc", "USDt"),
) -> tuple[Pool, InMemoryAssetLink]:
    """Create a pool backed by fresh in-memory tokens for both assets.

    Returns:
        (pool, link). Fund holders through link.token(asset).mint(...).
    """
    config = config or DEFAULT_POOL_CONFIG
    tokens = [
        InMemoryToken(config.asset_a, asset_symbols[0]),
        InMemoryToken(config.asset_b, asset_symbols[1]),
    ]
    link = InMemoryAssetLink(config.address, tokens)
    return Pool(link, config), link
