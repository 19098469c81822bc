"""Reserve ledger: the pool's believed holdings of each asset."""

from __future__ import annotations

import structlog

from amm_pool.assets.base import AssetLink
from amm_pool.errors import InvalidArgument
from amm_pool.safe_int import S, Uint256Overflow

logger = structlog.get_logger()


class ReserveLedger:
    """Tracks reserve_a and reserve_b for one pool.

    Reserves change only through commit(), called by the liquidity manager
    and swap engine once their transfers succeeded, and through sync(),
    which re-reads the pool's real balances.
    """

    def __init__(self, link: AssetLink, pool_address: str, asset_a: str, asset_b: str) -> None:
        self._link = link
        self._pool_address = pool_address
        self._asset_a = asset_a
        self._asset_b = asset_b
        self._reserve_a = 0
        self._reserve_b = 0

    @property
    def pool_address(self) -> str:
        return self._pool_address

    @property
    def reserve_a(self) -> int:
        return self._reserve_a

    @property
    def reserve_b(self) -> int:
        return self._reserve_b

    def reserves(self) -> tuple[int, int]:
        """Return (reserve_a, reserve_b)."""
        return self._reserve_a, self._reserve_b

    def reserve_of(self, asset: str) -> int:
        """Reserve of one pooled asset (identifier already normalized)."""
        if asset == self._asset_a:
            return self._reserve_a
        if asset == self._asset_b:
            return self._reserve_b
        raise InvalidArgument(f"Asset {asset} not in pool")

    @staticmethod
    def validate(reserve_a: int, reserve_b: int) -> tuple[int, int]:
        """Check a candidate reserve pair before anything is transferred.

        Raises:
            InvalidArgument: If either reserve is outside [0, 2^256-1]
        """
        try:
            return S(reserve_a).to_uint256(), S(reserve_b).to_uint256()
        except Uint256Overflow as err:
            raise InvalidArgument(f"Reserve out of range: {err}") from err

    def commit(self, reserve_a: int, reserve_b: int) -> None:
        """Replace both reserves at once.

        Raises:
            InvalidArgument: If either reserve is outside [0, 2^256-1]
        """
        self._reserve_a, self._reserve_b = self.validate(reserve_a, reserve_b)

    def sync(self) -> tuple[int, int]:
        """Set reserves to the pool's actually held balances.

        Returns:
            The new (reserve_a, reserve_b)
        """
        before = self.reserves()
        held_a = self._link.balance_of(self._asset_a, self._pool_address)
        held_b = self._link.balance_of(self._asset_b, self._pool_address)
        self.commit(held_a, held_b)
        logger.info(
            "reserves_synced",
            reserve_a_before=before[0],
            reserve_b_before=before[1],
            reserve_a=held_a,
            reserve_b=held_b,
        )
        return self.reserves()
