"""Swap engine: constant-product swaps against the pool reserves."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from amm_pool.assets.base import AssetLink
from amm_pool.assets.transfers import TransferBatch
from amm_pool.constants import DEFAULT_FEE_BPS
from amm_pool.errors import (
    InsufficientLiquidity,
    InvalidAssetPair,
    InvariantViolation,
    invariant_guard,
)
from amm_pool.ledgers.reserves import ReserveLedger
from amm_pool.ledgers.shares import ShareLedger
from amm_pool.math.constant_product import get_amount_out, product_preserved
from amm_pool.models.types import normalize_identity, require_amount
from amm_pool.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapQuote:
    """Outcome of a swap computed against the current reserves."""

    amount_in: int
    amount_out: int
    asset_in: str
    asset_out: str
    reserve_in: int
    reserve_out: int
    new_reserve_in: int
    new_reserve_out: int


class SwapEngine:
    """Prices and executes swaps for one pool.

    Formula: amount_out = reserve_out * amount_in // (reserve_in + amount_in)
    when fee_bps is 0. A non-zero fee scales amount_in by
    (10000 - fee_bps) / 10000 before pricing and the fee stays in the
    reserves.

    Not synchronized: the owning Pool holds its lock around every call.
    """

    def __init__(
        self,
        reserves: ReserveLedger,
        shares: ShareLedger,
        link: AssetLink,
        asset_a: str,
        asset_b: str,
        fee_bps: int = DEFAULT_FEE_BPS,
    ) -> None:
        self.reserves = reserves
        self.shares = shares
        self.link = link
        self.asset_a = asset_a
        self.asset_b = asset_b
        self.fee_bps = fee_bps

    def resolve_pair(self, asset_in: str, asset_out: str) -> tuple[str, str]:
        """Normalize and check the (asset_in, asset_out) direction.

        Raises:
            InvalidAssetPair: Unless the two identifiers are the pool's two
                assets in either order
        """
        pair = (normalize_identity(asset_in), normalize_identity(asset_out))
        if pair not in ((self.asset_a, self.asset_b), (self.asset_b, self.asset_a)):
            raise InvalidAssetPair(
                f"Pair ({asset_in}, {asset_out}) does not match pool "
                f"({self.asset_a}, {self.asset_b})"
            )
        return pair

    def quote_swap(self, amount_in: int, asset_in: str, asset_out: str) -> SwapQuote:
        """Compute a swap without executing it.

        Raises:
            InvalidArgument: If amount_in is not a positive uint256
            InvalidAssetPair: If the assets are not the pool's pair
            InsufficientLiquidity: If no shares exist, a reserve is 0, the
                output rounds to zero, or the output would drain the reserve
            InvariantViolation: If the swap would decrease the product
        """
        amount_in = require_amount("amount_in", amount_in)
        asset_in, asset_out = self.resolve_pair(asset_in, asset_out)
        reserve_in = self.reserves.reserve_of(asset_in)
        reserve_out = self.reserves.reserve_of(asset_out)

        if self.shares.is_empty() or reserve_in == 0 or reserve_out == 0:
            raise InsufficientLiquidity("Pool has no liquidity")

        amount_out = get_amount_out(amount_in, reserve_in, reserve_out, self.fee_bps)
        if amount_out == 0:
            raise InsufficientLiquidity(f"Swap of {amount_in} {asset_in} yields nothing")
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(
                f"Swap output {amount_out} would drain reserve of {reserve_out} {asset_out}"
            )

        with invariant_guard("swap"):
            new_reserve_in = (S(reserve_in) + S(amount_in)).value
            new_reserve_out = (S(reserve_out) - S(amount_out)).value

        if not product_preserved(reserve_in, reserve_out, new_reserve_in, new_reserve_out):
            raise InvariantViolation(
                f"Swap decreases constant product: {reserve_in} * {reserve_out} -> "
                f"{new_reserve_in} * {new_reserve_out}"
            )

        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            asset_in=asset_in,
            asset_out=asset_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            new_reserve_in=new_reserve_in,
            new_reserve_out=new_reserve_out,
        )

    def swap(self, caller: str, amount_in: int, asset_in: str, asset_out: str) -> int:
        """Sell `amount_in` of `asset_in` to the pool for `asset_out`.

        Returns:
            Amount of asset_out paid to the caller

        Raises:
            InvalidArgument: If amount_in is not a positive uint256
            InvalidAssetPair: If the assets are not the pool's pair
            InsufficientLiquidity: If the output is zero or would drain the reserve
            InvariantViolation: If the swap would decrease the product
            InsufficientAllowanceOrBalance: If either transfer failed
        """
        caller = normalize_identity(caller)
        result = self.quote_swap(amount_in, asset_in, asset_out)

        if result.asset_in == self.asset_a:
            new_reserves = (result.new_reserve_in, result.new_reserve_out)
        else:
            new_reserves = (result.new_reserve_out, result.new_reserve_in)
        new_reserves = ReserveLedger.validate(*new_reserves)

        batch = TransferBatch(self.link, self.reserves.pool_address)
        batch.pull(result.asset_in, caller, result.amount_in)
        batch.push(result.asset_out, caller, result.amount_out)
        batch.execute()

        self.reserves.commit(*new_reserves)

        logger.info(
            "swap_executed",
            caller=caller,
            asset_in=result.asset_in,
            asset_out=result.asset_out,
            amount_in=result.amount_in,
            amount_out=result.amount_out,
            reserve_a=new_reserves[0],
            reserve_b=new_reserves[1],
        )
        return result.amount_out
