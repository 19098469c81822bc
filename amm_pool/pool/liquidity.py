"""Liquidity manager: deposits mint LP shares, withdrawals burn them.

Every operation follows the same shape:
1. Validate arguments and read current reserves and shares
2. Compute the new state with floor-rounded integer math
3. Run the asset transfers as one TransferBatch
4. Commit reserves and shares

A failure in 1-3 leaves the pool exactly as it was.
"""

from __future__ import annotations

import structlog

from amm_pool.assets.base import AssetLink
from amm_pool.assets.transfers import TransferBatch
from amm_pool.constants import MAX_AMOUNT
from amm_pool.errors import (
    DegenerateDeposit,
    InsufficientLiquidity,
    InsufficientShares,
    InvalidArgument,
    invariant_guard,
)
from amm_pool.ledgers.reserves import ReserveLedger
from amm_pool.ledgers.shares import ShareLedger
from amm_pool.math.constant_product import (
    bootstrap_shares,
    deposit_ratios_match,
    proportional_shares,
    quote,
    withdrawal_amounts,
)
from amm_pool.models.types import normalize_identity, require_amount
from amm_pool.safe_int import S

logger = structlog.get_logger()


class LiquidityManager:
    """Computes and applies deposits and withdrawals for one pool.

    Not synchronized: the owning Pool holds its lock around every call.
    """

    def __init__(
        self,
        reserves: ReserveLedger,
        shares: ShareLedger,
        link: AssetLink,
        asset_a: str,
        asset_b: str,
    ) -> None:
        self.reserves = reserves
        self.shares = shares
        self.link = link
        self.asset_a = asset_a
        self.asset_b = asset_b

    # --- Deposits ---

    def quote_add_liquidity(self, amount_a: int, amount_b: int) -> int:
        """Shares a deposit of (amount_a, amount_b) would mint right now.

        Raises:
            InvalidArgument: If either amount is not a positive uint256
            DegenerateDeposit: If the deposit would mint zero shares
        """
        amount_a = require_amount("amount_a", amount_a)
        amount_b = require_amount("amount_b", amount_b)
        total = self.shares.total_supply

        with invariant_guard("add_liquidity"):
            if total == 0:
                minted = bootstrap_shares(amount_a, amount_b)
            else:
                reserve_a, reserve_b = self.reserves.reserves()
                minted = proportional_shares(amount_a, amount_b, reserve_a, reserve_b, total)

        if minted == 0:
            raise DegenerateDeposit(
                f"Deposit of ({amount_a}, {amount_b}) mints zero shares "
                f"against reserves {self.reserves.reserves()} and {total} shares"
            )
        if total + minted > MAX_AMOUNT:
            raise InvalidArgument(f"Minting {minted} shares overflows total supply")
        return minted

    def add_liquidity(self, caller: str, amount_a: int, amount_b: int) -> int:
        """Deposit both assets and mint LP shares to the caller.

        An empty pool mints floor(sqrt(amount_a * amount_b)). Otherwise the
        smaller of the two per-asset ratios applies, and the over-supplied
        excess stays in the pool for existing holders. Nothing is refunded.

        Returns:
            Number of shares minted

        Raises:
            InvalidArgument: If either amount is not a positive uint256
            DegenerateDeposit: If the deposit would mint zero shares
            InsufficientAllowanceOrBalance: If pulling either asset failed
        """
        caller = normalize_identity(caller)
        minted = self.quote_add_liquidity(amount_a, amount_b)
        reserve_a, reserve_b = self.reserves.reserves()
        bootstrap = self.shares.is_empty()
        new_reserves = ReserveLedger.validate(reserve_a + amount_a, reserve_b + amount_b)

        if not bootstrap and not deposit_ratios_match(amount_a, amount_b, reserve_a, reserve_b):
            logger.warning(
                "unmatched_deposit_ratio",
                caller=caller,
                amount_a=amount_a,
                amount_b=amount_b,
                reserve_a=reserve_a,
                reserve_b=reserve_b,
                message="Excess over the pool ratio is not refunded",
            )

        batch = TransferBatch(self.link, self.reserves.pool_address)
        batch.pull(self.asset_a, caller, amount_a).pull(self.asset_b, caller, amount_b)
        batch.execute()

        self.reserves.commit(*new_reserves)
        self.shares.mint(caller, minted)

        logger.info(
            "liquidity_added",
            caller=caller,
            amount_a=amount_a,
            amount_b=amount_b,
            minted=minted,
            bootstrap=bootstrap,
            total_shares=self.shares.total_supply,
        )
        return minted

    def quote_deposit(self, amount: int, asset: str) -> int:
        """Amount of the other asset that matches `amount` of `asset`.

        Depositing this pair mints shares for both sides with no excess.

        Raises:
            InvalidArgument: If amount is not positive or asset is not pooled
            InsufficientLiquidity: If the pool is empty (any ratio is accepted)
        """
        amount = require_amount("amount", amount)
        asset = normalize_identity(asset)
        reserve_from = self.reserves.reserve_of(asset)
        other = self.asset_b if asset == self.asset_a else self.asset_a
        reserve_to = self.reserves.reserve_of(other)
        if self.shares.is_empty() or reserve_from == 0 or reserve_to == 0:
            raise InsufficientLiquidity("Pool is empty; the first deposit sets the ratio")
        with invariant_guard("quote_deposit"):
            return quote(amount, reserve_from, reserve_to)

    # --- Withdrawals ---

    def quote_remove_liquidity(self, share_amount: int) -> tuple[int, int]:
        """Assets (out_a, out_b) burning `share_amount` would pay right now.

        Raises:
            InvalidArgument: If share_amount is not a positive integer
            InsufficientShares: If share_amount exceeds all outstanding shares
        """
        share_amount = require_amount("share_amount", share_amount)
        total = self.shares.total_supply
        if share_amount > total:
            raise InsufficientShares(f"Only {total} shares are outstanding, asked {share_amount}")
        reserve_a, reserve_b = self.reserves.reserves()
        with invariant_guard("remove_liquidity"):
            return withdrawal_amounts(share_amount, reserve_a, reserve_b, total)

    def remove_liquidity(self, caller: str, share_amount: int) -> tuple[int, int]:
        """Burn the caller's shares and pay out their part of both reserves.

        Burning every outstanding share returns the pool to the empty state.

        Returns:
            (out_a, out_b) paid to the caller

        Raises:
            InvalidArgument: If share_amount is not a positive integer
            InsufficientShares: If share_amount exceeds the caller's balance
            InsufficientAllowanceOrBalance: If paying out either asset failed
        """
        caller = normalize_identity(caller)
        share_amount = require_amount("share_amount", share_amount)
        balance = self.shares.balance_of(caller)
        if share_amount > balance:
            raise InsufficientShares(
                f"{caller} holds {balance} shares, asked to burn {share_amount}"
            )

        out_a, out_b = self.quote_remove_liquidity(share_amount)
        reserve_a, reserve_b = self.reserves.reserves()
        with invariant_guard("remove_liquidity"):
            new_reserves = ReserveLedger.validate(
                (S(reserve_a) - S(out_a)).value, (S(reserve_b) - S(out_b)).value
            )

        batch = TransferBatch(self.link, self.reserves.pool_address)
        batch.push(self.asset_a, caller, out_a).push(self.asset_b, caller, out_b)
        batch.execute()

        self.shares.burn(caller, share_amount)
        self.reserves.commit(*new_reserves)

        logger.info(
            "liquidity_removed",
            caller=caller,
            burned=share_amount,
            amount_a=out_a,
            amount_b=out_b,
            total_shares=self.shares.total_supply,
        )
        return out_a, out_b
