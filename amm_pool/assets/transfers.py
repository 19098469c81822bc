"""All-or-nothing execution of an operation's asset transfers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from amm_pool.assets.base import AssetLink, TransferError
from amm_pool.errors import InsufficientAllowanceOrBalance

logger = structlog.get_logger()


class Direction(str, Enum):
    """Which way assets move relative to the pool."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class Transfer:
    """One asset movement between a party and the pool."""

    direction: Direction
    asset: str
    party: str
    amount: int

    def reversed(self) -> Transfer:
        opposite = Direction.OUT if self.direction is Direction.IN else Direction.IN
        return Transfer(opposite, self.asset, self.party, self.amount)


class TransferBatch:
    """Transfers of one pool operation, executed as a unit.

    Inbound transfers run before outbound ones. If any transfer fails the
    completed ones are reversed newest first and the failure is raised as
    InsufficientAllowanceOrBalance.

    Given the pool address, the batch first checks that the pool holds
    enough of every asset it pays out, so no transfer runs unless every
    outbound transfer is covered.

    Usage:
        batch = TransferBatch(link, pool_address)
        batch.pull(asset_a, caller, amount_a)
        batch.pull(asset_b, caller, amount_b)
        batch.execute()
    """

    def __init__(self, link: AssetLink, pool_address: str | None = None) -> None:
        self._link = link
        self._pool_address = pool_address
        self._transfers: list[Transfer] = []

    @property
    def transfers(self) -> list[Transfer]:
        return list(self._transfers)

    def pull(self, asset: str, sender: str, amount: int) -> TransferBatch:
        """Queue a transfer from `sender` into the pool."""
        if amount > 0:
            self._transfers.append(Transfer(Direction.IN, asset, sender, amount))
        return self

    def push(self, asset: str, recipient: str, amount: int) -> TransferBatch:
        """Queue a transfer from the pool to `recipient`."""
        if amount > 0:
            self._transfers.append(Transfer(Direction.OUT, asset, recipient, amount))
        return self

    def execute(self) -> None:
        """Run all queued transfers.

        Raises:
            InsufficientAllowanceOrBalance: If the pool cannot cover the
                outbound transfers, or if any transfer failed. Completed
                transfers have been reversed.
        """
        self._check_pool_covers_outbound()
        ordered = sorted(self._transfers, key=lambda t: t.direction is Direction.OUT)
        completed: list[Transfer] = []
        for transfer in ordered:
            try:
                self._apply(transfer)
            except TransferError as err:
                logger.warning(
                    "transfer_failed",
                    direction=transfer.direction.value,
                    asset=transfer.asset,
                    party=transfer.party,
                    amount=transfer.amount,
                    reason=str(err),
                )
                self._rollback(completed)
                raise InsufficientAllowanceOrBalance(
                    f"Transfer {transfer.direction.value} of {transfer.amount} "
                    f"{transfer.asset} for {transfer.party} failed: {err}"
                ) from err
            completed.append(transfer)

    def _check_pool_covers_outbound(self) -> None:
        if self._pool_address is None:
            return
        net: dict[str, int] = {}
        for transfer in self._transfers:
            sign = -1 if transfer.direction is Direction.OUT else 1
            net[transfer.asset] = net.get(transfer.asset, 0) + sign * transfer.amount
        for asset, delta in net.items():
            if delta >= 0:
                continue
            held = self._link.balance_of(asset, self._pool_address)
            if held + delta < 0:
                logger.warning(
                    "pool_balance_short",
                    asset=asset,
                    held=held,
                    required=-delta,
                )
                raise InsufficientAllowanceOrBalance(
                    f"Pool holds {held} {asset}, needs {-delta} to pay out"
                )

    def _apply(self, transfer: Transfer) -> None:
        if transfer.direction is Direction.IN:
            self._link.transfer_in(transfer.asset, transfer.party, transfer.amount)
        else:
            self._link.transfer_out(transfer.asset, transfer.party, transfer.amount)

    def _rollback(self, completed: list[Transfer]) -> None:
        for transfer in reversed(completed):
            try:
                self._apply(transfer.reversed())
            except TransferError:
                # Balances and reserves may now disagree; sync() reconciles.
                logger.exception(
                    "transfer_rollback_failed",
                    direction=transfer.direction.value,
                    asset=transfer.asset,
                    party=transfer.party,
                    amount=transfer.amount,
                )
