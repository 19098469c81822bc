"""Asset transfer capability consumed by the pool.

The pool never implements a token. It only moves assets through an
AssetLink and reads balances back for reconciliation.
"""

from typing import Protocol, runtime_checkable


class TransferError(Exception):
    """Base error for asset transfers."""

    pass


class InsufficientBalance(TransferError):
    """Sender holds less than the transfer amount."""

    pass


class InsufficientAllowance(TransferError):
    """Sender has not approved the pool for the transfer amount."""

    pass


class UnknownAsset(TransferError):
    """Asset identifier is not known to the asset link."""

    pass


@runtime_checkable
class AssetLink(Protocol):
    """Protocol for moving pooled assets in and out of the pool.

    Each transfer is atomic: it either completes or raises TransferError
    having changed nothing. Implementations are bound to one pool address.
    """

    def transfer_in(self, asset: str, sender: str, amount: int) -> None:
        """Move `amount` of `asset` from `sender` into the pool.

        Raises:
            TransferError: If the sender's balance or allowance is short
        """
        ...

    def transfer_out(self, asset: str, recipient: str, amount: int) -> None:
        """Move `amount` of `asset` from the pool to `recipient`.

        Raises:
            TransferError: If the pool's balance is short
        """
        ...

    def balance_of(self, asset: str, holder: str) -> int:
        """Return how much of `asset` `holder` holds."""
        ...
