"""Fungible balance book.

BalanceBook is the ERC-20-shaped bookkeeping shared by the LP share ledger
and the in-memory asset tokens: balances, total supply, allowances, and
the mint/burn/transfer/approve/transfer_from operations over them.

Subclasses choose which exceptions signal a short balance or a short
allowance, so the same bookkeeping raises InsufficientShares for LP shares
and a TransferError for assets.
"""

from __future__ import annotations

from typing import ClassVar

from amm_pool.models.types import normalize_identity, require_amount
from amm_pool.safe_int import S, Uint256Overflow, Underflow


class BalanceBook:
    """Per-holder balances with a tracked total supply.

    Invariant: the sum of all balances equals total_supply.

    Not thread-safe on its own; the owning Pool serializes access.
    """

    balance_error: ClassVar[type[Exception]] = ValueError
    allowance_error: ClassVar[type[Exception]] = ValueError

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}
        self._allowances: dict[tuple[str, str], int] = {}
        self._total_supply = 0

    @property
    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, holder: str) -> int:
        return self._balances.get(normalize_identity(holder), 0)

    def allowance(self, owner: str, spender: str) -> int:
        key = (normalize_identity(owner), normalize_identity(spender))
        return self._allowances.get(key, 0)

    def holders(self) -> dict[str, int]:
        """Return a copy of all non-zero balances."""
        return dict(self._balances)

    def mint(self, holder: str, amount: int) -> None:
        """Create `amount` units for `holder`, growing total supply."""
        holder = normalize_identity(holder)
        amount = require_amount("amount", amount)
        try:
            new_supply = (S(self._total_supply) + S(amount)).to_uint256()
        except Uint256Overflow as err:
            raise self.balance_error(f"Mint of {amount} overflows total supply") from err
        self._set_balance(holder, self._balances.get(holder, 0) + amount)
        self._total_supply = new_supply

    def burn(self, holder: str, amount: int) -> None:
        """Destroy `amount` units held by `holder`, shrinking total supply."""
        holder = normalize_identity(holder)
        amount = require_amount("amount", amount)
        new_balance = self._debit(holder, amount)
        self._set_balance(holder, new_balance)
        self._total_supply = (S(self._total_supply) - S(amount)).value

    def transfer(self, sender: str, recipient: str, amount: int) -> None:
        """Move `amount` from sender to recipient. Total supply is unchanged."""
        sender = normalize_identity(sender)
        recipient = normalize_identity(recipient)
        amount = require_amount("amount", amount)
        new_sender_balance = self._debit(sender, amount)
        self._set_balance(sender, new_sender_balance)
        self._set_balance(recipient, self._balances.get(recipient, 0) + amount)

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """Set the amount `spender` may move out of `owner`'s balance."""
        key = (normalize_identity(owner), normalize_identity(spender))
        amount = require_amount("amount", amount, allow_zero=True)
        if amount == 0:
            self._allowances.pop(key, None)
        else:
            self._allowances[key] = amount

    def transfer_from(self, spender: str, owner: str, recipient: str, amount: int) -> None:
        """Move `amount` from owner to recipient, spending spender's allowance.

        Both the allowance and the balance are checked before either is
        changed.
        """
        key = (normalize_identity(owner), normalize_identity(spender))
        amount = require_amount("amount", amount)
        allowed = self._allowances.get(key, 0)
        if allowed < amount:
            raise self.allowance_error(
                f"Allowance of {key[1]} over {key[0]} is {allowed}, needs {amount}"
            )
        self.transfer(owner, recipient, amount)
        self._allowances[key] = allowed - amount
        if self._allowances[key] == 0:
            del self._allowances[key]

    def _debit(self, holder: str, amount: int) -> int:
        balance = self._balances.get(holder, 0)
        try:
            return (S(balance) - S(amount)).value
        except Underflow as err:
            raise self.balance_error(
                f"Balance of {holder} is {balance}, needs {amount}"
            ) from err

    def _set_balance(self, holder: str, amount: int) -> None:
        if amount == 0:
            self._balances.pop(holder, None)
        else:
            self._balances[holder] = amount
