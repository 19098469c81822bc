"""LP share ledger."""

from amm_pool.errors import InsufficientShares
from amm_pool.ledgers.balances import BalanceBook


class ShareLedger(BalanceBook):
    """LP share balances and total issued shares.

    Shares are created only by mint (deposit) and destroyed only by burn
    (withdraw). They are tradeable: transfer and transfer_from move shares
    between holders without changing the total.

    Attributes:
        name: LP token name, immutable
        symbol: LP token symbol, immutable
    """

    balance_error = InsufficientShares
    allowance_error = InsufficientShares

    def __init__(self, name: str, symbol: str) -> None:
        super().__init__()
        self._name = name
        self._symbol = symbol

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    def is_empty(self) -> bool:
        """True when no shares are outstanding."""
        return self.total_supply == 0
