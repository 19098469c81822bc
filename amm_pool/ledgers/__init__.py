"""Pool ledgers: reserves, LP shares and the balance book they build on."""

from amm_pool.ledgers.balances import BalanceBook
from amm_pool.ledgers.reserves import ReserveLedger
from amm_pool.ledgers.shares import ShareLedger

__all__ = ["BalanceBook", "ReserveLedger", "ShareLedger"]
