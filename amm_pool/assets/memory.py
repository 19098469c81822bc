"""In-memory ERC-20-style assets.

Used by the tests and the local development API. Mirrors the token the
pool was designed against: the pool can only pull assets a holder has
approved it for, and pays out by plain transfer.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from amm_pool.assets.base import InsufficientAllowance, InsufficientBalance, UnknownAsset
from amm_pool.ledgers.balances import BalanceBook
from amm_pool.models.types import normalize_identity

logger = structlog.get_logger()


class InMemoryToken(BalanceBook):
    """A fungible token held in process memory."""

    balance_error = InsufficientBalance
    allowance_error = InsufficientAllowance

    def __init__(self, address: str, symbol: str, name: str | None = None, decimals: int = 18):
        super().__init__()
        self.address = normalize_identity(address)
        self.symbol = symbol
        self.name = name or symbol
        self.decimals = decimals

    def __repr__(self) -> str:
        return f"InMemoryToken({self.symbol}, {self.address})"


class InMemoryAssetLink:
    """AssetLink over a set of InMemoryTokens, bound to one pool address."""

    def __init__(self, pool_address: str, tokens: Iterable[InMemoryToken]) -> None:
        self.pool_address = normalize_identity(pool_address)
        self._tokens = {token.address: token for token in tokens}

    def token(self, asset: str) -> InMemoryToken:
        """Look up a token by identifier.

        Raises:
            UnknownAsset: If no token has this identifier
        """
        token = self._tokens.get(normalize_identity(asset))
        if token is None:
            raise UnknownAsset(f"Unknown asset: {asset}")
        return token

    def transfer_in(self, asset: str, sender: str, amount: int) -> None:
        self.token(asset).transfer_from(self.pool_address, sender, self.pool_address, amount)
        logger.debug("asset_transferred_in", asset=asset, sender=sender, amount=amount)

    def transfer_out(self, asset: str, recipient: str, amount: int) -> None:
        self.token(asset).transfer(self.pool_address, recipient, amount)
        logger.debug("asset_transferred_out", asset=asset, recipient=recipient, amount=amount)

    def balance_of(self, asset: str, holder: str) -> int:
        return self.token(asset).balance_of(holder)
