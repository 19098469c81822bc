"""Asset transfer capability and its in-memory implementation."""

from amm_pool.assets.base import (
    AssetLink,
    InsufficientAllowance,
    InsufficientBalance,
    TransferError,
    UnknownAsset,
)
from amm_pool.assets.memory import InMemoryAssetLink, InMemoryToken
from amm_pool.assets.transfers import Direction, Transfer, TransferBatch

__all__ = [
    # Capability
    "AssetLink",
    "TransferError",
    "InsufficientBalance",
    "InsufficientAllowance",
    "UnknownAsset",
    # In-memory tokens
    "InMemoryToken",
    "InMemoryAssetLink",
    # Batching
    "Direction",
    "Transfer",
    "TransferBatch",
]
