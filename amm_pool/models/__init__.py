"""Shared types and pydantic API models."""

from amm_pool.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    ApproveRequest,
    BalanceResponse,
    DepositQuoteRequest,
    DepositQuoteResponse,
    ErrorResponse,
    MintRequest,
    PoolResponse,
    RemoveLiquidityRequest,
    RemoveLiquidityResponse,
    ReservesResponse,
    ShareTransferRequest,
    SwapQuoteRequest,
    SwapQuoteResponse,
    SwapRequest,
    SwapResponse,
)
from amm_pool.models.types import Identity, Uint256, normalize_identity, require_amount

__all__ = [
    # Types
    "Identity",
    "Uint256",
    "normalize_identity",
    "require_amount",
    # Requests
    "AddLiquidityRequest",
    "RemoveLiquidityRequest",
    "SwapRequest",
    "SwapQuoteRequest",
    "DepositQuoteRequest",
    "ShareTransferRequest",
    "ApproveRequest",
    "MintRequest",
    # Responses
    "PoolResponse",
    "ReservesResponse",
    "AddLiquidityResponse",
    "RemoveLiquidityResponse",
    "SwapResponse",
    "SwapQuoteResponse",
    "DepositQuoteResponse",
    "BalanceResponse",
    "ErrorResponse",
]
