"""Pydantic models for the pool HTTP API.

Amounts travel as decimal strings (uint256 range), identifiers as plain
strings. JSON field names are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from amm_pool.models.types import Identity, Uint256


class ApiModel(BaseModel):
    """Base model: camelCase aliases, population by field name allowed."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class AddLiquidityRequest(ApiModel):
    caller: Identity
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")


class RemoveLiquidityRequest(ApiModel):
    caller: Identity
    share_amount: Uint256 = Field(alias="shareAmount")


class SwapRequest(ApiModel):
    caller: Identity
    amount_in: Uint256 = Field(alias="amountIn")
    asset_in: Identity = Field(alias="assetIn")
    asset_out: Identity = Field(alias="assetOut")


class SwapQuoteRequest(ApiModel):
    amount_in: Uint256 = Field(alias="amountIn")
    asset_in: Identity = Field(alias="assetIn")
    asset_out: Identity = Field(alias="assetOut")


class DepositQuoteRequest(ApiModel):
    amount: Uint256
    asset: Identity


class ShareTransferRequest(ApiModel):
    sender: Identity
    recipient: Identity
    amount: Uint256


class ApproveRequest(ApiModel):
    owner: Identity
    spender: Identity
    amount: Uint256


class MintRequest(ApiModel):
    holder: Identity
    amount: Uint256


# =============================================================================
# Responses
# =============================================================================


class PoolResponse(ApiModel):
    """Snapshot of pool state."""

    address: str
    name: str
    symbol: str
    asset_a: str = Field(alias="assetA")
    asset_b: str = Field(alias="assetB")
    fee_bps: int = Field(alias="feeBps")
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    total_shares: Uint256 = Field(alias="totalShares")


class ReservesResponse(ApiModel):
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")


class AddLiquidityResponse(ApiModel):
    minted_shares: Uint256 = Field(alias="mintedShares")
    reserves: ReservesResponse


class RemoveLiquidityResponse(ApiModel):
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")
    reserves: ReservesResponse


class SwapResponse(ApiModel):
    amount_out: Uint256 = Field(alias="amountOut")
    reserves: ReservesResponse


class SwapQuoteResponse(ApiModel):
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    asset_in: str = Field(alias="assetIn")
    asset_out: str = Field(alias="assetOut")
    reserve_in_after: Uint256 = Field(alias="reserveInAfter")
    reserve_out_after: Uint256 = Field(alias="reserveOutAfter")


class DepositQuoteResponse(ApiModel):
    """Amount of the other asset that matches a deposit at the current ratio."""

    amount: Uint256
    asset: str
    matching_amount: Uint256 = Field(alias="matchingAmount")
    matching_asset: str = Field(alias="matchingAsset")


class BalanceResponse(ApiModel):
    holder: str
    balance: Uint256


class ErrorResponse(ApiModel):
    """Body returned for a failed pool operation."""

    error: str = Field(description="Stable error code, e.g. 'insufficient_liquidity'")
    detail: str
