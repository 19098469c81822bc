"""API endpoints for the liquidity pool."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from amm_pool.assets.memory import InMemoryAssetLink
from amm_pool.config import PoolConfig
from amm_pool.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    ApproveRequest,
    BalanceResponse,
    DepositQuoteRequest,
    DepositQuoteResponse,
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
from amm_pool.models.types import normalize_identity
from amm_pool.pool.pool import Pool, create_in_memory_pool

logger = structlog.get_logger()

router = APIRouter()

_default: tuple[Pool, InMemoryAssetLink] | None = None


def _default_pool() -> tuple[Pool, InMemoryAssetLink]:
    """Create the process-wide pool on first use, configured from POOL_* env vars."""
    global _default
    if _default is None:
        config = PoolConfig.from_env()
        _default = create_in_memory_pool(config)
        logger.info(
            "pool_created",
            name=config.name,
            symbol=config.symbol,
            asset_a=config.asset_a,
            asset_b=config.asset_b,
            fee_bps=config.fee_bps,
        )
    return _default


def get_pool() -> Pool:
    """Dependency provider for the pool instance.

    Override this in tests to inject a different pool:
        app.dependency_overrides[get_pool] = lambda: pool
    """
    return _default_pool()[0]


def get_asset_link() -> InMemoryAssetLink:
    """Dependency provider for the development asset ledger."""
    return _default_pool()[1]


def _reserves(pool: Pool) -> ReservesResponse:
    reserve_a, reserve_b = pool.reserves()
    return ReservesResponse(reserve_a=reserve_a, reserve_b=reserve_b)


# =============================================================================
# Pool
# =============================================================================


@router.get("/pool")
def pool_state(pool: Pool = Depends(get_pool)) -> PoolResponse:
    """Current pool metadata, reserves and total shares."""
    snapshot = pool.snapshot()
    return PoolResponse(
        address=snapshot.address,
        name=snapshot.name,
        symbol=snapshot.symbol,
        asset_a=snapshot.asset_a,
        asset_b=snapshot.asset_b,
        fee_bps=snapshot.fee_bps,
        reserve_a=snapshot.reserve_a,
        reserve_b=snapshot.reserve_b,
        total_shares=snapshot.total_shares,
    )


@router.get("/pool/shares/{holder}")
def share_balance(holder: str, pool: Pool = Depends(get_pool)) -> BalanceResponse:
    return BalanceResponse(holder=holder, balance=pool.share_balance_of(holder))


@router.post("/pool/liquidity")
def add_liquidity(
    request: AddLiquidityRequest, pool: Pool = Depends(get_pool)
) -> AddLiquidityResponse:
    """Deposit both assets and mint LP shares.

    Deposits off the current reserve ratio are accepted; the excess is not
    refunded. Use /pool/liquidity/quote to match the ratio.
    """
    minted = pool.add_liquidity(request.caller, int(request.amount_a), int(request.amount_b))
    return AddLiquidityResponse(minted_shares=minted, reserves=_reserves(pool))


@router.post("/pool/liquidity/quote")
def quote_deposit(
    request: DepositQuoteRequest, pool: Pool = Depends(get_pool)
) -> DepositQuoteResponse:
    """Amount of the other asset to pair with `amount` of `asset`."""
    asset_a, asset_b = pool.pair_identity()
    asset = normalize_identity(request.asset)
    matching = pool.quote_deposit(int(request.amount), asset)
    return DepositQuoteResponse(
        amount=request.amount,
        asset=asset,
        matching_amount=matching,
        matching_asset=asset_b if asset == asset_a else asset_a,
    )


@router.post("/pool/liquidity/remove")
def remove_liquidity(
    request: RemoveLiquidityRequest, pool: Pool = Depends(get_pool)
) -> RemoveLiquidityResponse:
    amount_a, amount_b = pool.remove_liquidity(request.caller, int(request.share_amount))
    return RemoveLiquidityResponse(amount_a=amount_a, amount_b=amount_b, reserves=_reserves(pool))


@router.post("/pool/swap")
def swap(request: SwapRequest, pool: Pool = Depends(get_pool)) -> SwapResponse:
    amount_out = pool.swap(
        request.caller, int(request.amount_in), request.asset_in, request.asset_out
    )
    return SwapResponse(amount_out=amount_out, reserves=_reserves(pool))


@router.post("/pool/swap/quote")
def quote_swap(request: SwapQuoteRequest, pool: Pool = Depends(get_pool)) -> SwapQuoteResponse:
    result = pool.quote_swap(int(request.amount_in), request.asset_in, request.asset_out)
    return SwapQuoteResponse(
        amount_in=result.amount_in,
        amount_out=result.amount_out,
        asset_in=result.asset_in,
        asset_out=result.asset_out,
        reserve_in_after=result.new_reserve_in,
        reserve_out_after=result.new_reserve_out,
    )


@router.post("/pool/sync")
def sync(pool: Pool = Depends(get_pool)) -> ReservesResponse:
    """Reset reserves to the pool's held balances."""
    reserve_a, reserve_b = pool.sync()
    return ReservesResponse(reserve_a=reserve_a, reserve_b=reserve_b)


@router.post("/pool/shares/transfer")
def transfer_shares(
    request: ShareTransferRequest, pool: Pool = Depends(get_pool)
) -> BalanceResponse:
    pool.transfer_shares(request.sender, request.recipient, int(request.amount))
    return BalanceResponse(holder=request.sender, balance=pool.share_balance_of(request.sender))


# =============================================================================
# Development asset ledger
# =============================================================================


@router.get("/assets/{asset}/balances/{holder}")
def asset_balance(
    asset: str, holder: str, link: InMemoryAssetLink = Depends(get_asset_link)
) -> BalanceResponse:
    return BalanceResponse(holder=holder, balance=link.balance_of(asset, holder))


@router.post("/assets/{asset}/approve")
def approve_asset(
    asset: str, request: ApproveRequest, link: InMemoryAssetLink = Depends(get_asset_link)
) -> BalanceResponse:
    """Set an allowance; approve the pool address before depositing or swapping."""
    token = link.token(asset)
    token.approve(request.owner, request.spender, int(request.amount))
    return BalanceResponse(
        holder=request.owner, balance=token.allowance(request.owner, request.spender)
    )


@router.post("/assets/{asset}/mint")
def mint_asset(
    asset: str, request: MintRequest, link: InMemoryAssetLink = Depends(get_asset_link)
) -> BalanceResponse:
    """Credit a holder on the in-memory ledger (local development only)."""
    token = link.token(asset)
    token.mint(request.holder, int(request.amount))
    logger.info("asset_minted", asset=asset, holder=request.holder, amount=request.amount)
    return BalanceResponse(holder=request.holder, balance=token.balance_of(request.holder))
