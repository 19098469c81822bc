"""FastAPI application exposing one liquidity pool.

The default pool runs against the in-memory asset ledger. Persistence and
real token integrations belong to whatever deploys this service.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from amm_pool import __version__
from amm_pool.api.endpoints import router
from amm_pool.assets.base import TransferError, UnknownAsset
from amm_pool.errors import (
    DegenerateDeposit,
    InsufficientAllowanceOrBalance,
    InsufficientLiquidity,
    InsufficientShares,
    InvalidArgument,
    InvariantViolation,
    PoolError,
)
from amm_pool.models.api import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("POOL_HOST", "0.0.0.0")
PORT = int(os.environ.get("POOL_PORT", "8000"))
DEBUG = os.environ.get("POOL_DEBUG", "false").lower() in ("true", "1", "yes")
LOG_LEVEL = os.environ.get("POOL_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# HTTP status per error class, most specific first
ERROR_STATUS: list[tuple[type[PoolError], int]] = [
    (InvalidArgument, 400),
    (InsufficientLiquidity, 409),
    (InsufficientShares, 409),
    (InsufficientAllowanceOrBalance, 409),
    (DegenerateDeposit, 409),
    (InvariantViolation, 500),
]

logger = structlog.get_logger()


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure structlog with level filtering, ISO timestamps and console output."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
    )


def status_for(error: PoolError) -> int:
    for error_type, status in ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 400


app = FastAPI(
    title="AMM Liquidity Pool",
    description="Two-asset constant-product liquidity pool",
    version=__version__,
)


@app.exception_handler(PoolError)
async def pool_error_handler(request: Request, exc: PoolError) -> JSONResponse:
    """Map pool errors to JSON bodies with a stable error code."""
    status = status_for(exc)
    log = logger.error if status >= 500 else logger.info
    log("pool_request_failed", path=request.url.path, error=exc.code, detail=str(exc))
    body = ErrorResponse(error=exc.code, detail=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(TransferError)
async def transfer_error_handler(request: Request, exc: TransferError) -> JSONResponse:
    """Errors raised directly by the development asset ledger."""
    status = 404 if isinstance(exc, UnknownAsset) else 409
    code = "unknown_asset" if isinstance(exc, UnknownAsset) else "transfer_failed"
    logger.info("asset_request_failed", path=request.url.path, error=code, detail=str(exc))
    body = ErrorResponse(error=code, detail=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the pool API server.

    Configuration via environment variables:
    - POOL_HOST: Host to bind to (default: 0.0.0.0)
    - POOL_PORT: Port to bind to (default: 8000)
    - POOL_DEBUG: Enable debug/reload mode (default: false)
    - POOL_LOG_LEVEL: Log level (default: INFO, DEBUG when POOL_DEBUG is set)
    - POOL_NAME, POOL_SYMBOL, POOL_ASSET_A, POOL_ASSET_B, POOL_ADDRESS,
      POOL_FEE_BPS: pool parameters (see PoolConfig.from_env)
    """
    configure_logging()
    uvicorn.run(
        "amm_pool.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
