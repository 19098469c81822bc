"""Pool error classes.

Every failed pool operation raises one of these and leaves the pool
untouched. The `code` attribute is a stable identifier used in logs and
API responses.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import ClassVar

from amm_pool.safe_int import SafeIntError


class PoolError(Exception):
    """Base error for pool operations."""

    code: ClassVar[str] = "pool_error"


class InvalidArgument(PoolError):
    """Zero, negative, non-integer or out-of-range amount or identifier."""

    code: ClassVar[str] = "invalid_argument"


class InvalidAssetPair(InvalidArgument):
    """Asset identifiers do not match the pool's configured pair."""

    code: ClassVar[str] = "invalid_asset_pair"


class InsufficientLiquidity(PoolError):
    """Swap would not move or would exhaust the output reserve, or pool is empty."""

    code: ClassVar[str] = "insufficient_liquidity"


class InsufficientShares(PoolError):
    """Burn or transfer exceeds the holder's share balance or allowance."""

    code: ClassVar[str] = "insufficient_shares"


class InsufficientAllowanceOrBalance(PoolError):
    """An external asset transfer failed."""

    code: ClassVar[str] = "insufficient_allowance_or_balance"


class InvariantViolation(PoolError):
    """A post-condition check failed. Should never happen."""

    code: ClassVar[str] = "invariant_violation"


class DegenerateDeposit(PoolError):
    """Deposit would mint zero shares after rounding."""

    code: ClassVar[str] = "degenerate_deposit"


@contextmanager
def invariant_guard(operation: str) -> Iterator[None]:
    """Translate arithmetic failures inside pool math into InvariantViolation.

    Inputs are validated before any math runs, so an underflow or a zero
    divisor here means ledger state is inconsistent.
    """
    try:
        yield
    except SafeIntError as err:
        raise InvariantViolation(f"{operation}: {err}") from err


__all__ = [
    "invariant_guard",
    "PoolError",
    "InvalidArgument",
    "InvalidAssetPair",
    "InsufficientLiquidity",
    "InsufficientShares",
    "InsufficientAllowanceOrBalance",
    "InvariantViolation",
    "DegenerateDeposit",
]
