"""Constant-product pool math.

Pure integer functions: no state, no side effects. Every division rounds
down, so rounding always favours the pool over the caller.

Swap formula (x * y = k), with an optional fee in basis points:
    amount_in_with_fee = amount_in * (10000 - fee_bps)
    amount_out = amount_in_with_fee * reserve_out
                 // (reserve_in * 10000 + amount_in_with_fee)

With fee_bps = 0 this reduces exactly to
    amount_out = reserve_out * amount_in // (reserve_in + amount_in)
"""

from __future__ import annotations

from amm_pool.constants import DEFAULT_FEE_BPS, FEE_BASE_BPS
from amm_pool.safe_int import S


def bootstrap_shares(amount_a: int, amount_b: int) -> int:
    """Shares minted by the first deposit into an empty pool.

    The geometric mean floor(sqrt(amount_a * amount_b)) makes the minted
    amount independent of the price ratio the first depositor picks.
    """
    return (S(amount_a) * S(amount_b)).sqrt().value


def proportional_shares(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
) -> int:
    """Shares minted by a deposit into a non-empty pool.

    Uses the smaller of the two per-asset ratios, so an unbalanced deposit
    is credited only for its under-supplied side.
    """
    by_a = S(amount_a) * S(total_shares) // S(reserve_a)
    by_b = S(amount_b) * S(total_shares) // S(reserve_b)
    return by_a.min(by_b).value


def deposit_ratios_match(amount_a: int, amount_b: int, reserve_a: int, reserve_b: int) -> bool:
    """True if amount_a / amount_b equals reserve_a / reserve_b exactly."""
    return S(amount_a) * S(reserve_b) == S(amount_b) * S(reserve_a)


def withdrawal_amounts(
    share_amount: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
) -> tuple[int, int]:
    """Assets paid out for burning `share_amount` of `total_shares`.

    Burning every outstanding share returns both reserves exactly.
    """
    out_a = S(reserve_a) * S(share_amount) // S(total_shares)
    out_b = S(reserve_b) * S(share_amount) // S(total_shares)
    return out_a.value, out_b.value


def quote(amount: int, reserve_from: int, reserve_to: int) -> int:
    """Amount of the other asset matching `amount` at the current reserve ratio."""
    return (S(amount) * S(reserve_to) // S(reserve_from)).value


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_bps: int = DEFAULT_FEE_BPS,
) -> int:
    """Calculate swap output using the constant product formula.

    Args:
        amount_in: Input asset amount
        reserve_in: Reserve of the input asset
        reserve_out: Reserve of the output asset
        fee_bps: Fee kept in the pool, in basis points (0 = no fee)

    Returns:
        Output asset amount, or 0 when either reserve or the input is empty
    """
    if amount_in <= 0:
        return 0
    if reserve_in <= 0 or reserve_out <= 0:
        return 0

    amount_in_with_fee = S(amount_in) * S(FEE_BASE_BPS - fee_bps)
    numerator = amount_in_with_fee * S(reserve_out)
    denominator = S(reserve_in) * S(FEE_BASE_BPS) + amount_in_with_fee

    return (numerator // denominator).value


def product_preserved(
    reserve_in: int,
    reserve_out: int,
    new_reserve_in: int,
    new_reserve_out: int,
) -> bool:
    """Check that a swap did not decrease the constant product k."""
    return S(new_reserve_in) * S(new_reserve_out) >= S(reserve_in) * S(reserve_out)


__all__ = [
    "bootstrap_shares",
    "proportional_shares",
    "deposit_ratios_match",
    "withdrawal_amounts",
    "quote",
    "get_amount_out",
    "product_preserved",
]
