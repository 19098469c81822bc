"""Pool math."""

from amm_pool.math.constant_product import (
    bootstrap_shares,
    deposit_ratios_match,
    get_amount_out,
    product_preserved,
    proportional_shares,
    quote,
    withdrawal_amounts,
)

__all__ = [
    "bootstrap_shares",
    "proportional_shares",
    "deposit_ratios_match",
    "withdrawal_amounts",
    "quote",
    "get_amount_out",
    "product_preserved",
]
