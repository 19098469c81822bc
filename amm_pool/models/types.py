"""Shared type definitions and validators.

Identifiers and amounts are validated here once, both for the core pool
(which raises InvalidArgument) and for the API models (which use the
pydantic annotated types).
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from amm_pool.constants import MAX_AMOUNT
from amm_pool.errors import InvalidArgument


def validate_uint256(value: Any) -> str:
    """Validate that a value is a valid uint256 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint256 as decimal string

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > MAX_AMOUNT:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return str(int_value)


# 256-bit unsigned integer as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]

# Asset or holder identifier (address-like, compared case-insensitively)
Identity = Annotated[str, Field(min_length=1, max_length=128)]


def normalize_identity(identity: str) -> str:
    """Normalize an asset or holder identifier.

    Identifiers are compared case-insensitively, so "0xABC" and "0xabc"
    name the same account.

    Raises:
        InvalidArgument: If identity is not a non-empty string
    """
    if not isinstance(identity, str):
        raise InvalidArgument(f"Identifier must be a string, got {type(identity).__name__}")
    normalized = identity.strip().lower()
    if not normalized:
        raise InvalidArgument("Identifier must not be empty")
    return normalized


def require_amount(name: str, value: Any, *, allow_zero: bool = False) -> int:
    """Validate an integer amount argument.

    Args:
        name: Argument name (for error messages)
        value: The amount to validate
        allow_zero: Accept zero (used for approvals)

    Returns:
        The amount as int

    Raises:
        InvalidArgument: If value is not an int, is negative, is zero
            (unless allow_zero), or exceeds 2^256-1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0 or (value == 0 and not allow_zero):
        raise InvalidArgument(f"{name} must be positive: {value}")
    if value > MAX_AMOUNT:
        raise InvalidArgument(f"{name} exceeds uint256 max: {value}")
    return value
