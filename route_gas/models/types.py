"""Address and integer bounds shared by tokens, pools and liquidity data."""

import string
from typing import Annotated

from pydantic import Field

# Largest value an on-chain uint256 can hold
UINT256_MAX = 2**256 - 1

# Ethereum address (40 hex chars after 0x prefix), any case
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and make sure it carries the 0x prefix.

    Raises:
        ValueError: If validate=True and the result is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = f"0x{addr}"
    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")
    return addr


def is_valid_address(address: str) -> bool:
    """True for 0x followed by exactly 40 hex digits."""
    if not isinstance(address, str) or len(address) != 42 or not address.startswith("0x"):
        return False
    return all(c in string.hexdigits for c in address[2:])


__all__ = ["UINT256_MAX", "Address", "normalize_address", "is_valid_address"]
