"""Token, chain and liquidity models."""

from route_gas.models.liquidity import Liquidity, TokenBalance
from route_gas.models.token import ChainId, Token
from route_gas.models.types import UINT256_MAX, Address, is_valid_address, normalize_address

__all__ = [
    # Types
    "Address",
    "UINT256_MAX",
    "normalize_address",
    "is_valid_address",
    # Tokens
    "ChainId",
    "Token",
    # Liquidity
    "Liquidity",
    "TokenBalance",
]
