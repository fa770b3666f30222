"""UniswapV3 concentrated liquidity pools."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt
from typing import ClassVar

from route_gas.math.currency import Price
from route_gas.models.token import Token
from route_gas.pools.family import PoolFamily

# V3 Fee tiers in Uniswap units (hundredths of a basis point)
# Fee = units / 1,000,000 (e.g., 3000 = 0.3%)
V3_FEE_LOWEST = 100  # 0.01% - stable pairs
V3_FEE_LOW = 500  # 0.05% - stable pairs
V3_FEE_MEDIUM = 3000  # 0.30% - most pairs
V3_FEE_HIGH = 10000  # 1.00% - exotic pairs

V3_FEE_TIERS = [V3_FEE_LOWEST, V3_FEE_LOW, V3_FEE_MEDIUM, V3_FEE_HIGH]

Q96 = 2**96
Q192 = Q96 * Q96


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Encode ``amount1 / amount0`` as a sqrt price in Q64.96 format.

    Args:
        amount1: Raw amount of token1
        amount0: Raw amount of token0 worth ``amount1`` of token1

    Returns:
        floor(sqrt(amount1 / amount0) * 2^96)
    """
    if amount0 <= 0:
        raise ValueError(f"amount0 must be positive: {amount0}")
    return isqrt((amount1 << 192) // amount0)


@dataclass
class UniswapV3Pool:
    """Represents a UniswapV3 concentrated liquidity pool.

    Tokens are stored in canonical order (token0 has the lower address), the
    order in which ``sqrt_price_x96`` is defined: sqrt(token1 / token0) * 2^96.
    """

    family: ClassVar[PoolFamily] = PoolFamily.V3

    token0: Token
    token1: Token
    fee: int  # Fee in Uniswap units (e.g., 3000 for 0.3%)
    sqrt_price_x96: int
    liquidity: int  # Current active liquidity
    tick: int = 0
    address: str | None = None
    liquidity_id: str | None = None

    def __post_init__(self) -> None:
        if not self.token0.sorts_before(self.token1):
            self.token0, self.token1 = self.token1, self.token0

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def fee_decimal(self) -> float:
        """Fee as decimal (e.g., 0.003 for 0.3%)."""
        return self.fee / 1_000_000

    @property
    def has_price(self) -> bool:
        """False for pools without an initialized price."""
        return self.sqrt_price_x96 > 0

    @property
    def token0_price(self) -> Price:
        """Mid price of token0 in terms of token1."""
        return Price(self.token0, self.token1, Q192, self.sqrt_price_x96 * self.sqrt_price_x96)

    @property
    def token1_price(self) -> Price:
        """Mid price of token1 in terms of token0.

        Raises:
            ValueError: If the pool has no initialized price
        """
        return Price(self.token1, self.token0, self.sqrt_price_x96 * self.sqrt_price_x96, Q192)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def price_of(self, token: Token) -> Price:
        """Mid price with ``token`` as the base currency.

        Raises:
            ValueError: If token is not in the pool
        """
        if token == self.token0:
            return self.token0_price
        if token == self.token1:
            return self.token1_price
        raise ValueError(f"Token {token.label} not in pool")

    def other_token(self, token: Token) -> Token:
        """Get the counterpart of ``token`` in this pool."""
        if token == self.token0:
            return self.token1
        if token == self.token1:
            return self.token0
        raise ValueError(f"Token {token.label} not in pool")

    def __repr__(self) -> str:
        return (
            f"UniswapV3Pool({self.token0.label}/{self.token1.label}, fee={self.fee}, "
            f"liquidity={self.liquidity})"
        )


__all__ = [
    "V3_FEE_LOWEST",
    "V3_FEE_LOW",
    "V3_FEE_MEDIUM",
    "V3_FEE_HIGH",
    "V3_FEE_TIERS",
    "Q96",
    "Q192",
    "encode_sqrt_ratio_x96",
    "UniswapV3Pool",
]
