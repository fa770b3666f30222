"""UniswapV2 constant product pools."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt
from typing import ClassVar

from route_gas.math.currency import Price
from route_gas.models.token import Token
from route_gas.pools.family import PoolFamily


@dataclass
class UniswapV2Pool:
    """Represents a UniswapV2 liquidity pool.

    Tokens are stored in canonical order (token0 has the lower address) with
    reserves swapped to match.
    """

    family: ClassVar[PoolFamily] = PoolFamily.V2

    token0: Token
    token1: Token
    reserve0: int
    reserve1: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = 30
    address: str | None = None
    liquidity_id: str | None = None

    def __post_init__(self) -> None:
        if not self.token0.sorts_before(self.token1):
            self.token0, self.token1 = self.token1, self.token0
            self.reserve0, self.reserve1 = self.reserve1, self.reserve0

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def liquidity(self) -> int:
        """Geometric mean of the reserves, comparable across pairs for ranking."""
        return isqrt(self.reserve0 * self.reserve1)

    @property
    def token0_price(self) -> Price:
        """Mid price of token0 in terms of token1.

        Raises:
            ValueError: If reserve0 is zero
        """
        return Price(self.token0, self.token1, self.reserve0, self.reserve1)

    @property
    def token1_price(self) -> Price:
        """Mid price of token1 in terms of token0.

        Raises:
            ValueError: If reserve1 is zero
        """
        return Price(self.token1, self.token0, self.reserve1, self.reserve0)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def price_of(self, token: Token) -> Price:
        """Mid price with ``token`` as the base currency."""
        if token == self.token0:
            return self.token0_price
        if token == self.token1:
            return self.token1_price
        raise ValueError(f"Token {token.label} not in pool")

    def __repr__(self) -> str:
        return (
            f"UniswapV2Pool({self.token0.label}/{self.token1.label}, "
            f"reserves=({self.reserve0}, {self.reserve1}))"
        )


__all__ = ["UniswapV2Pool"]
