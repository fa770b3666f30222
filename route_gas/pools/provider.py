"""Pool providers: the batched pool lookup consumed by the gas model.

A provider resolves a batch of token pairs (plus fee tier for V3) to live
pools in one round trip and returns an accessor that answers every requested
key with either a pool or ``None``.

The in-memory providers here serve a fixed pool set, e.g. pools loaded from
an auction's liquidity. RPC or subgraph backed providers implement the same
protocols elsewhere.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

import structlog

from route_gas.models.liquidity import Liquidity
from route_gas.models.token import Token
from route_gas.pools.parsing import parse_v2_liquidity, parse_v3_liquidity
from route_gas.pools.uniswap_v2 import UniswapV2Pool
from route_gas.pools.uniswap_v3 import UniswapV3Pool

logger = structlog.get_logger()

V3PoolKey = tuple[Token, Token, int]
V2PoolKey = tuple[Token, Token]


def _pair_key(token_a: Token, token_b: Token) -> tuple[Token, Token]:
    """Canonical (token0, token1) ordering for a pair."""
    if token_a.sorts_before(token_b):
        return token_a, token_b
    return token_b, token_a


class V3PoolAccessor(Protocol):
    """Result of a batched V3 pool lookup."""

    def get_pool(self, token_a: Token, token_b: Token, fee: int) -> UniswapV3Pool | None:
        """Get the pool for a pair and fee tier (token order independent)."""
        ...

    def get_all_pools(self) -> list[UniswapV3Pool]:
        ...


class V2PoolAccessor(Protocol):
    """Result of a batched V2 pool lookup."""

    def get_pool(self, token_a: Token, token_b: Token) -> UniswapV2Pool | None:
        """Get the pool for a pair (token order independent)."""
        ...

    def get_all_pools(self) -> list[UniswapV2Pool]:
        ...


class V3PoolProvider(Protocol):
    """Batched lookup of V3 pools by (token_a, token_b, fee)."""

    async def get_pools(self, token_pairs: list[V3PoolKey]) -> V3PoolAccessor:
        """Fetch all requested pools in one round trip.

        Args:
            token_pairs: (token_a, token_b, fee) triples to resolve

        Returns:
            Accessor answering every requested triple
        """
        ...


class V2PoolProvider(Protocol):
    """Batched lookup of V2 pools by (token_a, token_b)."""

    async def get_pools(self, token_pairs: list[V2PoolKey]) -> V2PoolAccessor:
        ...


class StaticV3PoolAccessor:
    """V3 accessor backed by a dict keyed by (token0, token1, fee)."""

    def __init__(self, pools: Mapping[tuple[Token, Token, int], UniswapV3Pool]) -> None:
        self._pools = dict(pools)

    def get_pool(self, token_a: Token, token_b: Token, fee: int) -> UniswapV3Pool | None:
        if token_a == token_b:
            return None
        token0, token1 = _pair_key(token_a, token_b)
        return self._pools.get((token0, token1, fee))

    def get_all_pools(self) -> list[UniswapV3Pool]:
        return list(self._pools.values())


class StaticV2PoolAccessor:
    """V2 accessor backed by a dict keyed by (token0, token1)."""

    def __init__(self, pools: Mapping[tuple[Token, Token], UniswapV2Pool]) -> None:
        self._pools = dict(pools)

    def get_pool(self, token_a: Token, token_b: Token) -> UniswapV2Pool | None:
        if token_a == token_b:
            return None
        return self._pools.get(_pair_key(token_a, token_b))

    def get_all_pools(self) -> list[UniswapV2Pool]:
        return list(self._pools.values())


class InMemoryV3PoolProvider:
    """V3 pool provider over a fixed set of pools.

    Unlike V2, multiple V3 pools can exist for the same pair with different
    fee tiers. Adding a pool with an existing (pair, fee) key replaces it.
    """

    def __init__(self, pools: Iterable[UniswapV3Pool] | None = None) -> None:
        self._pools: dict[tuple[Token, Token, int], UniswapV3Pool] = {}
        for pool in pools or ():
            self.add_pool(pool)

    @classmethod
    def from_liquidity(
        cls,
        liquidity: Iterable[Liquidity],
        chain_id: int,
        known_tokens: Mapping[str, Token] | None = None,
    ) -> InMemoryV3PoolProvider:
        """Build a provider from concentratedLiquidity entries (others are skipped)."""
        provider = cls()
        for item in liquidity:
            pool = parse_v3_liquidity(item, chain_id, known_tokens)
            if pool is not None:
                provider.add_pool(pool)
        return provider

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def add_pool(self, pool: UniswapV3Pool) -> None:
        key = (pool.token0, pool.token1, pool.fee)
        if key in self._pools:
            logger.debug(
                "v3_pool_replaced",
                token0=pool.token0.label,
                token1=pool.token1.label,
                fee=pool.fee,
            )
        self._pools[key] = pool

    async def get_pools(self, token_pairs: list[V3PoolKey]) -> StaticV3PoolAccessor:
        found: dict[tuple[Token, Token, int], UniswapV3Pool] = {}
        for token_a, token_b, fee in token_pairs:
            if token_a == token_b:
                continue
            token0, token1 = _pair_key(token_a, token_b)
            pool = self._pools.get((token0, token1, fee))
            if pool is not None:
                found[(token0, token1, fee)] = pool
        logger.debug("v3_pools_fetched", requested=len(token_pairs), found=len(found))
        return StaticV3PoolAccessor(found)


class InMemoryV2PoolProvider:
    """V2 pool provider over a fixed set of pools (one pool per pair)."""

    def __init__(self, pools: Iterable[UniswapV2Pool] | None = None) -> None:
        self._pools: dict[tuple[Token, Token], UniswapV2Pool] = {}
        for pool in pools or ():
            self.add_pool(pool)

    @classmethod
    def from_liquidity(
        cls,
        liquidity: Iterable[Liquidity],
        chain_id: int,
        known_tokens: Mapping[str, Token] | None = None,
    ) -> InMemoryV2PoolProvider:
        """Build a provider from constantProduct entries (others are skipped)."""
        provider = cls()
        for item in liquidity:
            pool = parse_v2_liquidity(item, chain_id, known_tokens)
            if pool is not None:
                provider.add_pool(pool)
        return provider

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def add_pool(self, pool: UniswapV2Pool) -> None:
        key = (pool.token0, pool.token1)
        if key in self._pools:
            logger.debug(
                "v2_pool_replaced",
                token0=pool.token0.label,
                token1=pool.token1.label,
            )
        self._pools[key] = pool

    async def get_pools(self, token_pairs: list[V2PoolKey]) -> StaticV2PoolAccessor:
        found: dict[tuple[Token, Token], UniswapV2Pool] = {}
        for token_a, token_b in token_pairs:
            if token_a == token_b:
                continue
            key = _pair_key(token_a, token_b)
            pool = self._pools.get(key)
            if pool is not None:
                found[key] = pool
        logger.debug("v2_pools_fetched", requested=len(token_pairs), found=len(found))
        return StaticV2PoolAccessor(found)


__all__ = [
    "V3PoolKey",
    "V2PoolKey",
    "V3PoolAccessor",
    "V2PoolAccessor",
    "V3PoolProvider",
    "V2PoolProvider",
    "StaticV3PoolAccessor",
    "StaticV2PoolAccessor",
    "InMemoryV3PoolProvider",
    "InMemoryV2PoolProvider",
]
