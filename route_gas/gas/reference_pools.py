"""Locating the reference pools used to price gas.

Gas is paid in the wrapped native currency. To express it in USD and in the
quote token we use the mid price of the deepest V3 pool pairing the native
currency with a USD token, and with the quote token respectively.

Candidates are queried in one batched provider call and ranked by
liquidity; ties go to the first candidate in fee tier priority order.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from route_gas.errors import ConfigurationError, NoLiquidityPoolError
from route_gas.gas.config import NetworkGasConfig
from route_gas.models.token import Token
from route_gas.pools import UniswapV3Pool, V3PoolKey, V3PoolProvider

logger = structlog.get_logger()


def select_highest_liquidity_pool(pools: Sequence[UniswapV3Pool]) -> UniswapV3Pool | None:
    """Pick the pool with the most liquidity, keeping the first on ties."""
    if not pools:
        return None
    return max(pools, key=lambda pool: pool.liquidity)


async def _fetch_existing_pools(
    v3_pool_provider: V3PoolProvider, candidates: list[V3PoolKey]
) -> list[UniswapV3Pool]:
    """Resolve candidates in one batch, keeping existing priced pools in order."""
    accessor = await v3_pool_provider.get_pools(candidates)

    pools: list[UniswapV3Pool] = []
    for token_a, token_b, fee in candidates:
        pool = accessor.get_pool(token_a, token_b, fee)
        if pool is None:
            continue
        if not pool.has_price:
            logger.debug(
                "reference_pool_unpriced",
                token0=pool.token0.label,
                token1=pool.token1.label,
                fee=fee,
            )
            continue
        pools.append(pool)
    return pools


async def get_highest_liquidity_usd_pool(
    config: NetworkGasConfig,
    v3_pool_provider: V3PoolProvider,
) -> UniswapV3Pool:
    """Find the deepest wrapped-native/USD pool.

    Args:
        config: Network gas configuration (wrapped native, USD tokens, fee tiers)
        v3_pool_provider: Batched V3 pool lookup

    Returns:
        The USD reference pool

    Raises:
        ConfigurationError: If the network has no USD gas tokens
        NoLiquidityPoolError: If no candidate pool exists
    """
    wrapped_native = config.wrapped_native
    usd_tokens = config.usd_tokens

    if not usd_tokens:
        raise ConfigurationError(
            f"Could not find a USD token for computing gas costs on {config.chain_id}"
        )

    candidates: list[V3PoolKey] = [
        (wrapped_native, usd_token, fee)
        for fee in config.usd_pool_fee_tiers
        for usd_token in usd_tokens
    ]
    pools = await _fetch_existing_pools(v3_pool_provider, candidates)

    usd_pool = select_highest_liquidity_pool(pools)
    if usd_pool is None:
        logger.error(
            "usd_gas_pool_not_found",
            chain_id=config.chain_id,
            native=wrapped_native.label,
            usd_tokens=[t.label for t in usd_tokens],
            candidates=len(candidates),
        )
        raise NoLiquidityPoolError(wrapped_native, usd_tokens)

    logger.debug(
        "gas_reference_pool_selected",
        kind="usd",
        token0=usd_pool.token0.label,
        token1=usd_pool.token1.label,
        fee=usd_pool.fee,
        liquidity=usd_pool.liquidity,
    )
    return usd_pool


async def get_highest_liquidity_native_pool(
    config: NetworkGasConfig,
    token: Token,
    v3_pool_provider: V3PoolProvider,
) -> UniswapV3Pool | None:
    """Find the deepest wrapped-native/quote-token pool.

    Args:
        config: Network gas configuration
        token: Quote token gas costs should be expressed in
        v3_pool_provider: Batched V3 pool lookup

    Returns:
        The native reference pool, or None if no candidate pool exists
    """
    wrapped_native = config.wrapped_native

    candidates: list[V3PoolKey] = [
        (wrapped_native, token, fee) for fee in config.native_pool_fee_tiers
    ]
    pools = await _fetch_existing_pools(v3_pool_provider, candidates)

    native_pool = select_highest_liquidity_pool(pools)
    if native_pool is None:
        logger.error(
            "native_gas_pool_not_found",
            chain_id=config.chain_id,
            native=wrapped_native.label,
            token=token.label,
            reason="no pool for computing gas costs",
        )
        return None

    logger.debug(
        "gas_reference_pool_selected",
        kind="native",
        token0=native_pool.token0.label,
        token1=native_pool.token1.label,
        fee=native_pool.fee,
        liquidity=native_pool.liquidity,
    )
    return native_pool


__all__ = [
    "select_highest_liquidity_pool",
    "get_highest_liquidity_usd_pool",
    "get_highest_liquidity_native_pool",
]
