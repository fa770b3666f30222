"""Pytest configuration and fixtures."""

import pytest

from route_gas.gas.config import NetworkGasConfig, V2GasCosts, V3GasCosts, get_network_config
from route_gas.models.token import ChainId
from route_gas.pools import (
    StaticV2PoolAccessor,
    StaticV3PoolAccessor,
    UniswapV2Pool,
    UniswapV3Pool,
    V2PoolKey,
    V3PoolKey,
)
from route_gas.pools.uniswap_v3 import V3_FEE_LOW, V3_FEE_MEDIUM
from tests.helpers import DAI, USDC, USDT, WBTC, WETH, make_v3_pool
from tests.helpers.constants import USDC_WETH_SQRT_PRICE, WBTC_WETH_SQRT_PRICE

# =============================================================================
# Mock classes for dependency injection
# =============================================================================


class MockV3PoolProvider:
    """Mock V3 pool provider that records every batched lookup.

    Only pools whose (pair, fee) key was requested are returned, so tests can
    assert which candidates were queried.

    Usage:
        # Serve a fixed pool set
        provider = MockV3PoolProvider([usd_pool, native_pool])

        # Simulate a failing collaborator
        provider = MockV3PoolProvider(error=RuntimeError("rpc down"))
    """

    def __init__(
        self,
        pools: list[UniswapV3Pool] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.pools = list(pools or [])
        self.error = error
        self.calls: list[list[V3PoolKey]] = []  # Track calls for assertions

    async def get_pools(self, token_pairs: list[V3PoolKey]) -> StaticV3PoolAccessor:
        self.calls.append(list(token_pairs))
        if self.error is not None:
            raise self.error

        requested = set()
        for token_a, token_b, fee in token_pairs:
            if token_a == token_b:
                continue
            if token_a.sorts_before(token_b):
                requested.add((token_a, token_b, fee))
            else:
                requested.add((token_b, token_a, fee))

        found = {}
        for pool in self.pools:
            key = (pool.token0, pool.token1, pool.fee)
            if key in requested:
                found[key] = pool
        return StaticV3PoolAccessor(found)


class MockV2PoolProvider:
    """Mock V2 pool provider; the gas heuristics should never query it."""

    def __init__(self, pools: list[UniswapV2Pool] | None = None) -> None:
        self.pools = list(pools or [])
        self.calls: list[list[V2PoolKey]] = []  # Track calls for assertions

    async def get_pools(self, token_pairs: list[V2PoolKey]) -> StaticV2PoolAccessor:
        self.calls.append(list(token_pairs))
        return StaticV2PoolAccessor({(pool.token0, pool.token1): pool for pool in self.pools})


# =============================================================================
# Pytest fixtures for configs
# =============================================================================


@pytest.fixture
def mainnet_config() -> NetworkGasConfig:
    """Default mainnet gas configuration."""
    return get_network_config(ChainId.MAINNET)


@pytest.fixture
def synthetic_config() -> NetworkGasConfig:
    """Mainnet tokens with small round cost constants."""
    return NetworkGasConfig(
        chain_id=ChainId.MAINNET,
        wrapped_native=WETH,
        usd_tokens=(DAI, USDC, USDT),
        v3=V3GasCosts(base_swap_cost=100, cost_per_hop=50, cost_per_init_tick=10),
        v2=V2GasCosts(base_swap_cost=80, cost_per_extra_hop=20),
    )


# =============================================================================
# Pytest fixtures for pools and providers
# =============================================================================


@pytest.fixture
def usd_pool() -> UniswapV3Pool:
    """WETH/USDC reference pool with an exact power-of-two price."""
    return make_v3_pool(
        WETH, USDC, fee=V3_FEE_LOW, liquidity=10**20, sqrt_price_x96=USDC_WETH_SQRT_PRICE
    )


@pytest.fixture
def wbtc_native_pool() -> UniswapV3Pool:
    """WETH/WBTC reference pool with an exact power-of-two price."""
    return make_v3_pool(
        WETH, WBTC, fee=V3_FEE_MEDIUM, liquidity=10**15, sqrt_price_x96=WBTC_WETH_SQRT_PRICE
    )


@pytest.fixture
def v3_provider(usd_pool: UniswapV3Pool, wbtc_native_pool: UniswapV3Pool) -> MockV3PoolProvider:
    """Provider with the USD and WBTC reference pools."""
    return MockV3PoolProvider([usd_pool, wbtc_native_pool])


@pytest.fixture
def v2_provider() -> MockV2PoolProvider:
    return MockV2PoolProvider()
