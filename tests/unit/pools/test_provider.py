"""Tests for in-memory pool providers."""

import pytest

from route_gas.models import Liquidity
from route_gas.pools import (
    InMemoryV2PoolProvider,
    InMemoryV3PoolProvider,
    StaticV3PoolAccessor,
)
from route_gas.pools.uniswap_v3 import Q96, V3_FEE_HIGH, V3_FEE_LOW, V3_FEE_MEDIUM
from tests.helpers import DAI, USDC, WETH, make_v2_pool, make_v3_pool
from tests.helpers.constants import USDC_ADDRESS, WETH_ADDRESS


class TestStaticV3PoolAccessor:
    """Tests for StaticV3PoolAccessor."""

    def test_lookup_is_order_independent(self):
        pool = make_v3_pool(WETH, USDC, fee=V3_FEE_LOW)
        accessor = StaticV3PoolAccessor({(pool.token0, pool.token1, pool.fee): pool})

        assert accessor.get_pool(WETH, USDC, V3_FEE_LOW) is pool
        assert accessor.get_pool(USDC, WETH, V3_FEE_LOW) is pool
        assert accessor.get_pool(USDC, WETH, V3_FEE_HIGH) is None

    def test_same_token_is_not_found(self):
        accessor = StaticV3PoolAccessor({})

        assert accessor.get_pool(WETH, WETH, V3_FEE_LOW) is None


class TestInMemoryV3PoolProvider:
    """Tests for InMemoryV3PoolProvider."""

    @pytest.mark.asyncio
    async def test_get_pools_answers_every_requested_key(self):
        low = make_v3_pool(WETH, USDC, fee=V3_FEE_LOW)
        medium = make_v3_pool(WETH, USDC, fee=V3_FEE_MEDIUM)
        provider = InMemoryV3PoolProvider([low, medium])

        accessor = await provider.get_pools(
            [
                (WETH, USDC, V3_FEE_LOW),
                (USDC, WETH, V3_FEE_MEDIUM),
                (WETH, USDC, V3_FEE_HIGH),
                (WETH, DAI, V3_FEE_LOW),
            ]
        )

        assert accessor.get_pool(WETH, USDC, V3_FEE_LOW) is low
        assert accessor.get_pool(WETH, USDC, V3_FEE_MEDIUM) is medium
        assert accessor.get_pool(WETH, USDC, V3_FEE_HIGH) is None
        assert accessor.get_pool(WETH, DAI, V3_FEE_LOW) is None

    @pytest.mark.asyncio
    async def test_only_requested_pools_returned(self):
        provider = InMemoryV3PoolProvider(
            [make_v3_pool(WETH, USDC, fee=V3_FEE_LOW), make_v3_pool(WETH, DAI, fee=V3_FEE_LOW)]
        )

        accessor = await provider.get_pools([(WETH, DAI, V3_FEE_LOW)])

        assert len(accessor.get_all_pools()) == 1

    @pytest.mark.asyncio
    async def test_add_pool_replaces_same_key(self):
        provider = InMemoryV3PoolProvider([make_v3_pool(WETH, USDC, liquidity=1)])
        provider.add_pool(make_v3_pool(USDC, WETH, liquidity=2))

        accessor = await provider.get_pools([(WETH, USDC, V3_FEE_MEDIUM)])

        assert provider.pool_count == 1
        assert accessor.get_pool(WETH, USDC, V3_FEE_MEDIUM).liquidity == 2

    def test_from_liquidity_skips_other_kinds(self):
        liquidity = [
            Liquidity.model_validate(
                {
                    "id": "v3",
                    "kind": "concentratedLiquidity",
                    "tokens": [WETH_ADDRESS, USDC_ADDRESS],
                    "fee": "0.003",
                    "sqrtPrice": str(Q96),
                    "liquidity": "5",
                }
            ),
            Liquidity.model_validate(
                {
                    "id": "v2",
                    "kind": "constantProduct",
                    "tokens": {
                        WETH_ADDRESS: {"balance": "1"},
                        USDC_ADDRESS: {"balance": "1"},
                    },
                }
            ),
        ]

        provider = InMemoryV3PoolProvider.from_liquidity(liquidity, chain_id=1)

        assert provider.pool_count == 1


class TestInMemoryV2PoolProvider:
    """Tests for InMemoryV2PoolProvider."""

    @pytest.mark.asyncio
    async def test_get_pools(self):
        pool = make_v2_pool(WETH, USDC)
        provider = InMemoryV2PoolProvider([pool])

        accessor = await provider.get_pools([(USDC, WETH), (WETH, DAI)])

        assert accessor.get_pool(WETH, USDC) is pool
        assert accessor.get_pool(WETH, DAI) is None
        assert accessor.get_pool(WETH, WETH) is None

    def test_from_liquidity(self):
        liquidity = [
            Liquidity.model_validate(
                {
                    "id": "v2",
                    "kind": "constantProduct",
                    "tokens": {
                        WETH_ADDRESS: {"balance": "10"},
                        USDC_ADDRESS: {"balance": "20"},
                    },
                }
            )
        ]

        provider = InMemoryV2PoolProvider.from_liquidity(liquidity, chain_id=1)

        assert provider.pool_count == 1
