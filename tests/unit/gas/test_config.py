"""Tests for network gas configuration."""

import pytest

from route_gas.constants import WRAPPED_NATIVE_CURRENCY
from route_gas.errors import ConfigurationError
from route_gas.gas.config import (
    DEFAULT_NETWORK_CONFIGS,
    NATIVE_POOL_FEE_TIERS,
    USD_POOL_FEE_TIERS,
    V2_BASE_SWAP_COST,
    V3_BASE_SWAP_COST,
    V3_BASE_SWAP_COST_ARBITRUM,
    NetworkGasConfig,
    get_network_config,
)
from route_gas.models.token import ChainId
from route_gas.pools.uniswap_v3 import V3_FEE_HIGH, V3_FEE_LOW, V3_FEE_LOWEST, V3_FEE_MEDIUM
from tests.helpers import DAI, USDC, USDT, WETH, WXDAI


class TestDefaultConfigs:
    """Tests for the built-in network configurations."""

    def test_every_chain_configured(self):
        assert set(DEFAULT_NETWORK_CONFIGS) == set(ChainId)

    def test_mainnet(self):
        config = get_network_config(1)

        assert config.chain_id == ChainId.MAINNET
        assert config.wrapped_native == WETH
        assert config.usd_tokens == (DAI, USDC, USDT)
        assert config.v3.base_swap_cost == V3_BASE_SWAP_COST
        assert config.v2.base_swap_cost == V2_BASE_SWAP_COST

    def test_arbitrum_v3_base_cost(self):
        config = get_network_config(ChainId.ARBITRUM_ONE)

        assert config.v3.base_swap_cost == V3_BASE_SWAP_COST_ARBITRUM
        assert config.v3.cost_per_hop == get_network_config(1).v3.cost_per_hop

    def test_goerli_has_no_usd_tokens(self):
        assert get_network_config(ChainId.GOERLI).usd_tokens == ()

    def test_gnosis_native_is_wxdai(self):
        assert get_network_config(ChainId.GNOSIS).wrapped_native == WXDAI

    def test_wrapped_native_matches_chain(self):
        for chain_id, config in DEFAULT_NETWORK_CONFIGS.items():
            assert config.wrapped_native == WRAPPED_NATIVE_CURRENCY[chain_id]
            assert all(token.chain_id == chain_id for token in config.usd_tokens)

    def test_uninitialized_tick_cost_is_zero(self):
        assert get_network_config(1).v3.cost_per_uninit_tick == 0

    def test_fee_tier_priority(self):
        assert USD_POOL_FEE_TIERS == (V3_FEE_HIGH, V3_FEE_MEDIUM, V3_FEE_LOW, V3_FEE_LOWEST)
        assert NATIVE_POOL_FEE_TIERS == (V3_FEE_HIGH, V3_FEE_MEDIUM, V3_FEE_LOW)

    def test_unknown_chain_raises(self):
        with pytest.raises(ConfigurationError, match="999"):
            get_network_config(999)


class TestNetworkGasConfig:
    """Tests for NetworkGasConfig validation."""

    def test_usd_tokens_frozen_as_tuple(self):
        config = NetworkGasConfig(chain_id=1, wrapped_native=WETH, usd_tokens=[USDC])

        assert config.usd_tokens == (USDC,)

    def test_wrapped_native_on_other_chain_rejected(self):
        with pytest.raises(ConfigurationError, match="Wrapped native"):
            NetworkGasConfig(chain_id=ChainId.GNOSIS, wrapped_native=WETH)

    def test_usd_token_on_other_chain_rejected(self):
        with pytest.raises(ConfigurationError, match="USD gas token"):
            NetworkGasConfig(chain_id=ChainId.GNOSIS, wrapped_native=WXDAI, usd_tokens=(USDC,))
