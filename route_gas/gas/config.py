"""Gas cost configuration per network.

All constants the estimator and the reference pool locator need are carried
in a ``NetworkGasConfig``, so tests and callers can supply synthetic values
instead of relying on the defaults table.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from route_gas.constants import USD_GAS_TOKENS_BY_CHAIN, WRAPPED_NATIVE_CURRENCY
from route_gas.errors import ConfigurationError
from route_gas.models.token import ChainId, Token
from route_gas.pools.uniswap_v3 import V3_FEE_HIGH, V3_FEE_LOW, V3_FEE_LOWEST, V3_FEE_MEDIUM

# UniswapV2 heuristic costs (same on every chain)
V2_BASE_SWAP_COST = 115_000
V2_COST_PER_EXTRA_HOP = 20_000

# UniswapV3 heuristic costs
V3_BASE_SWAP_COST = 2_000
V3_BASE_SWAP_COST_ARBITRUM = 5_000
V3_COST_PER_HOP = 80_000
V3_COST_PER_INIT_TICK = 31_000
V3_COST_PER_UNINIT_TICK = 0

# Fee tiers queried for reference pools, in priority order
USD_POOL_FEE_TIERS = (V3_FEE_HIGH, V3_FEE_MEDIUM, V3_FEE_LOW, V3_FEE_LOWEST)
NATIVE_POOL_FEE_TIERS = (V3_FEE_HIGH, V3_FEE_MEDIUM, V3_FEE_LOW)


@dataclass(frozen=True)
class V3GasCosts:
    """Heuristic gas costs for a section of UniswapV3 pools.

    Attributes:
        base_swap_cost: Charged once per V3 section
        cost_per_hop: Charged for every pool in a V3 section
        cost_per_init_tick: Charged per initialized tick crossed on the route
        cost_per_uninit_tick: Per uninitialized tick; uninitialized crossings
            are not reported by the quoter, so this term is always zero
    """

    base_swap_cost: int = V3_BASE_SWAP_COST
    cost_per_hop: int = V3_COST_PER_HOP
    cost_per_init_tick: int = V3_COST_PER_INIT_TICK
    cost_per_uninit_tick: int = V3_COST_PER_UNINIT_TICK


@dataclass(frozen=True)
class V2GasCosts:
    """Heuristic gas costs for a section of UniswapV2 pools.

    Attributes:
        base_swap_cost: Charged once per V2 section (includes the first hop)
        cost_per_extra_hop: Charged for every pool after the first in a section
    """

    base_swap_cost: int = V2_BASE_SWAP_COST
    cost_per_extra_hop: int = V2_COST_PER_EXTRA_HOP


@dataclass(frozen=True)
class NetworkGasConfig:
    """Everything the gas model needs to know about one network.

    Attributes:
        chain_id: Network identifier
        wrapped_native: Wrapped native currency gas is paid in (e.g. WETH)
        usd_tokens: USD-pegged tokens eligible as USD reference (may be empty)
        v3: UniswapV3 section costs
        v2: UniswapV2 section costs
        usd_pool_fee_tiers: Fee tiers searched for the USD reference pool
        native_pool_fee_tiers: Fee tiers searched for the native/quote pool
    """

    chain_id: int
    wrapped_native: Token
    usd_tokens: tuple[Token, ...] = ()
    v3: V3GasCosts = field(default_factory=V3GasCosts)
    v2: V2GasCosts = field(default_factory=V2GasCosts)
    usd_pool_fee_tiers: tuple[int, ...] = USD_POOL_FEE_TIERS
    native_pool_fee_tiers: tuple[int, ...] = NATIVE_POOL_FEE_TIERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "usd_tokens", tuple(self.usd_tokens))
        if self.wrapped_native.chain_id != self.chain_id:
            raise ConfigurationError(
                f"Wrapped native {self.wrapped_native.label} is not on chain {self.chain_id}"
            )
        for token in self.usd_tokens:
            if token.chain_id != self.chain_id:
                raise ConfigurationError(
                    f"USD gas token {token.label} is not on chain {self.chain_id}"
                )


def _default_config(chain_id: ChainId, v3: V3GasCosts | None = None) -> NetworkGasConfig:
    return NetworkGasConfig(
        chain_id=chain_id,
        wrapped_native=WRAPPED_NATIVE_CURRENCY[chain_id],
        usd_tokens=USD_GAS_TOKENS_BY_CHAIN[chain_id],
        v3=v3 or V3GasCosts(),
    )


DEFAULT_NETWORK_CONFIGS: dict[ChainId, NetworkGasConfig] = {
    ChainId.MAINNET: _default_config(ChainId.MAINNET),
    ChainId.GOERLI: _default_config(ChainId.GOERLI),
    ChainId.OPTIMISM: _default_config(ChainId.OPTIMISM),
    ChainId.GNOSIS: _default_config(ChainId.GNOSIS),
    ChainId.POLYGON: _default_config(ChainId.POLYGON),
    ChainId.ARBITRUM_ONE: _default_config(
        ChainId.ARBITRUM_ONE, V3GasCosts(base_swap_cost=V3_BASE_SWAP_COST_ARBITRUM)
    ),
}


def get_network_config(chain_id: int) -> NetworkGasConfig:
    """Get the default gas configuration for a chain.

    Raises:
        ConfigurationError: If the chain has no default configuration
    """
    try:
        return DEFAULT_NETWORK_CONFIGS[ChainId(chain_id)]
    except (ValueError, KeyError) as err:
        raise ConfigurationError(f"No gas configuration for chain {chain_id}") from err


__all__ = [
    "V2_BASE_SWAP_COST",
    "V2_COST_PER_EXTRA_HOP",
    "V3_BASE_SWAP_COST",
    "V3_BASE_SWAP_COST_ARBITRUM",
    "V3_COST_PER_HOP",
    "V3_COST_PER_INIT_TICK",
    "V3_COST_PER_UNINIT_TICK",
    "USD_POOL_FEE_TIERS",
    "NATIVE_POOL_FEE_TIERS",
    "V3GasCosts",
    "V2GasCosts",
    "NetworkGasConfig",
    "DEFAULT_NETWORK_CONFIGS",
    "get_network_config",
]
