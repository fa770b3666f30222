"""Gas estimation and gas cost denomination for mixed routes."""

from route_gas.gas.config import (
    DEFAULT_NETWORK_CONFIGS,
    NetworkGasConfig,
    V2GasCosts,
    V3GasCosts,
    get_network_config,
)
from route_gas.gas.estimator import GasUse, estimate_gas, section_gas_use
from route_gas.gas.model import (
    DEFAULT_GAS_MODEL_FACTORY,
    GasCostEstimate,
    GasModel,
    GasModelFactory,
    MixedRouteGasModel,
    MixedRouteHeuristicGasModelFactory,
    build_gas_model,
)
from route_gas.gas.reference_pools import (
    get_highest_liquidity_native_pool,
    get_highest_liquidity_usd_pool,
    select_highest_liquidity_pool,
)

__all__ = [
    # Config
    "NetworkGasConfig",
    "V3GasCosts",
    "V2GasCosts",
    "DEFAULT_NETWORK_CONFIGS",
    "get_network_config",
    # Estimation
    "GasUse",
    "estimate_gas",
    "section_gas_use",
    # Reference pools
    "select_highest_liquidity_pool",
    "get_highest_liquidity_usd_pool",
    "get_highest_liquidity_native_pool",
    # Model
    "GasCostEstimate",
    "GasModel",
    "GasModelFactory",
    "MixedRouteGasModel",
    "MixedRouteHeuristicGasModelFactory",
    "DEFAULT_GAS_MODEL_FACTORY",
    "build_gas_model",
]
