"""Heuristic gas cost model for mixed UniswapV3/UniswapV2 routes."""

from route_gas.errors import (
    ConfigurationError,
    CurrencyMismatchError,
    GasModelError,
    NoLiquidityPoolError,
)
from route_gas.gas import (
    GasCostEstimate,
    MixedRouteGasModel,
    MixedRouteHeuristicGasModelFactory,
    NetworkGasConfig,
    build_gas_model,
    get_network_config,
)
from route_gas.math import CurrencyAmount, Price
from route_gas.models import ChainId, Token
from route_gas.routing import MixedRoute, MixedRouteWithValidQuote

__version__ = "0.1.0"

__all__ = [
    "ChainId",
    "Token",
    "CurrencyAmount",
    "Price",
    "MixedRoute",
    "MixedRouteWithValidQuote",
    "NetworkGasConfig",
    "get_network_config",
    "GasCostEstimate",
    "MixedRouteGasModel",
    "MixedRouteHeuristicGasModelFactory",
    "build_gas_model",
    "GasModelError",
    "ConfigurationError",
    "NoLiquidityPoolError",
    "CurrencyMismatchError",
]
