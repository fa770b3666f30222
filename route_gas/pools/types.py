"""Pool type definitions.

Provides the AnyPool union type for use throughout the codebase.
"""

from typing import TypeAlias

from route_gas.pools.family import PoolFamily
from route_gas.pools.uniswap_v2 import UniswapV2Pool
from route_gas.pools.uniswap_v3 import UniswapV3Pool

# Union type for all pool types that can appear in a mixed route
AnyPool: TypeAlias = UniswapV3Pool | UniswapV2Pool

__all__ = ["AnyPool", "PoolFamily", "UniswapV2Pool", "UniswapV3Pool"]
