"""Pool types and pool providers.

Supports UniswapV3 (concentrated liquidity) and UniswapV2 (constant product)
pools, plus the batched provider interface used to look up reference pools.
"""

from .family import PoolFamily
from .parsing import parse_v2_liquidity, parse_v3_liquidity, resolve_token
from .provider import (
    InMemoryV2PoolProvider,
    InMemoryV3PoolProvider,
    StaticV2PoolAccessor,
    StaticV3PoolAccessor,
    V2PoolAccessor,
    V2PoolKey,
    V2PoolProvider,
    V3PoolAccessor,
    V3PoolKey,
    V3PoolProvider,
)
from .types import AnyPool
from .uniswap_v2 import UniswapV2Pool
from .uniswap_v3 import (
    V3_FEE_HIGH,
    V3_FEE_LOW,
    V3_FEE_LOWEST,
    V3_FEE_MEDIUM,
    V3_FEE_TIERS,
    UniswapV3Pool,
    encode_sqrt_ratio_x96,
)

__all__ = [
    # Pools
    "AnyPool",
    "PoolFamily",
    "UniswapV2Pool",
    "UniswapV3Pool",
    "encode_sqrt_ratio_x96",
    # Fee tiers
    "V3_FEE_LOWEST",
    "V3_FEE_LOW",
    "V3_FEE_MEDIUM",
    "V3_FEE_HIGH",
    "V3_FEE_TIERS",
    # Parsing
    "parse_v3_liquidity",
    "parse_v2_liquidity",
    "resolve_token",
    # Providers
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
