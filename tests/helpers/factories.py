"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_v3_pool, make_route_quote
    # or
    from tests.helpers.factories import make_v3_pool, make_v2_pool

    pool = make_v3_pool(WETH, USDC, liquidity=10**18)
    quote = make_route_quote([pool], ticks=[1])
"""

from collections.abc import Sequence

from route_gas.models.token import Token
from route_gas.pools import AnyPool, UniswapV2Pool, UniswapV3Pool
from route_gas.pools.uniswap_v3 import Q96, V3_FEE_MEDIUM
from route_gas.routing import MixedRoute, MixedRouteWithValidQuote
from tests.helpers.constants import DAI, UNI, USDC, WBTC, WETH

# Tokens used to chain hops in synthetic routes
_ROUTE_TOKENS = (WETH, USDC, DAI, WBTC, UNI)


def make_v3_pool(
    token_a: Token = WETH,
    token_b: Token = USDC,
    fee: int = V3_FEE_MEDIUM,
    liquidity: int = 10**18,
    sqrt_price_x96: int = Q96,
) -> UniswapV3Pool:
    """Create a V3 pool with sensible defaults.

    ``sqrt_price_x96`` is interpreted in canonical token order, whatever the
    argument order of the tokens.
    """
    return UniswapV3Pool(
        token0=token_a,
        token1=token_b,
        fee=fee,
        sqrt_price_x96=sqrt_price_x96,
        liquidity=liquidity,
    )


def make_v2_pool(
    token_a: Token = WETH,
    token_b: Token = USDC,
    reserve_a: int = 10**21,
    reserve_b: int = 2 * 10**12,
) -> UniswapV2Pool:
    """Create a V2 pool; reserves follow the argument order of the tokens."""
    return UniswapV2Pool(token0=token_a, token1=token_b, reserve0=reserve_a, reserve1=reserve_b)


def make_pools(families: str) -> list[AnyPool]:
    """Create route pools from a family pattern like ``"v3 v3 v2"``."""
    pools: list[AnyPool] = []
    for i, family in enumerate(families.split()):
        token_a = _ROUTE_TOKENS[i % len(_ROUTE_TOKENS)]
        token_b = _ROUTE_TOKENS[(i + 1) % len(_ROUTE_TOKENS)]
        if family == "v3":
            pools.append(make_v3_pool(token_a, token_b))
        elif family == "v2":
            pools.append(make_v2_pool(token_a, token_b))
        else:
            raise ValueError(f"Unknown pool family: {family}")
    return pools


def make_route_quote(
    pools: Sequence[AnyPool], ticks: Sequence[int] | None = None
) -> MixedRouteWithValidQuote:
    """Wrap pools in a route quote, with zero ticks crossed by default."""
    if ticks is None:
        ticks = [0] * len(pools)
    return MixedRouteWithValidQuote(
        route=MixedRoute(pools=pools),
        initialized_ticks_crossed_list=tuple(ticks),
    )


__all__ = ["make_v3_pool", "make_v2_pool", "make_pools", "make_route_quote"]
