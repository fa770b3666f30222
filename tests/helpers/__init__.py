"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Tokens used across tests
- factories: Pool and route factory functions
"""

from tests.helpers.constants import (
    DAI,
    UNI,
    USDC,
    USDT,
    WBTC,
    WETH,
    WETH_ARB,
    WETH_GOERLI_TOKEN,
    WXDAI,
)
from tests.helpers.factories import make_pools, make_route_quote, make_v2_pool, make_v3_pool

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WBTC",
    "UNI",
    "WETH_ARB",
    "WETH_GOERLI_TOKEN",
    "WXDAI",
    # Factories
    "make_v3_pool",
    "make_v2_pool",
    "make_pools",
    "make_route_quote",
]
