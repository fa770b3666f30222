"""Heuristic gas estimation for mixed V3/V2 routes.

Gas is computed off-chain from the shape of the route rather than with
eth_estimateGas: estimating on-chain needs the full input balance and
approvals, and V2 hops are simulated locally anyway.

Estimate:
    for each V3 section:  v3.base_swap_cost + v3.cost_per_hop * len(section)
    for each V2 section:  v2.base_swap_cost + v2.cost_per_extra_hop * (len(section) - 1)
    plus                  v3.cost_per_init_tick * max(1, sum(initialized ticks crossed))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from route_gas.gas.config import NetworkGasConfig
from route_gas.math.currency import CurrencyAmount
from route_gas.pools import PoolFamily
from route_gas.routing.sections import RouteSection, split_into_sections
from route_gas.routing.types import MixedRouteWithValidQuote

logger = structlog.get_logger()

# The quoter only reports initialized crossings
UNINITIALIZED_TICKS_CROSSED = 0


@dataclass(frozen=True)
class GasUse:
    """Gas estimate for one route.

    Attributes:
        base_gas_use: Total gas units for the route
        total_initialized_ticks_crossed: Tick count billed (at least 1)
        total_gas_cost_native_currency: base_gas_use * gas price, in wrapped native
    """

    base_gas_use: int
    total_initialized_ticks_crossed: int
    total_gas_cost_native_currency: CurrencyAmount


def total_initialized_ticks_crossed(ticks_crossed: Iterable[int]) -> int:
    """Sum of initialized ticks crossed, floored at 1."""
    return max(1, sum(ticks_crossed))


def section_gas_use(section: RouteSection, config: NetworkGasConfig) -> int:
    """Gas units for one contiguous same-family section."""
    if section.family is PoolFamily.V3:
        return config.v3.base_swap_cost + config.v3.cost_per_hop * len(section)
    # First V2 hop is covered by the base cost
    return config.v2.base_swap_cost + config.v2.cost_per_extra_hop * (len(section) - 1)


def estimate_gas(
    route_with_valid_quote: MixedRouteWithValidQuote,
    gas_price_wei: int,
    config: NetworkGasConfig,
) -> GasUse:
    """Estimate gas units and native currency cost for a route.

    Args:
        route_with_valid_quote: Route plus initialized ticks crossed per pool
        gas_price_wei: Gas price in wei per gas unit
        config: Network gas configuration

    Returns:
        GasUse with gas units and cost in the wrapped native currency

    Raises:
        ValueError: If gas_price_wei is negative
    """
    if gas_price_wei < 0:
        raise ValueError(f"Gas price cannot be negative: {gas_price_wei}")

    ticks_crossed = total_initialized_ticks_crossed(
        route_with_valid_quote.initialized_ticks_crossed_list
    )

    # Each section is a separate router call and pays its own base cost
    sections = split_into_sections(route_with_valid_quote.route.pools)
    base_gas_use = 0
    for section in sections:
        base_gas_use += section_gas_use(section, config)

    tick_gas_use = config.v3.cost_per_init_tick * ticks_crossed
    uninitialized_tick_gas_use = config.v3.cost_per_uninit_tick * UNINITIALIZED_TICKS_CROSSED
    base_gas_use += tick_gas_use + uninitialized_tick_gas_use

    logger.debug(
        "mixed_route_gas_estimated",
        hops=len(route_with_valid_quote.route.pools),
        sections=[section.family.value for section in sections],
        ticks_crossed=ticks_crossed,
        gas_use=base_gas_use,
    )

    total_gas_cost_native_currency = CurrencyAmount.from_raw_amount(
        config.wrapped_native, gas_price_wei * base_gas_use
    )

    return GasUse(
        base_gas_use=base_gas_use,
        total_initialized_ticks_crossed=ticks_crossed,
        total_gas_cost_native_currency=total_gas_cost_native_currency,
    )


__all__ = [
    "UNINITIALIZED_TICKS_CROSSED",
    "GasUse",
    "total_initialized_ticks_crossed",
    "section_gas_use",
    "estimate_gas",
]
