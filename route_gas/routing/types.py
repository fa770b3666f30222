"""Type definitions for routing module."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from route_gas.math.currency import CurrencyAmount
from route_gas.pools import AnyPool, PoolFamily


@dataclass(frozen=True)
class MixedRoute:
    """An ordered chain of V3 and V2 pools from an input to an output token.

    Adjacent pools are expected to share a token; that is the route
    producer's responsibility and is not re-checked here.
    """

    pools: Sequence[AnyPool]

    def __post_init__(self) -> None:
        if not self.pools:
            raise ValueError("A route must contain at least one pool")
        object.__setattr__(self, "pools", tuple(self.pools))

    @property
    def families(self) -> tuple[PoolFamily, ...]:
        return tuple(pool.family for pool in self.pools)

    @property
    def chain_id(self) -> int:
        return self.pools[0].chain_id

    def __len__(self) -> int:
        return len(self.pools)


@dataclass(frozen=True)
class MixedRouteWithValidQuote:
    """A route together with the quoter output needed for gas estimation.

    Attributes:
        route: The route being priced
        initialized_ticks_crossed_list: Initialized ticks crossed per pool,
            one entry per pool (V2 pools report 0)
        amount: Optional input amount the quote was produced for
        quote: Optional output amount of the quote
    """

    route: MixedRoute
    initialized_ticks_crossed_list: tuple[int, ...] = field(default=())
    amount: CurrencyAmount | None = None
    quote: CurrencyAmount | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "initialized_ticks_crossed_list", tuple(self.initialized_ticks_crossed_list)
        )


__all__ = ["MixedRoute", "MixedRouteWithValidQuote"]
