"""Mixed route types and route segmentation."""

from route_gas.routing.sections import RouteSection, split_into_sections
from route_gas.routing.types import MixedRoute, MixedRouteWithValidQuote

__all__ = [
    "MixedRoute",
    "MixedRouteWithValidQuote",
    "RouteSection",
    "split_into_sections",
]
