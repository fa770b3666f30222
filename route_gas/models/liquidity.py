"""Pydantic models for pool liquidity data.

The shape follows the solver auction ``liquidity`` entries, so pools exported
by a solver driver can be loaded as reference pools directly.
"""

from typing import Any

from pydantic import BaseModel, Field
from typing_extensions import TypedDict

from route_gas.models.types import Address


class TokenBalance(TypedDict):
    """Token balance information in liquidity pools."""

    balance: str


class Liquidity(BaseModel):
    """On-chain liquidity source.

    Supports both simplified format (tokens as list) and full format
    (tokens as dict with balances).

    For concentratedLiquidity pools the V3 state arrives as extra fields:
    - sqrtPrice: Current sqrt(price) * 2^96
    - liquidity: Active liquidity
    - tick: Current tick
    """

    id: str
    kind: str
    tokens: list[Address] | dict[Address, TokenBalance] | None = None
    address: Address | None = None
    fee: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    model_config = {"extra": "allow", "populate_by_name": True}

    def extra_field(self, name: str) -> Any:
        """Read an extra field accepted through ``extra="allow"``."""
        if self.model_extra and name in self.model_extra:
            return self.model_extra[name]
        return self.extra.get(name)


__all__ = ["Liquidity", "TokenBalance"]
