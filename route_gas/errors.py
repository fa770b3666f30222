"""Gas model error classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_gas.models.token import Token


class GasModelError(Exception):
    """Base error for gas model operations."""

    pass


class ConfigurationError(GasModelError):
    """Network configuration is missing or unusable."""

    pass


class NoLiquidityPoolError(GasModelError):
    """No reference pool exists for converting gas costs."""

    def __init__(self, native_token: Token, candidate_tokens: tuple[Token, ...]) -> None:
        self.native_token = native_token
        self.candidate_tokens = candidate_tokens
        candidates = ", ".join(t.label for t in candidate_tokens)
        super().__init__(
            f"Can't find {candidates}/{native_token.label} pool for computing gas costs"
        )


class CurrencyMismatchError(GasModelError, ValueError):
    """A price or amount was combined with an amount of another currency."""

    def __init__(
        self,
        base_currency: Token,
        quote_currency: Token | None,
        amount_currency: Token,
    ) -> None:
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        self.amount_currency = amount_currency
        if quote_currency is None:
            detail = f"expected {base_currency.label}"
        else:
            detail = f"price {base_currency.label}/{quote_currency.label} expects {base_currency.label}"
        super().__init__(f"Currency mismatch: {detail}, got {amount_currency.label}")


__all__ = [
    "GasModelError",
    "ConfigurationError",
    "NoLiquidityPoolError",
    "CurrencyMismatchError",
]
