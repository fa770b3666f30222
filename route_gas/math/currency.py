"""Exact currency amounts and prices.

Amounts are kept as exact fractions of raw token units so that converting a
gas cost through a pool mid-price never loses precision. Rounding happens
only when the caller asks for ``quotient`` (floor to raw units).

Usage:
    from route_gas.math import CurrencyAmount, Price

    cost = CurrencyAmount.from_raw_amount(weth, 2 * 10**15)
    usdc_per_weth = Price(weth, usdc, 10**18, 2_000 * 10**6)
    usdc_per_weth.quote(cost).quotient  # 4_000_000
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from route_gas.errors import CurrencyMismatchError
from route_gas.models.token import Token
from route_gas.models.types import UINT256_MAX


class CurrencyAmount:
    """An exact amount of a token in raw units.

    Attributes:
        currency: The token this amount is denominated in
        fraction: Exact amount in raw units (may be fractional after a quote)
    """

    __slots__ = ("_currency", "_fraction")

    def __init__(self, currency: Token, numerator: int, denominator: int = 1) -> None:
        """Create an amount of ``numerator / denominator`` raw units.

        Raises:
            ValueError: If the denominator is zero, the amount is negative,
                or the amount exceeds uint256
        """
        if denominator == 0:
            raise ValueError("CurrencyAmount denominator must be non-zero")
        fraction = Fraction(numerator, denominator)
        if fraction < 0:
            raise ValueError(f"CurrencyAmount cannot be negative: {fraction}")
        if fraction > UINT256_MAX:
            raise ValueError(f"CurrencyAmount exceeds uint256 max: {fraction}")
        self._currency = currency
        self._fraction = fraction

    @classmethod
    def from_raw_amount(cls, currency: Token, raw_amount: int | str) -> CurrencyAmount:
        """Create an amount from an integer number of raw units."""
        return cls(currency, int(raw_amount))

    @classmethod
    def from_fractional_amount(
        cls, currency: Token, numerator: int, denominator: int
    ) -> CurrencyAmount:
        """Create an amount from a fraction of raw units."""
        return cls(currency, numerator, denominator)

    @classmethod
    def zero(cls, currency: Token) -> CurrencyAmount:
        """Create a zero amount of ``currency``."""
        return cls(currency, 0)

    @property
    def currency(self) -> Token:
        return self._currency

    @property
    def fraction(self) -> Fraction:
        return self._fraction

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    @property
    def quotient(self) -> int:
        """Amount floored to whole raw units."""
        return self._fraction.numerator // self._fraction.denominator

    def is_zero(self) -> bool:
        return self._fraction == 0

    def to_decimal(self) -> Decimal:
        """Amount in human units (raw / 10**decimals)."""
        raw = Decimal(self._fraction.numerator) / Decimal(self._fraction.denominator)
        return raw.scaleb(-self._currency.decimals)

    def _check_currency(self, other: CurrencyAmount) -> None:
        if other._currency != self._currency:
            raise CurrencyMismatchError(self._currency, None, other._currency)

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        self._check_currency(other)
        total = self._fraction + other._fraction
        return CurrencyAmount(self._currency, total.numerator, total.denominator)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        """Subtract two amounts of the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ
            ValueError: If the result would be negative
        """
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        self._check_currency(other)
        diff = self._fraction - other._fraction
        return CurrencyAmount(self._currency, diff.numerator, diff.denominator)

    def __mul__(self, other: int | Fraction) -> CurrencyAmount:
        if isinstance(other, bool) or not isinstance(other, (int, Fraction)):
            return NotImplemented
        product = self._fraction * other
        return CurrencyAmount(self._currency, product.numerator, product.denominator)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self._currency == other._currency and self._fraction == other._fraction

    def __hash__(self) -> int:
        return hash((self._currency, self._fraction))

    def __repr__(self) -> str:
        return f"CurrencyAmount({self._currency.label}, {self._fraction})"


class Price:
    """Exchange rate between two tokens in raw units.

    ``numerator / denominator`` raw units of the quote currency are worth one
    raw unit of the base currency. The argument order (denominator before
    numerator) mirrors the usual "base amount, quote amount" reading.
    """

    __slots__ = ("_base_currency", "_quote_currency", "_fraction")

    def __init__(
        self,
        base_currency: Token,
        quote_currency: Token,
        denominator: int,
        numerator: int,
    ) -> None:
        """Create a price of ``numerator`` quote units per ``denominator`` base units.

        Raises:
            ValueError: If the denominator is zero or the price is negative
        """
        if denominator == 0:
            raise ValueError(
                f"Price {base_currency.label}/{quote_currency.label} has zero denominator"
            )
        fraction = Fraction(numerator, denominator)
        if fraction < 0:
            raise ValueError(f"Price cannot be negative: {fraction}")
        self._base_currency = base_currency
        self._quote_currency = quote_currency
        self._fraction = fraction

    @property
    def base_currency(self) -> Token:
        return self._base_currency

    @property
    def quote_currency(self) -> Token:
        return self._quote_currency

    @property
    def fraction(self) -> Fraction:
        """Raw quote units per raw base unit."""
        return self._fraction

    def invert(self) -> Price:
        """Flip base and quote currencies.

        Raises:
            ValueError: If the price is zero
        """
        return Price(
            self._quote_currency,
            self._base_currency,
            self._fraction.numerator,
            self._fraction.denominator,
        )

    def multiply(self, other: Price) -> Price:
        """Chain two prices: (A -> B) * (B -> C) = (A -> C).

        Raises:
            CurrencyMismatchError: If other's base is not this price's quote
        """
        if other._base_currency != self._quote_currency:
            raise CurrencyMismatchError(
                other._base_currency, other._quote_currency, self._quote_currency
            )
        product = self._fraction * other._fraction
        return Price(
            self._base_currency,
            other._quote_currency,
            product.denominator,
            product.numerator,
        )

    def quote(self, amount: CurrencyAmount) -> CurrencyAmount:
        """Convert an amount of the base currency into the quote currency.

        Raises:
            CurrencyMismatchError: If the amount is not in the base currency
        """
        if amount.currency != self._base_currency:
            raise CurrencyMismatchError(
                self._base_currency, self._quote_currency, amount.currency
            )
        result = amount.fraction * self._fraction
        return CurrencyAmount.from_fractional_amount(
            self._quote_currency, result.numerator, result.denominator
        )

    def to_decimal(self) -> Decimal:
        """Price in human units (quote tokens per whole base token)."""
        raw = Decimal(self._fraction.numerator) / Decimal(self._fraction.denominator)
        return raw.scaleb(self._base_currency.decimals - self._quote_currency.decimals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return (
            self._base_currency == other._base_currency
            and self._quote_currency == other._quote_currency
            and self._fraction == other._fraction
        )

    def __hash__(self) -> int:
        return hash((self._base_currency, self._quote_currency, self._fraction))

    def __repr__(self) -> str:
        return (
            f"Price({self._base_currency.label}/{self._quote_currency.label}, "
            f"{self._fraction})"
        )


__all__ = ["CurrencyAmount", "Price"]
