"""Exact arithmetic for token amounts and prices."""

from route_gas.math.currency import CurrencyAmount, Price

__all__ = ["CurrencyAmount", "Price"]
