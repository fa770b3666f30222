"""Pool protocol families."""

from enum import Enum


class PoolFamily(str, Enum):
    """Protocol family a pool belongs to.

    Each family is swapped through its own router call, so a route is billed
    per contiguous section of one family.
    """

    V3 = "v3"  # concentrated liquidity, keyed by (token_a, token_b, fee)
    V2 = "v2"  # constant product, keyed by (token_a, token_b)


__all__ = ["PoolFamily"]
