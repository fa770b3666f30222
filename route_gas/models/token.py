"""Token identity and chain ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from route_gas.models.types import normalize_address


class ChainId(IntEnum):
    """Networks with a default gas configuration."""

    MAINNET = 1
    GOERLI = 5
    OPTIMISM = 10
    GNOSIS = 100
    POLYGON = 137
    ARBITRUM_ONE = 42161


@dataclass(frozen=True)
class Token:
    """An ERC20 token on a specific chain.

    Two tokens are equal when they live on the same chain at the same
    address; decimals and symbol are metadata only.

    Attributes:
        chain_id: Chain the token is deployed on
        address: Token contract address (normalized to lowercase)
        decimals: Token decimals (18 for most tokens, 6 for USDC/USDT)
        symbol: Optional ticker, used in log output
    """

    chain_id: int
    address: str
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_address(self.address, validate=True))
        if not 0 <= self.decimals <= 77:
            raise ValueError(f"Token decimals out of range: {self.decimals}")

    def sorts_before(self, other: Token) -> bool:
        """True if this token is token0 of a pool with ``other``.

        Raises:
            ValueError: If the tokens are on different chains or identical
        """
        if self.chain_id != other.chain_id:
            raise ValueError(f"Tokens on different chains: {self.chain_id} != {other.chain_id}")
        if self.address == other.address:
            raise ValueError(f"Cannot order a token against itself: {self.address}")
        return bytes.fromhex(self.address[2:]) < bytes.fromhex(other.address[2:])

    @property
    def label(self) -> str:
        """Short human-readable name for logs."""
        return self.symbol or self.address[-8:]

    def __repr__(self) -> str:
        return f"Token({self.label}, chain={self.chain_id})"


__all__ = ["ChainId", "Token"]
