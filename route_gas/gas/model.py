"""Gas model for mixed V3/V2 routes.

``build_gas_model`` resolves the reference pools once per
(network, gas price, quote token) and returns a ``MixedRouteGasModel`` whose
``estimate_gas_cost`` prices any number of routes without further I/O.

Usage:
    model = await build_gas_model(ChainId.MAINNET, gas_price_wei, v3_provider, v2_provider, usdc)
    estimate = model.estimate_gas_cost(route_with_valid_quote)
    estimate.gas_estimate        # gas units
    estimate.gas_cost_in_token   # in the quote token
    estimate.gas_cost_in_usd     # in the USD reference token
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

import structlog

from route_gas.errors import ConfigurationError, CurrencyMismatchError
from route_gas.gas.config import NetworkGasConfig, get_network_config
from route_gas.gas.estimator import estimate_gas
from route_gas.gas.reference_pools import (
    get_highest_liquidity_native_pool,
    get_highest_liquidity_usd_pool,
)
from route_gas.math.currency import CurrencyAmount, Price
from route_gas.models.token import Token
from route_gas.pools import UniswapV3Pool, V2PoolProvider, V3PoolProvider
from route_gas.routing.types import MixedRouteWithValidQuote

logger = structlog.get_logger()


@dataclass(frozen=True)
class GasCostEstimate:
    """Gas cost of one route in three denominations.

    Attributes:
        gas_estimate: Gas units
        gas_cost_in_token: Cost in the quote token (zero if it could not be priced)
        gas_cost_in_usd: Cost in the USD reference token (zero if it could not be priced)
    """

    gas_estimate: int
    gas_cost_in_token: CurrencyAmount
    gas_cost_in_usd: CurrencyAmount


class GasModel(Protocol):
    """A gas model bound to a network, gas price and quote token."""

    def estimate_gas_cost(self, route_with_valid_quote: MixedRouteWithValidQuote) -> GasCostEstimate:
        ...


class MixedRouteGasModel:
    """Gas model for routes mixing V3 and V2 pools.

    Reference prices are read from the pools when the model is constructed,
    so later changes to the pool objects do not affect estimates.
    ``estimate_gas_cost`` does no I/O and can be called concurrently.

    Attributes:
        config: Network gas configuration
        gas_price_wei: Gas price in wei per gas unit
        quote_token: Token gas costs are expressed in
        usd_pool: Wrapped-native/USD reference pool
        native_pool: Wrapped-native/quote-token reference pool, None if the
            quote token is the native currency or no pool exists
    """

    __slots__ = (
        "_config",
        "_gas_price_wei",
        "_quote_token",
        "_usd_pool",
        "_native_pool",
        "_usd_token",
        "_usd_price",
        "_native_price",
    )

    def __init__(
        self,
        config: NetworkGasConfig,
        gas_price_wei: int,
        quote_token: Token,
        usd_pool: UniswapV3Pool,
        native_pool: UniswapV3Pool | None = None,
    ) -> None:
        """Bind a gas price and reference pools to a network config.

        Raises:
            ValueError: If the gas price is negative
            ConfigurationError: If a reference pool does not contain the wrapped native token
        """
        if gas_price_wei < 0:
            raise ValueError(f"Gas price cannot be negative: {gas_price_wei}")
        wrapped_native = config.wrapped_native
        if not usd_pool.involves_token(wrapped_native):
            raise ConfigurationError(f"USD pool {usd_pool!r} does not contain {wrapped_native.label}")
        if native_pool is not None and not native_pool.involves_token(wrapped_native):
            raise ConfigurationError(
                f"Native pool {native_pool!r} does not contain {wrapped_native.label}"
            )
        self._config = config
        self._gas_price_wei = gas_price_wei
        self._quote_token = quote_token
        self._usd_pool = usd_pool
        self._native_pool = native_pool
        self._usd_token = usd_pool.other_token(wrapped_native)
        self._usd_price: Price = usd_pool.price_of(wrapped_native)
        self._native_price: Price | None = (
            native_pool.price_of(wrapped_native) if native_pool is not None else None
        )

    @property
    def config(self) -> NetworkGasConfig:
        return self._config

    @property
    def gas_price_wei(self) -> int:
        return self._gas_price_wei

    @property
    def quote_token(self) -> Token:
        return self._quote_token

    @property
    def usd_pool(self) -> UniswapV3Pool:
        return self._usd_pool

    @property
    def native_pool(self) -> UniswapV3Pool | None:
        return self._native_pool

    @property
    def quote_is_native(self) -> bool:
        return self._quote_token == self._config.wrapped_native

    @property
    def usd_token(self) -> Token:
        """The USD-pegged side of the USD reference pool."""
        return self._usd_token

    def estimate_gas_cost(self, route_with_valid_quote: MixedRouteWithValidQuote) -> GasCostEstimate:
        """Estimate a route's gas cost in gas units, quote token and USD.

        Raises:
            CurrencyMismatchError: If a reference price is oriented on the
                wrong token (internal invariant violation)
        """
        gas_use = estimate_gas(route_with_valid_quote, self._gas_price_wei, self._config)
        native_cost = gas_use.total_gas_cost_native_currency

        # Gas is already paid in the quote token, only the USD view needs converting
        if self.quote_is_native:
            return GasCostEstimate(
                gas_estimate=gas_use.base_gas_use,
                gas_cost_in_token=native_cost,
                gas_cost_in_usd=self._quote_usd(native_cost),
            )

        native_price = self._native_price
        if native_price is None:
            logger.info(
                "gas_not_accounted_for_route",
                native=self._config.wrapped_native.label,
                quote_token=self._quote_token.label,
                reason="no native pool with the quote token to produce gas adjusted costs",
            )
            return GasCostEstimate(
                gas_estimate=gas_use.base_gas_use,
                gas_cost_in_token=CurrencyAmount.zero(self._quote_token),
                gas_cost_in_usd=CurrencyAmount.zero(self.usd_token),
            )

        try:
            gas_cost_in_token = native_price.quote(native_cost)
        except CurrencyMismatchError:
            logger.error(
                "native_price_quote_failed",
                native_price_base=native_price.base_currency.label,
                native_price_quote=native_price.quote_currency.label,
                gas_cost_currency=native_cost.currency.label,
            )
            raise

        return GasCostEstimate(
            gas_estimate=gas_use.base_gas_use,
            gas_cost_in_token=gas_cost_in_token,
            gas_cost_in_usd=self._quote_usd(native_cost),
        )

    def _quote_usd(self, native_cost: CurrencyAmount) -> CurrencyAmount:
        try:
            return self._usd_price.quote(native_cost)
        except CurrencyMismatchError:
            logger.error(
                "usd_price_quote_failed",
                usd_price_base=self._usd_price.base_currency.label,
                usd_price_quote=self._usd_price.quote_currency.label,
                gas_cost_currency=native_cost.currency.label,
            )
            raise

    def __repr__(self) -> str:
        return (
            f"MixedRouteGasModel(chain={self._config.chain_id}, "
            f"quote={self._quote_token.label}, gas_price={self._gas_price_wei})"
        )


async def _resolve_reference_pools(
    config: NetworkGasConfig,
    token: Token,
    v3_pool_provider: V3PoolProvider,
) -> tuple[UniswapV3Pool, UniswapV3Pool | None]:
    """Run both reference pool lookups concurrently.

    If either lookup fails the other is cancelled and awaited before the
    error propagates.
    """
    tasks = [
        asyncio.ensure_future(get_highest_liquidity_usd_pool(config, v3_pool_provider)),
        asyncio.ensure_future(get_highest_liquidity_native_pool(config, token, v3_pool_provider)),
    ]
    try:
        usd_pool, native_pool = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return usd_pool, native_pool


class GasModelFactory(ABC):
    """Builds gas models for a network, gas price and quote token."""

    @abstractmethod
    async def build_gas_model(
        self,
        chain_id: int,
        gas_price_wei: int,
        v3_pool_provider: V3PoolProvider,
        v2_pool_provider: V2PoolProvider,
        token: Token,
        *,
        config: NetworkGasConfig | None = None,
    ) -> GasModel:
        ...


class MixedRouteHeuristicGasModelFactory(GasModelFactory):
    """Factory for heuristic gas models of mixed V3/V2 routes."""

    async def build_gas_model(
        self,
        chain_id: int,
        gas_price_wei: int | str,
        v3_pool_provider: V3PoolProvider,
        v2_pool_provider: V2PoolProvider,
        token: Token,
        *,
        config: NetworkGasConfig | None = None,
    ) -> MixedRouteGasModel:
        """Resolve reference pools and build a gas model.

        Args:
            chain_id: Network to build the model for
            gas_price_wei: Gas price in wei per gas unit
            v3_pool_provider: Batched V3 pool lookup for reference pools
            v2_pool_provider: V2 pool lookup (not needed by the heuristics)
            token: Quote token gas costs should be expressed in
            config: Gas configuration; defaults to the chain's built-in config

        Returns:
            A ready-to-use MixedRouteGasModel

        Raises:
            ConfigurationError: Unknown chain, no USD tokens, or token on another chain
            NoLiquidityPoolError: No USD reference pool exists
        """
        _ = v2_pool_provider  # Interface-required param
        if config is None:
            config = get_network_config(chain_id)
        elif config.chain_id != chain_id:
            raise ConfigurationError(
                f"Gas config is for chain {config.chain_id}, not {chain_id}"
            )

        if token.chain_id != config.chain_id:
            raise ConfigurationError(
                f"Quote token {token.label} is on chain {token.chain_id}, not {config.chain_id}"
            )

        if not config.usd_tokens:
            raise ConfigurationError(
                f"Could not find a USD token for computing gas costs on {config.chain_id}"
            )

        gas_price_wei = int(gas_price_wei)
        if gas_price_wei < 0:
            raise ValueError(f"Gas price cannot be negative: {gas_price_wei}")

        # If the quote token is the native currency no conversion pool is needed,
        # but gas is still reported in USD.
        if token == config.wrapped_native:
            usd_pool = await get_highest_liquidity_usd_pool(config, v3_pool_provider)
            native_pool = None
        else:
            usd_pool, native_pool = await _resolve_reference_pools(config, token, v3_pool_provider)

        logger.debug(
            "gas_model_built",
            chain_id=config.chain_id,
            quote_token=token.label,
            gas_price=gas_price_wei,
            usd_pool_fee=usd_pool.fee,
            native_pool_fee=native_pool.fee if native_pool is not None else None,
        )

        return MixedRouteGasModel(
            config=config,
            gas_price_wei=gas_price_wei,
            quote_token=token,
            usd_pool=usd_pool,
            native_pool=native_pool,
        )


# Default factory instance
DEFAULT_GAS_MODEL_FACTORY = MixedRouteHeuristicGasModelFactory()


async def build_gas_model(
    chain_id: int,
    gas_price_wei: int | str,
    v3_pool_provider: V3PoolProvider,
    v2_pool_provider: V2PoolProvider,
    token: Token,
    *,
    config: NetworkGasConfig | None = None,
) -> MixedRouteGasModel:
    """Build a mixed route gas model with the default factory.

    See ``MixedRouteHeuristicGasModelFactory.build_gas_model``.
    """
    return await DEFAULT_GAS_MODEL_FACTORY.build_gas_model(
        chain_id,
        gas_price_wei,
        v3_pool_provider,
        v2_pool_provider,
        token,
        config=config,
    )


__all__ = [
    "GasCostEstimate",
    "GasModel",
    "MixedRouteGasModel",
    "GasModelFactory",
    "MixedRouteHeuristicGasModelFactory",
    "DEFAULT_GAS_MODEL_FACTORY",
    "build_gas_model",
]
