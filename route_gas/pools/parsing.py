"""Parsing functions for pool liquidity data.

Converts ``Liquidity`` entries into ``UniswapV3Pool`` (kind
``concentratedLiquidity``) and ``UniswapV2Pool`` (kind ``constantProduct``).
Malformed entries are logged and skipped rather than raised, so one bad pool
does not prevent the rest from loading.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import structlog

from route_gas.models.liquidity import Liquidity
from route_gas.models.token import Token
from route_gas.models.types import normalize_address
from route_gas.pools.uniswap_v2 import UniswapV2Pool
from route_gas.pools.uniswap_v3 import V3_FEE_MEDIUM, UniswapV3Pool

logger = structlog.get_logger()


def resolve_token(
    chain_id: int, address: str, known_tokens: Mapping[str, Token] | None = None
) -> Token:
    """Look up token metadata by address, falling back to an 18-decimal token.

    Args:
        chain_id: Chain the liquidity belongs to
        address: Token address (any case)
        known_tokens: Optional metadata keyed by address (any case)
    """
    address_norm = normalize_address(address)
    if known_tokens:
        for key, token in known_tokens.items():
            if normalize_address(key) == address_norm:
                return token
    return Token(chain_id=chain_id, address=address_norm)


def parse_v3_liquidity(
    liquidity: Liquidity,
    chain_id: int,
    known_tokens: Mapping[str, Token] | None = None,
) -> UniswapV3Pool | None:
    """Parse UniswapV3 pool from liquidity data.

    Returns:
        UniswapV3Pool if liquidity is concentrated liquidity, None otherwise
    """
    if liquidity.kind != "concentratedLiquidity":
        return None

    token_addresses = _token_addresses(liquidity)
    if token_addresses is None:
        return None

    sqrt_price_x96 = _parse_int_field(liquidity, "sqrtPrice")
    pool_liquidity = _parse_int_field(liquidity, "liquidity")
    if sqrt_price_x96 is None or pool_liquidity is None:
        logger.debug("v3_pool_missing_state", liquidity_id=liquidity.id)
        return None

    tick = _parse_int_field(liquidity, "tick") or 0

    return UniswapV3Pool(
        token0=resolve_token(chain_id, token_addresses[0], known_tokens),
        token1=resolve_token(chain_id, token_addresses[1], known_tokens),
        fee=_parse_v3_fee(liquidity),
        sqrt_price_x96=sqrt_price_x96,
        liquidity=pool_liquidity,
        tick=tick,
        address=normalize_address(liquidity.address) if liquidity.address else None,
        liquidity_id=liquidity.id,
    )


def parse_v2_liquidity(
    liquidity: Liquidity,
    chain_id: int,
    known_tokens: Mapping[str, Token] | None = None,
) -> UniswapV2Pool | None:
    """Parse UniswapV2 pool from liquidity data.

    Returns:
        UniswapV2Pool if liquidity is a constant product pool, None otherwise
    """
    if liquidity.kind != "constantProduct":
        return None

    # Reserves are required, so tokens must be a dict with balance info
    if not isinstance(liquidity.tokens, dict) or len(liquidity.tokens) != 2:
        logger.debug("v2_pool_invalid_tokens", liquidity_id=liquidity.id)
        return None

    (address0, info0), (address1, info1) = liquidity.tokens.items()
    if normalize_address(address0) == normalize_address(address1):
        logger.debug("v2_pool_duplicate_token", liquidity_id=liquidity.id)
        return None
    try:
        reserve0 = int(info0["balance"])
        reserve1 = int(info1["balance"])
    except (KeyError, ValueError, TypeError):
        logger.debug("v2_pool_invalid_balance", liquidity_id=liquidity.id)
        return None

    # Use Decimal for exact arithmetic - avoid float precision loss
    fee_bps = 30
    if liquidity.fee:
        try:
            fee_decimal = Decimal(str(liquidity.fee))
            fee_bps = int((fee_decimal * 10000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        except (ValueError, InvalidOperation):
            logger.warning(
                "fee_parse_failed",
                pool_id=liquidity.id,
                raw_fee=liquidity.fee,
                using_default="0.003 (30 bps)",
            )

    return UniswapV2Pool(
        token0=resolve_token(chain_id, address0, known_tokens),
        token1=resolve_token(chain_id, address1, known_tokens),
        reserve0=reserve0,
        reserve1=reserve1,
        fee_bps=fee_bps,
        address=normalize_address(liquidity.address) if liquidity.address else None,
        liquidity_id=liquidity.id,
    )


def _token_addresses(liquidity: Liquidity) -> list[str] | None:
    # V3 liquidity has tokens as a list, not dict
    if isinstance(liquidity.tokens, dict):
        token_addresses = list(liquidity.tokens.keys())
    elif isinstance(liquidity.tokens, list):
        token_addresses = liquidity.tokens
    else:
        logger.debug("v3_pool_invalid_tokens", liquidity_id=liquidity.id)
        return None

    if len(token_addresses) != 2:
        logger.debug(
            "v3_pool_wrong_token_count",
            liquidity_id=liquidity.id,
            count=len(token_addresses),
        )
        return None
    if normalize_address(token_addresses[0]) == normalize_address(token_addresses[1]):
        logger.debug("v3_pool_duplicate_token", liquidity_id=liquidity.id)
        return None
    return token_addresses


def _parse_int_field(liquidity: Liquidity, field_name: str) -> int | None:
    value = liquidity.extra_field(field_name)
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.debug(
            "v3_pool_parse_int_failed",
            liquidity_id=liquidity.id,
            field=field_name,
            value=value,
        )
        return None


def _parse_v3_fee(liquidity: Liquidity) -> int:
    """Parse fee in Uniswap units.

    Fee can come as:
    - Decimal string "0.003" (0.3%) -> multiply by 1,000,000 -> 3000
    - Integer string "3000" -> use directly
    """
    fee_value = liquidity.fee
    if fee_value is None:
        return V3_FEE_MEDIUM

    try:
        fee_decimal = Decimal(str(fee_value))
    except InvalidOperation:
        logger.debug("v3_pool_parse_fee_failed", liquidity_id=liquidity.id, fee=fee_value)
        return V3_FEE_MEDIUM

    if fee_decimal < 1:
        return int(fee_decimal * 1_000_000)
    return int(fee_decimal)


__all__ = ["parse_v3_liquidity", "parse_v2_liquidity", "resolve_token"]
