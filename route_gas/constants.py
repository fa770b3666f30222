"""Well-known token addresses per chain.

All addresses are validated at import time to catch typos early.
"""

from route_gas.models.token import ChainId, Token
from route_gas.models.types import is_valid_address


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


def _token(chain_id: ChainId, symbol: str, address: str, decimals: int = 18) -> Token:
    return Token(
        chain_id=chain_id,
        address=_validate_token_address(f"{symbol} ({chain_id.name})", address),
        decimals=decimals,
        symbol=symbol,
    )


# Mainnet
WETH_MAINNET = _token(ChainId.MAINNET, "WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
USDC_MAINNET = _token(ChainId.MAINNET, "USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", 6)
USDT_MAINNET = _token(ChainId.MAINNET, "USDT", "0xdac17f958d2ee523a2206206994597c13d831ec7", 6)
DAI_MAINNET = _token(ChainId.MAINNET, "DAI", "0x6b175474e89094c44da98b954eedeac495271d0f")

# Goerli (no USD gas tokens configured)
WETH_GOERLI = _token(ChainId.GOERLI, "WETH", "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6")

# Optimism
WETH_OPTIMISM = _token(ChainId.OPTIMISM, "WETH", "0x4200000000000000000000000000000000000006")
USDC_OPTIMISM = _token(ChainId.OPTIMISM, "USDC", "0x7f5c764cbc14f9669b88837ca1490cca17c31607", 6)
USDT_OPTIMISM = _token(ChainId.OPTIMISM, "USDT", "0x94b008aa00579c1307b0ef2c499ad98a8ce58e58", 6)
DAI_OPTIMISM = _token(ChainId.OPTIMISM, "DAI", "0xda10009cbd5d07dd0cecc66161fc93d7c9000da1")

# Gnosis
WXDAI_GNOSIS = _token(ChainId.GNOSIS, "WXDAI", "0xe91d153e0b41518a2ce8dd3d7944fa863463a97d")
USDC_GNOSIS = _token(ChainId.GNOSIS, "USDC", "0xddafbb505ad214d7b80b1f830fccc89b60fb7a83", 6)

# Polygon
WMATIC_POLYGON = _token(ChainId.POLYGON, "WMATIC", "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270")
USDC_POLYGON = _token(ChainId.POLYGON, "USDC", "0x2791bca1f2de4661ed88a30c99a7a9449aa84174", 6)
DAI_POLYGON = _token(ChainId.POLYGON, "DAI", "0x8f3cf7ad23cd3cadbd9735aff958023239c6a063")

# Arbitrum One
WETH_ARBITRUM = _token(ChainId.ARBITRUM_ONE, "WETH", "0x82af49447d8a07e3bd95bd0d56f35241523fbab1")
USDC_ARBITRUM = _token(
    ChainId.ARBITRUM_ONE, "USDC", "0xff970a61a04b1ca14834a43f5de4533ebddb5cc8", 6
)
USDT_ARBITRUM = _token(
    ChainId.ARBITRUM_ONE, "USDT", "0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9", 6
)
DAI_ARBITRUM = _token(ChainId.ARBITRUM_ONE, "DAI", "0xda10009cbd5d07dd0cecc66161fc93d7c9000da1")

# Wrapped native currency used to pay gas
WRAPPED_NATIVE_CURRENCY: dict[ChainId, Token] = {
    ChainId.MAINNET: WETH_MAINNET,
    ChainId.GOERLI: WETH_GOERLI,
    ChainId.OPTIMISM: WETH_OPTIMISM,
    ChainId.GNOSIS: WXDAI_GNOSIS,
    ChainId.POLYGON: WMATIC_POLYGON,
    ChainId.ARBITRUM_ONE: WETH_ARBITRUM,
}

# USD-pegged tokens eligible as gas price references
USD_GAS_TOKENS_BY_CHAIN: dict[ChainId, tuple[Token, ...]] = {
    ChainId.MAINNET: (DAI_MAINNET, USDC_MAINNET, USDT_MAINNET),
    ChainId.GOERLI: (),
    ChainId.OPTIMISM: (DAI_OPTIMISM, USDC_OPTIMISM, USDT_OPTIMISM),
    ChainId.GNOSIS: (USDC_GNOSIS,),
    ChainId.POLYGON: (USDC_POLYGON, DAI_POLYGON),
    ChainId.ARBITRUM_ONE: (DAI_ARBITRUM, USDC_ARBITRUM, USDT_ARBITRUM),
}
