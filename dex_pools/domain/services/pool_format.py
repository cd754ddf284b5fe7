from __future__ import annotations

from collections.abc import Iterable, Mapping

from dex_pools.domain.entities.dex_data import Pool, Token
from dex_pools.domain.entities.pool_query import FormattedPool, FormattedToken


UNKNOWN_SYMBOL = "UNKNOWN"
DEFAULT_DECIMALS = 18


def build_token_map(tokens: Iterable[Token]) -> dict[str, Token]:
    token_map: dict[str, Token] = {}
    for token in tokens:
        token_map.setdefault(token.address.lower(), token)
    return token_map


def format_token(address: str, tokens_by_address: Mapping[str, Token]) -> FormattedToken:
    token = tokens_by_address.get(address.lower())
    if token is None:
        return FormattedToken(address=address, symbol=UNKNOWN_SYMBOL, decimals=DEFAULT_DECIMALS)
    return FormattedToken(address=address, symbol=token.symbol, decimals=token.decimals)


def format_pool(pool: Pool, tokens_by_address: Mapping[str, Token]) -> FormattedPool:
    return FormattedPool(
        id=pool.id or f"{pool.token0}-{pool.token1}",
        factory=pool.factory,
        token0=format_token(pool.token0, tokens_by_address),
        token1=format_token(pool.token1, tokens_by_address),
        reserve0=str(int(pool.reserve0)),
        reserve1=str(int(pool.reserve1)),
        fee=str(int(pool.fee)),
        protocol=pool.dex_name,
        network=pool.chain,
    )
