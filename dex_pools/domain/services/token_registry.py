from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from dex_pools.domain.entities.dex_data import DexData


@dataclass(frozen=True)
class MonitoredToken:
    symbol: str
    address: str


# Polygon tokens tracked across every DEX source, checksum addresses.
MONITORED_TOKENS: tuple[MonitoredToken, ...] = (
    MonitoredToken(symbol="WMATIC", address="0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270"),
    MonitoredToken(symbol="USDC", address="0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174"),
    MonitoredToken(symbol="USDT", address="0xc2132D05D31c914a87C6611C10748AEb04B58e8F"),
    MonitoredToken(symbol="DAI", address="0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063"),
    MonitoredToken(symbol="WETH", address="0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619"),
    MonitoredToken(symbol="WBTC", address="0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6"),
    MonitoredToken(symbol="LINK", address="0x53E0bca35eC356BD5ddDFebbD1Fc0fD03FaBad39"),
    MonitoredToken(symbol="AAVE", address="0xD6DF932A45C0f255f85145f286eA0b292B21C90B"),
    MonitoredToken(symbol="UNI", address="0xb33EaAd8d922B1083446DC23f610c2567fB5180f"),
    MonitoredToken(symbol="QUICK", address="0x831753DD7087CaC61aB5644b308642cc1c33Dc13"),
    MonitoredToken(symbol="SUSHI", address="0x0b3F868E0BE5597D5DB7fEB59E1CADBb0fdDa50a"),
    MonitoredToken(symbol="CRV", address="0x172370d5Cd63279eFa6d502DAB29171933a610AF"),
    MonitoredToken(symbol="BAL", address="0x9a71012B13CA4d3D0Cdc72A177DF3ef03b0E76A3"),
    MonitoredToken(symbol="SAND", address="0xBbba073C31bF03b8ACf7c28EF0738DeCF3695683"),
    MonitoredToken(symbol="MANA", address="0xA1c57f48F0Deb89f569dFbE6E2B7f46D33606fD4"),
)


@lru_cache(maxsize=1)
def get_monitored_tokens_map() -> Mapping[str, MonitoredToken]:
    return MappingProxyType({token.address.lower(): token for token in MONITORED_TOKENS})


def get_token_info(address: str) -> MonitoredToken | None:
    return get_monitored_tokens_map().get(address.lower())


def is_monitored_token(address: str) -> bool:
    return get_token_info(address) is not None


def restrict_to_monitored(data: DexData) -> DexData:
    pools = [
        pool
        for pool in data.pools
        if is_monitored_token(pool.token0) and is_monitored_token(pool.token1)
    ]
    referenced = {address.lower() for pool in pools for address in (pool.token0, pool.token1)}
    tokens = [token for token in data.tokens if token.address.lower() in referenced]
    return DexData(tokens=tokens, pools=pools)
