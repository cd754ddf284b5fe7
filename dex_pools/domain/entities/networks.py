from __future__ import annotations

from enum import Enum


class Network(str, Enum):
    ARBITRUM_ONE = "arbitrum-one"
    AVALANCHE = "avalanche"
    BASE = "base"
    BSC = "bsc"
    MAINNET = "mainnet"
    OPTIMISM = "optimism"
    POLYGON = "polygon"
    UNICHAIN = "unichain"

    @property
    def chain_name(self) -> str:
        return NETWORK_CHAIN_NAMES[self]


class Protocol(str, Enum):
    UNISWAP_V2 = "uniswap_v2"
    UNISWAP_V3 = "uniswap_v3"
    UNISWAP_V4 = "uniswap_v4"

    @property
    def dex_name(self) -> str:
        return PROTOCOL_DEX_NAMES[self]


NETWORK_CHAIN_NAMES = {
    Network.ARBITRUM_ONE: "Arbitrum",
    Network.AVALANCHE: "Avalanche",
    Network.BASE: "Base",
    Network.BSC: "BSC",
    Network.MAINNET: "Ethereum",
    Network.OPTIMISM: "Optimism",
    Network.POLYGON: "Polygon",
    Network.UNICHAIN: "Unichain",
}

PROTOCOL_DEX_NAMES = {
    Protocol.UNISWAP_V2: "Uniswap V2",
    Protocol.UNISWAP_V3: "Uniswap V3",
    Protocol.UNISWAP_V4: "Uniswap V4",
}
