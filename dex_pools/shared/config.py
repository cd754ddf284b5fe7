from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_UNISWAP_V3_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/uniswap/uniswap-v3"
DEFAULT_SUSHISWAP_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/sushiswap/exchange"
DEFAULT_QUICKSWAP_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/sameepsi/quickswap06"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    ethereum_rpc_url: str
    polygon_rpc_url: str
    graph_api_key: str
    uniswap_v3_subgraph_url: str
    sushiswap_subgraph_url: str
    quickswap_subgraph_url: str
    graph_request_timeout_seconds: float
    graph_max_retries: int
    graph_pools_first: int
    dex_data_cache_ttl_seconds: float
    dex_data_snapshot_path: str
    api_host: str
    port: int
    log_level: str


def get_settings() -> Settings:
    return Settings(
        ethereum_rpc_url=_env("ETHEREUM_RPC_URL", ""),
        polygon_rpc_url=_env("POLYGON_RPC_URL", ""),
        graph_api_key=_env("GRAPH_API_KEY", ""),
        uniswap_v3_subgraph_url=_env("UNISWAP_V3_SUBGRAPH_URL") or DEFAULT_UNISWAP_V3_SUBGRAPH_URL,
        sushiswap_subgraph_url=_env("SUSHISWAP_SUBGRAPH_URL") or DEFAULT_SUSHISWAP_SUBGRAPH_URL,
        quickswap_subgraph_url=_env("QUICKSWAP_SUBGRAPH_URL") or DEFAULT_QUICKSWAP_SUBGRAPH_URL,
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        graph_max_retries=int(_env("GRAPH_MAX_RETRIES", "3")),
        graph_pools_first=int(_env("GRAPH_POOLS_FIRST", "10")),
        dex_data_cache_ttl_seconds=float(_env("DEX_DATA_CACHE_TTL_SECONDS", "0")),
        dex_data_snapshot_path=_env("DEX_DATA_SNAPSHOT_PATH", ""),
        api_host=_env("API_HOST", "0.0.0.0"),
        port=int(_env("PORT", "3000")),
        log_level=_env("LOG_LEVEL", "INFO"),
    )
