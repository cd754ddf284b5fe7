from __future__ import annotations

from functools import lru_cache

from dex_pools.application.ports.dex_data_port import DexDataPort
from dex_pools.application.use_cases.list_pools import ListPoolsUseCase
from dex_pools.infrastructure.clients.dex_data_provider import (
    CachedDexDataProvider,
    DexSourcesConfig,
    SubgraphDexDataProvider,
)
from dex_pools.infrastructure.clients.dex_subgraph_client import (
    DexSubgraphClient,
    DexSubgraphClientSettings,
)
from dex_pools.infrastructure.snapshot.json_snapshot import JsonSnapshotDexDataProvider
from dex_pools.shared.config import Settings, get_settings


def build_subgraph_provider(settings: Settings) -> SubgraphDexDataProvider:
    client = DexSubgraphClient(
        DexSubgraphClientSettings(
            graph_api_key=settings.graph_api_key,
            timeout_seconds=settings.graph_request_timeout_seconds,
            max_retries=settings.graph_max_retries,
            first=settings.graph_pools_first,
        )
    )
    return SubgraphDexDataProvider(
        config=DexSourcesConfig(
            ethereum_rpc_url=settings.ethereum_rpc_url,
            polygon_rpc_url=settings.polygon_rpc_url,
            uniswap_v3_subgraph_url=settings.uniswap_v3_subgraph_url,
            sushiswap_subgraph_url=settings.sushiswap_subgraph_url,
            quickswap_subgraph_url=settings.quickswap_subgraph_url,
        ),
        client=client,
    )


@lru_cache(maxsize=1)
def _get_dex_data_port() -> DexDataPort:
    settings = get_settings()
    if settings.dex_data_snapshot_path:
        return JsonSnapshotDexDataProvider(settings.dex_data_snapshot_path)
    return CachedDexDataProvider(
        provider=build_subgraph_provider(settings),
        ttl_seconds=settings.dex_data_cache_ttl_seconds,
    )


def get_dex_data_port() -> DexDataPort:
    return _get_dex_data_port()


def get_list_pools_use_case() -> ListPoolsUseCase:
    return ListPoolsUseCase(dex_data_port=get_dex_data_port())
