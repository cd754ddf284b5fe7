from __future__ import annotations

import pytest

from dex_pools.api import deps
from dex_pools.infrastructure.clients.dex_data_provider import CachedDexDataProvider
from dex_pools.infrastructure.snapshot.json_snapshot import JsonSnapshotDexDataProvider
from dex_pools.shared.config import DEFAULT_UNISWAP_V3_SUBGRAPH_URL, get_settings


@pytest.fixture(autouse=True)
def _reset_dex_data_port():
    deps._get_dex_data_port.cache_clear()
    yield
    deps._get_dex_data_port.cache_clear()


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "UNISWAP_V3_SUBGRAPH_URL",
        "GRAPH_MAX_RETRIES",
        "DEX_DATA_CACHE_TTL_SECONDS",
        "PORT",
        "DEX_DATA_SNAPSHOT_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.uniswap_v3_subgraph_url == DEFAULT_UNISWAP_V3_SUBGRAPH_URL
    assert settings.graph_max_retries == 3
    assert settings.dex_data_cache_ttl_seconds == 0
    assert settings.port == 3000
    assert settings.dex_data_snapshot_path == ""


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ETHEREUM_RPC_URL", "https://eth.example.com")
    monkeypatch.setenv("GRAPH_POOLS_FIRST", "25")
    monkeypatch.setenv("DEX_DATA_CACHE_TTL_SECONDS", "15")

    settings = get_settings()

    assert settings.ethereum_rpc_url == "https://eth.example.com"
    assert settings.graph_pools_first == 25
    assert settings.dex_data_cache_ttl_seconds == 15.0


def test_dex_data_port_uses_snapshot_when_configured(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.setenv("DEX_DATA_SNAPSHOT_PATH", str(tmp_path / "dex_data.json"))

    assert isinstance(deps.get_dex_data_port(), JsonSnapshotDexDataProvider)


def test_dex_data_port_defaults_to_live_subgraphs(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DEX_DATA_SNAPSHOT_PATH", raising=False)

    port = deps.get_dex_data_port()

    assert isinstance(port, CachedDexDataProvider)
    assert deps.get_dex_data_port() is port
