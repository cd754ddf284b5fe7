from __future__ import annotations

import json

import pytest

from dex_pools import cli
from dex_pools.application.use_cases.export_dex_data import (
    ExportDexDataInput,
    ExportDexDataUseCase,
)
from dex_pools.domain.entities.dex_data import DexData, Pool, Token
from dex_pools.domain.exceptions import DexConfigError, UpstreamFetchError


WMATIC = "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270"
USDC = "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"
OTHER = "0x2222222222222222222222222222222222222222"

DATA = DexData(
    tokens=[
        Token(symbol="WMATIC", decimals=18, address=WMATIC),
        Token(symbol="USDC", decimals=6, address=USDC),
        Token(symbol="OTHER", decimals=18, address=OTHER),
    ],
    pools=[
        Pool(id="0xa", dex_name="QuickSwap", chain="Polygon", token0=WMATIC, token1=USDC, reserve0=1, reserve1=2, fee=3000),
        Pool(id="0xb", dex_name="SushiSwap", chain="Ethereum", token0=OTHER, token1=USDC, reserve0=3, reserve1=4, fee=3000),
    ],
)


class FakeDexDataPort:
    def __init__(self, data: DexData | None = None, *, error: Exception | None = None):
        self._data = data
        self._error = error

    def fetch_all_dex_data(self) -> DexData:
        if self._error is not None:
            raise self._error
        return self._data


class FakeSink:
    def __init__(self):
        self.written: DexData | None = None

    def write(self, data: DexData) -> str:
        self.written = data
        return "memory://dex_data.json"


def test_export_writes_full_dataset():
    sink = FakeSink()
    use_case = ExportDexDataUseCase(dex_data_port=FakeDexDataPort(DATA), sink=sink)

    result = use_case.execute(ExportDexDataInput())

    assert sink.written == DATA
    assert result.location == "memory://dex_data.json"
    assert result.tokens == 3
    assert result.pools == 2


def test_export_monitored_only_restricts_dataset():
    sink = FakeSink()
    use_case = ExportDexDataUseCase(dex_data_port=FakeDexDataPort(DATA), sink=sink)

    result = use_case.execute(ExportDexDataInput(monitored_only=True))

    assert [pool.id for pool in sink.written.pools] == ["0xa"]
    assert result.tokens == 2


def test_export_wraps_upstream_errors():
    sink = FakeSink()
    use_case = ExportDexDataUseCase(
        dex_data_port=FakeDexDataPort(error=DexConfigError("ETHEREUM_RPC_URL is required")),
        sink=sink,
    )

    with pytest.raises(UpstreamFetchError, match="ETHEREUM_RPC_URL"):
        use_case.execute(ExportDexDataInput())
    assert sink.written is None


def test_cli_export_writes_json_file(tmp_path, monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setattr(cli, "build_subgraph_provider", lambda _settings: FakeDexDataPort(DATA))
    target = tmp_path / "dex_data.json"

    exit_code = cli.export(["--output", str(target)])

    assert exit_code == 0
    payload = json.loads(target.read_text(encoding="utf-8"))
    assert [pool["id"] for pool in payload["pools"]] == ["0xa", "0xb"]
    assert payload["pools"][0]["reserve1"] == "2"
    assert "Wrote 3 tokens and 2 pools" in capsys.readouterr().out


def test_cli_export_returns_error_code_on_failure(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        cli,
        "build_subgraph_provider",
        lambda _settings: FakeDexDataPort(error=DexConfigError("POLYGON_RPC_URL is required")),
    )
    target = tmp_path / "dex_data.json"

    exit_code = cli.export(["--output", str(target), "--monitored-only"])

    assert exit_code == 1
    assert not target.exists()
