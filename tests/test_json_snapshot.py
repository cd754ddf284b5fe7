from __future__ import annotations

import json

from dex_pools.domain.entities.dex_data import DexData, Pool, Token
from dex_pools.infrastructure.snapshot.json_snapshot import (
    JsonFileDexDataSink,
    JsonSnapshotDexDataProvider,
    dump_dex_data,
    load_dex_data,
    parse_dex_data,
)


SAMPLE = DexData(
    tokens=[
        Token(symbol="WETH", decimals=18, address="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),
        Token(symbol="USDC", decimals=6, address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
    ],
    pools=[
        Pool(
            id="0x8ad599c3a0ff1de082011efddc58f1908eb6e6d8",
            factory="0x1f98431c8ad98523631ae4a59f267346ea31f984",
            dex_name="Uniswap V3",
            chain="Ethereum",
            token0="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
            token1="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            reserve0=10**30,
            reserve1=2_000_000_000,
            fee=3000,
        ),
        Pool(
            id=None,
            factory=None,
            dex_name="SushiSwap",
            chain="Ethereum",
            token0="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
            token1="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            reserve0=900_000_000_000_000_000,
            reserve1=1_800_000_000,
            fee=3000,
        ),
    ],
)


def test_dump_uses_camel_case_and_string_numbers():
    payload = dump_dex_data(SAMPLE)

    assert payload["tokens"][1] == {
        "symbol": "USDC",
        "decimals": 6,
        "address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
    }
    pool = payload["pools"][0]
    assert pool["dexName"] == "Uniswap V3"
    assert pool["reserve0"] == "1" + "0" * 30
    assert pool["fee"] == "3000"
    assert payload["pools"][1]["id"] is None
    assert payload["pools"][1]["factory"] is None


def test_parse_accepts_numeric_reserves_and_normalizes_addresses():
    data = parse_dex_data(
        {
            "tokens": [{"symbol": "X", "decimals": 8, "address": "0xABC"}],
            "pools": [
                {
                    "dexName": "QuickSwap",
                    "chain": "Polygon",
                    "token0": "0xABC",
                    "token1": "0xdef",
                    "reserve0": 42,
                    "reserve1": "7",
                    "fee": 3000,
                }
            ],
        }
    )

    assert data.tokens[0].address == "0xabc"
    pool = data.pools[0]
    assert pool.token0 == "0xabc"
    assert pool.reserve0 == 42
    assert pool.reserve1 == 7
    assert pool.id is None
    assert pool.factory is None


def test_sink_writes_file_that_loads_back(tmp_path):
    target = tmp_path / "out" / "dex_data.json"

    location = JsonFileDexDataSink(target).write(SAMPLE)

    assert location == str(target)
    raw = json.loads(target.read_text(encoding="utf-8"))
    assert set(raw) == {"tokens", "pools"}
    assert load_dex_data(target) == SAMPLE


def test_snapshot_provider_loads_file_once(tmp_path):
    target = tmp_path / "dex_data.json"
    JsonFileDexDataSink(target).write(SAMPLE)
    provider = JsonSnapshotDexDataProvider(target)

    first = provider.fetch_all_dex_data()
    target.unlink()
    second = provider.fetch_all_dex_data()

    assert first is second
    assert first == SAMPLE
