from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock

from dex_pools.application.ports.dex_data_port import DexDataPort, DexDataSinkPort
from dex_pools.domain.entities.dex_data import DexData, Pool, Token


logger = logging.getLogger(__name__)


def _optional_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def dump_token(token: Token) -> dict:
    return {"symbol": token.symbol, "decimals": token.decimals, "address": token.address}


def dump_pool(pool: Pool) -> dict:
    return {
        "id": pool.id,
        "factory": pool.factory,
        "dexName": pool.dex_name,
        "chain": pool.chain,
        "token0": pool.token0,
        "token1": pool.token1,
        "reserve0": str(pool.reserve0),
        "reserve1": str(pool.reserve1),
        "fee": str(pool.fee),
    }


def dump_dex_data(data: DexData) -> dict:
    return {
        "tokens": [dump_token(token) for token in data.tokens],
        "pools": [dump_pool(pool) for pool in data.pools],
    }


def parse_dex_data(payload: dict) -> DexData:
    tokens = [
        Token(
            symbol=str(row["symbol"]),
            decimals=int(row["decimals"]),
            address=str(row["address"]).lower(),
        )
        for row in payload.get("tokens") or []
    ]
    pools = [
        Pool(
            id=_optional_str(row.get("id")),
            factory=_optional_str(row.get("factory")),
            dex_name=str(row["dexName"]),
            chain=str(row["chain"]),
            token0=str(row["token0"]).lower(),
            token1=str(row["token1"]).lower(),
            reserve0=int(str(row["reserve0"])),
            reserve1=int(str(row["reserve1"])),
            fee=int(str(row["fee"])),
        )
        for row in payload.get("pools") or []
    ]
    return DexData(tokens=tokens, pools=pools)


def write_dex_data(data: DexData, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(dump_dex_data(data), indent=2), encoding="utf-8")
    logger.info(
        "json_snapshot: written path=%s tokens=%s pools=%s",
        target,
        len(data.tokens),
        len(data.pools),
    )
    return target


def load_dex_data(path: str | Path) -> DexData:
    source = Path(path)
    payload = json.loads(source.read_text(encoding="utf-8"))
    data = parse_dex_data(payload)
    logger.info(
        "json_snapshot: loaded path=%s tokens=%s pools=%s",
        source,
        len(data.tokens),
        len(data.pools),
    )
    return data


class JsonSnapshotDexDataProvider(DexDataPort):
    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._data: DexData | None = None
        self._lock = Lock()

    def fetch_all_dex_data(self) -> DexData:
        with self._lock:
            if self._data is None:
                self._data = load_dex_data(self._path)
            return self._data


class JsonFileDexDataSink(DexDataSinkPort):
    def __init__(self, path: str | Path):
        self._path = Path(path)

    def write(self, data: DexData) -> str:
        return str(write_dex_data(data, self._path))
