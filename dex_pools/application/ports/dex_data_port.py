from __future__ import annotations

from typing import Protocol

from dex_pools.domain.entities.dex_data import DexData


class DexDataPort(Protocol):
    def fetch_all_dex_data(self) -> DexData:
        ...


class DexDataSinkPort(Protocol):
    def write(self, data: DexData) -> str:
        ...
