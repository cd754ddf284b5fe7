from __future__ import annotations

from dataclasses import dataclass
import logging

from dex_pools.application.ports.dex_data_port import DexDataPort, DexDataSinkPort
from dex_pools.domain.exceptions import UpstreamFetchError
from dex_pools.domain.services.token_registry import restrict_to_monitored


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportDexDataInput:
    monitored_only: bool = False


@dataclass(frozen=True)
class ExportDexDataOutput:
    location: str
    tokens: int
    pools: int


class ExportDexDataUseCase:
    def __init__(self, *, dex_data_port: DexDataPort, sink: DexDataSinkPort):
        self._dex_data_port = dex_data_port
        self._sink = sink

    def execute(self, command: ExportDexDataInput) -> ExportDexDataOutput:
        try:
            data = self._dex_data_port.fetch_all_dex_data()
        except Exception as exc:
            raise UpstreamFetchError(str(exc)) from exc

        if command.monitored_only:
            data = restrict_to_monitored(data)

        location = self._sink.write(data)
        logger.info(
            "export_dex_data: exported location=%s tokens=%s pools=%s monitored_only=%s",
            location,
            len(data.tokens),
            len(data.pools),
            command.monitored_only,
        )
        return ExportDexDataOutput(location=location, tokens=len(data.tokens), pools=len(data.pools))
