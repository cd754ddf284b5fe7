from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
from threading import Lock
import time

from dex_pools.application.ports.dex_data_port import DexDataPort
from dex_pools.domain.entities.dex_data import DexData, Token
from dex_pools.domain.exceptions import DexConfigError
from dex_pools.infrastructure.clients.dex_subgraph_client import (
    QUICKSWAP_FACTORY,
    SUSHISWAP_FACTORY,
    UNISWAP_V3_FACTORY,
    DexSubgraphClient,
    SubgraphSource,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DexSourcesConfig:
    ethereum_rpc_url: str
    polygon_rpc_url: str
    uniswap_v3_subgraph_url: str
    sushiswap_subgraph_url: str
    quickswap_subgraph_url: str


def build_sources(config: DexSourcesConfig) -> list[SubgraphSource]:
    return [
        SubgraphSource(
            dex_name="Uniswap V3",
            chain="Ethereum",
            url=config.uniswap_v3_subgraph_url,
            factory=UNISWAP_V3_FACTORY,
            concentrated=True,
        ),
        SubgraphSource(
            dex_name="SushiSwap",
            chain="Ethereum",
            url=config.sushiswap_subgraph_url,
            factory=SUSHISWAP_FACTORY,
        ),
        SubgraphSource(
            dex_name="QuickSwap",
            chain="Polygon",
            url=config.quickswap_subgraph_url,
            factory=QUICKSWAP_FACTORY,
        ),
    ]


def merge_tokens(token_lists: Iterable[Iterable[Token]]) -> list[Token]:
    merged: dict[str, Token] = {}
    for tokens in token_lists:
        for token in tokens:
            merged.setdefault(token.address, token)
    return list(merged.values())


class SubgraphDexDataProvider(DexDataPort):
    def __init__(self, *, config: DexSourcesConfig, client: DexSubgraphClient):
        self._config = config
        self._client = client

    def _validate_config(self) -> None:
        if not self._config.ethereum_rpc_url.strip():
            raise DexConfigError("ETHEREUM_RPC_URL is required")
        if not self._config.polygon_rpc_url.strip():
            raise DexConfigError("POLYGON_RPC_URL is required")

    def _fetch_or_empty(self, source: SubgraphSource) -> DexData:
        try:
            return self._client.fetch_source(source)
        except Exception as exc:
            logger.warning(
                "dex_data_provider: source_failed dex=%s chain=%s error=%s",
                source.dex_name,
                source.chain,
                exc,
            )
            return DexData()

    def fetch_all_dex_data(self) -> DexData:
        self._validate_config()
        sources = build_sources(self._config)

        logger.info("dex_data_provider: fetching sources=%s", len(sources))
        with ThreadPoolExecutor(max_workers=len(sources)) as executor:
            results = list(executor.map(self._fetch_or_empty, sources))

        tokens = merge_tokens(result.tokens for result in results)
        pools = [pool for result in results for pool in result.pools]

        logger.info(
            "dex_data_provider: fetched unique_tokens=%s pools=%s",
            len(tokens),
            len(pools),
        )
        return DexData(tokens=tokens, pools=pools)


class CachedDexDataProvider(DexDataPort):
    """Serves the last aggregated snapshot until ``ttl_seconds`` elapse.

    Callers arriving while a refresh is running wait for that refresh and share
    its outcome, success or error. Errors are handed to those waiters only and
    never stored.
    """

    def __init__(
        self,
        *,
        provider: DexDataPort,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._provider = provider
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._cached: tuple[float, DexData] | None = None
        self._in_flight: Future[DexData] | None = None
        self._lock = Lock()

    def fetch_all_dex_data(self) -> DexData:
        if self._ttl_seconds <= 0:
            return self._provider.fetch_all_dex_data()

        with self._lock:
            now = self._clock()
            if self._cached is not None:
                expires_at, data = self._cached
                if expires_at > now:
                    return data
                self._cached = None

            flight = self._in_flight
            if flight is None:
                flight = self._in_flight = Future()
                leader = True
            else:
                leader = False

        if not leader:
            return flight.result()

        try:
            data = self._provider.fetch_all_dex_data()
        except Exception as exc:
            with self._lock:
                self._in_flight = None
            flight.set_exception(exc)
            raise

        with self._lock:
            self._cached = (self._clock() + self._ttl_seconds, data)
            self._in_flight = None
        flight.set_result(data)
        return data
