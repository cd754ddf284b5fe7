from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
import logging
import time

import httpx

from dex_pools.domain.entities.dex_data import DexData, Pool, Token


logger = logging.getLogger(__name__)


UNISWAP_V3_FACTORY = "0x1f98431c8ad98523631ae4a59f267346ea31f984"
SUSHISWAP_FACTORY = "0xc0aee478e3658e2610c5f7a4a2e1777ce9e4f2ac"
QUICKSWAP_FACTORY = "0x5757371414417b8c6caad45baef941abc7d3ab32"

DEFAULT_FEE = 3000
RETRY_BASE_DELAY_SECONDS = 0.25

POOLS_QUERY = """
query TopPools($first: Int!) {
  pools(first: $first, orderBy: totalValueLockedUSD, orderDirection: desc) {
    id
    token0 { id symbol decimals }
    token1 { id symbol decimals }
    liquidity
    feeTier
  }
}
"""

PAIRS_QUERY = """
query TopPairs($first: Int!) {
  pairs(first: $first, orderBy: reserveUSD, orderDirection: desc) {
    id
    token0 { id symbol decimals }
    token1 { id symbol decimals }
    reserve0
    reserve1
  }
}
"""


class SubgraphRequestError(RuntimeError):
    pass


@dataclass(frozen=True)
class DexSubgraphClientSettings:
    graph_api_key: str
    timeout_seconds: float
    max_retries: int
    first: int = 10


@dataclass(frozen=True)
class SubgraphSource:
    dex_name: str
    chain: str
    url: str
    factory: str | None
    concentrated: bool = False


def scale_reserve(value: object, decimals: int) -> int:
    """Convert a human-unit reserve ("12.5") to the token's smallest unit."""
    try:
        amount = Decimal(str(value if value is not None else "0"))
    except InvalidOperation:
        return 0
    if not amount.is_finite() or amount <= 0:
        return 0
    scaled = amount.scaleb(decimals).to_integral_value(rounding=ROUND_FLOOR)
    return int(scaled)


def _token_from_row(row: dict) -> Token | None:
    address = row.get("id")
    if not address:
        return None
    try:
        decimals = int(row.get("decimals") or 0)
    except (TypeError, ValueError):
        decimals = 0
    return Token(
        symbol=str(row.get("symbol") or ""),
        decimals=decimals,
        address=str(address).lower(),
    )


class DexSubgraphClient:
    def __init__(self, settings: DexSubgraphClientSettings):
        self._settings = settings

    def fetch_source(self, source: SubgraphSource) -> DexData:
        if source.concentrated:
            rows = self._query_rows(source.url, POOLS_QUERY, "pools")
        else:
            rows = self._query_rows(source.url, PAIRS_QUERY, "pairs")

        tokens: dict[str, Token] = {}
        pools: list[Pool] = []
        for row in rows:
            token0 = _token_from_row(row.get("token0") or {})
            token1 = _token_from_row(row.get("token1") or {})
            if token0 is None or token1 is None:
                continue
            tokens.setdefault(token0.address, token0)
            tokens.setdefault(token1.address, token1)

            if source.concentrated:
                liquidity = int(row.get("liquidity") or 0)
                reserve0 = reserve1 = liquidity
                fee = int(row.get("feeTier") or DEFAULT_FEE)
            else:
                reserve0 = scale_reserve(row.get("reserve0"), token0.decimals)
                reserve1 = scale_reserve(row.get("reserve1"), token1.decimals)
                fee = DEFAULT_FEE

            pool_id = row.get("id")
            pools.append(
                Pool(
                    id=str(pool_id).lower() if pool_id else None,
                    factory=source.factory,
                    dex_name=source.dex_name,
                    chain=source.chain,
                    token0=token0.address,
                    token1=token1.address,
                    reserve0=reserve0,
                    reserve1=reserve1,
                    fee=fee,
                )
            )

        logger.info(
            "dex_subgraph_client: fetched_source dex=%s chain=%s tokens=%s pools=%s",
            source.dex_name,
            source.chain,
            len(tokens),
            len(pools),
        )
        return DexData(tokens=list(tokens.values()), pools=pools)

    def _query_rows(self, url: str, query: str, key: str) -> list[dict]:
        payload = self._post_graphql(
            url=url,
            query=query,
            variables={"first": self._settings.first},
        )
        return (payload.get("data") or {}).get(key) or []

    def _headers(self) -> dict:
        api_key = self._settings.graph_api_key.strip()
        if api_key:
            return {"Authorization": f"Bearer {api_key}"}
        return {}

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        attempts = max(1, self._settings.max_retries)
        body = {"query": query, "variables": variables}
        failure: Exception | None = None

        with httpx.Client(
            timeout=self._settings.timeout_seconds,
            headers=self._headers(),
        ) as client:
            for attempt in range(1, attempts + 1):
                if failure is not None:
                    time.sleep(RETRY_BASE_DELAY_SECONDS * 2 ** (attempt - 2))
                try:
                    return self._send(client, url, body)
                except (httpx.HTTPError, SubgraphRequestError, ValueError) as exc:
                    failure = exc
                    logger.warning(
                        "dex_subgraph_client: graphql_failed attempt=%s/%s url=%s error=%s",
                        attempt,
                        attempts,
                        url,
                        exc,
                    )

        raise SubgraphRequestError(
            f"GraphQL request to {url} failed after {attempts} attempt(s): {failure}"
        ) from failure

    @staticmethod
    def _send(client: httpx.Client, url: str, body: dict) -> dict:
        response = client.post(url, json=body)
        response.raise_for_status()
        payload = response.json()
        errors = payload.get("errors") or []
        if errors:
            raise SubgraphRequestError(
                " | ".join(str(err.get("message", err)) for err in errors)
            )
        return payload
