from __future__ import annotations

import re

from dex_pools.domain.entities.networks import Network, Protocol
from dex_pools.domain.entities.pool_query import PoolQuery
from dex_pools.domain.exceptions import PoolQueryInputError


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 1000

# Leading ASCII integer prefix; trailing text ("2.5", "5abc", "1e1") is ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def parse_page(value: str | None) -> int:
    if value is None or not str(value).strip():
        return DEFAULT_PAGE
    page = _parse_int(value)
    if page is None or page < 1:
        raise PoolQueryInputError("Invalid page parameter. Must be >= 1")
    return page


def parse_limit(value: str | None) -> int:
    if value is None or not str(value).strip():
        return DEFAULT_LIMIT
    limit = _parse_int(value)
    if limit is None or limit < 1:
        raise PoolQueryInputError("Invalid limit parameter. Must be between 1 and 1000")
    return min(limit, MAX_LIMIT)


def parse_network(value: str | None) -> Network | None:
    if not value:
        return None
    try:
        return Network(value)
    except ValueError as exc:
        accepted = ", ".join(member.value for member in Network)
        raise PoolQueryInputError(
            f"Invalid network parameter. Accepted values: {accepted}"
        ) from exc


def parse_protocol(value: str | None) -> Protocol | None:
    if not value:
        return None
    try:
        return Protocol(value)
    except ValueError as exc:
        accepted = ", ".join(member.value for member in Protocol)
        raise PoolQueryInputError(
            f"Invalid protocol parameter. Accepted values: {accepted}"
        ) from exc


def parse_address_list(value: str | None) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(item.strip().lower() for item in value.split(",") if item.strip())


def parse_pool_query(
    *,
    network: str | None = None,
    protocol: str | None = None,
    factory: str | None = None,
    pool: str | None = None,
    input_token: str | None = None,
    output_token: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> PoolQuery:
    parsed_page = parse_page(page)
    parsed_limit = parse_limit(limit)
    parsed_network = parse_network(network)
    parsed_protocol = parse_protocol(protocol)
    return PoolQuery(
        network=parsed_network,
        protocol=parsed_protocol,
        factories=parse_address_list(factory),
        pools=parse_address_list(pool),
        input_tokens=parse_address_list(input_token),
        output_tokens=parse_address_list(output_token),
        page=parsed_page,
        limit=parsed_limit,
    )
