from __future__ import annotations

from dataclasses import dataclass

from dex_pools.domain.entities.pool_query import FormattedPool


@dataclass(frozen=True)
class ListPoolsInput:
    network: str | None = None
    factory: str | None = None
    pool: str | None = None
    input_token: str | None = None
    output_token: str | None = None
    protocol: str | None = None
    limit: str | None = None
    page: str | None = None


@dataclass(frozen=True)
class PaginationOutput:
    page: int
    limit: int
    total: int
    has_more: bool


@dataclass(frozen=True)
class ListPoolsOutput:
    data: list[FormattedPool]
    pagination: PaginationOutput
