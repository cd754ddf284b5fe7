from __future__ import annotations

from dataclasses import dataclass, field

from dex_pools.domain.entities.networks import Network, Protocol


@dataclass(frozen=True)
class PoolQuery:
    network: Network | None = None
    protocol: Protocol | None = None
    factories: frozenset[str] = field(default_factory=frozenset)
    pools: frozenset[str] = field(default_factory=frozenset)
    input_tokens: frozenset[str] = field(default_factory=frozenset)
    output_tokens: frozenset[str] = field(default_factory=frozenset)
    page: int = 1
    limit: int = 10


@dataclass(frozen=True)
class FormattedToken:
    address: str
    symbol: str
    decimals: int


@dataclass(frozen=True)
class FormattedPool:
    id: str
    factory: str | None
    token0: FormattedToken
    token1: FormattedToken
    reserve0: str
    reserve1: str
    fee: str
    protocol: str
    network: str
