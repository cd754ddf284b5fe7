from __future__ import annotations

from collections.abc import Callable, Sequence

from dex_pools.domain.entities.dex_data import Pool
from dex_pools.domain.entities.pool_query import PoolQuery


PoolPredicate = Callable[[Pool], bool]


def _touches_any(pool: Pool, tokens: frozenset[str]) -> bool:
    return pool.token0.lower() in tokens or pool.token1.lower() in tokens


def build_predicates(query: PoolQuery) -> list[PoolPredicate]:
    predicates: list[PoolPredicate] = []

    if query.network is not None:
        chain_name = query.network.chain_name
        predicates.append(lambda pool: pool.chain == chain_name)

    if query.factories:
        factories = query.factories
        predicates.append(
            lambda pool: pool.factory is not None and pool.factory.lower() in factories
        )

    if query.pools:
        pool_ids = query.pools
        predicates.append(lambda pool: pool.id is not None and pool.id.lower() in pool_ids)

    # Both token filters match either side of the pair, not the swap direction.
    if query.input_tokens:
        input_tokens = query.input_tokens
        predicates.append(lambda pool: _touches_any(pool, input_tokens))

    if query.output_tokens:
        output_tokens = query.output_tokens
        predicates.append(lambda pool: _touches_any(pool, output_tokens))

    if query.protocol is not None:
        dex_name = query.protocol.dex_name
        predicates.append(lambda pool: pool.dex_name == dex_name)

    return predicates


def filter_pools(pools: Sequence[Pool], query: PoolQuery) -> list[Pool]:
    filtered = list(pools)
    for predicate in build_predicates(query):
        filtered = [pool for pool in filtered if predicate(pool)]
    return filtered
