from __future__ import annotations

import logging

from dex_pools.application.dto.list_pools import (
    ListPoolsInput,
    ListPoolsOutput,
    PaginationOutput,
)
from dex_pools.application.ports.dex_data_port import DexDataPort
from dex_pools.domain.exceptions import UpstreamFetchError
from dex_pools.domain.services.pagination import has_more, paginate
from dex_pools.domain.services.pool_filter import filter_pools
from dex_pools.domain.services.pool_format import build_token_map, format_pool
from dex_pools.domain.services.pool_query import parse_pool_query


logger = logging.getLogger(__name__)


class ListPoolsUseCase:
    def __init__(self, *, dex_data_port: DexDataPort):
        self._dex_data_port = dex_data_port

    def execute(self, command: ListPoolsInput) -> ListPoolsOutput:
        query = parse_pool_query(
            network=command.network,
            protocol=command.protocol,
            factory=command.factory,
            pool=command.pool,
            input_token=command.input_token,
            output_token=command.output_token,
            page=command.page,
            limit=command.limit,
        )

        try:
            dex_data = self._dex_data_port.fetch_all_dex_data()
        except Exception as exc:
            raise UpstreamFetchError(str(exc)) from exc

        token_map = build_token_map(dex_data.tokens)
        filtered = filter_pools(dex_data.pools, query)
        page_items = paginate(filtered, page=query.page, limit=query.limit)
        total = len(filtered)

        logger.info(
            "list_pools: served pools=%s total=%s page=%s limit=%s network=%s protocol=%s",
            len(page_items),
            total,
            query.page,
            query.limit,
            query.network.value if query.network else None,
            query.protocol.value if query.protocol else None,
        )

        return ListPoolsOutput(
            data=[format_pool(pool, token_map) for pool in page_items],
            pagination=PaginationOutput(
                page=query.page,
                limit=query.limit,
                total=total,
                has_more=has_more(page=query.page, limit=query.limit, total=total),
            ),
        )
