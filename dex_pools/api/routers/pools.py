from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from dex_pools.api.deps import get_list_pools_use_case
from dex_pools.api.schemas.pools import (
    ErrorResponse,
    PaginationResponse,
    PoolResponse,
    PoolsResponse,
    TokenResponse,
)
from dex_pools.application.dto.list_pools import ListPoolsInput
from dex_pools.application.use_cases.list_pools import ListPoolsUseCase
from dex_pools.domain.entities.pool_query import FormattedToken
from dex_pools.domain.exceptions import PoolQueryInputError, UpstreamFetchError

router = APIRouter()
logger = logging.getLogger(__name__)


def _token_response(token: FormattedToken) -> TokenResponse:
    return TokenResponse(address=token.address, symbol=token.symbol, decimals=token.decimals)


@router.get(
    "/v1/evm/pools",
    response_model=PoolsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_pools(
    network: str | None = None,
    factory: str | None = None,
    pool: str | None = None,
    input_token: str | None = None,
    output_token: str | None = None,
    protocol: str | None = None,
    limit: str | None = None,
    page: str | None = None,
    use_case: ListPoolsUseCase = Depends(get_list_pools_use_case),
):
    try:
        result = use_case.execute(
            ListPoolsInput(
                network=network,
                factory=factory,
                pool=pool,
                input_token=input_token,
                output_token=output_token,
                protocol=protocol,
                limit=limit,
                page=page,
            )
        )
    except PoolQueryInputError as exc:
        logger.info("pools_router: invalid_input detail=%s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamFetchError as exc:
        logger.error("pools_router: upstream_fetch_failed detail=%s", exc)
        raise HTTPException(
            status_code=500,
            detail={"error": "Internal server error", "message": str(exc)},
        ) from exc
    except Exception as exc:
        logger.exception("pools_router: unexpected_error")
        raise HTTPException(
            status_code=500,
            detail={"error": "Internal server error", "message": str(exc)},
        ) from exc

    return PoolsResponse(
        data=[
            PoolResponse(
                id=item.id,
                factory=item.factory,
                token0=_token_response(item.token0),
                token1=_token_response(item.token1),
                reserve0=item.reserve0,
                reserve1=item.reserve1,
                fee=item.fee,
                protocol=item.protocol,
                network=item.network,
            )
            for item in result.data
        ],
        pagination=PaginationResponse(
            page=result.pagination.page,
            limit=result.pagination.limit,
            total=result.pagination.total,
            has_more=result.pagination.has_more,
        ),
    )
