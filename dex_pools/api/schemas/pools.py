from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    address: str
    symbol: str
    decimals: int


class PoolResponse(BaseModel):
    id: str
    factory: str | None
    token0: TokenResponse
    token1: TokenResponse
    reserve0: str
    reserve1: str
    fee: str
    protocol: str
    network: str


class PaginationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    has_more: bool = Field(alias="hasMore")


class PoolsResponse(BaseModel):
    data: list[PoolResponse]
    pagination: PaginationResponse


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
