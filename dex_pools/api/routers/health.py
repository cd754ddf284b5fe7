from __future__ import annotations

from fastapi import APIRouter

from dex_pools.api.schemas.pools import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
