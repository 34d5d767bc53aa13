"""API v1 router with basic endpoints."""
from fastapi import APIRouter

from kicks_match.schemas.base_schemas import BaseResponse

router = APIRouter(prefix="/api/v1", tags=["v1"])


@router.get("/ping", response_model=BaseResponse[str])
async def ping() -> BaseResponse[str]:
    """
    Liveness check.

    Returns:
        BaseResponse with "pong" message
    """
    return BaseResponse(data="pong", message="Service is running")
