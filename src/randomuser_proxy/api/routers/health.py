"""Liveness endpoint."""

from fastapi import APIRouter

from randomuser_proxy.schemas import PingResponse

router = APIRouter(tags=["diagnostics"])


@router.get("/ping", summary="Liveness probe", response_model=PingResponse)
async def ping() -> PingResponse:
    """Signal that the API process is running."""

    return PingResponse(message="pong")
