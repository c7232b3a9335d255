"""
Health check endpoints.
"""

from fastapi import APIRouter

from .config import settings
from .schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Health check endpoint")
async def health() -> HealthResponse:
    """Service status and the PDS it talks to."""
    return HealthResponse(
        status="ok",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        service_url=settings.BSKATAR_SERVICE_URL,
    )


@router.get("/health/live", summary="Liveness probe")
async def liveness():
    return {"status": "alive"}
