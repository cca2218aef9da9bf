"""Health check endpoints."""

from fastapi import APIRouter

from datastream_validator.api.dependencies import AppSettings
from datastream_validator.api.schemas.validation import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
    )
