"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION

router = APIRouter()

LIVENESS_MESSAGE = "Employee Collaboration API is running."


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness probe."""
    return LIVENESS_MESSAGE


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
