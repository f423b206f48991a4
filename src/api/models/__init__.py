"""API Pydantic models."""

from .responses import (
    CollaborationResponse,
    ErrorCodes,
    ErrorMessages,
    ErrorResponse,
    HealthResponse,
    ProjectCollaborationDetail,
)

__all__ = [
    "CollaborationResponse",
    "ErrorCodes",
    "ErrorMessages",
    "ErrorResponse",
    "HealthResponse",
    "ProjectCollaborationDetail",
]
