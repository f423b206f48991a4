"""FastAPI dependencies for request-scoped resources."""

from typing import Any

from fastapi import Request

from api.logging import new_request_id
from core.logging import bind_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id(request: Request) -> str:
    """
    Return the ID assigned to this request by the request ID middleware.

    Falls back to generating one when the middleware is not installed
    (e.g. a router mounted on a bare app in tests).
    """
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id


def get_request_logger(request: Request) -> Any:
    """Return a logger with the request ID bound, for passing into services."""
    return bind_context(
        get_logger("api.handlers"),
        request_id=get_request_id(request),
    )


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
