"""FastAPI application entry point."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies import REQUEST_ID_HEADER, get_client_ip
from api.logging import new_request_id
from api.models.responses import ErrorCodes, ErrorMessages, ErrorResponse
from api.routes import employees_router, health_router
from core.config import API_DEBUG, API_VERSION, LOG_REQUESTS
from core.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    configure_logging()
    logger.info("api_started", version=API_VERSION, debug=API_DEBUG)

    yield

    logger.info("api_stopped")


app = FastAPI(
    title="Employee Collaboration API",
    description="REST API for finding the pair of employees who worked together the longest on common projects",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Assign a request ID, log the request/response pair and echo the ID back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
    request.state.request_id = request_id
    log = logger.bind(request_id=request_id)

    if LOG_REQUESTS:
        log.info(
            "http_request_received",
            method=request.method,
            path=request.url.path,
            client_ip=get_client_ip(request),
            user_agent=request.headers.get("user-agent"),
        )

    start_time = time.time()
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    if LOG_REQUESTS:
        log.info(
            "http_response_returned",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            response_time_ms=int((time.time() - start_time) * 1000),
        )

    return response


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Return HTTP errors in the standard error format instead of under 'detail'."""
    if isinstance(exc.detail, dict):
        content = {**exc.detail}
        content.setdefault("request_id", _request_id(request))
    else:
        content = ErrorResponse(
            error=str(exc.detail),
            code=ErrorCodes.VALIDATION_ERROR
            if exc.status_code < 500
            else ErrorCodes.INTERNAL_ERROR,
            request_id=_request_id(request),
        ).model_dump()
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as validation errors (400)."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", []))
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="Invalid request",
            code=ErrorCodes.VALIDATION_ERROR,
            request_id=_request_id(request),
            details=messages,
        ).model_dump(),
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.error(
        "unhandled_exception",
        request_id=_request_id(request),
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorMessages.INTERNAL_SERVER_ERROR,
            code=ErrorCodes.INTERNAL_ERROR,
            request_id=_request_id(request),
            details=[],
        ).model_dump(),
    )


# Include routers
app.include_router(health_router)
app.include_router(employees_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
