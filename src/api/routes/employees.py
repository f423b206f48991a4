"""Employee collaboration endpoint."""

import asyncio
import time
from io import BytesIO
from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from api.dependencies import get_client_ip, get_request_id, get_request_logger
from api.logging import RequestLog, log_request
from api.models.responses import (
    CollaborationResponse,
    ErrorCodes,
    ErrorMessages,
    ErrorResponse,
)
from core.config import MAX_UPLOAD_SIZE_BYTES, SHOW_EXCEPTION_DETAILS
from core.validation import is_csv_filename
from models.records import CollaborationResult, NotFound
from services.collaboration import find_longest_collaboration

router = APIRouter(prefix="/v1")

ENDPOINT = "/v1/employees/collaboration"


def error_detail(
    error: str, code: str, request_id: str, details: list[str] | None = None
) -> dict:
    """Build the standard error body carried by an HTTPException."""
    return ErrorResponse(
        error=error,
        code=code,
        request_id=request_id,
        details=details or [],
    ).model_dump()


def _process_in_thread(file_content: bytes, log: Any) -> CollaborationResult | NotFound:
    """Run the blocking parse and analysis on an in-memory stream."""
    with BytesIO(file_content) as stream:
        return find_longest_collaboration(stream, log=log)


@router.post(
    "/employees/collaboration",
    response_model=CollaborationResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def find_collaboration_endpoint(
    request: Request,
    file: Annotated[
        UploadFile | None,
        File(description="CSV file with columns: EmpID, ProjectID, DateFrom, DateTo"),
    ] = None,
    request_id: str = Depends(get_request_id),
    log: Any = Depends(get_request_logger),
):
    """
    Find the pair of employees who worked together the longest.

    Accepts a CSV upload and returns the winning pair with a per-project
    breakdown of the days they overlapped.
    """
    start_time = time.time()

    request_log = RequestLog(
        request_id=request_id,
        endpoint=ENDPOINT,
        method="POST",
        client_ip=get_client_ip(request),
        file_name=file.filename if file else None,
    )

    try:
        # Validate file presence
        file_content = await file.read() if file else b""
        request_log.file_size_bytes = len(file_content)

        if not file or not file_content:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=error_detail(
                    ErrorMessages.NO_FILE_UPLOADED,
                    ErrorCodes.VALIDATION_ERROR,
                    request_id,
                ),
            )

        # Validate file extension
        if not is_csv_filename(file.filename):
            log.warning("invalid_file_type", file_name=file.filename)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=error_detail(
                    ErrorMessages.FILE_MUST_BE_CSV,
                    ErrorCodes.VALIDATION_ERROR,
                    request_id,
                    [f"Received: {file.filename}"],
                ),
            )

        # Validate file size
        if len(file_content) > MAX_UPLOAD_SIZE_BYTES:
            max_mb = MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=error_detail(
                    f"File exceeds maximum size of {max_mb} MB",
                    ErrorCodes.FILE_TOO_LARGE,
                    request_id,
                    [f"File size: {len(file_content) / (1024*1024):.1f} MB"],
                ),
            )

        log.info(
            "processing_file",
            file_name=file.filename,
            file_size_bytes=len(file_content),
        )

        # Use thread pool for sync parsing and analysis
        outcome = await asyncio.to_thread(_process_in_thread, file_content, log)

        if isinstance(outcome, NotFound):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=error_detail(
                    ErrorMessages.NO_COLLABORATIONS_FOUND,
                    ErrorCodes.VALIDATION_ERROR,
                    request_id,
                ),
            )

        # Log success
        request_log.status_code = 200
        request_log.employee_first_id = outcome.pair.first_id
        request_log.employee_second_id = outcome.pair.second_id
        request_log.days_worked_together = outcome.total_days
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        return CollaborationResponse.from_result(outcome)

    except HTTPException as e:
        # Log HTTP errors
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            for detail in e.detail.get("details", []):
                request_log.details.append(("validation_error", detail))
        else:
            request_log.error_message = str(e.detail)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        raise

    except Exception as e:
        # Unexpected errors (already logged with traceback by the service)
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail(
                ErrorMessages.ERROR_PROCESSING_FILE,
                ErrorCodes.INTERNAL_ERROR,
                request_id,
                [str(e)] if SHOW_EXCEPTION_DETAILS else [],
            ),
        )

    finally:
        log_request(request_log, log)
