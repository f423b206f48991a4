"""Structured request logging for API."""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

from core.logging import get_logger

logger = get_logger("api.requests")


def new_request_id() -> str:
    """Generate a unique request ID."""
    return str(uuid.uuid4())


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=new_request_id)
    received_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    file_size_bytes: int | None = None
    file_name: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    employee_first_id: int | None = None
    employee_second_id: int | None = None
    days_worked_together: int | None = None
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)


def log_request(log: RequestLog, log_to: Any = None) -> None:
    """Emit the request log as a single structured event."""
    target = log_to if log_to is not None else logger
    fields = asdict(log)
    fields["details"] = [
        {"type": detail_type, "message": message}
        for detail_type, message in log.details
    ]

    if log.status_code >= 500:
        target.error("request_completed", **fields)
    elif log.status_code >= 400:
        target.warning("request_completed", **fields)
    else:
        target.info("request_completed", **fields)
