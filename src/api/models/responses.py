"""Pydantic response models for API endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.records import CollaborationResult


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class ProjectCollaborationDetail(BaseModel):
    """Overlap between the winning pair on one project."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: int
    days_worked_together: int
    overlap_start: str  # YYYY-MM-DD
    overlap_end: str  # YYYY-MM-DD


class CollaborationResponse(BaseModel):
    """The pair of employees who worked together the longest."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    employee_first_id: int
    employee_second_id: int
    days_worked_together: int
    project_details: list[ProjectCollaborationDetail]

    @classmethod
    def from_result(cls, result: CollaborationResult) -> "CollaborationResponse":
        """Translate an analysis result into the external response shape."""
        return cls(
            employee_first_id=result.pair.first_id,
            employee_second_id=result.pair.second_id,
            days_worked_together=result.total_days,
            project_details=[
                ProjectCollaborationDetail(
                    project_id=overlap.project_id,
                    days_worked_together=overlap.days_overlapped,
                    overlap_start=overlap.overlap_start.isoformat(),
                    overlap_end=overlap.overlap_end.isoformat(),
                )
                for overlap in result.project_overlaps
            ],
        )


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    request_id: str | None = None
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorMessages:
    """User-facing error messages."""

    NO_FILE_UPLOADED = "No file uploaded"
    FILE_MUST_BE_CSV = "File must be a CSV file"
    NO_COLLABORATIONS_FOUND = "No collaborations found in the provided data"
    ERROR_PROCESSING_FILE = "Error processing file"
    INTERNAL_SERVER_ERROR = "Internal server error"
