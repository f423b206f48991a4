"""
Employee Collaboration Service

Finds the pair of employees who worked together on common projects for the
longest total time. Records are grouped by project, every pair of records in
a project is checked for an overlapping date range, and overlaps are summed
per employee pair across all projects.
"""

from collections import defaultdict
from datetime import date
from typing import Any, BinaryIO, Sequence

from core.logging import get_logger
from models.records import (
    NO_OVERLAP,
    NO_RECORDS,
    CollaborationResult,
    EmployeePair,
    NotFound,
    ProjectOverlap,
    WorkPeriodRecord,
)
from services.parser import parse_records

logger = get_logger(__name__)


# =============================================================================
# OVERLAP CALCULATION
# =============================================================================


def calculate_overlap(
    first: WorkPeriodRecord, second: WorkPeriodRecord, today: date
) -> tuple[date, date, int] | None:
    """
    Calculate the overlap between two work periods.

    Open-ended periods run until `today`. Both ends are inclusive, so two
    periods touching on a single day overlap by 1 day.

    Returns:
        Tuple of (overlap_start, overlap_end, days) or None if the periods
        do not intersect
    """
    overlap_start = max(first.date_from, second.date_from)
    overlap_end = min(first.effective_end(today), second.effective_end(today))

    if overlap_start > overlap_end:
        return None

    days = (overlap_end - overlap_start).days + 1
    return overlap_start, overlap_end, days


# =============================================================================
# AGGREGATION
# =============================================================================


def group_by_project(
    records: Sequence[WorkPeriodRecord],
) -> dict[int, list[WorkPeriodRecord]]:
    """Group records by project ID, keeping first-encounter order."""
    grouped: dict[int, list[WorkPeriodRecord]] = defaultdict(list)
    for record in records:
        grouped[record.project_id].append(record)
    return grouped


def collect_overlaps(
    records: Sequence[WorkPeriodRecord], today: date
) -> dict[EmployeePair, list[ProjectOverlap]]:
    """
    Collect every project overlap per employee pair.

    Each pair of records within a project is compared once. Duplicate
    records produce their own overlap entries.
    """
    collaborations: dict[EmployeePair, list[ProjectOverlap]] = defaultdict(list)

    for project_id, project_records in group_by_project(records).items():
        for i in range(len(project_records)):
            for j in range(i + 1, len(project_records)):
                first = project_records[i]
                second = project_records[j]

                if first.employee_id == second.employee_id:
                    continue

                overlap = calculate_overlap(first, second, today)
                if overlap is None:
                    continue

                overlap_start, overlap_end, days = overlap
                pair = EmployeePair.of(first.employee_id, second.employee_id)
                collaborations[pair].append(
                    ProjectOverlap(
                        project_id=project_id,
                        days_overlapped=days,
                        overlap_start=overlap_start,
                        overlap_end=overlap_end,
                    )
                )

    return collaborations


def select_longest(
    collaborations: dict[EmployeePair, list[ProjectOverlap]],
) -> CollaborationResult | None:
    """
    Pick the pair with the most days together.

    Ties go to the smallest pair (lowest first id, then lowest second id).
    """
    best: CollaborationResult | None = None

    for pair in sorted(collaborations):
        overlaps = collaborations[pair]
        total_days = sum(o.days_overlapped for o in overlaps)
        if best is None or total_days > best.total_days:
            best = CollaborationResult(
                pair=pair,
                total_days=total_days,
                project_overlaps=tuple(overlaps),
            )

    return best


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================


def analyze(
    records: Sequence[WorkPeriodRecord],
    today: date | None = None,
    log: Any = None,
) -> CollaborationResult | NotFound:
    """
    Find the longest-collaborating employee pair among parsed records.

    Args:
        records: Work periods in input order
        today: End date for open-ended periods (defaults to date.today())
        log: Logger with request context bound (defaults to module logger)

    Returns:
        CollaborationResult for the winning pair, or NotFound when there
        are no records or no two employees overlap on any project
    """
    log = log if log is not None else logger

    if not records:
        log.warning("no_valid_records")
        return NO_RECORDS

    today = today if today is not None else date.today()
    collaborations = collect_overlaps(records, today)

    result = select_longest(collaborations)
    if result is None:
        log.info("no_collaborations_found", record_count=len(records))
        return NO_OVERLAP

    log.info(
        "longest_collaboration_found",
        employee_first_id=result.pair.first_id,
        employee_second_id=result.pair.second_id,
        days_worked_together=result.total_days,
        pair_count=len(collaborations),
    )
    return result


def find_longest_collaboration(
    stream: BinaryIO,
    today: date | None = None,
    log: Any = None,
) -> CollaborationResult | NotFound:
    """
    Parse a CSV byte stream and find the longest collaboration.

    Raises:
        OSError: The stream could not be read
    """
    log = log if log is not None else logger

    try:
        records = parse_records(stream, log)
        return analyze(records, today, log)
    except Exception:
        log.exception("collaboration_analysis_failed")
        raise
