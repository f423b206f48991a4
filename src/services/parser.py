"""
Work Period Parser

Reads comma-delimited EmpID,ProjectID,DateFrom,DateTo lines into
WorkPeriodRecord objects. Malformed lines are logged and skipped; only a
failure to read the underlying stream is raised to the caller.
"""

import io
from typing import Any, BinaryIO, Iterable

from core.config import CSV_DELIMITER
from core.logging import get_logger
from core.validation import is_open_end, parse_date, parse_int
from models.records import WorkPeriodRecord

logger = get_logger(__name__)


def parse_line(line: str) -> tuple[WorkPeriodRecord | None, str | None]:
    """
    Parse a single input line.

    Returns:
        Tuple of (record, None) on success or (None, reason) when the
        line is malformed
    """
    parts = [part.strip() for part in line.split(CSV_DELIMITER)]

    if len(parts) < 4:
        return None, "insufficient columns"

    employee_id = parse_int(parts[0])
    if employee_id is None:
        return None, "invalid EmpID"

    project_id = parse_int(parts[1])
    if project_id is None:
        return None, "invalid ProjectID"

    date_from = parse_date(parts[2])
    if date_from is None:
        return None, "invalid DateFrom"

    date_to = None
    if not is_open_end(parts[3]):
        date_to = parse_date(parts[3])
        if date_to is None:
            return None, "invalid DateTo"

    return (
        WorkPeriodRecord(
            employee_id=employee_id,
            project_id=project_id,
            date_from=date_from,
            date_to=date_to,
        ),
        None,
    )


def parse_lines(lines: Iterable[str], log: Any = None) -> list[WorkPeriodRecord]:
    """Parse lines into records in input order, skipping malformed ones."""
    log = log if log is not None else logger
    records = []
    skipped = 0

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        try:
            record, reason = parse_line(line)
        except ValueError as e:
            record, reason = None, str(e)
        if record is None:
            skipped += 1
            log.warning(
                "malformed_line",
                line_number=line_number,
                reason=reason,
                line=line,
            )
            continue

        records.append(record)

    log.info("records_parsed", record_count=len(records), skipped_count=skipped)
    return records


def parse_records(stream: BinaryIO, log: Any = None) -> list[WorkPeriodRecord]:
    """
    Parse a binary stream of UTF-8 CSV content.

    A leading byte-order mark is ignored and undecodable bytes are replaced.
    The stream is left open for the caller.

    Raises:
        OSError: The stream could not be read
    """
    reader = io.TextIOWrapper(stream, encoding="utf-8-sig", errors="replace", newline=None)
    try:
        return parse_lines(reader, log)
    finally:
        reader.detach()


def parse_records_from_text(text: str, log: Any = None) -> list[WorkPeriodRecord]:
    """Parse CSV content that is already in memory."""
    return parse_lines(text.splitlines(), log)
