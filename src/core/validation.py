"""
Field validation for work-period input lines and uploaded files.
"""

import re
from datetime import date, datetime

from core.config import CSV_EXTENSION, DATE_FORMATS, NULL_SENTINEL

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_int(value: str) -> int | None:
    """Parse a signed decimal integer, returning None if invalid."""
    value = value.strip()
    if not _INTEGER_PATTERN.match(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None


def parse_date(value: str) -> date | None:
    """
    Parse a calendar date, returning None if invalid.

    ISO 8601 is tried first (a full ISO datetime is accepted and truncated
    to its date), then each of DATE_FORMATS in order.
    """
    value = value.strip()
    if not value:
        return None

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue

    return None


def is_open_end(value: str) -> bool:
    """Check if a DateTo field means 'still active' (empty or NULL)."""
    value = value.strip()
    return not value or value.upper() == NULL_SENTINEL


def is_csv_filename(filename: str | None) -> bool:
    """Check if the filename has a .csv extension (case-insensitive)."""
    if not filename:
        return False
    return filename.lower().endswith(CSV_EXTENSION)
