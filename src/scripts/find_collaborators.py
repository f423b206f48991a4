#!/usr/bin/env python3
"""
Find the pair of employees who worked together the longest.

Reads a CSV file with columns EmpID, ProjectID, DateFrom, DateTo and prints
the winning pair with a per-project breakdown as JSON. Open-ended periods
(DateTo empty or NULL) run until today unless --today is given.

Usage:
    uv run python src/scripts/find_collaborators.py <input_file.csv> [--today YYYY-MM-DD]

Example:
    uv run python src/scripts/find_collaborators.py data/employees.csv --today 2024-06-30
"""

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api.models.responses import CollaborationResponse, ErrorMessages
from core.config import EXPECTED_COLUMNS
from core.logging import configure_logging
from models.records import NotFound
from services.collaboration import find_longest_collaboration


def parse_today(date_str: str) -> date:
    """Parse the --today argument (YYYY-MM-DD)."""
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected format YYYY-MM-DD, got '{date_str}'")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find the pair of employees who worked together the longest",
        epilog=f"Expected columns: {', '.join(EXPECTED_COLUMNS)}",
    )
    parser.add_argument(
        "input_file",
        type=Path,
        help="Path to the employee projects CSV file",
    )
    parser.add_argument(
        "--today",
        type=parse_today,
        default=None,
        help="End date for open-ended periods (default: today)",
    )

    args = parser.parse_args(argv)
    configure_logging()

    if not args.input_file.exists():
        print(f"Error: Input file not found: {args.input_file}", file=sys.stderr)
        return 1

    try:
        with args.input_file.open("rb") as stream:
            outcome = find_longest_collaboration(stream, today=args.today)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if isinstance(outcome, NotFound):
        print(f"Error: {ErrorMessages.NO_COLLABORATIONS_FOUND}", file=sys.stderr)
        return 1

    response = CollaborationResponse.from_result(outcome)
    print(response.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
