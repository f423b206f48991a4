"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.records import WorkPeriodRecord  # noqa: E402


SAMPLE_CSV = """EmpID,ProjectID,DateFrom,DateTo
143,12,2013-11-01,2014-01-05
218,10,2012-05-16,NULL
143,10,2009-01-01,2011-04-27
218,12,2013-11-01,2014-01-05
"""

NO_COLLABORATION_CSV = """EmpID,ProjectID,DateFrom,DateTo
143,12,2013-11-01,2014-01-05
218,10,2015-05-16,2016-06-20
"""


@pytest.fixture
def today():
    """Fixed evaluation date for open-ended work periods."""
    return date(2024, 1, 1)


@pytest.fixture
def sample_csv():
    """CSV content where employees 143 and 218 overlap on project 12."""
    return SAMPLE_CSV


@pytest.fixture
def no_collaboration_csv():
    """CSV content where no two employees share a project."""
    return NO_COLLABORATION_CSV


@pytest.fixture
def make_record():
    """Factory for work period records from ISO date strings."""

    def _make(employee_id, project_id, date_from, date_to=None):
        return WorkPeriodRecord(
            employee_id=employee_id,
            project_id=project_id,
            date_from=date.fromisoformat(date_from),
            date_to=date.fromisoformat(date_to) if date_to else None,
        )

    return _make
