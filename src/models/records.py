"""
Data models for work periods and collaboration results.

All models are frozen dataclasses: they are built once per analysis call
and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WorkPeriodRecord:
    """One employee's assignment to one project (one input line)."""

    employee_id: int
    project_id: int
    date_from: date
    date_to: date | None = None  # None = still active

    def effective_end(self, today: date) -> date:
        """End date of the assignment, using today for open-ended periods."""
        return self.date_to if self.date_to is not None else today


@dataclass(frozen=True)
class ProjectOverlap:
    """Days two employees spent together on a single project."""

    project_id: int
    days_overlapped: int
    overlap_start: date
    overlap_end: date


@dataclass(frozen=True, order=True)
class EmployeePair:
    """Unordered pair of employees, stored with the smaller id first."""

    first_id: int
    second_id: int

    def __post_init__(self):
        if self.first_id >= self.second_id:
            raise ValueError(
                f"EmployeePair requires first_id < second_id, "
                f"got ({self.first_id}, {self.second_id})"
            )

    @classmethod
    def of(cls, employee_a: int, employee_b: int) -> "EmployeePair":
        """Build a normalized pair from two ids given in any order."""
        if employee_a == employee_b:
            raise ValueError(f"An employee cannot pair with itself: {employee_a}")
        return cls(min(employee_a, employee_b), max(employee_a, employee_b))


@dataclass(frozen=True)
class CollaborationResult:
    """The pair of employees who worked together the longest."""

    pair: EmployeePair
    total_days: int
    project_overlaps: tuple[ProjectOverlap, ...]


@dataclass(frozen=True)
class NotFound:
    """No collaboration could be determined."""

    reason: str  # "no_records" or "no_overlap"


NO_RECORDS = NotFound("no_records")
NO_OVERLAP = NotFound("no_overlap")
