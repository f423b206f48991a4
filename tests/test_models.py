"""
Tests for record and result models.
"""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from models.records import EmployeePair, WorkPeriodRecord


def test_pair_is_normalized_smaller_id_first():
    assert EmployeePair.of(218, 143) == EmployeePair.of(143, 218) == EmployeePair(143, 218)


def test_pair_is_usable_as_dict_key():
    totals = {EmployeePair.of(2, 1): 5}
    totals[EmployeePair.of(1, 2)] += 3

    assert totals == {EmployeePair(1, 2): 8}


def test_pair_sorts_by_first_then_second_id():
    pairs = [EmployeePair(2, 3), EmployeePair(1, 9), EmployeePair(1, 4)]

    assert sorted(pairs) == [EmployeePair(1, 4), EmployeePair(1, 9), EmployeePair(2, 3)]


def test_pair_rejects_same_employee():
    with pytest.raises(ValueError):
        EmployeePair.of(7, 7)


def test_pair_rejects_unnormalized_order():
    with pytest.raises(ValueError):
        EmployeePair(9, 1)


def test_effective_end_uses_today_only_when_open():
    closed = WorkPeriodRecord(1, 1, date(2020, 1, 1), date(2020, 6, 30))
    open_ended = WorkPeriodRecord(1, 1, date(2020, 1, 1))

    assert closed.effective_end(date(2024, 1, 1)) == date(2020, 6, 30)
    assert open_ended.effective_end(date(2024, 1, 1)) == date(2024, 1, 1)


def test_records_are_immutable():
    record = WorkPeriodRecord(1, 1, date(2020, 1, 1))

    with pytest.raises(FrozenInstanceError):
        record.employee_id = 2
