"""
Tests for input field validation.
"""

from datetime import date

import pytest

from core.validation import is_csv_filename, is_open_end, parse_date, parse_int


class TestParseInt:
    @pytest.mark.parametrize(
        "value, expected",
        [("143", 143), (" 218 ", 218), ("+7", 7), ("-3", -3), ("0", 0)],
    )
    def test_valid(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "EmpID", "1.5", "12a", "1_000", "--1"])
    def test_invalid(self, value):
        assert parse_int(value) is None

    def test_beyond_conversion_limit(self):
        assert parse_int("9" * 5000) is None
        assert parse_int("-" + "9" * 5000) is None


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2013-11-01") == date(2013, 11, 1)

    def test_iso_datetime_is_truncated(self):
        assert parse_date("2013-11-01T08:30:00") == date(2013, 11, 1)

    @pytest.mark.parametrize(
        "value",
        ["2013/11/01", "11/01/2013", "01.11.2013"],
    )
    def test_fallback_formats(self, value):
        assert parse_date(value) == date(2013, 11, 1)

    @pytest.mark.parametrize("value", ["", "NULL", "2013-13-01", "2013-02-30", "yesterday"])
    def test_invalid(self, value):
        assert parse_date(value) is None


class TestIsOpenEnd:
    @pytest.mark.parametrize("value", ["", "  ", "NULL", "null", "Null"])
    def test_open(self, value):
        assert is_open_end(value)

    @pytest.mark.parametrize("value", ["2014-01-05", "NONE", "N/A"])
    def test_not_open(self, value):
        assert not is_open_end(value)


class TestIsCsvFilename:
    @pytest.mark.parametrize("name", ["employees.csv", "EMPLOYEES.CSV", "data.Csv"])
    def test_csv(self, name):
        assert is_csv_filename(name)

    @pytest.mark.parametrize("name", [None, "", "document.txt", "data.csv.txt", "csv"])
    def test_not_csv(self, name):
        assert not is_csv_filename(name)
