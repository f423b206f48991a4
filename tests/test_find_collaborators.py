"""
Tests for the find_collaborators command-line script.
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src" / "scripts"))

from find_collaborators import main  # noqa: E402


@pytest.fixture
def csv_file(tmp_path, sample_csv):
    path = tmp_path / "employees.csv"
    path.write_text(sample_csv)
    return path


def test_prints_longest_collaboration_as_json(csv_file, capsys):
    exit_code = main([str(csv_file), "--today", "2024-01-01"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["employeeFirstId"] == 143
    assert output["employeeSecondId"] == 218
    assert output["daysWorkedTogether"] == 66
    assert output["projectDetails"][0]["overlapStart"] == "2013-11-01"


def test_open_ended_periods_use_today_argument(tmp_path, capsys):
    path = tmp_path / "open.csv"
    path.write_text("1,5,2024-01-01,NULL\n2,5,2024-01-10,\n")

    exit_code = main([str(path), "--today", "2024-01-20"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["daysWorkedTogether"] == 11


def test_no_collaboration_exits_with_error(tmp_path, no_collaboration_csv, capsys):
    path = tmp_path / "employees.csv"
    path.write_text(no_collaboration_csv)

    assert main([str(path)]) == 1
    assert "No collaborations found" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "not found" in capsys.readouterr().err


def test_invalid_today_is_rejected(csv_file):
    with pytest.raises(SystemExit):
        main([str(csv_file), "--today", "01/20/2024"])
