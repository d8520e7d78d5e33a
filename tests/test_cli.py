# tests/test_cli.py

from datetime import datetime, timedelta, timezone

import pytest

import reformcal
from reformcal import CalendarDate
from reformcal import cli


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin 'today' so that runs without a date argument are reproducible."""
    def set_today(y, m, d):
        monkeypatch.setattr(reformcal, "today", lambda: CalendarDate(y, m, d))
    set_today(2021, 5, 17)
    return set_today

def test_month_and_year(capsys):
    assert cli.main(["--no-color", "9", "1752"]) == 0
    out = capsys.readouterr().out
    assert "September 1752" in out
    assert "       1  2 14 15 16" in out

def test_day_month_year(capsys):
    assert cli.main(["--no-color", "14", "9", "1752"]) == 0
    assert "September 1752" in capsys.readouterr().out

def test_skipped_day_is_an_error(capsys):
    assert cli.main(["5", "9", "1752"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("reformcal: ")
    assert "1752" in err

def test_month_sentinels(capsys):
    assert cli.main(["--no-color", "13", "1999"]) == 0
    assert "January 2000" in capsys.readouterr().out
    assert cli.main(["--no-color", "0", "2000"]) == 0
    assert "December 1999" in capsys.readouterr().out

def test_year_only_shows_whole_year(capsys):
    assert cli.main(["--no-color", "2000"]) == 0
    out = capsys.readouterr().out
    assert "January 2000" in out
    assert "December 2000" in out

def test_three_months(capsys):
    assert cli.main(["-3", "--no-color", "1", "2000"]) == 0
    out = capsys.readouterr().out
    assert "December 1999" in out
    assert "February 2000" in out

def test_monday_first(capsys):
    assert cli.main(["-m", "--no-color", "2", "2015"]) == 0
    assert "Mo Tu We Th Fr Sa Su" in capsys.readouterr().out

def test_no_arguments_uses_today(capsys, fixed_today):
    assert cli.main(["--no-color"]) == 0
    assert "May 2021" in capsys.readouterr().out

def test_month_without_day_outside_today(capsys, fixed_today):
    fixed_today(2021, 5, 31)
    assert cli.main(["--no-color", "2", "2021"]) == 0
    assert "February 2021" in capsys.readouterr().out

def test_months_option(capsys, fixed_today):
    assert cli.main(["--no-color", "-n", "2"]) == 0
    out = capsys.readouterr().out
    assert "May 2021" in out
    assert "June 2021" in out
    assert "July 2021" not in out

@pytest.mark.parametrize("argv", [["1", "2", "3", "4"], ["x"], ["-n", "0", "2000"]])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as e:
        cli.main(argv)
    assert e.value.code == 2

def test_diag_year_table(capsys):
    assert cli.main(["diag", "year-table", "--from-year", "1751", "--to-year", "1753"]) == 0
    out = capsys.readouterr().out
    assert "1752  yes    354  We" in out
    assert "1753  no     365  Mo" in out

def test_diag_self_check(capsys):
    assert cli.main(["diag", "self-check", "--n", "300", "--seed", "7"]) == 0
    assert "0 failures" in capsys.readouterr().out

def test_today_is_utc():
    now = datetime(2021, 5, 17, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert reformcal.today(now) == CalendarDate(2021, 5, 18)
    assert reformcal.today(datetime(2021, 5, 17, 23, 30)) == CalendarDate(2021, 5, 17)

def test_date_info():
    info = reformcal.date_info(1752, 9, 14)
    assert info["date"] == "1752-09-14"
    assert info["weekday"] == 4
    assert info["leap"] is True
    assert info["days_in_month"] == 19
    assert info["days_in_year"] == 354
