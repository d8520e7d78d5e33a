# tests/test_grid.py

import pytest

from reformcal import CalendarDate, CalOptions, PADDING_DAY, month_cells, month_weeks
from reformcal.grid import GRID_CELLS, displayed_months, leading_padding, months_span


def _days(cells):
    return [c.day for c in cells if not c.is_padding]

def test_reform_month_cells():
    cells = month_cells(1752, 9)
    assert len(cells) == GRID_CELLS
    # 1 September 1752 was a Tuesday
    assert [c.day for c in cells[:3]] == [PADDING_DAY, PADDING_DAY, 1]
    assert _days(cells) == [1, 2] + list(range(14, 31))
    assert all((c.year, c.month) == (1752, 9) for c in cells)

def test_monday_first_padding():
    first = CalendarDate(1752, 9, 1)
    assert leading_padding(first) == 2
    assert leading_padding(first, monday_first=True) == 1
    sunday = CalendarDate(2015, 2, 1)
    assert leading_padding(sunday) == 0
    assert leading_padding(sunday, monday_first=True) == 6

def test_cells_are_consistent_dates():
    for c in month_cells(2024, 2):
        assert c == CalendarDate(c.year, c.month, c.day)

def test_six_week_month():
    # May 2021 starts on a Saturday
    cells = month_cells(2021, 5)
    assert cells[-1].day == 31
    weeks = month_weeks(2021, 5)
    assert len(weeks) == 6
    assert [w.week_num for w in weeks] == [1, 2, 3, 4, 5, 6]
    assert [d.day for d in weeks[-1].days] == [30, 31] + [PADDING_DAY] * 5
    assert all(len(w.days) == 7 for w in weeks)

def test_four_week_month():
    # February 2015 starts on a Sunday and has 28 days
    weeks = month_weeks(2015, 2)
    assert len(weeks) == 4
    assert weeks[0].days[0] == CalendarDate(2015, 2, 1)
    assert len(month_weeks(2015, 2, monday_first=True)) == 5

def test_week_columns_follow_weekdays():
    for week in month_weeks(1752, 9):
        for col, d in enumerate(week.days):
            if not d.is_padding:
                assert d.weekday == col

def test_months_span():
    active = CalendarDate(2020, 5, 17)
    assert months_span(active, CalOptions()) == [0]
    assert months_span(active, CalOptions(three=True)) == [-1, 0, 1]
    assert months_span(active, CalOptions(twelve=True)) == list(range(12))
    assert months_span(active, CalOptions(year=True)) == list(range(-4, 8))
    assert months_span(active, CalOptions(months=4)) == [0, 1, 2, 3]
    assert months_span(active, CalOptions(twelve=True, year=True)) == list(range(12))

def test_displayed_months():
    year = displayed_months(CalendarDate(2020, 5, 17), CalOptions(year=True))
    assert year[0] == CalendarDate(2020, 1, 1)
    assert year[-1] == CalendarDate(2020, 12, 1)

    three = displayed_months(CalendarDate(2020, 1, 31), CalOptions(three=True))
    assert three == [CalendarDate(2019, 12, 1), CalendarDate(2020, 1, 1), CalendarDate(2020, 2, 1)]

def test_options_validation():
    with pytest.raises(ValueError):
        CalOptions(months=0)
