"""
reformcal.grid
--------------
Month grids: every displayed month is a run of CalendarDate cells, padded
with placeholder days so that the 1st lands under its weekday column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .core.reform import PADDING_DAY, month_days
from .core.types import CalendarDate
from .options import CalOptions

log = logging.getLogger(__name__)

# Six leading placeholders plus 31 days.
GRID_CELLS = 37


@dataclass
class CalendarWeek:
    week_num: int = -1
    days: List[CalendarDate] = field(default_factory=list)


def leading_padding(first: CalendarDate, *, monday_first: bool = False) -> int:
    """Number of placeholder cells before the 1st of the month."""
    if monday_first:
        return (first.weekday + 6) % 7
    return first.weekday


def month_cells(year: int, month: int, *, monday_first: bool = False) -> List[CalendarDate]:
    first = CalendarDate(year, month, 1)
    pad = first.padding()

    cells = [pad] * leading_padding(first, monday_first=monday_first)
    cells.extend(CalendarDate(first.year, first.month, d) for d in month_days(first.year, first.month))
    cells.extend([pad] * (GRID_CELLS - len(cells)))
    return cells


def month_weeks(year: int, month: int, *, monday_first: bool = False) -> List[CalendarWeek]:
    cells = month_cells(year, month, monday_first=monday_first)
    weeks: List[CalendarWeek] = []
    for i in range(0, len(cells), 7):
        chunk = cells[i : i + 7]
        chunk += [chunk[0].padding()] * (7 - len(chunk))
        if all(c.day == PADDING_DAY for c in chunk):
            continue
        weeks.append(CalendarWeek(week_num=len(weeks) + 1, days=chunk))
    return weeks


def months_span(active: CalendarDate, options: CalOptions) -> List[int]:
    """Month offsets, relative to the active month, that should be displayed."""
    if options.twelve:
        span = list(range(0, 12))
    elif options.year:
        span = list(range(1 - active.month, 13 - active.month))
    elif options.three:
        span = [-1, 0, 1]
    elif options.months is not None:
        span = list(range(0, options.months))
    else:
        span = [0]
    log.debug("months span for %s: %s", active, span)
    return span


def displayed_months(active: CalendarDate, options: CalOptions) -> List[CalendarDate]:
    """First day of each displayed month."""
    first = active.first_of_month()
    return [first.shift_month(k) for k in months_span(active, options)]
