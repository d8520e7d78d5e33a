"""
reformcal.render
----------------
Plain-text month blocks (English names), three months per row.
"""

from __future__ import annotations

from typing import List, Optional

from .core.types import CalendarDate
from .grid import displayed_months, month_weeks
from .options import CalOptions

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

BLOCK_WIDTH = 20
BLOCK_LINES = 8  # title, header, six weeks
BLOCKS_PER_ROW = 3
BLOCK_SEP = "  "

HIGHLIGHT_ON = "\x1b[7m"
HIGHLIGHT_OFF = "\x1b[0m"


def weekday_header(monday_first: bool = False) -> str:
    if monday_first:
        return "Mo Tu We Th Fr Sa Su"
    return "Su Mo Tu We Th Fr Sa"


def month_title(first: CalendarDate) -> str:
    return f"{MONTH_NAMES[first.month - 1]:>11} {first.year}"


def _cell(day: CalendarDate, active: Optional[CalendarDate], highlight: bool) -> str:
    if day.is_padding:
        return "  "
    text = f"{day.day:>2}"
    if highlight and day == active:
        return f"{HIGHLIGHT_ON}{text}{HIGHLIGHT_OFF}"
    return text


def render_month(
    first: CalendarDate,
    active: Optional[CalendarDate] = None,
    options: CalOptions = CalOptions(),
) -> List[str]:
    """
    Lines of one month block, each BLOCK_WIDTH visible characters wide.

    Always BLOCK_LINES long so that blocks of a row line up.
    """
    lines = [
        month_title(first).ljust(BLOCK_WIDTH),
        weekday_header(options.monday_first),
    ]
    for week in month_weeks(first.year, first.month, monday_first=options.monday_first):
        lines.append(" ".join(_cell(d, active, options.highlight) for d in week.days))
    while len(lines) < BLOCK_LINES:
        lines.append(" " * BLOCK_WIDTH)
    return lines


def render_calendar(active: CalendarDate, options: CalOptions = CalOptions()) -> str:
    blocks = [render_month(first, active, options) for first in displayed_months(active, options)]

    rows: List[str] = []
    for i in range(0, len(blocks), BLOCKS_PER_ROW):
        group = blocks[i : i + BLOCKS_PER_ROW]
        lines = [BLOCK_SEP.join(parts).rstrip() for parts in zip(*group)]
        rows.append("\n".join(lines))
    return "\n\n".join(rows) + "\n"
