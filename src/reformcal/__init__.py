"""reformcal public API.

Keep this surface small: users should mostly interact with CalendarDate and
the functions re-exported here.
"""

from .api import (
    today,
    date_info,
    days_in_year,
    is_leap_year,
    month_days,
    weekday,
)
from .core.errors import DomainError, ReformCalError
from .core.reform import PADDING_DAY
from .core.types import CalendarDate, normalize
from .grid import CalendarWeek, month_cells, month_weeks
from .options import CalOptions
from .render import render_calendar

__version__ = "0.1.0"

__all__ = [
    "CalendarDate",
    "normalize",
    "DomainError",
    "ReformCalError",
    "PADDING_DAY",
    "today",
    "date_info",
    "days_in_year",
    "is_leap_year",
    "month_days",
    "weekday",
    "CalendarWeek",
    "month_cells",
    "month_weeks",
    "CalOptions",
    "render_calendar",
]
