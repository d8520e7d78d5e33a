from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .core.reform import days_in_year, is_leap_year, month_days, weekday
from .core.types import CalendarDate, normalize


def today(now: Optional[datetime] = None) -> CalendarDate:
    """Current civil date at UTC (offset 0)."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return CalendarDate(now.year, now.month, now.day)


def date_info(year: int, month: int, day: int) -> Dict[str, Any]:
    """All derived facts of a date as a plain dict."""
    d = normalize(year, month, day)
    return {
        "date": str(d),
        "year": d.year,
        "month": d.month,
        "day": d.day,
        "leap": d.leap,
        "weekday": d.weekday,
        "days_in_month": len(d.get_month_days()),
        "days_in_year": d.get_days_in_year(),
    }


__all__ = [
    "today",
    "date_info",
    "days_in_year",
    "is_leap_year",
    "month_days",
    "weekday",
]
