"""
reformcal.core.reform
---------------------
Pure calendar rules for the English calendar: proleptic Gregorian leap years,
month lengths, weekdays, and the September 1752 switch from the Julian
calendar (the 3rd to the 13th were skipped).
"""

from __future__ import annotations

from typing import Tuple

from .errors import DomainError

REFORM_YEAR = 1752
REFORM_MONTH = 9
# First Gregorian day; the day before it was 1752-09-02.
REFORM_FIRST_DAY = 14
SKIPPED_DAYS = range(3, REFORM_FIRST_DAY)

# Weekday skew between the Julian and Gregorian reckoning in 1752 (11 days mod 7).
JULIAN_WEEKDAY_SKEW = 4

# Grid placeholder for a slot outside the displayed month.
PADDING_DAY = -1

# Sakamoto month offsets, indexed by month - 1.
_SAKAMOTO = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_THIRTY = (4, 6, 9, 11)
_THIRTY_ONE = (1, 3, 5, 7, 8, 10, 12)

_DAYS_28 = tuple(range(1, 29))
_DAYS_29 = tuple(range(1, 30))
_DAYS_30 = tuple(range(1, 31))
_DAYS_31 = tuple(range(1, 32))
_DAYS_REFORM = (1, 2) + tuple(range(REFORM_FIRST_DAY, 31))


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian rule, also applied before 1752."""
    return year % 4 == 0 and (year % 400 == 0 or year % 100 != 0)


def month_days(year: int, month: int) -> Tuple[int, ...]:
    """Ordered day numbers that exist in (year, month)."""
    if year == REFORM_YEAR and month == REFORM_MONTH:
        return _DAYS_REFORM
    if month in _THIRTY:
        return _DAYS_30
    if month in _THIRTY_ONE:
        return _DAYS_31
    if month == 2:
        return _DAYS_29 if is_leap_year(year) else _DAYS_28
    raise DomainError(f"month {month} of year {year} does not exist")


def days_in_year(year: int) -> int:
    if year == REFORM_YEAR:
        return 366 - 12
    return 366 if is_leap_year(year) else 365


def is_julian(year: int, month: int, day: int) -> bool:
    """True for dates strictly before the first Gregorian day, 1752-09-14."""
    return (year, month, day) < (REFORM_YEAR, REFORM_MONTH, REFORM_FIRST_DAY)


def weekday(year: int, month: int, day: int) -> int:
    """
    Day of week, 0=Sunday..6=Saturday (Sakamoto).

    Julian dates get the fixed 1752 skew, which keeps the weekday sequence
    continuous across the skipped days.
    """
    y = year - 1 if month < 3 else year
    skew = JULIAN_WEEKDAY_SKEW if is_julian(year, month, day) else 0
    return (y + y // 4 - y // 100 + y // 400 + _SAKAMOTO[month - 1] + day + skew) % 7


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """
    Fold the month sentinels 0 (December of the previous year) and
    13 (January of the next year) into a valid (year, month).
    """
    if month == 0:
        return year - 1, 12
    if month == 13:
        return year + 1, 1
    if 1 <= month <= 12:
        return year, month
    raise DomainError(f"month {month} cannot be normalized (year {year})")


def add_months(year: int, month: int, shift: int) -> Tuple[int, int]:
    """(year, month) moved by `shift` months; same as `shift` single steps."""
    y, m0 = divmod(year * 12 + (month - 1) + shift, 12)
    return y, m0 + 1
