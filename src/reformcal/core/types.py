from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Tuple

from .errors import DomainError
from .reform import (
    PADDING_DAY,
    REFORM_MONTH,
    REFORM_YEAR,
    SKIPPED_DAYS,
    add_months,
    days_in_year,
    is_leap_year,
    month_days,
    normalize_month,
    weekday,
)


def _check_day(year: int, month: int, day: int) -> None:
    if day == PADDING_DAY or day in month_days(year, month):
        return
    if year == REFORM_YEAR and month == REFORM_MONTH and day in SKIPPED_DAYS:
        raise DomainError(
            f"{year}-{month:02d}-{day:02d} does not exist (skipped by the 1752 Gregorian reform)"
        )
    raise DomainError(f"day {day} does not exist in {year}-{month:02d}")


@dataclass(frozen=True)
class CalendarDate:
    """
    A civil date of the English calendar with its derived facts.

    `leap` and `weekday` (0=Sunday) are computed on construction and can not
    be passed in. Month 0 and 13 are accepted as the December before and the
    January after `year`. `day` may be PADDING_DAY for grid placeholders.

    Values are immutable; the shift methods return new dates and raise
    DomainError instead of producing a date that does not exist.
    """
    year: int
    month: int
    day: int
    leap: bool = field(init=False)
    weekday: int = field(init=False)

    def __post_init__(self) -> None:
        year, month = normalize_month(self.year, self.month)
        _check_day(year, month, self.day)
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "leap", is_leap_year(year))
        object.__setattr__(self, "weekday", weekday(year, month, self.day))

    @classmethod
    def new(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(year, month, day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @property
    def is_padding(self) -> bool:
        return self.day == PADDING_DAY

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        """Same label as a datetime.date (years 1..9999, no padding days)."""
        if self.is_padding:
            raise DomainError(f"padding day of {self.year}-{self.month:02d} is not a date")
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        day = "--" if self.is_padding else f"{self.day:02d}"
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{day}"

    # ---------------------------------------------------------
    # Shifts
    # ---------------------------------------------------------

    def shift_year(self, shift: int) -> "CalendarDate":
        return normalize(self.year + shift, self.month, self.day)

    def shift_month(self, shift: int) -> "CalendarDate":
        """
        Move by `shift` months, carrying into the year.

        Equal to `shift` single-month steps. The day is kept as is, so a day
        missing from the target month (e.g. the 31st) raises DomainError.
        """
        year, month = add_months(self.year, self.month, shift)
        return normalize(year, month, self.day)

    def shift_day(self, shift: int) -> "CalendarDate":
        """
        Move by `shift` existing days.

        The move may cross at most one month boundary: one past the last day
        is the 1st of the next month, one before the first day is the last day
        of the previous month. Longer moves raise DomainError.
        """
        if self.is_padding:
            if shift == 0:
                return self
            raise DomainError(f"cannot shift padding day of {self.year}-{self.month:02d} by {shift}")

        days = self.get_month_days()
        pos = days.index(self.day) + shift

        if 0 <= pos < len(days):
            return normalize(self.year, self.month, days[pos])
        if pos == len(days):
            year, month = add_months(self.year, self.month, 1)
            return normalize(year, month, month_days(year, month)[0])
        if pos == -1:
            year, month = add_months(self.year, self.month, -1)
            return normalize(year, month, month_days(year, month)[-1])
        raise DomainError(f"shift_day({shift}) from {self} spans more than one month boundary")

    # ---------------------------------------------------------
    # Month / year facts
    # ---------------------------------------------------------

    def get_month_days(self) -> Tuple[int, ...]:
        return month_days(self.year, self.month)

    def get_days_in_year(self) -> int:
        return days_in_year(self.year)

    def first_of_month(self) -> "CalendarDate":
        return normalize(self.year, self.month, 1)

    def padding(self) -> "CalendarDate":
        return normalize(self.year, self.month, PADDING_DAY)


def normalize(year: int, month: int, day: int) -> CalendarDate:
    """Build a validated CalendarDate; raises DomainError if it does not exist."""
    return CalendarDate(year, month, day)
