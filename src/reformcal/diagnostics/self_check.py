from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import reformcal
from reformcal import CalendarDate


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def check_weekday(d0: date) -> Optional[str]:
    """Post-reform weekdays must match the proleptic Gregorian datetime.date."""
    cd = CalendarDate.from_date(d0)
    expected = d0.isoweekday() % 7
    if cd.weekday != expected:
        return f"weekday {cd}: engine={cd.weekday} datetime={expected}"
    return None


def check_day_steps(d0: date) -> Optional[str]:
    cd = CalendarDate.from_date(d0)
    fwd = cd.shift_day(1)
    if fwd.to_date() != d0 + timedelta(days=1):
        return f"shift_day(+1) {cd}: got {fwd}"
    if fwd.shift_day(-1) != cd:
        return f"shift_day(+1/-1) {cd}: got {fwd.shift_day(-1)}"
    return None


def check_month_steps(d0: date, n: int) -> Optional[str]:
    # Day kept at most 28 so that only the 1752 gap can make a step fail.
    cd = CalendarDate(d0.year, d0.month, min(d0.day, 28))
    step = 1 if n > 0 else -1
    try:
        stepped = cd
        for _ in range(abs(n)):
            stepped = stepped.shift_month(step)
    except reformcal.DomainError:
        stepped = None
    try:
        jumped = cd.shift_month(n)
    except reformcal.DomainError:
        jumped = None
    if stepped is None:
        # An intermediate month (September 1752) lacks the day; only the jump is defined.
        return None
    if jumped != stepped:
        return f"shift_month({n}) {cd}: jump={jumped} steps={stepped}"
    return None


def self_check(N: int, start: date, end: date, seed: int, *, max_failures: int) -> List[str]:
    random.seed(seed)
    failures: List[str] = []

    for _ in range(N):
        d0 = random_date(start, end)
        n = random.randint(-60, 60)
        for msg in (check_weekday(d0), check_day_steps(d0), check_month_steps(d0, n)):
            if msg is not None:
                failures.append(msg)
                if len(failures) >= max_failures:
                    return failures
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Randomized consistency checks of the calendar engine.")
    p.add_argument("--n", type=int, default=2000)
    p.add_argument("--start", default="1752-09-14", help="YYYY-MM-DD (not before 1752-09-14)")
    p.add_argument("--end", default="2400-12-30", help="YYYY-MM-DD")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max-failures", type=int, default=20)
    args = p.parse_args(argv)

    start = date.fromisoformat(args.start)
    end = date.fromisoformat(args.end)
    if start < date(1752, 9, 14):
        p.error("--start must not be before the reform (1752-09-14)")

    failures = self_check(args.n, start, end, args.seed, max_failures=args.max_failures)
    for msg in failures:
        print("FAIL", msg)
    print(f"reformcal {reformcal.__version__}: {args.n} dates, {len(failures)} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
