from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import reformcal

WEEKDAY_ABBR = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def _need_matplotlib():
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "reformcal[diagnostics]"') from e


def year_rows(from_year: int, to_year: int) -> List[Tuple[int, bool, int, int]]:
    """(year, leap, days in year, weekday of January 1) for each year."""
    rows = []
    for y in range(from_year, to_year + 1):
        jan1 = reformcal.CalendarDate(y, 1, 1)
        rows.append((y, jan1.leap, jan1.get_days_in_year(), jan1.weekday))
    return rows


def plot_rows(rows: List[Tuple[int, bool, int, int]], outbase: str) -> str:
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 3.6), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    years = [r[0] for r in rows]
    ax.scatter(years, [r[3] for r in rows], s=10, c=["tab:red" if r[1] else "tab:blue" for r in rows])
    ax.set_yticks(range(7))
    ax.set_yticklabels(WEEKDAY_ABBR)
    ax.set_xlabel("Year")
    ax.set_ylabel("Weekday of January 1")
    ax.set_title("January 1 weekday (red: leap years)")

    path = outbase + ".png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year lengths and January 1 weekdays for a range of years.")
    p.add_argument("--from-year", type=int, default=1740)
    p.add_argument("--to-year", type=int, default=1760)
    p.add_argument("--plot", action="store_true", help="also save a PNG scatter plot (needs matplotlib)")
    p.add_argument("--outbase", default="year_table", help="Output base name for --plot")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        p.error("--to-year must not be before --from-year")

    rows = year_rows(args.from_year, args.to_year)

    print(f"{'year':>6}  {'leap':<4}  {'days':>4}  jan1")
    print("-" * 26)
    for y, leap, days, wd in rows:
        print(f"{y:>6}  {'yes' if leap else 'no':<4}  {days:>4}  {WEEKDAY_ABBR[wd]}")

    if args.plot:
        print(f"Saved: {plot_rows(rows, args.outbase)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
