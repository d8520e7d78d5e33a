from __future__ import annotations

import argparse
from dataclasses import replace
import importlib
import inspect
import logging
import sys

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"

DIAG_TOOLS = {
    "self-check": "reformcal.diagnostics.self_check",
    "year-table": "reformcal.diagnostics.year_table",
}


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="reformcal",
        description="Display a calendar (English calendar, with the September 1752 reform).",
        usage="%(prog)s [options] [[[day] month] year]\n       %(prog)s diag {self-check,year-table} ...",
        epilog="Month accepts 0 (December of the previous year) and 13 (January of the next year).",
    )
    p.add_argument("-1", "--one", action="store_true", help="display a single month (default)")
    p.add_argument("-3", "--three", action="store_true", help="display three months spanning the date")
    p.add_argument("-n", "--months", type=int, metavar="N", help="display N months starting with the date")
    p.add_argument("-y", "--year", action="store_true", help="display the whole calendar year")
    p.add_argument("-Y", "--twelve", action="store_true", help="display the next twelve months")

    first = p.add_mutually_exclusive_group()
    first.add_argument("-m", "--monday", dest="monday_first", action="store_true", help="Monday as first day")
    first.add_argument("-s", "--sunday", dest="monday_first", action="store_false", help="Sunday as first day (default)")

    p.add_argument("--no-color", action="store_true", help="do not highlight the active date")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("date", nargs="*", type=int, help="[[day] month] year")
    return p


def cmd_cal(argv: list[str]) -> int:
    import reformcal
    from reformcal.options import CalOptions

    p = build_parser()
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=LOG_DATEFMT, stream=sys.stderr)

    now = reformcal.today()
    year, month, day = now.year, now.month, now.day
    n = len(args.date)
    if n == 1:
        (year,) = args.date
    elif n == 2:
        month, year = args.date
    elif n == 3:
        day, month, year = args.date
    elif n > 3:
        p.error("too many arguments")

    try:
        options = CalOptions(
            monday_first=args.monday_first,
            three=args.three,
            year=args.year or n == 1,
            twelve=args.twelve,
            months=args.months,
            highlight=not args.no_color and sys.stdout.isatty(),
        )
    except ValueError as e:
        p.error(str(e))

    try:
        if n in (1, 2):
            # No day given: only keep today's day inside today's month.
            probe = reformcal.CalendarDate(year, month, 1)
            if (probe.year, probe.month) != (now.year, now.month):
                day = 1
                options = replace(options, highlight=False)
        active = reformcal.CalendarDate(year, month, day)
    except reformcal.DomainError as e:
        print(f"reformcal: {e}", file=sys.stderr)
        return 1

    log.debug("active date %s, options %s", active, options)
    sys.stdout.write(reformcal.render_calendar(active, options))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "diag":
        p = argparse.ArgumentParser(prog="reformcal diag", description="Diagnostics tools")
        p.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")
        args, rest = p.parse_known_args(argv[1:2])
        return _run_module_main(DIAG_TOOLS[args.tool], rest + argv[2:])

    return cmd_cal(argv)


if __name__ == "__main__":
    raise SystemExit(main())
