from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from datetime import date


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def cmd_holidays(argv: list[str]) -> int:
    import holical
    from holical.core.types import HolidayType

    p = argparse.ArgumentParser(prog="holical holidays", description="List the holidays of a region for a year")
    p.add_argument("region", help="Region code, e.g. CA-PE")
    p.add_argument("year", type=int)
    p.add_argument("--locale", default=None, help="Locale for names (default: region default)")
    p.add_argument("--kind", choices=[t.value for t in HolidayType], default=None)
    args = p.parse_args(argv)

    hs = holical.compute(args.region, args.year, locale=args.locale)
    rows = hs.of_kind(HolidayType(args.kind)) if args.kind else hs.all()

    print(f"{hs.region} {hs.year} ({hs.timezone}): {len(rows)} holidays")
    for h in rows:
        note = f"  (observed; actual {h.actual_date.isoformat()})" if h.observed else ""
        print(f"  {h.date.isoformat()}  {h.date.strftime('%a')}  {h.key:<28} {h.name}{note}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    from holical.engines.easter import computus

    p = argparse.ArgumentParser(prog="holical easter", description="Gregorian Easter Sunday")
    p.add_argument("year", type=int)
    p.add_argument("--to-year", type=int, default=None, help="Print a range of years")
    p.add_argument("--debug", action="store_true", help="Show computus intermediates")
    args = p.parse_args(argv)

    Y1 = args.to_year if args.to_year is not None else args.year
    if Y1 < args.year:
        raise SystemExit("--to-year must be >= year")
    for Y in range(args.year, Y1 + 1):
        c = computus(Y)
        if args.debug:
            print(f"{Y}  {c['date'].isoformat()}  golden={c['golden_number']} epact={c['epact']} "
                  f"sunday_offset={c['sunday_offset']}")
        else:
            print(f"{Y}  {c['date'].isoformat()}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import holical
    from holical.core.types import YearPolicy

    p = argparse.ArgumentParser(
        prog="holical convert", description="Lunisolar (month, day) in a Gregorian year -> Gregorian date"
    )
    p.add_argument("year", type=int, help="Gregorian anchor year")
    p.add_argument("month", type=int, help="Civil month number (Hebrew: 1=Tishrei .. 12=Elul)")
    p.add_argument("day", type=int)
    p.add_argument("--calendar", default="hebrew")
    p.add_argument("--leap", action="store_true", help="Intercalary month (Hebrew: Adar I)")
    p.add_argument("--policy", choices=[pol.value for pol in YearPolicy], default=YearPolicy.REANCHOR.value)
    args = p.parse_args(argv)

    d = holical.to_gregorian(
        args.calendar, args.year, args.month, args.day,
        is_leap_month=args.leap, policy=YearPolicy(args.policy),
    )
    print(d.isoformat())
    return 0


def cmd_lunisolar(argv: list[str]) -> int:
    import holical

    p = argparse.ArgumentParser(prog="holical lunisolar", description="Gregorian -> lunisolar date label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="hebrew")
    args = p.parse_args(argv)

    cd = holical.from_gregorian(_parse_ymd(args.date), calendar=args.calendar)
    print(f"{cd.day} {cd.month_name} {cd.year}  (month={cd.month}, leap={cd.is_leap_month})")
    return 0


def cmd_regions(argv: list[str]) -> int:
    import holical

    p = argparse.ArgumentParser(prog="holical regions", description="List known regions")
    p.parse_args(argv)

    for code in holical.list_regions():
        info = holical.region_info(code)
        parent = f" < {info['parent']}" if info["parent"] else ""
        print(f"{code:<6} {info['name']:<24} {info['timezone']:<18} {len(info['holidays'])} holidays{parent}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    from holical.core.errors import HolicalError

    p = argparse.ArgumentParser(prog="holical", description="Holiday date computation toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("holidays", help="List holidays for REGION YEAR")
    sub.add_parser("easter", help="Gregorian Easter Sunday for a year or range")
    sub.add_parser("convert", help="Lunisolar date -> Gregorian date")
    sub.add_parser("lunisolar", help="Gregorian date -> lunisolar date")
    sub.add_parser("regions", help="List known regions")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["holiday-table", "round-trip", "easter-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "holidays": cmd_holidays,
        "easter": cmd_easter,
        "convert": cmd_convert,
        "lunisolar": cmd_lunisolar,
        "regions": cmd_regions,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "holiday-table": "holical.diagnostics.holiday_table",
                "round-trip": "holical.diagnostics.round_trip",
                "easter-scatter": "holical.diagnostics.easter_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except HolicalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
