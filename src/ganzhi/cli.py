from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect
from typing import Optional, Tuple


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_hm(s: str) -> Tuple[int, Optional[int]]:
    m = _TIME_RE.match(s)
    if m is None:
        raise SystemExit(f"Bad time {s!r}; expected HH or HH:MM")
    return int(m.group(1)), (None if m.group(2) is None else int(m.group(2)))


def _civil(date_s: str, time_s: Optional[str]):
    from ganzhi.core.types import CivilDateTime

    d = _parse_ymd(date_s)
    if time_s is None:
        return CivilDateTime(d.year, d.month, d.day)
    hour, minute = _parse_hm(time_s)
    return CivilDateTime(d.year, d.month, d.day, hour, minute)


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


def cmd_day(argv: list[str]) -> int:
    import ganzhi
    from ganzhi.attributes.registry import available_attributes

    p = argparse.ArgumentParser(prog="ganzhi day", description="Civil date/time -> four pillars")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("time", nargs="?", default=None, help="HH:MM (UTC+8)")
    p.add_argument("--engine", default="standard")
    p.add_argument("--no-hour", action="store_true", help="omit the hour pillar")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help=f"attribute name (repeatable): {', '.join(available_attributes())}")
    args = p.parse_args(argv)

    res = ganzhi.compute_ganzhi(
        _civil(args.date, args.time),
        engine=args.engine,
        include_hour=not args.no_hour,
        attributes=tuple(args.attr),
        debug=args.debug,
    )
    print(f"公历: {res.civil.display()}")
    print(f"农历: {res.lunar_display}")
    print(f"干支: {res.ganzhi_text}")
    print(f"生肖: {res.animal}")
    print(f"节气: {res.solar_term.name} ({res.solar_term.date.isoformat()})")
    if res.hour_range:
        print(f"时辰: {res.hour_range}")
    if res.attributes:
        for k, v in res.attributes.items():
            print(f"{k}: {v}")
    if res.debug:
        for k, v in res.debug.items():
            print(f"  {k} = {v}")
    return 0


def cmd_hours(argv: list[str]) -> int:
    import ganzhi

    p = argparse.ArgumentParser(prog="ganzhi hours", description="The thirteen hour pillars of a day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="standard")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    day = ganzhi.compute_ganzhi(d, engine=args.engine, include_hour=False).day
    print(f"{d.isoformat()}  {day}日")
    for slot in ganzhi.daily_hours(d, engine=args.engine):
        tag = "  (晚子时)" if slot.late_zi else ""
        print(f"  {slot.time_range}  {slot.ganzhi}时{tag}")
    return 0


def cmd_terms(argv: list[str]) -> int:
    import ganzhi

    p = argparse.ArgumentParser(prog="ganzhi terms", description="The 24 solar terms of a Gregorian year")
    p.add_argument("year", type=int)
    p.add_argument("--jie-only", action="store_true", help="only the twelve month-opening terms")
    args = p.parse_args(argv)

    for t in ganzhi.solar_terms(args.year):
        if args.jie_only and not t.is_jie:
            continue
        kind = "节" if t.is_jie else "气"
        print(f"{t.index:2d}  {t.name}  {kind}  {t.date.isoformat()}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import ganzhi
    from ganzhi.core.types import LunarDate

    p = argparse.ArgumentParser(prog="ganzhi lunar", description="Gregorian <-> lunar date")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian), or lunar Y-M-D with --inverse")
    p.add_argument("--inverse", action="store_true", help="treat DATE as a lunar date")
    p.add_argument("--leap", action="store_true", help="with --inverse: the month is the leap month")
    args = p.parse_args(argv)

    if args.inverse:
        y, m, d = map(int, args.date.split("-"))
        t = LunarDate(y, m, d, args.leap)
        print(f"{ganzhi.lunar_display(t)} -> {ganzhi.lunar_to_solar(t).isoformat()}")
        return 0

    t = ganzhi.lunar_date(_parse_ymd(args.date))
    leap = " (leap)" if t.is_leap_month else ""
    print(f"{args.date} -> {t.year}-{t.month:02d}-{t.day:02d}{leap}  {ganzhi.lunar_display(t)}")
    return 0


def cmd_validate(argv: list[str]) -> int:
    import ganzhi

    p = argparse.ArgumentParser(prog="ganzhi validate", description="Compare computed pillars with a reference")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD")
    p.add_argument("time", nargs="?", help="HH:MM")
    p.add_argument("expected", nargs="?", help='e.g. "辛未年 丙申月 庚辰日 癸未时"')
    p.add_argument("--engine", default=None)
    p.add_argument("--references", action="store_true", help="run the built-in reference cases")
    args = p.parse_args(argv)

    if args.references:
        fwd = ["--engine", args.engine] if args.engine else []
        return _run_module_main("ganzhi.diagnostics.validate_reference", fwd)

    if not (args.date and args.time and args.expected):
        p.error("DATE TIME EXPECTED are required unless --references is given")

    res = ganzhi.validate(_civil(args.date, args.time), args.expected, engine=args.engine or "standard")
    print(res.summary())
    return 0 if res.is_valid else 1


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `ganzhi YYYY-MM-DD [HH:MM] ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="ganzhi", description="Sexagenary (GanZhi) calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", add_help=False, help="Four pillars of a civil date/time")
    sub.add_parser("hours", add_help=False, help="Thirteen hour pillars of a day")
    sub.add_parser("terms", add_help=False, help="Solar terms of a year")
    sub.add_parser("lunar", add_help=False, help="Gregorian <-> lunar conversion")
    sub.add_parser("validate", add_help=False, help="Check pillars against a reference string")

    # diagnostics
    sub.add_parser("pretty-month", add_help=False, help="Print a Gregorian month grid (diagnostics)")
    sub.add_parser("new-years", add_help=False, help="Print New Year table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "term-drift", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from ganzhi.core.errors import GanZhiError

    commands = {
        "day": cmd_day,
        "hours": cmd_hours,
        "terms": cmd_terms,
        "lunar": cmd_lunar,
        "validate": cmd_validate,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("ganzhi.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("ganzhi.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "leap-months": "ganzhi.diagnostics.leap_months",
                "term-drift": "ganzhi.diagnostics.term_drift",
                "round-trip": "ganzhi.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except GanZhiError as e:
        print(f"ganzhi: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
