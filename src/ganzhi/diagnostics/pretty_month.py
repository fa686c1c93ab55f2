from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse
from typing import List, Optional

import ganzhi
from ganzhi.engines.lunisolar import day_in_chinese, month_in_chinese


def dow_header() -> str:
    return "Mo      Tu      We      Th      Fr      Sa      Su"


def cell(top: str, bot: str, w: int = 7) -> tuple[str, str]:
    return (top.ljust(w), bot.ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_label(d: date) -> str:
    """Month name on the first of a lunar month, otherwise the day name."""
    t = ganzhi.lunar_date(d)
    if t.day == 1:
        return month_in_chinese(t.month, t.is_leap_month) + "月"
    return day_in_chinese(t.day)


def gregorian_month_calendar(gy: int, gm: int, *, engine: str = "standard") -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]
    d = first
    while d <= last:
        gz = ganzhi.compute_ganzhi(d, engine=engine, include_hour=False).day
        wk.append(cell(f"{d.day:2d} {gz}", lunar_label(d)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    terms = [t for t in ganzhi.solar_terms(gy) if t.date.month == gm]
    term_txt = "  ".join(f"{t.name} {t.date.day}日" for t in terms)
    print_grid(f"{gy}-{gm:02d}   {term_txt}", weeks)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid with day pillars, lunar days and solar terms."
    )
    p.add_argument("--engine", default="standard")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 2)")
    args = p.parse_args(argv)

    if not args.greg:
        # sensible default demo
        gregorian_month_calendar(2025, 2, engine=args.engine)
        return 0

    gy, gm = args.greg
    gregorian_month_calendar(gy, gm, engine=args.engine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
