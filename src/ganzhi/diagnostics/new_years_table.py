from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import ganzhi
from ganzhi.engines.lunar_table import leap_month
from ganzhi.engines.lunisolar import month_in_chinese


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Spring Festival (正月初一) date, year pillar and leap month per lunar year."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the New Year column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "New Year", "Pillar", "Animal", "Leap"]
    colw = [5, 10, 6, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        d = ganzhi.new_year_day(Y)
        res = ganzhi.compute_ganzhi(d, include_hour=False)
        lm = leap_month(Y)
        row = [
            str(Y),
            mmdd(d) if args.dates == "mmdd" else d.isoformat(),
            str(res.year),
            res.animal,
            month_in_chinese(lm, True) if lm else "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
