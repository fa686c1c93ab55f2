#!/usr/bin/env python3
"""
Audit the tabulated solar-term dates against the analytic solar-longitude model
in ganzhi.reference.solar: per-term offset in days (table minus model), with a
summary and an optional scatter plot.
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from ganzhi.engines.solar_terms import SOLAR_TERM_NAMES, term_date, term_instant
from ganzhi.reference.solar import term_date_civil, term_instant_civil


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ganzhi[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ganzhi[diagnostics]"') from e


def term_offsets(year: int) -> List[Tuple[int, int, float]]:
    """(term index, date offset in days, instant offset in hours) for one year."""
    out = []
    for k in range(24):
        d_days = (term_date(year, k) - term_date_civil(year, k)).days
        d_hours = (term_instant(year, k) - term_instant_civil(year, k)).total_seconds() / 3600.0
        out.append((k, d_days, d_hours))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solar-term table vs analytic solar longitude.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--out-png", default="", help="Write a scatter plot of the hour offsets.")
    p.add_argument("--show-dates", action="store_true", help="List every term whose civil date differs.")
    args = p.parse_args(argv)

    np = _need_numpy()

    years, hours, days = [], [], []
    for Y in range(args.year_start, args.year_end + 1):
        for k, d_days, d_hours in term_offsets(Y):
            years.append(Y + k / 24.0)
            hours.append(d_hours)
            days.append(d_days)
            if args.show_dates and d_days:
                print(f"{Y} {SOLAR_TERM_NAMES[k]}: {d_days:+d} day")

    hours_a = np.array(hours)
    days_a = np.array(days)
    print(f"terms checked: {len(hours_a)}")
    print(f"instant offset (h): mean {hours_a.mean():+.2f}  rms {np.sqrt((hours_a ** 2).mean()):.2f}  "
          f"min {hours_a.min():+.2f}  max {hours_a.max():+.2f}")
    print(f"civil date differs: {int((days_a != 0).sum())}  max |days| {int(np.abs(days_a).max())}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(12, 4))
        ax.scatter(np.array(years), hours_a, s=2, c="0.2")
        ax.axhline(0.0, color="0.6", lw=0.8)
        ax.set_xlabel("Year")
        ax.set_ylabel("Table - model (hours)")
        ax.set_title("Solar-term instant offsets")
        fig.tight_layout()
        fig.savefig(args.out_png, dpi=200)
        print(f"Saved: {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
