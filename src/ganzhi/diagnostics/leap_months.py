#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from ganzhi.engines.lunar_table import MAX_YEAR, MIN_YEAR, leap_month, month_length


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


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(year, leap month, leap month length) for every year that has one."""
    xs, ys, ls = [], [], []
    for Y in range(start_year, end_year + 1):
        lm = leap_month(Y)
        if lm:
            xs.append(Y)
            ys.append(lm)
            ls.append(month_length(Y, lm, True))
    return np.array(xs, dtype=int), np.array(ys, dtype=int), np.array(ls, dtype=int)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram of the lunar table (square cell grid only)."
    )
    p.add_argument("--start-year", type=int, default=MIN_YEAR)
    p.add_argument("--end-year", type=int, default=MAX_YEAR)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap months 1900-2100")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.4, help="Cell border line width.")
    p.add_argument("--year-step", type=int, default=10, help="Label every k years (default: 10).")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")
    if start_year < MIN_YEAR or end_year > MAX_YEAR:
        raise SystemExit(f"years must lie in {MIN_YEAR}..{MAX_YEAR}")

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)

    xt = list(range(start_year, end_year + 1, max(1, args.year_step)))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Lunar year")
    ax.set_yticks(list(range(1, 13)))
    ax.set_ylabel("Leap month")

    x, m, length = build_points(np, start_year, end_year)
    big = length == 30
    ax.scatter(x[big], m[big], s=40, marker="o", c="0.15", linewidths=0.0, label="30 days", zorder=5)
    ax.scatter(x[~big], m[~big], s=40, marker="o", facecolors="none", edgecolors="0.15",
               linewidths=1.0, label="29 days", zorder=5)

    counts = np.bincount(m, minlength=13)[1:]
    print(f"{len(x)} leap months in {start_year}..{end_year}")
    print("per month: " + " ".join(f"{i + 1}:{c}" for i, c in enumerate(counts)))

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
