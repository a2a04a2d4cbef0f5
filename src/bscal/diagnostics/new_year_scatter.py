#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import bscal
from bscal.core.time import day_of_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "bscal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "bscal[diagnostics]"') from e


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """BS years and the AD day-of-year of their 1 Baisakh."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(day_of_year(bscal.new_year_day(int(Y))))
    return years, y


def month_length_grid(np, start_year: int, end_year: int):
    """(years x 12) matrix of month lengths."""
    grid = np.empty((end_year - start_year + 1, 12), dtype=int)
    for i, Y in enumerate(range(start_year, end_year + 1)):
        for M in range(1, 13):
            grid[i, M - 1] = bscal.days_in_month(Y, M)
    return grid


def main(argv: Optional[List[str]] = None) -> int:
    lo, hi = bscal.supported_range()

    p = argparse.ArgumentParser(description="Plot BS New Year drift and month lengths across the table.")
    p.add_argument("--start-year", type=int, default=lo)
    p.add_argument("--end-year", type=int, default=hi)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="bs_new_year", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if not (lo <= args.start_year <= args.end_year <= hi):
        raise SystemExit(f"--start-year/--end-year must satisfy {lo} <= start <= end <= {hi}")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, (ax, ax2) = plt.subplots(1, 2, figsize=(12.0, 4.8), constrained_layout=True)

    x, y = build_series(np, args.start_year, args.end_year)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=14, c="tab:blue", alpha=0.5, linewidths=0.0, label="1 Baisakh")
    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="tab:red", linewidth=1.8)
    ax.set_xlabel("BS year")
    ax.set_ylabel("AD day-of-year (Jan 1 = 1)")
    ax.set_title("BS New Year in the Gregorian year")

    grid = month_length_grid(np, args.start_year, args.end_year)
    im = ax2.imshow(grid, aspect="auto", cmap="viridis", vmin=29, vmax=32,
                    extent=(0.5, 12.5, args.end_year + 0.5, args.start_year - 0.5))
    ax2.set_xticks(range(1, 13))
    ax2.set_xlabel("BS month")
    ax2.set_ylabel("BS year")
    ax2.set_title("Month lengths (days)")
    fig.colorbar(im, ax=ax2, ticks=[29, 30, 31, 32])

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
