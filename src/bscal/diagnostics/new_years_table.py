from __future__ import annotations

from datetime import date
import argparse

import bscal


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def rows(from_year: int, to_year: int) -> list[tuple[int, date, int]]:
    """(BS year, AD date of Baisakh 1, days in year)."""
    return [(Y, bscal.new_year_day(Y), bscal.days_in_year(Y)) for Y in range(from_year, to_year + 1)]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the AD date of BS New Year (1 Baisakh) for a range of BS years."
    )
    p.add_argument("--from-year", type=int, default=2070)
    p.add_argument("--to-year", type=int, default=2090)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the AD column (default: iso).",
    )
    args = p.parse_args(argv)

    lo, hi = bscal.supported_range()
    if not (lo <= args.from_year <= args.to_year <= hi):
        raise SystemExit(f"--from-year/--to-year must satisfy {lo} <= from <= to <= {hi}")

    print(f"{'BS':>6}  {'New Year (AD)':<13}  {'Days':>4}")
    print("-" * 27)
    for Y, d, n in rows(args.from_year, args.to_year):
        shown = d.isoformat() if args.dates == "iso" else mmdd(d)
        print(f"{Y:>6}  {shown:<13}  {n:>4}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
