from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import List, Optional

from bscal.core.errors import DataIntegrityError
from bscal.engines.calendar import CalendarEngine
from bscal.reference.loader import CsvMonthEntryRepository, load_table


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Rebuild and check the BS calendar table; print summary statistics.")
    p.add_argument("--csv", type=Path, default=None, help="CSV to check (default: the active search order).")
    p.add_argument("--cross-check", action="store_true",
                   help="Compare precomputed offsets against the naive month summation for every month.")
    args = p.parse_args(argv)

    repo = CsvMonthEntryRepository(args.csv) if args.csv else None
    try:
        table = load_table(repo)
    except DataIntegrityError as e:
        print(f"INVALID: {e}")
        return 1

    lo, hi = table.supported_range()
    print(f"Months: {len(table)}  Years: {lo}..{hi}  AD: {table.first_ad} .. {table.last_ad}")
    print(f"Total days: {table.total_days}")
    print()

    print("Month lengths:")
    hist = Counter(e.days_in_month for e in table)
    for n in sorted(hist):
        print(f"  {n} days: {hist[n]}")
    print()

    print("Year lengths:")
    years = Counter(table.days_in_year(Y) for Y in range(lo, hi + 1))
    for n in sorted(years):
        print(f"  {n} days: {years[n]}")

    if args.cross_check:
        eng = CalendarEngine(table)
        bad = 0
        for e, off in zip(table.entries, table.offsets):
            if eng.naive_offset(e.year_bs, e.month_bs, 1) != off:
                bad += 1
                print(f"MISMATCH {e.year_bs}-{e.month_bs:02d}: offset {off}")
        print()
        print("Offsets agree with naive summation." if bad == 0 else f"Offset mismatches: {bad}")
        if bad:
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
