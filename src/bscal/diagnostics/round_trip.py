from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import bscal
from bscal.core.time import parse_ad


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        t = bscal.ad_to_bs(d0)
        back = bscal.bs_to_ad(t.year, t.month, t.day)
        if back != d0:
            failures += 1
            print("\nFAIL (ad -> bs -> ad)")
            print("d0:", d0)
            print("bs:", t)
            print("back:", back)
            if failures >= max_failures:
                return failures

        # BS ordering must agree with AD ordering
        d1 = random_date(start, end)
        t1 = bscal.ad_to_bs(d1)
        expected = (d0 > d1) - (d0 < d1)
        if bscal.compare(t, t1) != expected:
            failures += 1
            print("\nFAIL (compare)")
            print("d0, d1:", d0, d1)
            print("bs:", t, t1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    lo_ad = bscal.get_engine().table.first_ad
    hi_ad = bscal.get_engine().table.last_ad

    p = argparse.ArgumentParser(description="Random round-trip tests: AD -> BS -> AD.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=str, default=lo_ad.isoformat(), help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default=hi_ad.isoformat(), help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_ad(args.start)
    end = parse_ad(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Testing {args.N} dates in {start} .. {end} ...")
    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
