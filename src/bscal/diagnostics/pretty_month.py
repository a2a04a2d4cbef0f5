from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import bscal


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def weeks_of(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay cells out in Sunday-first weeks starting at first's weekday."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "")] * ((first.weekday() + 1) % 7)
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk += [cell("", "")] * (7 - len(wk))
        weeks.append(wk)
    return weeks


def render_grid(title: str, weeks: list[list[tuple[str, str]]]) -> str:
    lines = [title, dow_header(), "-" * len(dow_header())]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def bs_month_calendar(Y: int, M: int, *, numerals: str = "ascii") -> str:
    b = bscal.month_bounds(Y, M)
    d0, d1 = b["first_date"], b["last_date"]

    cells = []
    d = d0
    while d <= d1:
        t = bscal.ad_to_bs(d)
        top = bscal.format_custom(t.year, t.month, t.day, "D", numerals=numerals).rjust(2)
        cells.append(cell(top, f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    title = f"BS month  {bscal.format_custom(Y, M, 1, 'MMMM YYYY', numerals=numerals)}   ({d0} .. {d1})"
    return render_grid(title, weeks_of(d0, cells))


def ad_month_calendar(gy: int, gm: int) -> str:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        t = bscal.ad_to_bs(d)
        cells.append(cell(f"{d.day:2d}", f"{t.month:02d}-{t.day:02d}"))
        d += timedelta(days=1)

    return render_grid(f"AD month  {gy}-{gm:02d}", weeks_of(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a BS-month calendar and/or an AD-month calendar with paired labels."
    )
    p.add_argument("--bs", nargs=2, type=int, metavar=("Y", "M"),
                   help="BS month to print: Y M (e.g. 2081 1)")
    p.add_argument("--ad", nargs=2, type=int, metavar=("GY", "GM"),
                   help="AD month to print: GY GM (e.g. 2024 4)")
    p.add_argument("--numerals", choices=("ascii", "local"), default="ascii")
    args = p.parse_args(argv)

    if not args.bs and not args.ad:
        # current month on both calendars
        t = bscal.today()
        print(bs_month_calendar(t.year, t.month, numerals=args.numerals))
        g = bscal.bs_to_ad(t.year, t.month, t.day)
        print(ad_month_calendar(g.year, g.month))
        return 0

    if args.bs:
        Y, M = args.bs
        print(bs_month_calendar(Y, M, numerals=args.numerals))

    if args.ad:
        gy, gm = args.ad
        print(ad_month_calendar(gy, gm))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
