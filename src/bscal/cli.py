from __future__ import annotations

import argparse
import logging
import sys
import re
import importlib
import inspect

from bscal.core.errors import BscalError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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
    import bscal
    from bscal.core.time import parse_ad

    p = argparse.ArgumentParser(prog="bscal day", description="AD -> BS day label")
    p.add_argument("date", help="AD date YYYY-MM-DD")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = bscal.day_info(parse_ad(args.date), attributes=tuple(args.attr))
    print(f"{info.ad_date.isoformat()} AD = {info.bs} BS")
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import bscal

    p = argparse.ArgumentParser(prog="bscal today", description="Today's BS date")
    p.add_argument("--tz", default=None, help="IANA timezone (default: $BSCAL_TIMEZONE or Asia/Kathmandu)")
    p.add_argument("--numerals", choices=("ascii", "local"), default="ascii")
    args = p.parse_args(argv)

    t = bscal.today(args.tz)
    print(bscal.format_dual(t.year, t.month, t.day, style="long", numerals=args.numerals))
    return 0


def cmd_to_ad(argv: list[str]) -> int:
    import bscal
    from bscal.core.time import parse_bs

    p = argparse.ArgumentParser(prog="bscal to-ad", description="BS -> AD")
    p.add_argument("date", help="BS date YYYY-MM-DD (ASCII or Devanagari digits)")
    args = p.parse_args(argv)

    t = parse_bs(args.date)
    print(bscal.bs_to_ad(t.year, t.month, t.day).isoformat())
    return 0


def cmd_to_bs(argv: list[str]) -> int:
    import bscal
    from bscal.core.time import parse_ad

    p = argparse.ArgumentParser(prog="bscal to-bs", description="AD -> BS")
    p.add_argument("date", help="AD date YYYY-MM-DD")
    p.add_argument("--style", choices=("short", "long", "local"), default="short")
    p.add_argument("--numerals", choices=("ascii", "local"), default="ascii")
    args = p.parse_args(argv)

    from bscal.formatting.formatter import format_bs

    t = bscal.ad_to_bs(parse_ad(args.date))
    print(format_bs(t.year, t.month, t.day, args.style, numerals=args.numerals))
    return 0


def cmd_format(argv: list[str]) -> int:
    import bscal
    from bscal.core.time import parse_bs
    from bscal.formatting.formatter import format_bs

    p = argparse.ArgumentParser(prog="bscal format", description="Format a BS date")
    p.add_argument("date", help="BS date YYYY-MM-DD")
    p.add_argument("--style", choices=("short", "long", "local"), default="short")
    p.add_argument("--pattern", default=None, help="Custom pattern, e.g. 'D MMMM, YYYY'")
    p.add_argument("--numerals", choices=("ascii", "local"), default="ascii")
    p.add_argument("--dual", action="store_true", help="Append the AD date")
    p.add_argument("--separator", default=" ")
    args = p.parse_args(argv)

    t = parse_bs(args.date)
    bscal.bs_to_ad(t.year, t.month, t.day)  # rejects invalid dates

    if args.dual:
        out = bscal.format_dual(t.year, t.month, t.day, style=args.style,
                                numerals=args.numerals, separator=args.separator)
    elif args.pattern:
        out = bscal.format_custom(t.year, t.month, t.day, args.pattern, numerals=args.numerals)
    else:
        out = format_bs(t.year, t.month, t.day, args.style, numerals=args.numerals)
    print(out)
    return 0


def cmd_add(argv: list[str]) -> int:
    import bscal
    from bscal.core.time import parse_bs

    p = argparse.ArgumentParser(prog="bscal add", description="Add days (or months) to a BS date")
    p.add_argument("date", help="BS date YYYY-MM-DD")
    p.add_argument("n", type=int, help="signed count")
    p.add_argument("--months", action="store_true", help="n counts BS months instead of days")
    args = p.parse_args(argv)

    t = parse_bs(args.date)
    out = bscal.add_months(t, args.n) if args.months else bscal.add_days(t, args.n)
    print(out)
    return 0


def cmd_diff(argv: list[str]) -> int:
    import bscal
    from bscal.core.time import parse_bs

    p = argparse.ArgumentParser(prog="bscal diff", description="Signed days from date1 to date2 (BS)")
    p.add_argument("date1")
    p.add_argument("date2")
    args = p.parse_args(argv)

    print(bscal.diff(parse_bs(args.date1), parse_bs(args.date2)))
    return 0


def cmd_info(argv: list[str]) -> int:
    import bscal

    argparse.ArgumentParser(prog="bscal info", description="Active calendar table summary").parse_args(argv)
    for k, v in bscal.engine_info().items():
        print(f"{k}: {v}")
    return 0


_COMMANDS = {
    "today": cmd_today,
    "to-ad": cmd_to_ad,
    "to-bs": cmd_to_bs,
    "format": cmd_format,
    "add": cmd_add,
    "diff": cmd_diff,
    "info": cmd_info,
}


def _dispatch(args: argparse.Namespace, rest: list[str]) -> int:
    if args.cmd == "day":
        day_argv = [args.date]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd in _COMMANDS:
        return _COMMANDS[args.cmd](rest)

    if args.cmd == "pretty-month":
        return _run_module_main("bscal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("bscal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "bscal.diagnostics.round_trip",
            "validate-table": "bscal.diagnostics.validate_table",
            "new-year-scatter": "bscal.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `bscal YYYY-MM-DD ...` is `bscal day ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="bscal", description="Bikram Sambat calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING",
                   choices=("DEBUG", "INFO", "WARNING", "ERROR"), help="logging level (default: WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="AD -> BS day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    # conversions and formatting
    sub.add_parser("today", help="Today's date in BS and AD")
    sub.add_parser("to-ad", help="Convert a BS date to AD")
    sub.add_parser("to-bs", help="Convert an AD date to BS")
    sub.add_parser("format", help="Format a BS date (short/long/local/custom/dual)")
    sub.add_parser("add", help="Add days or months to a BS date")
    sub.add_parser("diff", help="Days between two BS dates")
    sub.add_parser("info", help="Active calendar table summary")

    # diagnostics
    sub.add_parser("pretty-month", help="Print BS/AD month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print BS New Year table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "validate-table", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        return _dispatch(args, rest)
    except (BscalError, ValueError) as e:
        # malformed YYYY-MM-DD arguments surface as ValueError from the parsers
        print(f"error: {e}", file=sys.stderr)
        return 2
    except KeyError as e:
        # unknown --attr name
        print(f"error: {e.args[0] if e.args else e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
