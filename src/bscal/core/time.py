from __future__ import annotations
import os
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from .types import BSDate

DEFAULT_TIMEZONE = "Asia/Kathmandu"


def timezone_name() -> str:
    """Timezone used for 'today': $BSCAL_TIMEZONE, else Nepal Standard Time."""
    return os.environ.get("BSCAL_TIMEZONE", "").strip() or DEFAULT_TIMEZONE


def today_ad(tz: Optional[str] = None) -> date:
    """Current civil date in the configured timezone."""
    return datetime.now(ZoneInfo(tz or timezone_name())).date()


def parse_ad(s: str) -> date:
    """Parse an ISO YYYY-MM-DD Gregorian date."""
    y, m, d = map(int, s.strip().split("-"))
    return date(y, m, d)


def parse_bs(s: str) -> BSDate:
    """
    Parse YYYY-MM-DD into a BSDate. Devanagari digits are accepted.
    The result is not validated against the table.
    """
    from ..formatting.numerals import to_ascii_numerals

    parts = to_ascii_numerals(s.strip()).split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Expected YYYY-MM-DD, got {s!r}")
    y, m, d = (int(p) for p in parts)
    return BSDate(y, m, d)


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1
