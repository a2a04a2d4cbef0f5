"""
bscal.engines.arithmetic
------------------------
Date arithmetic on BS dates. Day counts always go through the AD conversion;
irregular month lengths are never re-derived here.
"""

from __future__ import annotations

from datetime import timedelta

from ..core.errors import OutOfRangeError
from ..core.types import BSDate
from .calendar import CalendarEngine


def add_days(eng: CalendarEngine, d: BSDate, n: int) -> BSDate:
    """Shift d by n days (signed)."""
    ad = eng.to_ad(d.year, d.month, d.day)
    try:
        shifted = ad + timedelta(days=n)
    except OverflowError as e:
        raise OutOfRangeError(f"{d} shifted by {n} days leaves the supported range") from e
    return eng.from_ad(shifted)


def diff(eng: CalendarEngine, d1: BSDate, d2: BSDate) -> int:
    """Signed whole days d2 - d1."""
    return (eng.to_ad(d2.year, d2.month, d2.day) - eng.to_ad(d1.year, d1.month, d1.day)).days


def compare(d1: BSDate, d2: BSDate) -> int:
    """
    -1, 0 or 1 by (year, month, day). Needs no table: BS months never wrap
    within a year, so field order is chronological order.
    """
    a, b = d1.as_tuple(), d2.as_tuple()
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def add_months(eng: CalendarEngine, d: BSDate, n: int) -> BSDate:
    """
    Step n whole BS months keeping the day number. The result must exist:
    e.g. day 32 moved into a 31-day month raises InvalidDateError.
    """
    eng.to_ad(d.year, d.month, d.day)  # validates d
    k = d.year * 12 + (d.month - 1) + n
    y, m = divmod(k, 12)
    if eng.table.entry(y, m + 1) is None:
        raise OutOfRangeError(f"{d} shifted by {n} months leaves the supported range")
    eng.to_ad(y, m + 1, d.day)  # day must exist in the target month
    return BSDate(y, m + 1, d.day)
