"""
bscal.engines.calendar
----------------------
The orchestrator. Binds a frozen CalendarTable to the validator and the two
day-count conversions, and exposes the month-level helpers built on them.

All methods are pure reads of the table; an engine is safe to share
between threads.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from ..core.errors import DataIntegrityError, InvalidDateError, OutOfRangeError
from ..core.time import today_ad
from ..core.types import EPOCH_AD, MAX_YEAR, MIN_YEAR, BSDate, DayInfo, MonthEntry
from .table import CalendarTable


def _invalid_reason(table: CalendarTable, year: int, month: int, day: int) -> Optional[str]:
    """None when the date is legal, else a short human reason."""
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (year, month, day)):
        return "fields must be integers"
    if not (MIN_YEAR <= year <= MAX_YEAR):
        return f"year must be {MIN_YEAR}-{MAX_YEAR}"
    if not (1 <= month <= 12):
        return "month must be 1-12"
    if day < 1:
        return "day must be >= 1"
    e = table.entry(year, month)
    if e is None:
        return f"no calendar data for {year}-{month:02d}"
    if day > e.days_in_month:
        return f"{year}-{month:02d} has {e.days_in_month} days"
    return None


class CalendarEngine:
    """
    Translates BS dates to AD dates and back against one table snapshot.
    """
    def __init__(self, table: CalendarTable):
        self.table = table

    def info(self) -> Dict[str, Any]:
        lo, hi = self.table.supported_range()
        return {
            "epoch_ad": EPOCH_AD.isoformat(),
            "min_year": lo,
            "max_year": hi,
            "months": len(self.table),
            "first_ad": self.table.first_ad.isoformat(),
            "last_ad": self.table.last_ad.isoformat(),
        }

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def is_valid(self, year: int, month: int, day: int) -> bool:
        return _invalid_reason(self.table, year, month, day) is None

    def _require_valid(self, year: int, month: int, day: int) -> None:
        reason = _invalid_reason(self.table, year, month, day)
        if reason is not None:
            raise InvalidDateError(f"Invalid BS date: {year}-{month}-{day} ({reason})")

    # ---------------------------------------------------------
    # Forward: BS to AD
    # ---------------------------------------------------------

    def to_ad(self, year: int, month: int, day: int) -> date:
        self._require_valid(year, month, day)
        offset = self.table.offset_of(year, month)
        if offset is None:
            # validator already saw the entry; only a corrupted table gets here
            raise DataIntegrityError(f"Missing calendar entry {year}-{month:02d}")
        return EPOCH_AD + timedelta(days=offset + day - 1)

    def naive_offset(self, year: int, month: int, day: int) -> int:
        """
        Reference summation: days in every month from the epoch month up to
        (not including) the target month, plus day - 1. Linear in elapsed
        months; used to cross-check the precomputed offsets.
        """
        self._require_valid(year, month, day)
        total = 0
        for e in self.table:
            if (e.year_bs, e.month_bs) >= (year, month):
                break
            total += e.days_in_month
        return total + day - 1

    # ---------------------------------------------------------
    # Inverse: AD to BS
    # ---------------------------------------------------------

    def from_ad(self, d: date) -> BSDate:
        if isinstance(d, datetime):
            d = d.date()
        if not (self.table.first_ad <= d <= self.table.last_ad):
            raise OutOfRangeError(
                f"AD date {d.isoformat()} is out of supported range. "
                f"Supported range: {self.table.first_ad.isoformat()} to {self.table.last_ad.isoformat()}"
            )
        e = self.table.entry_containing(d)
        if e is None:
            raise DataIntegrityError(f"No calendar entry covers AD date {d.isoformat()}")
        return BSDate(e.year_bs, e.month_bs, (d - e.start_ad).days + 1)

    # ---------------------------------------------------------
    # Month-level helpers
    # ---------------------------------------------------------

    def month_entry(self, year: int, month: int) -> MonthEntry:
        e = self.table.entry(year, month)
        if e is None:
            raise InvalidDateError(f"Invalid BS month: {year}-{month}")
        return e

    def days_in_month(self, year: int, month: int) -> int:
        return self.month_entry(year, month).days_in_month

    def days_in_year(self, year: int) -> int:
        if not self.table.year_entries(year):
            raise InvalidDateError(f"Invalid BS year: {year}")
        return self.table.days_in_year(year)

    def month_bounds(self, year: int, month: int) -> Dict[str, Any]:
        e = self.month_entry(year, month)
        return {
            "Y": year,
            "M": month,
            "days": e.days_in_month,
            "first_date": e.start_ad,
            "last_date": e.end_ad,
        }

    def new_year_day(self, year: int) -> date:
        """AD date of Baisakh 1 of the given BS year."""
        return self.month_entry(year, 1).start_ad

    def prev_month(self, year: int, month: int) -> Dict[str, int]:
        self.month_entry(year, month)
        y2, m2 = (year - 1, 12) if month == 1 else (year, month - 1)
        if self.table.entry(y2, m2) is None:
            raise OutOfRangeError(f"No month before {year}-{month:02d} in the supported range")
        return {"Y": y2, "M": m2}

    def next_month(self, year: int, month: int) -> Dict[str, int]:
        self.month_entry(year, month)
        y2, m2 = (year + 1, 1) if month == 12 else (year, month + 1)
        if self.table.entry(y2, m2) is None:
            raise OutOfRangeError(f"No month after {year}-{month:02d} in the supported range")
        return {"Y": y2, "M": m2}

    # ---------------------------------------------------------
    # High-level API methods (used by api.py / CLI)
    # ---------------------------------------------------------

    def day_info(self, d: date) -> DayInfo:
        if isinstance(d, datetime):
            d = d.date()
        return DayInfo(ad_date=d, bs=self.from_ad(d), weekday=(d.weekday() + 1) % 7)

    def today(self, tz: Optional[str] = None) -> BSDate:
        return self.from_ad(today_ad(tz))
