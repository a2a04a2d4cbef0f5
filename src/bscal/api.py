from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes.registry import compute_attributes
from .core.types import BSDate, DayInfo, DualFormatOptions, MonthEntry
from .engines import arithmetic as _arith
from .engines.calendar import CalendarEngine
from .engines.table import CalendarTable
from .formatting import formatter as _fmt
from .reference.loader import MonthEntryRepository, load_table

logger = logging.getLogger(__name__)

# The active snapshot. Replaced by a single assignment, never mutated; every
# call below reads it once, so a concurrent swap is seen as old-or-new.
_engine: Optional[CalendarEngine] = None

def set_engine(eng: CalendarEngine) -> None:
    global _engine
    _engine = eng

def set_table(table: CalendarTable) -> None:
    set_engine(CalendarEngine(table))

def get_engine() -> CalendarEngine:
    eng = _engine
    if eng is None:
        raise RuntimeError("Calendar table not initialized")
    return eng

def reload_table(repo: Optional[MonthEntryRepository] = None) -> CalendarEngine:
    """Build a fresh snapshot from repo (default search order) and swap it in."""
    eng = CalendarEngine(load_table(repo))
    set_engine(eng)
    logger.info("Calendar table snapshot replaced")
    return eng

def make_engine(table: CalendarTable) -> CalendarEngine:
    return CalendarEngine(table)

def engine_info() -> Dict[str, Any]:
    return get_engine().info()

def supported_range() -> Tuple[int, int]:
    return get_engine().table.supported_range()

# ============================================================
# Validation / conversion
# ============================================================

def is_valid_bs_date(year: int, month: int, day: int) -> bool:
    return get_engine().is_valid(year, month, day)

def bs_to_ad(year: int, month: int, day: int) -> date:
    return get_engine().to_ad(year, month, day)

def ad_to_bs(d: date) -> BSDate:
    return get_engine().from_ad(d)

def today(tz: Optional[str] = None) -> BSDate:
    return get_engine().today(tz)

def day_info(d: date, *, attributes: Sequence[str] = ()) -> DayInfo:
    info = get_engine().day_info(d)
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

# ============================================================
# Formatting
# ============================================================

format_short = _fmt.format_short
format_long = _fmt.format_long
format_local = _fmt.format_local
format_custom = _fmt.format_custom

def format_dual(
    year: int,
    month: int,
    day: int,
    options: Optional[DualFormatOptions] = None,
    **kwargs: Any,
) -> str:
    """kwargs (style, numerals, separator) build the options when none are given."""
    if options is None:
        options = DualFormatOptions(**kwargs)
    elif kwargs:
        raise TypeError(f"format_dual() takes options or keyword overrides, not both: {sorted(kwargs)}")
    return _fmt.format_dual(get_engine(), year, month, day, options)

# ============================================================
# Arithmetic
# ============================================================

def add_days(d: BSDate, n: int) -> BSDate:
    return _arith.add_days(get_engine(), d, n)

def add_months(d: BSDate, n: int) -> BSDate:
    return _arith.add_months(get_engine(), d, n)

def diff(d1: BSDate, d2: BSDate) -> int:
    return _arith.diff(get_engine(), d1, d2)

compare = _arith.compare

# ============================================================
# Month-level API
# ============================================================

def month_info(year: int, month: int) -> MonthEntry:
    return get_engine().month_entry(year, month)

def days_in_month(year: int, month: int) -> int:
    return get_engine().days_in_month(year, month)

def days_in_year(year: int) -> int:
    return get_engine().days_in_year(year)

def months_in_year(year: int) -> List[Dict[str, Any]]:
    eng = get_engine()
    out = []
    for M in range(1, 13):
        e = eng.month_entry(year, M)
        out.append({
            "Y": year, "M": M,
            "name_en": e.month_name_en, "name_np": e.month_name_local,
            "days": e.days_in_month, "first_date": e.start_ad, "last_date": e.end_ad,
        })
    return out

def month_bounds(year: int, month: int) -> Dict[str, Any]:
    return get_engine().month_bounds(year, month)

def new_year_day(year: int) -> date:
    return get_engine().new_year_day(year)

def prev_month(year: int, month: int) -> Dict[str, int]:
    return get_engine().prev_month(year, month)

def next_month(year: int, month: int) -> Dict[str, int]:
    return get_engine().next_month(year, month)

def first_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["first_date"]

def last_day_of_month(year: int, month: int) -> date:
    return month_bounds(year, month)["last_date"]
