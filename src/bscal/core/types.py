from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

# 2000-01-01 BS == 1943-04-14 AD
EPOCH_BS = (2000, 1, 1)
EPOCH_AD = date(1943, 4, 14)

MIN_YEAR = 2000
MAX_YEAR = 2100
MIN_MONTH_DAYS = 29
MAX_MONTH_DAYS = 32

@dataclass(frozen=True)
class MonthEntry:
    """One row of the calendar table: a BS month and the AD interval it covers."""
    year_bs: int
    month_bs: int
    days_in_month: int
    start_ad: date
    end_ad: date

    @property
    def key(self) -> tuple[int, int]:
        return (self.year_bs, self.month_bs)

    @property
    def month_name_en(self) -> str:
        from ..formatting.names import month_name
        return month_name(self.month_bs)

    @property
    def month_name_local(self) -> str:
        from ..formatting.names import month_name
        return month_name(self.month_bs, local=True)

@dataclass(frozen=True, order=True)
class BSDate:
    """
    Bikram Sambat date value. Field order makes the dataclass ordering
    lexicographic on (year, month, day).

    Validity is not asserted here; ask the engine.
    """
    year: int
    month: int
    day: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

@dataclass(frozen=True)
class DayInfo:
    ad_date: date
    bs: BSDate
    weekday: int  # 0=Sunday..6=Saturday
    attributes: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class DualFormatOptions:
    style: Literal["short", "long", "local"] = "short"
    numerals: Literal["ascii", "local"] = "ascii"
    separator: str = " "

    def __post_init__(self) -> None:
        if self.style not in ("short", "long", "local"):
            raise ValueError("style must be 'short', 'long' or 'local'")
        if self.numerals not in ("ascii", "local"):
            raise ValueError("numerals must be 'ascii' or 'local'")
