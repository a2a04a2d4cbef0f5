from __future__ import annotations
from typing import Optional

from bscal.engines.calendar import CalendarEngine
from bscal.reference.loader import MonthEntryRepository, load_table

def build_engine(repo: Optional[MonthEntryRepository] = None) -> CalendarEngine:
    return CalendarEngine(load_table(repo))
