from __future__ import annotations
from typing import Any, Dict

from ..core.types import DayInfo
from ..formatting.names import month_name, weekday_name
from .registry import register_attribute

# Nepal's fiscal year begins on 1 Shrawan.
FISCAL_YEAR_START_MONTH = 4

def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Sunday..6=Saturday
    return {
        "weekday": info.weekday,
        "weekday_en": weekday_name(info.weekday),
        "weekday_np": weekday_name(info.weekday, local=True),
    }

def month_names(info: DayInfo) -> Dict[str, Any]:
    m = info.bs.month
    return {"month_name_en": month_name(m), "month_name_np": month_name(m, local=True)}

def fiscal_year(info: DayInfo) -> Dict[str, Any]:
    y = info.bs.year if info.bs.month >= FISCAL_YEAR_START_MONTH else info.bs.year - 1
    return {
        "fiscal_year": f"{y}/{(y + 1) % 100:02d}",
        "fiscal_year_start": y,
    }

def day_of_year(info: DayInfo) -> Dict[str, Any]:
    # 1-based within the BS year; needs the active table for Baisakh 1.
    from .. import api
    start = api.get_engine().new_year_day(info.bs.year)
    return {"day_of_year": (info.ad_date - start).days + 1}

register_attribute("weekday", weekday)
register_attribute("month_name", month_names)
register_attribute("fiscal_year", fiscal_year)
register_attribute("day_of_year", day_of_year)
