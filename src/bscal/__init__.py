"""bscal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Load the packaged calendar table on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    is_valid_bs_date,
    bs_to_ad,
    ad_to_bs,
    today,
    day_info,
    format_short,
    format_long,
    format_local,
    format_custom,
    format_dual,
    add_days,
    add_months,
    diff,
    compare,
    month_info,
    days_in_month,
    days_in_year,
    months_in_year,
    month_bounds,
    new_year_day,
    prev_month,
    next_month,
    first_day_of_month,
    last_day_of_month,
    supported_range,
    engine_info,
    make_engine,
    get_engine,
    set_engine,
    set_table,
    reload_table,
)
from .attributes.registry import register_attribute, list_attributes
from .core.errors import BscalError, InvalidDateError, OutOfRangeError, DataIntegrityError
from .core.types import BSDate, DayInfo, DualFormatOptions, MonthEntry
from .engines.table import CalendarTable
from .formatting.numerals import to_local_numerals, to_ascii_numerals

__all__ = [
    "is_valid_bs_date",
    "bs_to_ad",
    "ad_to_bs",
    "today",
    "day_info",
    "format_short",
    "format_long",
    "format_local",
    "format_custom",
    "format_dual",
    "to_local_numerals",
    "to_ascii_numerals",
    "add_days",
    "add_months",
    "diff",
    "compare",
    "month_info",
    "days_in_month",
    "days_in_year",
    "months_in_year",
    "month_bounds",
    "new_year_day",
    "prev_month",
    "next_month",
    "first_day_of_month",
    "last_day_of_month",
    "supported_range",
    "engine_info",
    "make_engine",
    "get_engine",
    "set_engine",
    "set_table",
    "reload_table",
    "register_attribute",
    "list_attributes",
    "BSDate",
    "DayInfo",
    "DualFormatOptions",
    "MonthEntry",
    "CalendarTable",
    "BscalError",
    "InvalidDateError",
    "OutOfRangeError",
    "DataIntegrityError",
]
