"""Diagnostics package.

- pretty_month, new_years_table, round_trip, validate_table: stdlib only
- new_year_scatter: optional (requires the diagnostics extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "validate_table", "new_year_scatter"]
