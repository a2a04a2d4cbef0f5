"""
bscal.reference.loader

Reference data for the BS calendar table.

The engine never decides month lengths; it accepts them from a repository
and freezes them into a CalendarTable. This module holds the repository
interface, two implementations, and the default search order for the CSV
snapshot:

  1) BSCAL_CALENDAR_TABLE environment variable (path to CSV)
  2) user cache (~/.cache/bscal/bs_calendar.csv or $XDG_CACHE_HOME/bscal/...)
  3) packaged data (bscal.reference.data/bs_calendar.csv)

Expected CSV columns:
  year_bs, month_bs, days_in_month, start_ad, end_ad
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from datetime import date
from pathlib import Path
from typing import IO, Iterable, List, Optional, Protocol, Sequence

from ..core.errors import DataIntegrityError
from ..core.types import MonthEntry
from ..engines.table import CalendarTable

logger = logging.getLogger(__name__)

CSV_NAME = "bs_calendar.csv"
CSV_COLUMNS = ("year_bs", "month_bs", "days_in_month", "start_ad", "end_ad")


class MonthEntryRepository(Protocol):
    def fetch_all_month_entries(self) -> List[MonthEntry]:
        """All entries ordered by (year_bs, month_bs)."""
        ...

    def fetch_range(self, min_year: int, max_year: int) -> List[MonthEntry]:
        ...


def read_entries(f: IO[str]) -> List[MonthEntry]:
    reader = csv.DictReader(f)
    missing = [c for c in CSV_COLUMNS if c not in (reader.fieldnames or ())]
    if missing:
        raise DataIntegrityError(f"Calendar CSV is missing columns: {missing}")
    out: List[MonthEntry] = []
    for lineno, r in enumerate(reader, start=2):
        try:
            out.append(MonthEntry(
                year_bs=int(r["year_bs"]),
                month_bs=int(r["month_bs"]),
                days_in_month=int(r["days_in_month"]),
                start_ad=date.fromisoformat(r["start_ad"].strip()),
                end_ad=date.fromisoformat(r["end_ad"].strip()),
            ))
        except (TypeError, ValueError) as e:
            raise DataIntegrityError(f"Bad calendar CSV row at line {lineno}: {e}") from e
    return out


def write_entries(f: IO[str], entries: Iterable[MonthEntry]) -> None:
    w = csv.writer(f, lineterminator="\n")
    w.writerow(CSV_COLUMNS)
    for e in entries:
        w.writerow([e.year_bs, e.month_bs, e.days_in_month, e.start_ad.isoformat(), e.end_ad.isoformat()])


class InMemoryMonthEntryRepository:
    def __init__(self, entries: Sequence[MonthEntry]):
        self._entries = sorted(entries, key=lambda e: e.key)

    def fetch_all_month_entries(self) -> List[MonthEntry]:
        return list(self._entries)

    def fetch_range(self, min_year: int, max_year: int) -> List[MonthEntry]:
        return [e for e in self._entries if min_year <= e.year_bs <= max_year]


class CsvMonthEntryRepository:
    def __init__(self, path: Path):
        self.path = Path(path)

    def fetch_all_month_entries(self) -> List[MonthEntry]:
        with self.path.open("r", encoding="utf-8", newline="") as f:
            return sorted(read_entries(f), key=lambda e: e.key)

    def fetch_range(self, min_year: int, max_year: int) -> List[MonthEntry]:
        return [e for e in self.fetch_all_month_entries() if min_year <= e.year_bs <= max_year]


class PackagedMonthEntryRepository:
    """The snapshot shipped inside the wheel."""

    def fetch_all_month_entries(self) -> List[MonthEntry]:
        pkg = importlib.import_module("bscal.reference.data")
        path = importlib.resources.files(pkg).joinpath(CSV_NAME)
        with path.open("r", encoding="utf-8", newline="") as f:
            return sorted(read_entries(f), key=lambda e: e.key)

    def fetch_range(self, min_year: int, max_year: int) -> List[MonthEntry]:
        return [e for e in self.fetch_all_month_entries() if min_year <= e.year_bs <= max_year]


def cache_path() -> Path:
    xdg = os.environ.get("XDG_CACHE_HOME", "").strip()
    cache_dir = (Path(xdg).expanduser() / "bscal") if xdg else (Path.home() / ".cache" / "bscal")
    return cache_dir / CSV_NAME


def default_repository() -> MonthEntryRepository:
    """Pick the first available source in search order."""
    # 1) explicit override
    p = os.environ.get("BSCAL_CALENDAR_TABLE", "").strip()
    if p:
        path = Path(p).expanduser()
        if path.is_file():
            logger.info("Using calendar table from BSCAL_CALENDAR_TABLE=%s", path)
            return CsvMonthEntryRepository(path)
        logger.warning("BSCAL_CALENDAR_TABLE=%s is not a file; falling back", path)

    # 2) user cache
    cp = cache_path()
    if cp.is_file():
        logger.info("Using cached calendar table %s", cp)
        return CsvMonthEntryRepository(cp)

    # 3) packaged data
    return PackagedMonthEntryRepository()


def load_table(repo: Optional[MonthEntryRepository] = None) -> CalendarTable:
    """Fetch every entry and freeze it into a validated CalendarTable."""
    repo = repo if repo is not None else default_repository()
    entries = repo.fetch_all_month_entries()
    table = CalendarTable.from_entries(entries)
    lo, hi = table.supported_range()
    logger.info(
        "Loaded BS calendar table: %d months, %d..%d BS (%s .. %s AD)",
        len(table), lo, hi, table.first_ad, table.last_ad,
    )
    return table
