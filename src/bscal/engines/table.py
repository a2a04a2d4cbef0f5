"""
bscal.engines.table
-------------------
Frozen in-memory arena of MonthEntry rows, indexed two ways:

- by (year_bs, month_bs) key, for exact lookup;
- by start_ad ordinal, for binary search of the month containing an AD date.

Every entry also carries a precomputed cumulative offset (days from the
epoch to the first day of that month), so BS -> AD conversion is a key
lookup plus one addition.

The table is validated once at construction. Nothing here mutates after
__post_init__; a refresh means building a new table.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from ..core.errors import DataIntegrityError
from ..core.types import (
    EPOCH_AD,
    EPOCH_BS,
    MAX_MONTH_DAYS,
    MAX_YEAR,
    MIN_MONTH_DAYS,
    MIN_YEAR,
    MonthEntry,
)


def _check_entry(e: MonthEntry) -> None:
    if not (MIN_YEAR <= e.year_bs <= MAX_YEAR):
        raise DataIntegrityError(f"year_bs out of range [{MIN_YEAR}, {MAX_YEAR}]: {e.year_bs}")
    if not (1 <= e.month_bs <= 12):
        raise DataIntegrityError(f"month_bs out of range [1, 12]: {e.year_bs}-{e.month_bs}")
    if not (MIN_MONTH_DAYS <= e.days_in_month <= MAX_MONTH_DAYS):
        raise DataIntegrityError(
            f"days_in_month out of range [{MIN_MONTH_DAYS}, {MAX_MONTH_DAYS}] "
            f"for {e.year_bs}-{e.month_bs}: {e.days_in_month}"
        )
    if e.end_ad != e.start_ad + timedelta(days=e.days_in_month - 1):
        raise DataIntegrityError(
            f"{e.year_bs}-{e.month_bs}: end_ad {e.end_ad} does not match "
            f"start_ad {e.start_ad} + {e.days_in_month - 1} days"
        )


@dataclass(frozen=True)
class CalendarTable:
    """
    Immutable lookup structure over contiguous BS months.

    Build with CalendarTable.from_entries(...) or CalendarTable.from_year_lengths(...).
    """
    entries: Tuple[MonthEntry, ...]
    # parallel to entries
    starts: Tuple[int, ...] = field(init=False, repr=False)
    offsets: Tuple[int, ...] = field(init=False, repr=False)
    _index: Dict[Tuple[int, int], int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        if not self.entries:
            raise DataIntegrityError("Calendar table is empty")

        first = self.entries[0]
        if (first.year_bs, first.month_bs) != EPOCH_BS[:2] or first.start_ad != EPOCH_AD:
            raise DataIntegrityError(
                f"Table must start at {EPOCH_BS[0]}-{EPOCH_BS[1]:02d} BS = {EPOCH_AD} AD, "
                f"got {first.year_bs}-{first.month_bs:02d} starting {first.start_ad}"
            )

        index: Dict[Tuple[int, int], int] = {}
        offsets = []
        running = 0
        prev: Optional[MonthEntry] = None
        for i, e in enumerate(self.entries):
            _check_entry(e)
            if e.key in index:
                raise DataIntegrityError(f"Duplicate entry for {e.year_bs}-{e.month_bs}")
            if prev is not None:
                expected = (prev.year_bs + 1, 1) if prev.month_bs == 12 else (prev.year_bs, prev.month_bs + 1)
                if e.key != expected:
                    raise DataIntegrityError(
                        f"Missing entry {expected[0]}-{expected[1]} "
                        f"(found {e.year_bs}-{e.month_bs} after {prev.year_bs}-{prev.month_bs})"
                    )
                if e.start_ad != prev.end_ad + timedelta(days=1):
                    raise DataIntegrityError(
                        f"{e.year_bs}-{e.month_bs} starts {e.start_ad}, "
                        f"expected {prev.end_ad + timedelta(days=1)} (day after previous month)"
                    )
            index[e.key] = i
            offsets.append(running)
            running += e.days_in_month
            prev = e

        if prev.month_bs != 12:
            raise DataIntegrityError(
                f"Table must end on a complete year, last entry is {prev.year_bs}-{prev.month_bs}"
            )

        # Offsets are a running sum of month lengths; contiguity makes them
        # equal to start_ad - epoch for every entry.
        starts = tuple(e.start_ad.toordinal() for e in self.entries)

        object.__setattr__(self, "starts", starts)
        object.__setattr__(self, "offsets", tuple(offsets))
        object.__setattr__(self, "_index", index)

    # ---------------------------------------------------------
    # Builders
    # ---------------------------------------------------------

    @classmethod
    def from_entries(cls, entries: Iterable[MonthEntry]) -> "CalendarTable":
        """Sort by (year, month) and freeze. Gaps and overlaps are rejected."""
        return cls(tuple(sorted(entries, key=lambda e: e.key)))

    @classmethod
    def from_year_lengths(cls, years: Mapping[int, Sequence[int]]) -> "CalendarTable":
        """
        Build from {year_bs: [12 month lengths]}, laying months end to end
        from the epoch AD date.
        """
        out = []
        cur = EPOCH_AD
        for y in sorted(years):
            lengths = years[y]
            if len(lengths) != 12:
                raise DataIntegrityError(f"Year {y} must list 12 month lengths, got {len(lengths)}")
            for m, n in enumerate(lengths, start=1):
                end = cur + timedelta(days=n - 1)
                out.append(MonthEntry(y, m, n, cur, end))
                cur = end + timedelta(days=1)
        return cls(tuple(out))

    # ---------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[MonthEntry]:
        return iter(self.entries)

    def index_of(self, year_bs: int, month_bs: int) -> Optional[int]:
        return self._index.get((year_bs, month_bs))

    def entry(self, year_bs: int, month_bs: int) -> Optional[MonthEntry]:
        i = self._index.get((year_bs, month_bs))
        return None if i is None else self.entries[i]

    def entry_containing(self, d: date) -> Optional[MonthEntry]:
        i = self.index_containing(d)
        return None if i is None else self.entries[i]

    def index_containing(self, d: date) -> Optional[int]:
        o = d.toordinal()
        i = bisect_right(self.starts, o) - 1
        if i < 0 or o > self.entries[i].end_ad.toordinal():
            return None
        return i

    def offset_of(self, year_bs: int, month_bs: int) -> Optional[int]:
        """Days from the epoch to day 1 of the given month."""
        i = self._index.get((year_bs, month_bs))
        return None if i is None else self.offsets[i]

    def supported_range(self) -> Tuple[int, int]:
        return (self.entries[0].year_bs, self.entries[-1].year_bs)

    @property
    def first_ad(self) -> date:
        return self.entries[0].start_ad

    @property
    def last_ad(self) -> date:
        return self.entries[-1].end_ad

    @property
    def total_days(self) -> int:
        return self.offsets[-1] + self.entries[-1].days_in_month

    def year_entries(self, year_bs: int) -> Tuple[MonthEntry, ...]:
        return tuple(self.entries[self._index[(year_bs, m)]] for m in range(1, 13) if (year_bs, m) in self._index)

    def days_in_year(self, year_bs: int) -> int:
        return sum(e.days_in_month for e in self.year_entries(year_bs))
