# tests/test_loader.py

import logging
import pytest
from datetime import date

import bscal
from bscal.core.errors import DataIntegrityError, OutOfRangeError
from bscal.engines.table import CalendarTable
from bscal.reference import loader


def _write_csv(path, entries):
    with path.open("w", encoding="utf-8", newline="") as f:
        loader.write_entries(f, entries)
    return path


def test_packaged_repository_loads():
    entries = loader.PackagedMonthEntryRepository().fetch_all_month_entries()
    assert len(entries) == 1212
    assert entries[0].key == (2000, 1)
    assert entries[-1].key == (2100, 12)


def test_csv_repository_round_trip(tmp_path, table):
    p = _write_csv(tmp_path / "bs.csv", table.entries)
    repo = loader.CsvMonthEntryRepository(p)
    assert repo.fetch_all_month_entries() == list(table.entries)
    assert [e.key for e in repo.fetch_range(2081, 2081)] == [(2081, m) for m in range(1, 13)]


def test_bad_row_reports_line(tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text(
        "year_bs,month_bs,days_in_month,start_ad,end_ad\n"
        "2000,1,30,1943-04-14,1943-05-13\n"
        "2000,2,thirty,1943-05-14,1943-06-14\n",
        encoding="utf-8",
    )
    with pytest.raises(DataIntegrityError, match="line 3"):
        loader.CsvMonthEntryRepository(p).fetch_all_month_entries()


def test_missing_columns(tmp_path):
    p = tmp_path / "cols.csv"
    p.write_text("year_bs,month_bs,days_in_month\n2000,1,30\n", encoding="utf-8")
    with pytest.raises(DataIntegrityError, match="missing columns"):
        loader.CsvMonthEntryRepository(p).fetch_all_month_entries()


def test_gap_in_csv_fails_load(tmp_path, table):
    entries = [e for e in table.entries if e.key != (2050, 6)]
    p = _write_csv(tmp_path / "gap.csv", entries)
    with pytest.raises(DataIntegrityError, match="Missing entry 2050-6"):
        loader.load_table(loader.CsvMonthEntryRepository(p))


def test_env_override(tmp_path, monkeypatch, table):
    p = _write_csv(tmp_path / "override.csv", table.entries[:24])
    monkeypatch.setenv("BSCAL_CALENDAR_TABLE", str(p))
    repo = loader.default_repository()
    assert isinstance(repo, loader.CsvMonthEntryRepository)
    assert repo.path == p
    assert len(loader.load_table()) == 24


def test_env_override_missing_file_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("BSCAL_CALENDAR_TABLE", str(tmp_path / "nope.csv"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    with caplog.at_level(logging.WARNING, logger="bscal.reference.loader"):
        repo = loader.default_repository()
    assert isinstance(repo, loader.PackagedMonthEntryRepository)
    assert "not a file" in caplog.text


def test_user_cache(tmp_path, monkeypatch, table):
    monkeypatch.delenv("BSCAL_CALENDAR_TABLE", raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
    cp = loader.cache_path()
    assert cp == tmp_path / "bscal" / "bs_calendar.csv"
    cp.parent.mkdir()
    _write_csv(cp, table.entries)
    repo = loader.default_repository()
    assert isinstance(repo, loader.CsvMonthEntryRepository)
    assert repo.path == cp


def test_load_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="bscal.reference.loader"):
        loader.load_table(loader.PackagedMonthEntryRepository())
    assert "1212 months" in caplog.text


def test_reload_swaps_whole_snapshot(restore_engine):
    old = restore_engine
    synthetic = CalendarTable.from_year_lengths({2000: [30] * 12})
    repo = loader.InMemoryMonthEntryRepository(synthetic.entries)

    new = bscal.reload_table(repo)
    assert bscal.get_engine() is new
    assert bscal.supported_range() == (2000, 2000)
    assert bscal.bs_to_ad(2000, 12, 30) == date(1944, 4, 7)
    with pytest.raises(OutOfRangeError):
        bscal.ad_to_bs(date(1944, 4, 8))

    # an engine held across the swap keeps answering from its own table
    assert old.to_ad(2081, 1, 1) == date(2024, 4, 13)


def test_set_table(restore_engine):
    bscal.set_table(CalendarTable.from_year_lengths({2000: [32] * 12}))
    assert bscal.days_in_month(2000, 7) == 32
    assert not bscal.is_valid_bs_date(2001, 1, 1)
