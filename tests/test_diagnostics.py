# tests/test_diagnostics.py

import pytest
from datetime import date

from bscal.diagnostics import new_years_table, pretty_month, round_trip, validate_table
from bscal.reference import loader


def test_new_years_rows():
    rows = new_years_table.rows(2080, 2082)
    assert rows == [
        (2080, date(2023, 4, 14), 365),
        (2081, date(2024, 4, 13), 366),
        (2082, date(2025, 4, 14), rows[2][2]),
    ]
    assert new_years_table.mmdd(date(2024, 4, 13)) == "04-13"


def test_new_years_range_checked():
    with pytest.raises(SystemExit):
        new_years_table.main(["--from-year", "1990", "--to-year", "2000"])


def test_bs_month_grid_starts_on_weekday():
    out = pretty_month.bs_month_calendar(2081, 1)
    lines = out.splitlines()
    # 2024-04-13 is a Saturday: day 1 sits in the last column
    first_row = lines[3]
    assert first_row.endswith(" 1")
    assert first_row.startswith(" " * 36)
    assert lines[4].endswith("04-13")


def test_bs_month_grid_local_numerals():
    out = pretty_month.bs_month_calendar(2081, 1, numerals="local")
    assert "बैशाख" not in out  # title uses the English month name
    assert "Baisakh २०८१" in out
    assert "३१" in out


def test_ad_month_grid():
    out = pretty_month.ad_month_calendar(2024, 4)
    assert out.startswith("AD month  2024-04\n")
    assert "01-01" in out  # 2024-04-13 is 1 Baisakh


def test_round_trip_clean():
    start, end = date(1943, 4, 14), date(2044, 4, 12)
    assert round_trip.roundtrip_test(2000, start, end, 123, max_failures=5) == 0


def test_validate_table_reports_bad_csv(tmp_path, capsys, table):
    p = tmp_path / "gap.csv"
    with p.open("w", encoding="utf-8", newline="") as f:
        loader.write_entries(f, [e for e in table.entries if e.key != (2001, 3)])
    assert validate_table.main(["--csv", str(p)]) == 1
    assert capsys.readouterr().out.startswith("INVALID: Missing entry 2001-3")


def test_rolling_median():
    np = pytest.importorskip("numpy")
    from bscal.diagnostics.new_year_scatter import rolling_median
    y = np.array([1.0, 100.0, 1.0, 1.0, 1.0])
    assert list(rolling_median(np, y, win=3)) == [1.0, 1.0, 1.0, 1.0, 1.0]


def test_new_year_series():
    np = pytest.importorskip("numpy")
    from bscal.diagnostics.new_year_scatter import build_series, month_length_grid
    years, doy = build_series(np, 2080, 2081)
    assert list(years) == [2080, 2081]
    assert list(doy) == [104.0, 104.0]  # 2023-04-14 and 2024-04-13 (leap year)
    grid = month_length_grid(np, 2081, 2081)
    assert grid.shape == (1, 12)
    assert int(grid.sum()) == 366


def test_new_year_scatter_writes_png(tmp_path):
    pytest.importorskip("numpy")
    mpl = pytest.importorskip("matplotlib")
    mpl.use("Agg")
    from bscal.diagnostics import new_year_scatter
    outbase = str(tmp_path / "ny")
    assert new_year_scatter.main(["--start-year", "2070", "--end-year", "2090",
                                  "--show-trend", "--outbase", outbase]) == 0
    assert (tmp_path / "ny.png").is_file()
