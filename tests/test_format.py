# tests/test_format.py

import pytest

import bscal
from bscal.core.errors import InvalidDateError
from bscal.core.types import DualFormatOptions
from bscal.formatting.formatter import format_bs


def test_short():
    assert bscal.format_short(2080, 1, 15) == "2080-01-15"
    assert bscal.format_short(2080, 1, 5) == "2080-01-05"


def test_long_and_local():
    assert bscal.format_long(2080, 1, 5) == "5 Baisakh 2080"
    assert bscal.format_long(2081, 10, 24) == "24 Magh 2081"
    assert bscal.format_local(2080, 1, 15) == "15 बैशाख 2080"
    assert bscal.format_local(2080, 1, 15, numerals="local") == "१५ बैशाख २०८०"


@pytest.mark.parametrize("y, m, d, pattern, expected", [
    (2080, 1, 5, "MMM DD, YY", "Bai 05, 80"),
    (2080, 1, 5, "DD/MM/YYYY", "05/01/2080"),
    (2080, 1, 5, "MMMM D, YYYY", "Baisakh 5, 2080"),
    (2080, 12, 25, "D MMMM, YYYY (MM/DD)", "25 Chaitra, 2080 (12/25)"),
    (2081, 10, 24, "MMMM", "Magh"),
    (2081, 8, 3, "MMMM M", "Mangsir 8"),
    (2081, 8, 3, "YYYY-MM-DD / YYYY", "2081-08-03 / 2081"),
    (2081, 8, 3, "no tokens here", "no tokens here"),
])
def test_custom(y, m, d, pattern, expected):
    assert bscal.format_custom(y, m, d, pattern) == expected


def test_custom_local_numerals():
    assert bscal.format_custom(2080, 1, 5, "YYYY-MM-DD", numerals="local") == "२०८०-०१-०५"


def test_format_bs_styles():
    assert format_bs(2080, 1, 5, "short") == "2080-01-05"
    assert format_bs(2080, 1, 5, "long") == "5 Baisakh 2080"
    with pytest.raises(ValueError, match="Unknown style"):
        format_bs(2080, 1, 5, "fancy")


def test_bad_numerals():
    with pytest.raises(ValueError):
        bscal.format_short(2080, 1, 5, numerals="roman")


def test_dual_default():
    assert bscal.format_dual(2000, 1, 1) == "2000-01-01 BS (1943-04-14 AD)"
    assert bscal.format_dual(2081, 10, 24) == "2081-10-24 BS (2025-02-06 AD)"


def test_dual_options():
    assert bscal.format_dual(2081, 10, 24, style="long") == "24 Magh 2081 BS (2025-02-06 AD)"
    opts = DualFormatOptions(style="short", numerals="local")
    assert bscal.format_dual(2081, 10, 24, opts) == "२०८१-१०-२४ बि.सं. (2025-02-06 ई.सं.)"
    assert bscal.format_dual(2081, 10, 24, separator="_") == "2081-10-24_BS_(2025-02-06_AD)"


def test_dual_options_validated():
    with pytest.raises(ValueError):
        DualFormatOptions(style="fancy")
    with pytest.raises(ValueError):
        DualFormatOptions(numerals="roman")


def test_dual_rejects_invalid_date():
    with pytest.raises(InvalidDateError):
        bscal.format_dual(2081, 1, 32)


def test_dual_options_and_keywords_conflict():
    with pytest.raises(TypeError, match="not both"):
        bscal.format_dual(2081, 10, 24, DualFormatOptions(), style="long")
