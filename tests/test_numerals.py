# tests/test_numerals.py

import pytest
import random

from bscal.core.time import parse_ad, parse_bs
from bscal.core.types import BSDate
from bscal.formatting.numerals import apply_numerals, to_ascii_numerals, to_local_numerals
from bscal.formatting.names import month_name, weekday_name


def test_digits_both_ways():
    assert to_local_numerals("0123456789") == "०१२३४५६७८९"
    assert to_ascii_numerals("०१२३४५६७८९") == "0123456789"
    assert to_local_numerals(2080) == "२०८०"


def test_non_digits_pass_through():
    assert to_local_numerals("15 Baisakh, 2080") == "१५ Baisakh, २०८०"
    assert to_ascii_numerals("१५ बैशाख") == "15 बैशाख"


def test_apply_numerals():
    assert apply_numerals("2080", "ascii") == "2080"
    assert apply_numerals("2080", "local") == "२०८०"
    with pytest.raises(ValueError):
        apply_numerals("2080", "arabic")


def test_parse_bs_accepts_devanagari():
    assert parse_bs("२०८१-१०-२४") == BSDate(2081, 10, 24)
    assert parse_bs(" 2081-10-24 ") == BSDate(2081, 10, 24)


@pytest.mark.parametrize("s", ["2081/10/24", "2081-10", "abcd-ef-gh", ""])
def test_parse_bs_rejects_malformed(s):
    with pytest.raises(ValueError, match="Expected YYYY-MM-DD"):
        parse_bs(s)


def test_parse_ad():
    assert parse_ad("2024-04-13").isoformat() == "2024-04-13"
    with pytest.raises(ValueError):
        parse_ad("2024-02-30")


def test_names():
    assert month_name(1) == "Baisakh"
    assert month_name(12, local=True) == "चैत्र"
    assert weekday_name(0) == "Sunday"
    assert weekday_name(6, local=True) == "शनिबार"
    with pytest.raises(ValueError):
        month_name(13)


def test_numeral_round_trip():
    random.seed(42)
    alphabet = "0123456789-/ ,abcBS"
    for _ in range(1000):
        s = "".join(random.choice(alphabet) for _ in range(random.randint(1, 20)))
        assert to_ascii_numerals(to_local_numerals(s)) == s
