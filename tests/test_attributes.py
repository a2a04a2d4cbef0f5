# tests/test_attributes.py

import pytest
from datetime import date

import bscal
from bscal.attributes import registry


def test_builtin_attributes_registered():
    names = bscal.list_attributes()
    for n in ("weekday", "month_name", "fiscal_year", "day_of_year"):
        assert n in names


def test_weekday_and_month_name():
    info = bscal.day_info(date(2024, 4, 13), attributes=("weekday", "month_name"))
    assert info.attributes == {
        "weekday": 6,
        "weekday_en": "Saturday",
        "weekday_np": "शनिबार",
        "month_name_en": "Baisakh",
        "month_name_np": "बैशाख",
    }


def test_fiscal_year_turns_on_shrawan():
    # 2081-03-32 is the last day of 2080/81
    last = bscal.day_info(date(2024, 7, 15), attributes=("fiscal_year",))
    assert last.bs == bscal.BSDate(2081, 3, 32)
    assert last.attributes["fiscal_year"] == "2080/81"
    first = bscal.day_info(date(2024, 7, 16), attributes=("fiscal_year",))
    assert first.bs == bscal.BSDate(2081, 4, 1)
    assert first.attributes == {"fiscal_year": "2081/82", "fiscal_year_start": 2081}


def test_fiscal_year_century_wrap():
    info = bscal.day_info(bscal.bs_to_ad(2099, 6, 1), attributes=("fiscal_year",))
    assert info.attributes["fiscal_year"] == "2099/00"


def test_day_of_year():
    assert bscal.day_info(date(2024, 4, 13), attributes=("day_of_year",)).attributes == {"day_of_year": 1}
    last = bscal.day_info(date(2025, 4, 13), attributes=("day_of_year",))
    assert last.bs == bscal.BSDate(2081, 12, 30)
    assert last.attributes["day_of_year"] == 366


def test_unknown_attribute():
    with pytest.raises(KeyError, match="Unknown attribute"):
        bscal.day_info(date(2024, 4, 13), attributes=("moon_phase",))


@pytest.fixture
def scratch_attr():
    yield "is_new_year"
    registry._REGISTRY.pop("is_new_year", None)


def test_register_custom_attribute(scratch_attr):
    bscal.register_attribute(scratch_attr, lambda info: {"is_new_year": info.bs.month == 1 and info.bs.day == 1})
    info = bscal.day_info(date(2024, 4, 13), attributes=(scratch_attr,))
    assert info.attributes == {"is_new_year": True}

    with pytest.raises(KeyError, match="already exists"):
        bscal.register_attribute(scratch_attr, lambda info: {})
    bscal.register_attribute(scratch_attr, lambda info: {"is_new_year": None}, overwrite=True)
    assert bscal.day_info(date(2024, 4, 13), attributes=(scratch_attr,)).attributes == {"is_new_year": None}
