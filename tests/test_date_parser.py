"""Tests for date parsing, English and Bengali."""

import pytest
from datetime import date, timedelta
from hisab.utils.date_parser import parse_date, get_date_range


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_bengali_digits():
    assert parse_date("২০২৪-০১-১৫") == date(2024, 1, 15)


@pytest.mark.parametrize(
    "text,offset",
    [
        ("today", 0),
        ("আজ", 0),
        ("Yesterday", -1),
        ("গতকাল", -1),
        ("tomorrow", 1),
        ("আগামীকাল", 1),
    ],
)
def test_parse_relative_days(text, offset):
    assert parse_date(text) == date.today() + timedelta(days=offset)


def test_parse_this_month():
    today = date.today()
    assert parse_date("this month") == date(today.year, today.month, 1)


def test_parse_last_month():
    """First day of last month."""
    today = date.today()
    if today.month == 1:
        expected = date(today.year - 1, 12, 1)
    else:
        expected = date(today.year, today.month - 1, 1)
    assert parse_date("last month") == expected


def test_parse_this_and_last_year():
    today = date.today()
    assert parse_date("this year") == date(today.year, 1, 1)
    assert parse_date("last year") == date(today.year - 1, 1, 1)


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_date("someday soon")


class TestGetDateRange:
    """Tests for named periods."""

    def test_this_month(self):
        assert get_date_range("this-month", today=date(2024, 3, 15)) == (date(2024, 3, 1), date(2024, 3, 15))

    def test_last_month_across_leap_day(self):
        assert get_date_range("last-month", today=date(2024, 3, 15)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_last_month_in_january(self):
        assert get_date_range("last-month", today=date(2024, 1, 10)) == (date(2023, 12, 1), date(2023, 12, 31))

    def test_this_year(self):
        assert get_date_range("this-year", today=date(2024, 6, 1)) == (date(2024, 1, 1), date(2024, 6, 1))

    def test_last_year(self):
        assert get_date_range("last-year", today=date(2024, 6, 1)) == (date(2023, 1, 1), date(2023, 12, 31))

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="Unknown period"):
            get_date_range("next-decade")
