"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from hisab.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("৳250", Decimal("250")),
        ("250 টাকা", Decimal("250")),
        ("Tk 99.50", Decimal("99.50")),
        ("1,234.56", Decimal("1234.56")),
        ("1,23,456", Decimal("123456")),
        ("১২৩.৪৫", Decimal("123.45")),
        ("৳১,২০০", Decimal("1200")),
        ("-50", Decimal("-50")),
        ("(75.25)", Decimal("-75.25")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..3", "NaN", "Infinity"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)
