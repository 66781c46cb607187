"""Tests for taka formatting."""

from decimal import Decimal

import pytest

from hisab.utils.currency import format_taka, group_digits


@pytest.mark.parametrize(
    "digits,expected",
    [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("123456", "1,23,456"),
        ("1234567", "12,34,567"),
        ("123456789", "12,34,56,789"),
    ],
)
def test_group_digits(digits, expected):
    assert group_digits(digits) == expected


def test_format_bengali_digits():
    assert format_taka(Decimal("800")) == "৳৮০০.০০"
    assert format_taka(Decimal("123456")) == "৳১,২৩,৪৫৬.০০"


def test_format_ascii_digits():
    assert format_taka(Decimal("1234567.5"), bengali_digits=False) == "৳12,34,567.50"


def test_format_rounds_to_paisa():
    assert format_taka(Decimal("10.005"), bengali_digits=False) == "৳10.01"


def test_format_negative():
    assert format_taka(Decimal("-500"), bengali_digits=False) == "-৳500.00"


def test_format_signed():
    assert format_taka(Decimal("5"), bengali_digits=False, signed=True) == "+৳5.00"
    assert format_taka(Decimal("0"), bengali_digits=False, signed=True) == "৳0.00"
