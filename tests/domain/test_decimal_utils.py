"""Tests for the amount parsing helpers."""

from decimal import Decimal

import pytest

from ledger_dashboard.utils.decimal_utils import (
    parse_amount,
    parse_non_negative_amount,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1500", Decimal("1500")),
        ("1500.75", Decimal("1500.75")),
        ("  42 ", Decimal("42")),
        ("12abc", Decimal("12")),
        ("1,500", Decimal("1")),
        (".5", Decimal("0.5")),
        ("-250", Decimal("-250")),
        ("1e3", Decimal("1000")),
        ("abc", Decimal("0")),
        ("₹100", Decimal("0")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        ("NaN", Decimal("0")),
        ("Infinity", Decimal("0")),
        ("1e999999999", Decimal("0")),
        ("-9e999999", Decimal("0")),
        ("1e-999999999", Decimal("0")),
        ("1e308", Decimal("1e308")),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_non_negative_amount_clamps_negatives():
    assert parse_non_negative_amount("-5") == Decimal("0")
    assert parse_non_negative_amount("5") == Decimal("5")


def test_amounts_beyond_double_range_can_be_summed():
    values = [parse_amount(raw) for raw in ("1e999999999", "9e999999", "5")]

    assert sum(values, Decimal("0")) == Decimal("5")
