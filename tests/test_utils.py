from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from emi_calc.utils import (
    add_months,
    decimal_from_str,
    format_display_date,
    format_numeric_date,
    parse_amount,
    parse_date,
)


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2025, 1, 1), 1, date(2025, 2, 1)),
        (date(2025, 11, 15), 3, date(2026, 2, 15)),
        (date(2025, 1, 31), 1, date(2025, 3, 3)),
        (date(2024, 1, 31), 1, date(2024, 3, 2)),
        (date(2025, 3, 31), 1, date(2025, 5, 1)),
        (date(2025, 8, 31), 12, date(2026, 8, 31)),
        (date(2025, 5, 10), 0, date(2025, 5, 10)),
    ],
)
def test_add_months_rolls_over_instead_of_clamping(start, months, expected):
    assert add_months(start, months) == expected


def test_parse_date():
    assert parse_date(" 2025-01-31 ") == date(2025, 1, 31)
    with pytest.raises(ValueError):
        parse_date("2025-02-30")
    with pytest.raises(ValueError):
        parse_date("31/01/2025")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("100000", Decimal("100000")),
        ("1,00,000", Decimal("100000")),
        ("5l", Decimal("500000")),
        ("5 lakh", Decimal("500000")),
        ("1.2cr", Decimal("12000000")),
        ("2crore", Decimal("20000000")),
        ("500k", Decimal("500000")),
        ("2m", Decimal("2000000")),
    ],
)
def test_parse_amount_suffixes(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_amount_rejects_garbage():
    with pytest.raises(ValueError):
        parse_amount("lots")
    with pytest.raises(ValueError):
        decimal_from_str("12x")


def test_display_dates():
    assert format_display_date(date(2025, 2, 1)) == "01 Feb 25"
    assert format_numeric_date(date(2025, 2, 1)) == "1/2/2025"


@pytest.mark.parametrize("raw", ["nan", "snan", "inf", "1e999999cr"])
def test_parse_amount_rejects_non_finite_and_out_of_range(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)
