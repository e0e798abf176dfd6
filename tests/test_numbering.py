from __future__ import annotations

from decimal import Decimal

import pytest

from emi_calc.exceptions import InvalidInputError
from emi_calc.numbering import format_currency, format_grouped_number, number_to_words, spell_amount


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234567, "12,34,567"),
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (100000, "1,00,000"),
        (123456789, "12,34,56,789"),
        (-1234567, "-12,34,567"),
        (1234.5, "1,235"),
        (Decimal("8514.49"), "8,514"),
    ],
)
def test_indian_digit_grouping(amount, expected):
    assert format_grouped_number(amount) == expected


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), Decimal("NaN"), "12", None])
def test_non_finite_values_render_as_zero(amount):
    assert format_grouped_number(amount) == "0"


def test_format_currency_prefixes_symbol():
    assert format_currency(100000) == "₹ 1,00,000"
    assert format_currency(2500, "Rs.") == "Rs. 2,500"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (100000, "One Lakh Rupees"),
        (15, "Fifteen Rupees"),
        (20, "Twenty Rupees"),
        (105, "One Hundred Five Rupees"),
        (1380, "One Thousand Three Hundred Eighty Rupees"),
        (1234567, "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees"),
        (10000000, "One Crore Rupees"),
        (25_00_00_000, "Twenty Five Crore Rupees"),
        (10_000_000_000, "One Thousand Crore Rupees"),
        (Decimal("500000"), "Five Lakh Rupees"),
    ],
)
def test_number_to_words_uses_crore_lakh_thousand(amount, expected):
    assert number_to_words(amount) == expected


def test_zero_is_spelled_without_currency():
    assert number_to_words(0) == "Zero"


def test_currency_word_is_configurable():
    assert number_to_words(2000, "Dollars") == "Two Thousand Dollars"
    assert number_to_words(2000, "") == "Two Thousand"


@pytest.mark.parametrize("amount", [-1, 1.5, Decimal("10.25"), float("nan"), "100"])
def test_number_to_words_rejects_out_of_contract_values(amount):
    with pytest.raises(InvalidInputError):
        number_to_words(amount)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("100000.5"), "One Lakh One Rupees"),
        (Decimal("100000.4"), "One Lakh Rupees"),
        (1234.5, "One Thousand Two Hundred Thirty Five Rupees"),
        (0, "Zero"),
    ],
)
def test_spell_amount_rounds_half_up(amount, expected):
    assert spell_amount(amount) == expected
    assert number_to_words(int(format_grouped_number(amount).replace(",", ""))) == expected


@pytest.mark.parametrize("amount", [float("nan"), Decimal("sNaN"), Decimal("-Infinity"), "lots", -1])
def test_spell_amount_rejects_unusable_values(amount):
    with pytest.raises(InvalidInputError):
        spell_amount(amount)
