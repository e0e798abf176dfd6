"""Utility functions for the EMI calculator.

This module provides helpers for parsing user input into Python data types and
for handling dates, including adding calendar months and formatting dates the
way they appear on the schedule and the certificate.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation, Overflow

# Suffix multipliers accepted by ``parse_amount``; longest suffixes first.
AMOUNT_SUFFIXES = (
    ("crore", Decimal("10000000")),
    ("lakh", Decimal("100000")),
    ("cr", Decimal("10000000")),
    ("k", Decimal("1000")),
    ("l", Decimal("100000")),
    ("m", Decimal("1000000")),
)


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a ``date``.

    Raises
    ------
    ValueError
        If the string is not a valid calendar date.
    """
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise ValueError(f"Invalid date (expected YYYY-MM-DD): {value}") from exc


def add_months(dt: date, months: int) -> date:
    """Return the date ``months`` calendar months after ``dt``.

    The day of the month is not clamped: when it does not exist in the target
    month the surplus days roll over into the next month, so adding one month
    to Jan 31 yields Mar 3 (or Mar 2 in a leap year).
    """
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    return date(year, month, 1) + timedelta(days=dt.day - 1)


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas, so both ``1,00,000`` and ``100,000`` are
    accepted. It raises ``ValueError`` if conversion fails.
    """
    try:
        cleaned = value.replace(",", "").strip()
        return Decimal(cleaned)
    except (AttributeError, InvalidOperation) as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc


def parse_amount(value: str) -> Decimal:
    """Parse an amount with an optional magnitude suffix.

    Accepts plain numbers (``"500000"``), grouped numbers (``"5,00,000"``)
    and shorthand such as ``"5l"``, ``"5 lakh"``, ``"1.2cr"``, ``"500k"`` or
    ``"2m"``.
    """
    text = str(value).strip().lower().replace(",", "").replace(" ", "")
    factor = Decimal(1)
    for suffix, multiplier in AMOUNT_SUFFIXES:
        if text.endswith(suffix) and len(text) > len(suffix):
            factor = multiplier
            text = text[: -len(suffix)]
            break
    number = decimal_from_str(text)
    if not number.is_finite():
        raise ValueError(f"Invalid numeric value: {value}")
    try:
        return number * factor
    except (InvalidOperation, Overflow) as exc:
        raise ValueError(f"Amount out of range: {value}") from exc


def format_display_date(dt: date) -> str:
    """Short date used on schedule rows and the certificate, e.g. ``01 Feb 25``."""
    return dt.strftime("%d %b %y")


def format_numeric_date(dt: date) -> str:
    """Day/month/year date without padding, e.g. ``1/2/2025``."""
    return f"{dt.day}/{dt.month}/{dt.year}"
