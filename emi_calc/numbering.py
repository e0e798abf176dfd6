"""Indian numbering helpers.

Amounts on the schedule and the certificate are written with the Indian digit
grouping (``12,34,567``) and spelled out in crore, lakh and thousand rather
than the Western million/thousand bands.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from numbers import Number

from .exceptions import InvalidInputError

SINGLE = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _tens_words(num: int) -> str:
    if num < 10:
        return SINGLE[num]
    if num < 20:
        return TEENS[num - 10]
    return TENS[num // 10] + (" " + SINGLE[num % 10] if num % 10 else "")


def _hundreds_words(num: int) -> str:
    hundreds, rest = divmod(num, 100)
    parts = []
    if hundreds:
        parts.append(SINGLE[hundreds] + " Hundred")
    if rest:
        parts.append(_tens_words(rest))
    return " ".join(parts)


def _indian_words(num: int) -> str:
    crore, num = divmod(num, CRORE)
    lakh, num = divmod(num, LAKH)
    thousand, remaining = divmod(num, THOUSAND)

    parts = []
    if crore:
        # more than 99 crore is itself grouped, e.g. "One Thousand Crore"
        parts.append(_indian_words(crore) + " Crore")
    if lakh:
        parts.append(_tens_words(lakh) + " Lakh")
    if thousand:
        parts.append(_tens_words(thousand) + " Thousand")
    if remaining:
        parts.append(_hundreds_words(remaining))
    return " ".join(parts)


def _as_whole_number(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, (Number, Decimal)):
        raise InvalidInputError("Amount must be a number", {"amount": amount})
    try:
        whole = int(amount)
    except (ValueError, OverflowError, InvalidOperation) as exc:
        raise InvalidInputError("Amount must be finite", {"amount": amount}) from exc
    if whole != amount:
        raise InvalidInputError("Amount must be a whole number", {"amount": amount})
    if whole < 0:
        raise InvalidInputError("Amount must not be negative", {"amount": amount})
    return whole


def number_to_words(amount, currency_word: str = "Rupees") -> str:
    """Spell out a non-negative whole amount using crore, lakh and thousand.

    >>> number_to_words(100000)
    'One Lakh Rupees'
    >>> number_to_words(1234567)
    'Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees'

    Zero is spelled ``"Zero"`` without the currency word.

    Raises
    ------
    InvalidInputError
        If ``amount`` is negative, fractional or not a number.
    """
    num = _as_whole_number(amount)
    if num == 0:
        return "Zero"
    words = _indian_words(num)
    return f"{words} {currency_word}" if currency_word else words


def spell_amount(amount, currency_word: str = "Rupees") -> str:
    """Words for an amount rounded half-up to whole units.

    Uses the same rounding as ``format_grouped_number`` so the words always
    match the figure printed beside them.
    """
    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
        if not value.is_finite():
            raise InvalidOperation
        whole = value.quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except (TypeError, ValueError, InvalidOperation) as exc:
        raise InvalidInputError("Amount must be a finite number", {"amount": amount}) from exc
    return number_to_words(int(whole), currency_word)


def format_grouped_number(amount) -> str:
    """Render an amount with Indian digit grouping, e.g. ``12,34,567``.

    The value is rounded half-up to a whole number. NaN, infinite and
    non-numeric values render as ``"0"``.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Number, Decimal)):
        return "0"
    if isinstance(amount, float) and not math.isfinite(amount):
        return "0"
    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    except (TypeError, ValueError, InvalidOperation):
        return "0"
    if not value.is_finite():
        return "0"

    whole = int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    digits = str(abs(whole))
    last_three, other = digits[-3:], digits[:-3]
    groups = []
    while len(other) > 2:
        groups.insert(0, other[-2:])
        other = other[:-2]
    if other:
        groups.insert(0, other)
    groups.append(last_three)
    return sign + ",".join(groups)


def format_currency(amount, symbol: str = "₹") -> str:
    """Grouped amount prefixed with the currency symbol, e.g. ``₹ 12,34,567``."""
    return f"{symbol} {format_grouped_number(amount)}"
