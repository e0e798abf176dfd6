"""Data models for the EMI calculator.

This module defines dataclasses representing the entities used by the
calculator: the loan input, individual schedule records, the computed schedule
with its aggregates and the loan offer certificate built on top of it. Using
dataclasses makes it easy to construct, inspect and serialize these structures.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class LoanInput:
    """Configuration of a fixed-rate, fixed-term loan.

    Attributes
    ----------
    principal: Decimal
        The amount borrowed. ``int`` and ``float`` values are accepted and
        converted by the engine.
    annual_rate_percent: Decimal
        Annual nominal interest rate in percent (``4`` means 4 % per annum).
    term_years: int
        Length of the loan in whole years.
    start_date: date
        Disbursement date. The first installment falls one month later.
    """

    principal: Decimal
    annual_rate_percent: Decimal
    term_years: int
    start_date: date


@dataclass(frozen=True)
class PaymentRecord:
    """One installment of the amortization schedule.

    All amounts are rounded to whole currency units when the record is
    created; the running balance used to derive them is never rounded.
    """

    sequence_number: int
    due_date: date
    payment_amount: int
    principal_portion: int
    interest_portion: int
    ending_balance: int


@dataclass(frozen=True)
class Schedule:
    """The full amortization schedule and its aggregates."""

    loan: LoanInput
    monthly_rate: Decimal
    monthly_payment: Decimal  # unrounded installment
    records: Tuple[PaymentRecord, ...]
    total_interest: int
    total_cost: Decimal

    @property
    def payment_count(self) -> int:
        return len(self.records)

    @property
    def emi(self) -> int:
        return self.records[0].payment_amount if self.records else 0

    @property
    def first_due_date(self) -> Optional[date]:
        return self.records[0].due_date if self.records else None

    @property
    def last_due_date(self) -> Optional[date]:
        return self.records[-1].due_date if self.records else None

    def to_summary(self) -> Dict[str, object]:
        """Return the aggregate metrics as a JSON-serialisable dict."""
        return {
            "principal": float(self.loan.principal),
            "annual_rate_percent": float(self.loan.annual_rate_percent),
            "term_years": self.loan.term_years,
            "start_date": self.loan.start_date.isoformat(),
            "monthly_payment": self.emi,
            "payments": self.payment_count,
            "total_interest": self.total_interest,
            "total_cost": float(self.total_cost),
            "first_due_date": self.first_due_date.isoformat() if self.first_due_date else None,
            "last_due_date": self.last_due_date.isoformat() if self.last_due_date else None,
        }

    def to_rows(self) -> List[Dict[str, object]]:
        """Convert the records into JSON-serialisable dictionaries."""
        return [
            {
                "payment_no": r.sequence_number,
                "due_date": r.due_date.isoformat(),
                "payment": r.payment_amount,
                "principal": r.principal_portion,
                "interest": r.interest_portion,
                "ending_balance": r.ending_balance,
            }
            for r in self.records
        ]


@dataclass(frozen=True)
class CertificateProfile:
    """Cosmetic settings of a loan offer certificate.

    The letter layout is shared by every lender; only the labels, the
    currency and the office block differ, so they are collected here instead
    of in separate copies of the letter.
    """

    lender_name: str = "Sample Finance"
    reference_number: str = "REF0000000001"
    currency_symbol: str = "₹"
    currency_word: str = "Rupees"
    office_addresses: Tuple[str, ...] = ()
    processing_fee_label: str = "Processing Fees"
    closing_note: str = (
        "This is a system generated letter and hence does not require any signature."
    )


@dataclass(frozen=True)
class Certificate:
    """Data of a single loan offer letter."""

    issue_date: date
    reference_number: str
    borrower_name: str
    first_emi_date: date
    approved_amount: Decimal
    annual_rate_percent: Decimal
    term_months: int
    emi: int
    total_interest: int
    processing_fees: Decimal
    amount_in_words: str
