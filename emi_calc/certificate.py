"""Loan offer certificate.

A certificate restates the approved loan, its EMI and the first EMI date in a
letter addressed to the borrower. ``build_certificate`` collects the figures
from a computed ``Schedule``; ``render_certificate_text`` lays them out as
plain text for the terminal. The web app renders the same ``Certificate``
through an HTML template.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from .data_models import Certificate, CertificateProfile, Schedule
from .exceptions import InvalidInputError
from .numbering import format_currency, spell_amount
from .utils import format_display_date

INTRO = (
    "We acknowledge the receipt of your documentation and appreciate your "
    "choice of {lender} as your financial partner. With reference to your "
    "recent loan application, we are pleased to extend to you the following "
    "loan offer, subject to the specified terms and conditions, with the first "
    "Equated Monthly Instalment (EMI) scheduled for:"
)

CLOSING = [
    "Please note that this loan offer is contingent upon your acceptance of the "
    "aforementioned terms and conditions. Should you wish to proceed with this "
    "loan, kindly respond to this communication at your earliest convenience.",
    "Should you have any questions or require further clarification, please do "
    "not hesitate to reach out to our customer service team.",
    "Thank you once again for choosing {lender}.",
]


def build_certificate(
    schedule: Schedule,
    borrower_name: str,
    processing_fees=0,
    profile: Optional[CertificateProfile] = None,
    issue_date: Optional[date] = None,
) -> Certificate:
    """Collect the figures of a loan offer letter from a computed schedule."""
    profile = profile or CertificateProfile()
    try:
        fees = processing_fees if isinstance(processing_fees, Decimal) else Decimal(str(processing_fees))
    except InvalidOperation as exc:
        raise InvalidInputError("Processing fees must be a number", {"processing_fees": processing_fees}) from exc
    if not fees.is_finite() or fees < 0:
        raise InvalidInputError("Processing fees must not be negative", {"processing_fees": str(fees)})
    if not schedule.records:
        raise InvalidInputError("Schedule has no payments")

    loan = schedule.loan
    amount_in_words = spell_amount(loan.principal, profile.currency_word)
    return Certificate(
        issue_date=issue_date or loan.start_date,
        reference_number=profile.reference_number,
        borrower_name=borrower_name.strip(),
        first_emi_date=schedule.first_due_date,
        approved_amount=loan.principal,
        annual_rate_percent=loan.annual_rate_percent,
        term_months=schedule.payment_count,
        emi=schedule.emi,
        total_interest=schedule.total_interest,
        processing_fees=fees,
        amount_in_words=amount_in_words,
    )


def certificate_lines(certificate: Certificate, profile: CertificateProfile):
    """Return the loan detail block as ``(label, value)`` pairs."""
    symbol = profile.currency_symbol
    return [
        ("Approved Loan Amount", format_currency(certificate.approved_amount, symbol)),
        ("Interest Rate", f"{certificate.annual_rate_percent.normalize():f}%"),
        ("Loan Term", f"{certificate.term_months} Months"),
        ("Monthly Payment (EMI)", format_currency(certificate.emi, symbol)),
        ("Total Interest Payable", format_currency(certificate.total_interest, symbol)),
        (profile.processing_fee_label, format_currency(certificate.processing_fees, symbol)),
    ]


def render_certificate_text(certificate: Certificate, profile: Optional[CertificateProfile] = None) -> str:
    """Lay out a certificate as a plain-text letter."""
    profile = profile or CertificateProfile()
    lines: List[str] = []
    width = 72
    lines.append(profile.lender_name.center(width).rstrip())
    lines.append("")
    lines.append(format_display_date(certificate.issue_date).rjust(width))
    lines.append(certificate.reference_number.rjust(width))
    lines.append("")
    lines.append("Dear Sir / Madam,")
    lines.append(certificate.borrower_name)
    lines.append("")
    lines.append(f"Certificate of Approved Loan No. {certificate.reference_number}")
    lines.append("")
    lines.append(INTRO.format(lender=profile.lender_name))
    lines.append("")
    lines.append(format_display_date(certificate.first_emi_date))
    lines.append("")
    for label, value in certificate_lines(certificate, profile):
        lines.append(f"{label:<28}{value}")
        if label == "Approved Loan Amount":
            lines.append(f"{'':<28}({certificate.amount_in_words})")
    lines.append("")
    for paragraph in CLOSING:
        lines.append(paragraph.format(lender=profile.lender_name))
        lines.append("")
    lines.append(profile.closing_note)
    if profile.office_addresses:
        lines.append("-" * width)
        lines.append("Corporate Offices:")
        lines.extend(profile.office_addresses)
    return "\n".join(lines)
