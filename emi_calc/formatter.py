"""Output helpers for the EMI calculator.

This module provides simple functions to render amortization schedules and
summaries in a tabular text format. Amounts use the Indian digit grouping and
dates the short ``01 Feb 25`` form shown on the certificate.
"""

from __future__ import annotations

from typing import Iterable

import click

from .data_models import PaymentRecord, Schedule
from .numbering import format_currency, format_grouped_number, spell_amount
from .utils import format_numeric_date, format_display_date


def print_summary(schedule: Schedule, symbol: str = "₹", currency_word: str = "Rupees") -> None:
    """Print the loan summary in a human-readable format."""
    loan = schedule.loan
    click.echo("Loan Summary")
    click.echo("-" * 72)
    click.echo(f"Loan amount        : {format_currency(loan.principal, symbol)}")
    click.echo(f"                     ({spell_amount(loan.principal, currency_word)})")
    click.echo(f"Interest rate      : {loan.annual_rate_percent.normalize():f} %")
    click.echo(f"Monthly payment    : {format_currency(schedule.emi, symbol)}")
    click.echo(f"Number of payments : {schedule.payment_count}")
    click.echo(f"Total interest     : {format_currency(schedule.total_interest, symbol)}")
    click.echo(f"Total cost of loan : {format_currency(schedule.total_cost, symbol)}")
    click.echo(f"Date               : {format_numeric_date(loan.start_date)}")
    click.echo("-" * 72)


def print_schedule(records: Iterable[PaymentRecord]) -> None:
    """Print the monthly break-up as a simple tab-separated table."""
    headers = [
        "Pymnt No.",
        "Payment Date",
        "Payment",
        "Principal",
        "Interest",
        "Ending Balance",
    ]
    click.echo("\t".join(headers))
    for record in records:
        row = [
            f"{record.sequence_number:02d}",
            format_display_date(record.due_date),
            format_grouped_number(record.payment_amount),
            format_grouped_number(record.principal_portion),
            format_grouped_number(record.interest_portion),
            format_grouped_number(record.ending_balance),
        ]
        click.echo("\t".join(row))
