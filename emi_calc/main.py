"""Command-line interface for the EMI calculator.

This module uses the ``click`` library to implement a multi-command
interface. Users can compute the full amortization schedule, view the summary,
print a loan offer certificate or spell out an amount in words. Schedules can
be printed to the terminal or exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .certificate import build_certificate, render_certificate_text
from .config import LOG_LEVELS, load_profile, log_json, log_level
from .data_models import LoanInput, Schedule
from .engine import compute_schedule
from .exceptions import EmiCalcError
from .formatter import print_schedule, print_summary
from .logging_setup import setup_logging
from .numbering import format_grouped_number, number_to_words
from .utils import decimal_from_str, parse_amount, parse_date

logger = logging.getLogger(__name__)


def build_loan_from_options(
    principal: str,
    rate: str,
    years: int,
    start_date: Optional[str],
) -> LoanInput:
    """Turn raw option strings into a ``LoanInput``.

    ``start_date`` defaults to today when omitted.
    """
    try:
        principal_value = parse_amount(principal)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--principal")
    try:
        rate_value = decimal_from_str(str(rate).rstrip("%"))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--rate")
    if start_date:
        try:
            start_dt = parse_date(start_date)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--start-date")
    else:
        start_dt = date.today()
    return LoanInput(
        principal=principal_value,
        annual_rate_percent=rate_value,
        term_years=years,
        start_date=start_dt,
    )


def run_schedule(loan: LoanInput) -> Schedule:
    """Compute a schedule, reporting domain errors as click errors."""
    try:
        return compute_schedule(loan)
    except EmiCalcError as exc:
        logger.debug("Rejected loan input: %s", exc)
        raise click.ClickException(exc.message)


def export_to_json(path: Path, schedule: Schedule) -> None:
    """Export schedule and summary to a JSON file."""
    data: Dict[str, Any] = {"summary": schedule.to_summary(), "schedule": schedule.to_rows()}
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: Schedule) -> None:
    """Export schedule to a CSV file."""
    header = [
        "Payment_No",
        "Due_Date",
        "Payment",
        "Principal",
        "Interest",
        "Ending_Balance",
    ]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for r in schedule.records:
            writer.writerow(
                [
                    r.sequence_number,
                    r.due_date.isoformat(),
                    r.payment_amount,
                    r.principal_portion,
                    r.interest_portion,
                    r.ending_balance,
                ]
            )


def loan_options(func):
    """Attach the options shared by every loan command."""
    decorators = [
        click.option("--principal", "-p", "principal", required=True, help="Loan amount, e.g. 100000, 5l or 1.2cr"),
        click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)"),
        click.option("--years", "-y", "years", required=True, type=int, help="Loan period in years"),
        click.option("--start-date", "-s", "start_date", help="Start date of the loan (YYYY-MM-DD); defaults to today"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.option(
    "--log-level",
    "level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to EMI_LOG_LEVEL or INFO)",
)
def cli(level: Optional[str]) -> None:
    """An EMI calculator for fixed-rate loans."""
    if level is None:
        try:
            level = log_level()
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="EMI_LOG_LEVEL")
    setup_logging(level.upper(), json_format=log_json())


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(
    principal: str,
    rate: str,
    years: int,
    start_date: Optional[str],
    output: Optional[str],
) -> None:
    """Compute and print the full amortization schedule."""
    loan = build_loan_from_options(principal, rate, years, start_date)
    result = run_schedule(loan)
    profile = load_profile()
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, result)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, result)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv", param_hint="--output")
        logger.info("Exported %d payments to %s", result.payment_count, path)
        click.echo(f"Schedule exported to {path}")
    else:
        print_summary(result, profile.currency_symbol, profile.currency_word)
        print_schedule(result.records)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    rate: str,
    years: int,
    start_date: Optional[str],
    output: Optional[str],
) -> None:
    """Compute and print only the summary metrics for a loan."""
    loan = build_loan_from_options(principal, rate, years, start_date)
    result = run_schedule(loan)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension", param_hint="--output")
        with path.open("w", encoding="utf-8") as f:
            json.dump({"summary": result.to_summary()}, f, indent=2)
        click.echo(f"Summary exported to {path}")
    else:
        profile = load_profile()
        print_summary(result, profile.currency_symbol, profile.currency_word)


@cli.command()
@loan_options
@click.option("--name", "name", default="KoS", show_default=True, help="Borrower name")
@click.option("--processing-fees", "processing_fees", default="1380", show_default=True, help="Processing fees")
@click.option("--lender", "lender", help="Lender name printed on the letter")
@click.option("--reference", "reference", help="Approved loan reference number")
def certificate(
    principal: str,
    rate: str,
    years: int,
    start_date: Optional[str],
    name: str,
    processing_fees: str,
    lender: Optional[str],
    reference: Optional[str],
) -> None:
    """Print a loan offer certificate for the loan."""
    loan = build_loan_from_options(principal, rate, years, start_date)
    result = run_schedule(loan)
    profile = load_profile()
    overrides = {}
    if lender:
        overrides["lender_name"] = lender
    if reference:
        overrides["reference_number"] = reference
    if overrides:
        profile = replace(profile, **overrides)
    try:
        fees = parse_amount(processing_fees)
        letter = build_certificate(result, name, fees, profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--processing-fees")
    click.echo(render_certificate_text(letter, profile))


@cli.command()
@click.argument("amount")
def words(amount: str) -> None:
    """Show an amount with Indian digit grouping and in words.

    AMOUNT accepts the same shorthand as --principal, for example 5l or 1.2cr.
    """
    try:
        value = parse_amount(amount)
        text = number_to_words(value, load_profile().currency_word)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="AMOUNT")
    click.echo(format_grouped_number(value))
    click.echo(text)


if __name__ == "__main__":
    cli()
