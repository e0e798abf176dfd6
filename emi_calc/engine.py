"""Core calculation engine for the EMI calculator.

This module implements the financial logic required to build the amortization
schedule of a fixed-rate loan repaid in equated monthly instalments (EMI).
Results are returned as a ``Schedule`` holding one ``PaymentRecord`` per month
along with the total interest and total cost of the loan.

The running balance is carried at full precision; amounts are rounded to whole
currency units only when a record is emitted, so rounding error does not
compound from one period to the next.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import List

from .data_models import LoanInput, PaymentRecord, Schedule
from .exceptions import ComputationOverflowError, InvalidInputError
from .utils import add_months

logger = logging.getLogger(__name__)

PRECISION = 28  # digits used for financial calculations
MAX_EXTRA_DIGITS = 1000  # below this magnitude the rate is treated as zero


def _as_decimal(value, name: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number", {name: value})
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    raise InvalidInputError(f"{name} must be a number", {name: value})


def _round(value: Decimal) -> int:
    if not value.is_finite():
        raise ComputationOverflowError("Non-finite amount in schedule", {"value": str(value)})
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _validate(loan: LoanInput) -> tuple:
    principal = _as_decimal(loan.principal, "principal")
    rate = _as_decimal(loan.annual_rate_percent, "annual_rate_percent")
    term = loan.term_years
    if isinstance(term, bool) or not isinstance(term, int):
        raise InvalidInputError("Term must be a whole number of years", {"term_years": term})
    if term <= 0:
        raise InvalidInputError("Term must be positive", {"term_years": term})
    if not principal.is_finite() or principal <= 0:
        raise InvalidInputError("Principal must be positive", {"principal": str(principal)})
    if not rate.is_finite() or rate < 0:
        raise InvalidInputError(
            "Interest rate must not be negative", {"annual_rate_percent": str(rate)}
        )
    return principal, rate, term


def _calculate_annuity_payment(principal: Decimal, rate_per_month: Decimal, term: int) -> Decimal:
    """Return the annuity (equal installment) monthly payment for a loan.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. When the interest rate is zero the
    formula divides by zero, so the payment simplifies to ``P / n``.
    """
    if rate_per_month == 0:
        return principal / Decimal(term)
    factor = (1 + rate_per_month) ** term
    if factor == 1:
        # rate vanishes at the working precision
        return principal / Decimal(term)
    return principal * (rate_per_month * factor) / (factor - 1)


def compute_schedule(loan: LoanInput) -> Schedule:
    """Compute the amortization schedule for a loan.

    Parameters
    ----------
    loan: LoanInput
        Principal, annual rate, term and start date of the loan.

    Returns
    -------
    Schedule
        Exactly ``term_years * 12`` records numbered from 1, each due one
        calendar month after the previous one, plus ``total_interest`` (the
        sum of the rounded interest portions) and ``total_cost``.

    Raises
    ------
    InvalidInputError
        If the term is not a positive whole number, the principal is not
        positive or the rate is negative.
    ComputationOverflowError
        If the inputs are so extreme that the arithmetic overflows.
    """
    principal, rate, term_years = _validate(loan)
    periods = term_years * 12

    with localcontext() as ctx:
        ctx.prec = PRECISION
        try:
            rate_per_month = rate / Decimal(12) / Decimal(100)
            if rate_per_month:
                # 1 + i must keep the significant digits of a tiny i
                ctx.prec = PRECISION + min(MAX_EXTRA_DIGITS, max(0, -rate_per_month.adjusted()))
            payment = _calculate_annuity_payment(principal, rate_per_month, periods)
            if not payment.is_finite():
                raise ComputationOverflowError(
                    "Monthly payment is not finite", {"payment": str(payment)}
                )

            records: List[PaymentRecord] = []
            balance = principal
            for period in range(1, periods + 1):
                interest_payment = balance * rate_per_month
                principal_payment = payment - interest_payment
                balance -= principal_payment
                records.append(
                    PaymentRecord(
                        sequence_number=period,
                        due_date=add_months(loan.start_date, period),
                        payment_amount=_round(payment),
                        principal_portion=_round(principal_payment),
                        interest_portion=_round(interest_payment),
                        ending_balance=_round(balance),
                    )
                )
        except (Overflow, InvalidOperation, DivisionByZero) as exc:
            raise ComputationOverflowError(
                "Schedule arithmetic overflowed",
                {"principal": str(principal), "annual_rate_percent": str(rate), "term_years": term_years},
            ) from exc
        except (OverflowError, ValueError) as exc:
            # due dates beyond year 9999
            raise ComputationOverflowError(
                "Payment dates fall outside the supported calendar", {"term_years": term_years}
            ) from exc

        total_interest = sum(r.interest_portion for r in records)
        total_cost = principal + Decimal(total_interest)

    logger.debug(
        "Computed %d payments: emi=%s total_interest=%s",
        periods,
        records[0].payment_amount,
        total_interest,
    )
    return Schedule(
        loan=replace(loan, principal=principal, annual_rate_percent=rate),
        monthly_rate=rate_per_month,
        monthly_payment=payment,
        records=tuple(records),
        total_interest=total_interest,
        total_cost=total_cost,
    )
