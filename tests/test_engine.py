from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from emi_calc.data_models import LoanInput
from emi_calc.engine import compute_schedule
from emi_calc.exceptions import ComputationOverflowError, InvalidInputError


def make_loan(principal=100000, rate=4, years=1, start=date(2025, 1, 1)) -> LoanInput:
    return LoanInput(principal=principal, annual_rate_percent=rate, term_years=years, start_date=start)


def test_one_lakh_at_four_percent(one_lakh_loan):
    schedule = compute_schedule(one_lakh_loan)

    assert schedule.payment_count == 12
    first, last = schedule.records[0], schedule.records[-1]
    assert first.interest_portion == 333
    assert first.payment_amount == 8515
    assert first.principal_portion == 8182
    assert first.due_date == date(2025, 2, 1)
    assert last.due_date == date(2026, 1, 1)
    assert last.ending_balance == 0
    assert 2170 < schedule.total_interest < 2190


def test_records_are_contiguous_and_consistent():
    schedule = compute_schedule(make_loan(principal=750000, rate=Decimal("9.5"), years=5))

    assert [r.sequence_number for r in schedule.records] == list(range(1, 61))
    payments = {r.payment_amount for r in schedule.records}
    assert len(payments) == 1
    for record in schedule.records:
        assert abs(record.principal_portion + record.interest_portion - record.payment_amount) <= 1
    balances = [r.ending_balance for r in schedule.records]
    assert balances == sorted(balances, reverse=True)
    assert abs(balances[-1]) <= 1


def test_total_cost_is_principal_plus_rounded_interest():
    schedule = compute_schedule(make_loan(principal=500000, rate=4, years=3))

    assert schedule.payment_count == 36
    assert schedule.total_interest == sum(r.interest_portion for r in schedule.records)
    assert schedule.total_cost == Decimal(500000) + schedule.total_interest
    # declining balance means less than simple interest on the full principal
    assert 0 < schedule.total_interest < 500000 * 4 / 100 * 3


def test_zero_rate_splits_principal_evenly():
    schedule = compute_schedule(make_loan(principal=120000, rate=0, years=1))

    assert all(r.interest_portion == 0 for r in schedule.records)
    assert all(r.payment_amount == 10000 for r in schedule.records)
    assert schedule.records[0].ending_balance == 110000
    assert schedule.records[-1].ending_balance == 0
    assert schedule.total_interest == 0
    assert schedule.total_cost == Decimal(120000)


def test_same_input_gives_same_schedule(one_lakh_loan):
    assert compute_schedule(one_lakh_loan) == compute_schedule(one_lakh_loan)


def test_float_inputs_are_accepted():
    schedule = compute_schedule(make_loan(principal=100000.0, rate=4.0))

    assert schedule.loan.principal == Decimal("100000.0")
    assert schedule.emi == 8515


def test_month_end_start_rolls_over():
    schedule = compute_schedule(make_loan(start=date(2025, 1, 31)))

    dates = [r.due_date for r in schedule.records]
    assert dates[0] == date(2025, 3, 3)
    assert dates[1] == date(2025, 3, 31)
    assert dates[2] == date(2025, 5, 1)


def test_month_end_start_rolls_over_in_leap_year():
    schedule = compute_schedule(make_loan(start=date(2024, 1, 31)))

    assert schedule.records[0].due_date == date(2024, 3, 2)


@pytest.mark.parametrize(
    "loan",
    [
        make_loan(years=0),
        make_loan(years=-2),
        make_loan(principal=-1),
        make_loan(principal=0),
        make_loan(rate=-0.5),
        make_loan(principal=float("nan")),
        make_loan(rate=Decimal("Infinity")),
    ],
)
def test_invalid_inputs_are_rejected(loan):
    with pytest.raises(InvalidInputError):
        compute_schedule(loan)


def test_fractional_term_is_rejected():
    with pytest.raises(InvalidInputError):
        compute_schedule(make_loan(years=1.5))


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError, match="Term must be positive"):
        compute_schedule(make_loan(years=0))


def test_extreme_rate_overflows():
    with pytest.raises(ComputationOverflowError):
        compute_schedule(make_loan(rate=Decimal("1e500000")))


def test_dates_past_year_9999_overflow():
    with pytest.raises(ComputationOverflowError):
        compute_schedule(make_loan(years=8000))


@pytest.mark.parametrize("rate", ["1e-20", "1e-22", "1e-25", "1e-30", "1e-5000"])
def test_tiny_rate_amortizes_like_zero_rate(rate):
    schedule = compute_schedule(make_loan(rate=Decimal(rate)))

    assert schedule.emi == 8333
    assert all(r.interest_portion == 0 for r in schedule.records)
    assert abs(schedule.records[-1].ending_balance) <= 1
