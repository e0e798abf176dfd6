from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from emi_calc.data_models import LoanInput


@pytest.fixture()
def one_lakh_loan() -> LoanInput:
    return LoanInput(
        principal=Decimal("100000"),
        annual_rate_percent=Decimal("4"),
        term_years=1,
        start_date=date(2025, 1, 1),
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "EMI_LENDER_NAME",
        "EMI_REFERENCE_NUMBER",
        "EMI_CURRENCY_SYMBOL",
        "EMI_CURRENCY_WORD",
        "EMI_OFFICE_ADDRESSES",
        "EMI_PROCESSING_FEE_LABEL",
        "EMI_LOG_LEVEL",
        "EMI_LOG_JSON",
    ):
        monkeypatch.delenv(key, raising=False)
