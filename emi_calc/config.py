"""Environment-driven settings.

The web app and the CLI read their cosmetic settings from environment
variables so that one deployment can render letters for a different lender
without code changes.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .data_models import CertificateProfile

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _split_addresses(raw: str):
    return tuple(part.strip() for part in raw.split("|") if part.strip())


def load_profile(environ: Optional[Mapping[str, str]] = None) -> CertificateProfile:
    """Build a ``CertificateProfile`` from ``EMI_*`` environment variables.

    Unset variables fall back to the ``CertificateProfile`` defaults.
    ``EMI_OFFICE_ADDRESSES`` holds one or more addresses separated by ``|``.
    """
    env = os.environ if environ is None else environ
    defaults = CertificateProfile()
    return CertificateProfile(
        lender_name=env.get("EMI_LENDER_NAME", defaults.lender_name),
        reference_number=env.get("EMI_REFERENCE_NUMBER", defaults.reference_number),
        currency_symbol=env.get("EMI_CURRENCY_SYMBOL", defaults.currency_symbol),
        currency_word=env.get("EMI_CURRENCY_WORD", defaults.currency_word),
        office_addresses=_split_addresses(env.get("EMI_OFFICE_ADDRESSES", "")),
        processing_fee_label=env.get("EMI_PROCESSING_FEE_LABEL", defaults.processing_fee_label),
        closing_note=defaults.closing_note,
    )


def log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return ``EMI_LOG_LEVEL`` upper-cased; raises ``ValueError`` for unknown levels."""
    env = os.environ if environ is None else environ
    level = env.get("EMI_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


def log_json(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("EMI_LOG_JSON", "").lower() in ("1", "true", "yes")
