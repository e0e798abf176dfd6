import logging
import os
from datetime import date

from flask import Flask, jsonify, render_template, request

from emi_calc.certificate import build_certificate, certificate_lines
from emi_calc.config import load_profile, log_json, log_level
from emi_calc.data_models import LoanInput
from emi_calc.engine import compute_schedule
from emi_calc.exceptions import EmiCalcError
from emi_calc.logging_setup import setup_logging
from emi_calc.numbering import format_currency, format_grouped_number, spell_amount
from emi_calc.utils import decimal_from_str, format_display_date, format_numeric_date, parse_amount, parse_date

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
app.jinja_env.filters["grouped"] = format_grouped_number
app.jinja_env.filters["display_date"] = format_display_date
app.jinja_env.filters["numeric_date"] = format_numeric_date

DEFAULT_FORM = {
    "principal": "100000",
    "rate": "4",
    "years": "1",
    "start_date": "",
    "name": "KoS",
    "processing_fees": "1380",
}


def _form_values(form) -> dict:
    values = dict(DEFAULT_FORM)
    values["start_date"] = date.today().isoformat()
    for key in values:
        raw = form.get(key)
        if raw is not None:
            values[key] = str(raw).strip()
    return values


def _values_to_loan(values: dict) -> LoanInput:
    """Convert submitted form values into a ``LoanInput``.

    Raises ``ValueError`` with a user-facing message on malformed fields.
    """
    try:
        years = int(values["years"])
    except ValueError as exc:
        raise ValueError(f"Invalid loan period: {values['years']}") from exc
    return LoanInput(
        principal=parse_amount(values["principal"]),
        annual_rate_percent=decimal_from_str(values["rate"]),
        term_years=years,
        start_date=parse_date(values["start_date"]),
    )


def _json_to_values(payload: dict) -> dict:
    values = _form_values({})
    for key in values:
        if key in payload and payload[key] is not None:
            values[key] = str(payload[key])
    return values


@app.route("/", methods=["GET", "POST"])
def index():
    values = _form_values(request.form)
    profile = load_profile()
    schedule = None
    words = None
    error = None

    if request.method == "POST":
        try:
            schedule = compute_schedule(_values_to_loan(values))
            words = spell_amount(schedule.loan.principal, profile.currency_word)
        except (EmiCalcError, ValueError) as exc:
            logger.warning("Rejected loan form: %s", exc)
            error = str(exc)

    return render_template(
        "index.html",
        values=values,
        schedule=schedule,
        words=words,
        error=error,
        profile=profile,
    )


@app.route("/certificate", methods=["GET", "POST"])
def certificate():
    source = request.form if request.method == "POST" else request.args
    values = _form_values(source)
    profile = load_profile()
    try:
        schedule = compute_schedule(_values_to_loan(values))
        letter = build_certificate(
            schedule,
            values["name"],
            parse_amount(values["processing_fees"] or "0"),
            profile,
        )
    except (EmiCalcError, ValueError) as exc:
        logger.warning("Rejected certificate request: %s", exc)
        return render_template("index.html", values=values, schedule=None, words=None, error=str(exc), profile=profile), 400

    return render_template(
        "certificate.html",
        letter=letter,
        lines=certificate_lines(letter, profile),
        profile=profile,
        values=values,
    )


@app.post("/api/schedule")
def api_schedule():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    try:
        schedule = compute_schedule(_values_to_loan(_json_to_values(payload)))
    except (EmiCalcError, ValueError) as exc:
        logger.warning("Rejected API request: %s", exc)
        return jsonify({"error": str(exc)}), 400
    summary = schedule.to_summary()
    summary["monthly_payment_display"] = format_currency(schedule.emi, load_profile().currency_symbol)
    return jsonify({"summary": summary, "schedule": schedule.to_rows()})


if __name__ == "__main__":
    setup_logging(log_level(), json_format=log_json())
    logger.info("Starting EMI calculator web app...")
    app.run(host="0.0.0.0", port=8710, debug=True)
