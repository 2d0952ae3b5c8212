"""Credit routes."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from flask import current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from creditwise.logging_config import get_logger
from creditwise.models import Debt
from creditwise.serializers import to_payload
from creditwise.services import (
    calculate_avalanche_payoff,
    calculate_credit_utilization,
    calculate_snowball_payoff,
    compare_strategies,
    estimate_credit_score,
    get_debt_freedom_date,
)

from . import bp

logger = get_logger(__name__)

PAYOFF_ACTIONS = ("payoff-avalanche", "payoff-snowball", "compare", "freedom-date")


def _error(message: str, status: int = 400, **details):
    return jsonify({"error": message, **details}), status


def _validation_error(exc: ValidationError):
    logger.info("Rejected credit request", extra={"errors": exc.error_count()})
    return _error(
        "validation_failed",
        details=exc.errors(include_url=False, include_context=False, include_input=False),
    )


def _parse_debts(raw) -> list[Debt]:
    """Build validated debts from a JSON list, filling the optional fields."""

    debts = []
    for index, item in enumerate(raw, start=1):
        if not isinstance(item, dict):
            raise ValueError("Each debt must be a JSON object")
        data = dict(item)
        data.setdefault("id", f"debt_{index}")
        debts.append(Debt.model_validate(data))
    return debts


@bp.get("/score")
def credit_score():
    """Estimate a credit score from query-string factors."""

    try:
        score = estimate_credit_score(request.args.to_dict(), as_of=datetime.now(timezone.utc))
    except ValidationError as exc:
        return _validation_error(exc)
    return jsonify({"score": to_payload(score)})


@bp.get("/utilization")
def credit_utilization():
    """Analyze utilization for a JSON-encoded ``accounts`` list."""

    accounts_param = request.args.get("accounts")
    try:
        accounts = json.loads(accounts_param) if accounts_param else []
    except json.JSONDecodeError:
        return _error("accounts must be a JSON array")
    if not isinstance(accounts, list) or not all(isinstance(a, dict) for a in accounts):
        return _error("accounts must be a JSON array")

    try:
        utilization = calculate_credit_utilization(accounts)
    except ValidationError as exc:
        return _validation_error(exc)
    return jsonify({"utilization": to_payload(utilization)})


@bp.post("/payoff")
def payoff():
    """Run payoff projections for the posted debts."""

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    action = body.get("action")
    raw_debts = body.get("debts")
    if not isinstance(raw_debts, list):
        return _error("Debts array is required")

    raw_budget = body.get("monthly_budget")
    if isinstance(raw_budget, bool):
        return _error("monthly_budget must be a number")
    try:
        monthly_budget = float(raw_budget)
    except (TypeError, ValueError):
        return _error("monthly_budget must be a number")

    try:
        debts = _parse_debts(raw_debts)
        if action == "payoff-avalanche":
            return jsonify({"strategy": to_payload(calculate_avalanche_payoff(debts, monthly_budget))})
        if action == "payoff-snowball":
            return jsonify({"strategy": to_payload(calculate_snowball_payoff(debts, monthly_budget))})
        if action == "compare":
            return jsonify({"comparison": to_payload(compare_strategies(debts, monthly_budget))})
        if action == "freedom-date":
            method = body.get("method") or current_app.config["CREDITWISE_CONFIG"].DEFAULT_PAYOFF_METHOD
            freedom = get_debt_freedom_date(
                debts, monthly_budget, method, now=datetime.now(timezone.utc).date()
            )
            return jsonify(to_payload(freedom))
    except ValidationError as exc:
        return _validation_error(exc)
    except ValueError as exc:
        logger.info("Rejected payoff request: %s", exc)
        return _error(str(exc))

    return _error(f"Invalid action. Use: {', '.join(PAYOFF_ACTIONS)}")


@bp.errorhandler(Exception)
def _unexpected(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Credit API error")
    return _error("Failed to process credit request", status=500)
