"""Conversion of engine results into JSON-ready payloads."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any

from .services import DebtFreedom


def _jsonable(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value


def to_payload(result: Any) -> Any:
    """Return a dict/list structure made of JSON primitives for *result*."""

    if isinstance(result, DebtFreedom):
        return {
            "freedom_date": result.date.isoformat(),
            "converged": result.converged,
            "strategy": to_payload(result.strategy),
        }
    if is_dataclass(result) and not isinstance(result, type):
        return _jsonable(asdict(result))
    return _jsonable(result)

