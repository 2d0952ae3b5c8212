"""Credit utilization analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..models.credit import CreditAccount
from .money import round_half_up

HIGH_ACCOUNT_UTILIZATION = 50.0

_BANDS = (
    (10.0, "excellent", "Excellent credit utilization! Keep it up."),
    (30.0, "good", "Good utilization. Staying under 30% is ideal for credit scores."),
    (50.0, "fair", "Consider paying down balances to get under 30% utilization."),
)
_POOR = ("poor", "High utilization may hurt your credit score. Focus on paying down balances.")


@dataclass(slots=True)
class AccountUtilization:
    account_id: str
    account_name: str
    balance: float
    limit: float
    utilization: float


@dataclass(slots=True)
class CreditUtilization:
    """Aggregate and per-account utilization with a health band."""

    overall: float
    by_account: list[AccountUtilization]
    recommendation: str
    health_status: str


def _percent(balance: float, limit: float) -> float:
    if limit <= 0:
        return 0.0
    return balance / limit * 100


def _health_band(overall: float) -> tuple[str, str]:
    for ceiling, status, recommendation in _BANDS:
        if overall < ceiling:
            return status, recommendation
    return _POOR


def calculate_credit_utilization(
    accounts: Iterable[CreditAccount | Mapping[str, Any]],
) -> CreditUtilization:
    """Return overall and per-account utilization for revolving accounts.

    Accounts without a positive credit limit are ignored.
    """

    parsed = [
        account if isinstance(account, CreditAccount) else CreditAccount.model_validate(dict(account))
        for account in accounts
    ]
    credit_accounts = [account for account in parsed if account.credit_limit > 0]
    if not credit_accounts:
        return CreditUtilization(
            overall=0.0,
            by_account=[],
            recommendation="No credit accounts found",
            health_status="excellent",
        )

    total_balance = sum(abs(account.balance) for account in credit_accounts)
    total_limit = sum(account.credit_limit for account in credit_accounts)
    overall = _percent(total_balance, total_limit)

    by_account = [
        AccountUtilization(
            account_id=account.id,
            account_name=account.name,
            balance=abs(account.balance),
            limit=account.credit_limit,
            utilization=_percent(abs(account.balance), account.credit_limit),
        )
        for account in credit_accounts
    ]

    health_status, recommendation = _health_band(overall)
    high_count = sum(1 for item in by_account if item.utilization > HIGH_ACCOUNT_UTILIZATION)
    if high_count:
        recommendation += f" {high_count} account(s) have over 50% utilization."

    return CreditUtilization(
        overall=round_half_up(overall, 1),
        by_account=sorted(by_account, key=lambda item: item.utilization, reverse=True),
        recommendation=recommendation,
        health_status=health_status,
    )


__all__ = ["AccountUtilization", "CreditUtilization", "calculate_credit_utilization"]
