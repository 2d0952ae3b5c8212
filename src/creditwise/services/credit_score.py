"""Synthetic credit score estimation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from ..models.credit import CreditFactorsInput
from .money import round_half_up

MIN_SCORE = 300
MAX_SCORE = 850

# Share of the 850-point scale carried by each component
PAYMENT_HISTORY_WEIGHT = 0.35
UTILIZATION_WEIGHT = 0.30
CREDIT_AGE_WEIGHT = 0.15
CREDIT_MIX_WEIGHT = 0.10

FULL_CREDIT_AGE_MONTHS = 120
FULL_CREDIT_MIX_ACCOUNTS = 5
INQUIRY_PENALTY = 10
MAX_INQUIRY_PENALTY = 85
DEROGATORY_PENALTY = 50


@dataclass(slots=True)
class CreditFactor:
    """One explained component of an estimated score."""

    name: str
    impact: str  # high | medium | low
    status: str  # positive | negative | neutral
    description: str
    recommendation: str | None = None


@dataclass(slots=True)
class CreditScore:
    """Estimated score with its rating band and factor breakdown."""

    score: int
    rating: str
    factors: list[CreditFactor]
    updated_at: datetime | None = None
    source: str = "estimated"
    history: list[dict] = field(default_factory=list)


def get_credit_rating(score: float) -> str:
    """Map a score onto its rating band."""

    if score >= 800:
        return "excellent"
    if score >= 700:
        return "good"
    if score >= 650:
        return "fair"
    if score >= 550:
        return "poor"
    return "very_poor"


def _points(fraction: float, weight: float) -> int:
    return int(round_half_up(fraction * MAX_SCORE * weight))


def _payment_history_factor(rate: float) -> CreditFactor:
    if rate > 0.95:
        status = "positive"
    elif rate > 0.8:
        status = "neutral"
    else:
        status = "negative"
    return CreditFactor(
        name="Payment History",
        impact="high",
        status=status,
        description=f"{int(round_half_up(rate * 100))}% on-time payments",
        recommendation="Set up autopay to never miss a payment" if rate < 0.95 else None,
    )


def _utilization_factor(utilization: float) -> CreditFactor:
    if utilization < 0.3:
        status = "positive"
    elif utilization < 0.5:
        status = "neutral"
    else:
        status = "negative"
    return CreditFactor(
        name="Credit Utilization",
        impact="high",
        status=status,
        description=f"{int(round_half_up(utilization * 100))}% of credit used",
        recommendation="Try to keep utilization below 30%" if utilization > 0.3 else None,
    )


def _credit_age_factor(months: int) -> CreditFactor:
    if months > 60:
        status = "positive"
    elif months > 24:
        status = "neutral"
    else:
        status = "negative"
    years, remainder = divmod(months, 12)
    return CreditFactor(
        name="Credit Age",
        impact="medium",
        status=status,
        description=f"Average account age: {years} years {remainder} months",
    )


def _credit_mix_factor(count: int) -> CreditFactor:
    return CreditFactor(
        name="Credit Mix",
        impact="low",
        status="positive" if count >= 3 else "neutral",
        description=f"{count} credit accounts",
    )


def estimate_credit_score(
    factors: CreditFactorsInput | Mapping[str, Any],
    *,
    as_of: datetime | None = None,
) -> CreditScore:
    """Estimate a score from raw credit profile signals.

    The model is additive: starting from 300, each component contributes its
    weighted share of the 850-point scale, then inquiry and derogatory
    penalties are subtracted and the result is clamped to [300, 850].
    Factors are returned in computation order (payment history, utilization,
    age, mix, inquiries, derogatories).

    ``as_of`` stamps the result; the estimator never reads the clock itself.
    """

    if not isinstance(factors, CreditFactorsInput):
        factors = CreditFactorsInput.model_validate(dict(factors))

    score = MIN_SCORE
    explained: list[CreditFactor] = []

    score += _points(factors.payment_history, PAYMENT_HISTORY_WEIGHT)
    explained.append(_payment_history_factor(factors.payment_history))

    # Utilization credit decays to zero at 50% usage
    score += _points(1 - min(1.0, factors.utilization * 2), UTILIZATION_WEIGHT)
    explained.append(_utilization_factor(factors.utilization))

    score += _points(min(1.0, factors.account_age_months / FULL_CREDIT_AGE_MONTHS), CREDIT_AGE_WEIGHT)
    explained.append(_credit_age_factor(factors.account_age_months))

    score += _points(min(1.0, factors.account_count / FULL_CREDIT_MIX_ACCOUNTS), CREDIT_MIX_WEIGHT)
    explained.append(_credit_mix_factor(factors.account_count))

    score -= min(factors.hard_inquiries * INQUIRY_PENALTY, MAX_INQUIRY_PENALTY)
    if factors.hard_inquiries > 2:
        explained.append(
            CreditFactor(
                name="Recent Inquiries",
                impact="low",
                status="negative",
                description=f"{factors.hard_inquiries} hard inquiries in last 12 months",
                recommendation="Avoid applying for new credit for a few months",
            )
        )

    if factors.derogatory_count > 0:
        score -= factors.derogatory_count * DEROGATORY_PENALTY
        explained.append(
            CreditFactor(
                name="Derogatory Marks",
                impact="high",
                status="negative",
                description=f"{factors.derogatory_count} negative marks on record",
                recommendation="Consider disputing any errors on your credit report",
            )
        )

    score = max(MIN_SCORE, min(MAX_SCORE, score))
    return CreditScore(
        score=score,
        rating=get_credit_rating(score),
        factors=explained,
        updated_at=as_of,
    )


__all__ = ["CreditFactor", "CreditScore", "estimate_credit_score", "get_credit_rating"]
