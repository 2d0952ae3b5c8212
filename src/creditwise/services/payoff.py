"""Month-by-month debt payoff simulation.

The simulator is ordering-agnostic: it pays debts in whatever priority order
it is handed. Avalanche and snowball are just two ways of producing that
order (see :mod:`creditwise.services.strategies`).

Extra-pool policy: the money left after minimum payments goes, in full, to
the first unpaid debt in priority order. When that debt needs less than it
receives, the surplus is not rolled into the next debt in the same month; the
cleared debt's minimum joins the pool from the following month onwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from ..logging_config import get_logger
from ..models.debt import Debt
from .money import CENT, ZERO, monthly_rate, to_cents, to_float

logger = get_logger(__name__)

MAX_MONTHS = 360
PAID_OFF_THRESHOLD = CENT

METHOD_NAMES = {
    "avalanche": "Avalanche (Highest Interest First)",
    "snowball": "Snowball (Lowest Balance First)",
    "custom": "Custom Order",
}


@dataclass(slots=True)
class MonthlyPayment:
    month: int
    principal: float
    interest: float
    balance: float


@dataclass(slots=True)
class DebtPayoffSchedule:
    """Payment history of a single debt inside a simulation."""

    debt_id: str
    debt_name: str
    original_balance: float
    payoff_month: int
    total_interest_paid: float
    paid_off: bool
    monthly_payments: list[MonthlyPayment] = field(default_factory=list)


@dataclass(slots=True)
class PayoffStrategy:
    """Outcome of paying a set of debts in a given order with a fixed budget.

    ``converged`` is False when the month cap was reached with debts still
    open; ``months_to_payoff`` is then the cap itself. ``insufficient_budget``
    reports a budget below the sum of minimum payments.
    """

    name: str
    method: str
    total_debt: float
    total_interest: float
    months_to_payoff: int
    monthly_payment: float
    payoff_order: list[DebtPayoffSchedule]
    converged: bool = True
    insufficient_budget: bool = False


@dataclass(slots=True)
class _WorkingDebt:
    debt: Debt
    remaining: Decimal
    rate: Decimal
    minimum: Decimal
    paid_off: bool = False
    payoff_month: int | None = None
    interest_paid: Decimal = ZERO
    rows: list[MonthlyPayment] = field(default_factory=list)


def _first_active(working: Sequence[_WorkingDebt]) -> _WorkingDebt | None:
    for item in working:
        if not item.paid_off:
            return item
    return None


def _build_schedule(item: _WorkingDebt) -> DebtPayoffSchedule:
    return DebtPayoffSchedule(
        debt_id=item.debt.id,
        debt_name=item.debt.name,
        original_balance=item.debt.balance,
        payoff_month=item.payoff_month if item.payoff_month is not None else len(item.rows),
        total_interest_paid=to_float(item.interest_paid),
        paid_off=item.paid_off,
        monthly_payments=item.rows,
    )


def simulate_payoff(
    ordered_debts: Sequence[Debt],
    monthly_budget: float,
    *,
    method: str = "custom",
) -> PayoffStrategy:
    """Simulate paying *ordered_debts* in priority order with a monthly budget.

    Each month, every open debt accrues interest (rounded half-up to the cent)
    and receives its minimum payment; the first open debt also receives the
    whole extra pool. Payments are funded from the budget in priority order,
    so a budget below the minimums starves the lowest-priority debts. Unpaid
    interest is not capitalized, which keeps every balance non-increasing.

    The loop stops when all debts are cleared or after ``MAX_MONTHS`` months.

    Raises:
        ValueError: if ``monthly_budget`` is negative or not finite.
    """

    if not math.isfinite(monthly_budget):
        raise ValueError("Monthly budget must be a finite number.")
    if monthly_budget < 0:
        raise ValueError("Monthly budget cannot be negative.")

    budget = to_cents(monthly_budget)
    working = [
        _WorkingDebt(
            debt=debt,
            remaining=to_cents(debt.balance),
            rate=monthly_rate(debt.interest_rate),
            minimum=to_cents(debt.minimum_payment),
        )
        for debt in ordered_debts
    ]

    minimum_total = sum((item.minimum for item in working), ZERO)
    extra_pool = max(ZERO, budget - minimum_total)
    last_payoff_month = 0

    for month in range(1, MAX_MONTHS + 1):
        target = _first_active(working)
        if target is None:
            break

        funds = budget
        freed_minimums = ZERO
        for item in working:
            if item.paid_off:
                continue

            interest = to_cents(item.remaining * item.rate)
            item.interest_paid += interest

            payment = item.minimum
            if item is target:
                payment += extra_pool
            payment = min(payment, funds)
            # The full payment leaves the budget even if the debt needs less.
            funds -= payment

            principal = min(max(payment - interest, ZERO), item.remaining)
            item.remaining -= principal

            if item.remaining <= PAID_OFF_THRESHOLD:
                principal += item.remaining
                item.remaining = ZERO
                item.paid_off = True
                item.payoff_month = month
                last_payoff_month = month
                freed_minimums += item.minimum

            item.rows.append(
                MonthlyPayment(
                    month=month,
                    principal=to_float(principal),
                    interest=to_float(interest),
                    balance=to_float(item.remaining),
                )
            )

        extra_pool += freed_minimums

    converged = all(item.paid_off for item in working)
    total_interest = sum((item.interest_paid for item in working), ZERO)
    total_debt = sum((to_cents(item.debt.balance) for item in working), ZERO)
    schedules = sorted(
        (_build_schedule(item) for item in working),
        key=lambda schedule: schedule.payoff_month,
    )

    strategy = PayoffStrategy(
        name=METHOD_NAMES.get(method, method),
        method=method,
        total_debt=to_float(total_debt),
        total_interest=to_float(total_interest),
        months_to_payoff=last_payoff_month if converged else MAX_MONTHS,
        monthly_payment=float(monthly_budget),
        payoff_order=schedules,
        converged=converged,
        insufficient_budget=budget < minimum_total,
    )

    logger.debug(
        "Simulated %s payoff for %d debts: %d months, %.2f interest",
        method,
        len(working),
        strategy.months_to_payoff,
        strategy.total_interest,
    )
    if not converged:
        logger.warning(
            "Payoff did not converge within %d months",
            MAX_MONTHS,
            extra={
                "method": method,
                "monthly_budget": float(monthly_budget),
                "minimum_total": to_float(minimum_total),
                "open_debts": sum(1 for item in working if not item.paid_off),
            },
        )
    return strategy


__all__ = [
    "MAX_MONTHS",
    "DebtPayoffSchedule",
    "MonthlyPayment",
    "PayoffStrategy",
    "simulate_payoff",
]
