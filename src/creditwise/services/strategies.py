"""Avalanche/snowball orderings, strategy comparison and debt freedom dates."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from ..models.debt import Debt
from .payoff import PayoffStrategy, simulate_payoff

SAVINGS_THRESHOLD = 500.0
QUICK_WIN_BALANCE = 1000.0


@dataclass(slots=True)
class StrategyComparison:
    avalanche: PayoffStrategy
    snowball: PayoffStrategy
    savings: float
    months_saved: int
    recommendation: str


@dataclass(slots=True)
class DebtFreedom:
    """Projected debt-free date for a strategy."""

    date: date
    strategy: PayoffStrategy

    @property
    def converged(self) -> bool:
        return self.strategy.converged


def order_avalanche(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts by APR, highest first. Equal rates keep their input order."""
    return sorted(debts, key=lambda d: d.interest_rate, reverse=True)


def order_snowball(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts by balance, smallest first. Equal balances keep their input order."""
    return sorted(debts, key=lambda d: d.balance)


def calculate_avalanche_payoff(debts: Iterable[Debt], monthly_budget: float) -> PayoffStrategy:
    """Return payoff projection prioritizing highest APR first."""
    return simulate_payoff(order_avalanche(debts), monthly_budget, method="avalanche")


def calculate_snowball_payoff(debts: Iterable[Debt], monthly_budget: float) -> PayoffStrategy:
    """Return payoff projection prioritizing smallest balances first."""
    return simulate_payoff(order_snowball(debts), monthly_budget, method="snowball")


def calculate_payoff(debts: Iterable[Debt], monthly_budget: float, method: str) -> PayoffStrategy:
    """Compute the projection for a strategy given by name."""
    if method == "avalanche":
        return calculate_avalanche_payoff(debts, monthly_budget)
    if method == "snowball":
        return calculate_snowball_payoff(debts, monthly_budget)
    raise ValueError("Invalid debt payoff strategy.")


def _recommendation(debts: list[Debt], savings: float, months_saved: int) -> str:
    if savings > SAVINGS_THRESHOLD:
        return (
            f"Avalanche method saves ${savings:.0f} in interest and pays off "
            f"{abs(months_saved)} months faster. Recommended for maximum savings."
        )
    if any(debt.balance < QUICK_WIN_BALANCE for debt in debts):
        return (
            "Snowball method provides quick wins by eliminating small debts first. "
            "The psychological boost may help you stay motivated."
        )
    return (
        "Both methods are similar for your debt profile. Choose based on whether you "
        "prefer quick wins (Snowball) or maximum savings (Avalanche)."
    )


def compare_strategies(debts: Iterable[Debt], monthly_budget: float) -> StrategyComparison:
    """Run both strategies on the same debts and recommend one."""

    debts = list(debts)
    avalanche = calculate_avalanche_payoff(debts, monthly_budget)
    snowball = calculate_snowball_payoff(debts, monthly_budget)

    savings = round(snowball.total_interest - avalanche.total_interest, 2)
    months_saved = snowball.months_to_payoff - avalanche.months_to_payoff
    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        savings=savings,
        months_saved=months_saved,
        recommendation=_recommendation(debts, savings, months_saved),
    )


def add_months(start: date, months: int) -> date:
    """Shift *start* by whole calendar months, clamping to the month's last day."""

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


def get_debt_freedom_date(
    debts: Iterable[Debt],
    monthly_budget: float,
    method: str = "avalanche",
    *,
    now: date | datetime,
) -> DebtFreedom:
    """Project the date the last debt is cleared, counted from *now*.

    If the strategy does not converge the date sits at the simulation cap;
    check ``DebtFreedom.converged`` before presenting it as a payoff date.
    """

    strategy = calculate_payoff(debts, monthly_budget, method)
    return DebtFreedom(date=add_months(now, strategy.months_to_payoff), strategy=strategy)


__all__ = [
    "DebtFreedom",
    "StrategyComparison",
    "add_months",
    "calculate_avalanche_payoff",
    "calculate_payoff",
    "calculate_snowball_payoff",
    "compare_strategies",
    "get_debt_freedom_date",
    "order_avalanche",
    "order_snowball",
]
