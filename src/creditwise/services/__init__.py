"""Credit and debt computations."""

from .credit_score import CreditFactor, CreditScore, estimate_credit_score, get_credit_rating
from .payoff import (
    MAX_MONTHS,
    DebtPayoffSchedule,
    MonthlyPayment,
    PayoffStrategy,
    simulate_payoff,
)
from .strategies import (
    DebtFreedom,
    StrategyComparison,
    calculate_avalanche_payoff,
    calculate_payoff,
    calculate_snowball_payoff,
    compare_strategies,
    get_debt_freedom_date,
    order_avalanche,
    order_snowball,
)
from .utilization import AccountUtilization, CreditUtilization, calculate_credit_utilization

__all__ = [
    "MAX_MONTHS",
    "AccountUtilization",
    "CreditFactor",
    "CreditScore",
    "CreditUtilization",
    "DebtFreedom",
    "DebtPayoffSchedule",
    "MonthlyPayment",
    "PayoffStrategy",
    "StrategyComparison",
    "calculate_avalanche_payoff",
    "calculate_credit_utilization",
    "calculate_payoff",
    "calculate_snowball_payoff",
    "compare_strategies",
    "estimate_credit_score",
    "get_credit_rating",
    "get_debt_freedom_date",
    "order_avalanche",
    "order_snowball",
    "simulate_payoff",
]
