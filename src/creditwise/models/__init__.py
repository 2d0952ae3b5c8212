"""Validated input models."""

from .credit import CreditAccount, CreditFactorsInput
from .debt import DEBT_TYPES, Debt

__all__ = [
    "CreditAccount",
    "CreditFactorsInput",
    "DEBT_TYPES",
    "Debt",
]
