"""Inputs for credit score estimation and utilization analysis."""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class CreditFactorsInput(SQLModel):
    """Raw credit profile signals used by the score estimator."""

    model_config = ConfigDict(allow_inf_nan=False)

    utilization: float = Field(ge=0, le=1)  # share of revolving limit in use
    payment_history: float = Field(ge=0, le=1)  # on-time payment rate
    account_age_months: int = Field(default=0, ge=0)
    account_count: int = Field(default=0, ge=0)
    hard_inquiries: int = Field(default=0, ge=0)
    derogatory_count: int = Field(default=0, ge=0)


class CreditAccount(SQLModel):
    """A revolving account with its current balance and limit.

    Balances may be reported as negative numbers by some institutions; the
    utilization calculator uses their magnitude.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    name: str = Field(default="")
    balance: float = 0.0
    credit_limit: float = 0.0
