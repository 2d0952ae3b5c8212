"""Debt input entity."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, SQLModel

DEBT_TYPES = (
    "credit_card",
    "personal_loan",
    "student_loan",
    "mortgage",
    "auto_loan",
    "medical",
    "other",
)


class Debt(SQLModel):
    """Installment or revolving debt fed into payoff simulations.

    Validation happens at construction: negative balances, rates or payments
    raise ``pydantic.ValidationError`` instead of producing nonsensical
    simulations later on. Infinite and NaN amounts are rejected the same way.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(min_length=1, max_length=64)
    name: str = Field(default="", max_length=80)
    type: str = Field(default="other", max_length=32)
    balance: float = Field(ge=0)
    credit_limit: Optional[float] = Field(default=None, ge=0)
    interest_rate: float = Field(default=0.0, ge=0)  # annual percentage
    minimum_payment: float = Field(default=0.0, ge=0)
    due_date: int = Field(default=1, ge=1, le=31)  # day of month
    lender: str = Field(default="Unknown", max_length=80)
    account_id: Optional[str] = Field(default=None, max_length=64)

    @field_validator("type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in DEBT_TYPES:
            raise ValueError(f"Unknown debt type {value!r}; expected one of {', '.join(DEBT_TYPES)}")
        return normalized
