"""Pytest configuration and shared fixtures for CreditWise tests.

This module provides debt/account factories, a Flask application wired to a
temporary data directory, and helper utilities for money assertions.
"""

from __future__ import annotations

from itertools import count

import pytest

from creditwise import create_app
from creditwise.models import CreditAccount, Debt

# =============================================================================
# Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory fixture for creating validated debts.

    Usage:
        debt = debt_factory(balance=5000.0, interest_rate=20.0)
    """
    ids = count(1)

    def _create_debt(
        *,
        id: str | None = None,
        name: str | None = None,
        balance: float = 1000.0,
        interest_rate: float = 12.0,
        minimum_payment: float = 50.0,
        type: str = "credit_card",
        **extra,
    ) -> Debt:
        number = next(ids)
        return Debt(
            id=id or f"debt_{number}",
            name=name or f"Debt {number}",
            type=type,
            balance=balance,
            interest_rate=interest_rate,
            minimum_payment=minimum_payment,
            **extra,
        )

    return _create_debt


@pytest.fixture
def account_factory():
    """Factory fixture for creating revolving credit accounts."""
    ids = count(1)

    def _create_account(*, balance: float, credit_limit: float, name: str | None = None) -> CreditAccount:
        number = next(ids)
        return CreditAccount(
            id=f"acct_{number}",
            name=name or f"Card {number}",
            balance=balance,
            credit_limit=credit_limit,
        )

    return _create_account


@pytest.fixture
def scenario_b_debts(debt_factory):
    """Three debts whose rate order and balance order coincide."""
    return [
        debt_factory(id="mid", balance=3000.0, interest_rate=12.0, minimum_payment=60.0),
        debt_factory(id="large", balance=10000.0, interest_rate=6.0, minimum_payment=150.0),
        debt_factory(id="small", balance=200.0, interest_rate=25.0, minimum_payment=25.0),
    ]


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CREDITWISE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CREDITWISE_DEFAULT_METHOD", raising=False)
    app = create_app("testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
