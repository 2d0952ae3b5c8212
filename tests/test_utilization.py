"""Credit utilization calculator tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from creditwise.services import calculate_credit_utilization
from tests.conftest import assert_float_equal


def test_no_credit_accounts_is_excellent(account_factory):
    """Accounts without a positive limit are ignored entirely."""
    result = calculate_credit_utilization([account_factory(balance=500.0, credit_limit=0.0)])

    assert result.overall == 0.0
    assert result.by_account == []
    assert result.health_status == "excellent"
    assert result.recommendation == "No credit accounts found"


def test_empty_input():
    result = calculate_credit_utilization([])

    assert result.overall == 0.0
    assert result.health_status == "excellent"


def test_overall_uses_aggregate_balance_and_limit(account_factory):
    accounts = [
        account_factory(balance=100.0, credit_limit=4000.0, name="Low"),
        account_factory(balance=500.0, credit_limit=1000.0, name="High"),
    ]

    result = calculate_credit_utilization(accounts)

    assert_float_equal(result.overall, 12.0)
    assert result.health_status == "good"
    assert result.recommendation == "Good utilization. Staying under 30% is ideal for credit scores."
    # Sorted by utilization descending
    assert [item.account_name for item in result.by_account] == ["High", "Low"]
    assert_float_equal(result.by_account[0].utilization, 50.0)
    assert_float_equal(result.by_account[1].utilization, 2.5)


def test_zero_limit_account_excluded_from_breakdown(account_factory):
    accounts = [
        account_factory(balance=200.0, credit_limit=1000.0),
        account_factory(balance=999.0, credit_limit=0.0),
    ]

    result = calculate_credit_utilization(accounts)

    assert len(result.by_account) == 1
    assert_float_equal(result.overall, 20.0)


def test_negative_balances_count_by_magnitude(account_factory):
    result = calculate_credit_utilization([account_factory(balance=-300.0, credit_limit=1000.0)])

    assert_float_equal(result.overall, 30.0)
    assert result.health_status == "fair"
    assert result.by_account[0].balance == 300.0


def test_high_account_note_appended(account_factory):
    accounts = [
        account_factory(balance=900.0, credit_limit=1000.0),
        account_factory(balance=100.0, credit_limit=1000.0),
    ]

    result = calculate_credit_utilization(accounts)

    assert result.health_status == "poor"
    assert result.recommendation.endswith(" 1 account(s) have over 50% utilization.")
    assert result.recommendation.startswith("High utilization may hurt your credit score.")


def test_exactly_fifty_percent_account_is_not_flagged(account_factory):
    result = calculate_credit_utilization([account_factory(balance=250.0, credit_limit=500.0)])

    assert "account(s)" not in result.recommendation


def test_overall_rounded_to_one_decimal(account_factory):
    result = calculate_credit_utilization([account_factory(balance=100.0, credit_limit=300.0)])

    assert result.overall == 33.3


@pytest.mark.parametrize(
    "balance, status",
    [(0.0, "excellent"), (99.0, "excellent"), (100.0, "good"), (299.0, "good"), (300.0, "fair"), (500.0, "poor")],
)
def test_health_bands(account_factory, balance, status):
    result = calculate_credit_utilization([account_factory(balance=balance, credit_limit=1000.0)])

    assert result.health_status == status


def test_utilization_increases_with_balance(account_factory):
    values = [
        calculate_credit_utilization([account_factory(balance=balance, credit_limit=2500.0)]).overall
        for balance in (0.0, 10.0, 250.0, 1200.0, 2500.0, 4000.0)
    ]

    assert values == sorted(values)
    assert values[0] == 0.0


def test_accepts_plain_mappings():
    result = calculate_credit_utilization(
        [{"id": "a", "name": "Visa", "balance": 450.0, "credit_limit": 1500.0}]
    )

    assert_float_equal(result.overall, 30.0)
    assert result.by_account[0].account_id == "a"


@pytest.mark.parametrize("field", ["balance", "credit_limit"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_amounts_rejected(field, value):
    account = {"id": "a", "name": "Visa", "balance": 450.0, "credit_limit": 1500.0}
    account[field] = value

    with pytest.raises(ValidationError):
        calculate_credit_utilization([account])
