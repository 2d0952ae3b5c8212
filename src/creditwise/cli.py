"""Flask CLI commands for CreditWise."""

from __future__ import annotations

import json

import click
from pydantic import ValidationError

from .models import Debt
from .services import compare_strategies, estimate_credit_score


def _load_debts(path: str) -> list[Debt]:
    with open(path, encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise click.BadParameter("expected a JSON array of debts", param_hint="DEBTS_FILE")
    try:
        return [
            Debt.model_validate({"id": f"debt_{index}", **item})
            for index, item in enumerate(raw, start=1)
        ]
    except (TypeError, ValidationError) as exc:
        raise click.BadParameter(str(exc), param_hint="DEBTS_FILE") from exc


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("creditwise-compare")
    @click.argument("debts_file", type=click.Path(exists=True, dir_okay=False))
    @click.option("--budget", type=float, required=True, help="Monthly amount available for debts")
    def creditwise_compare(debts_file: str, budget: float) -> None:
        """Compare avalanche and snowball payoff for debts in a JSON file."""

        debts = _load_debts(debts_file)
        try:
            comparison = compare_strategies(debts, budget)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="--budget") from exc
        for strategy in (comparison.avalanche, comparison.snowball):
            months = (
                f"{strategy.months_to_payoff} months"
                if strategy.converged
                else f"not paid off within {strategy.months_to_payoff} months"
            )
            click.echo(f"{strategy.name}: {months}, ${strategy.total_interest:,.2f} interest")
            for schedule in strategy.payoff_order:
                click.echo(f"  month {schedule.payoff_month:>3}  {schedule.debt_name or schedule.debt_id}")
        if comparison.avalanche.insufficient_budget:
            click.echo("Warning: budget is below the sum of minimum payments.")
        click.echo(comparison.recommendation)

    @app.cli.command("creditwise-score")
    @click.option("--utilization", type=click.FloatRange(0, 1), required=True)
    @click.option("--payment-history", type=click.FloatRange(0, 1), required=True)
    @click.option("--age-months", type=click.IntRange(min=0), default=0, show_default=True)
    @click.option("--accounts", type=click.IntRange(min=0), default=0, show_default=True)
    @click.option("--inquiries", type=click.IntRange(min=0), default=0, show_default=True)
    @click.option("--derogatory", type=click.IntRange(min=0), default=0, show_default=True)
    def creditwise_score(
        utilization: float,
        payment_history: float,
        age_months: int,
        accounts: int,
        inquiries: int,
        derogatory: int,
    ) -> None:
        """Estimate a credit score and explain its factors."""

        result = estimate_credit_score(
            {
                "utilization": utilization,
                "payment_history": payment_history,
                "account_age_months": age_months,
                "account_count": accounts,
                "hard_inquiries": inquiries,
                "derogatory_count": derogatory,
            }
        )
        click.echo(f"Estimated score: {result.score} ({result.rating})")
        for factor in result.factors:
            click.echo(f"  [{factor.status}] {factor.name}: {factor.description}")
            if factor.recommendation:
                click.echo(f"      -> {factor.recommendation}")
