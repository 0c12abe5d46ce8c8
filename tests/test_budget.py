"""Tests for budget evaluation and the budget service."""

from datetime import date
from decimal import Decimal

import pytest

from conftest import make_record
from fintrack.domain.budget import (
    build_overview,
    classify_budget,
    evaluate_budget,
    spent_by_category,
)
from fintrack.domain.entities import BudgetLimit, BudgetState, MoneyKind
from fintrack.domain.errors import NotFoundError, ValidationError


def _limit(amount: str, category_id: int = 1, budget_id: int = 1) -> BudgetLimit:
    return BudgetLimit(
        id=budget_id, category_id=category_id, amount=Decimal(amount), month=3, year=2024
    )


def test_warning_scenario():
    status = evaluate_budget(_limit("500"), Decimal("450"))

    assert status.percentage == Decimal("90")
    assert status.remaining == Decimal("50")
    assert status.state == BudgetState.WARNING


@pytest.mark.parametrize(
    "spent,expected",
    [
        ("0.80", BudgetState.WARNING),
        ("1.00", BudgetState.EXCEEDED),
        ("0.799999", BudgetState.ON_TRACK),
        ("0", BudgetState.ON_TRACK),
        ("1.5", BudgetState.EXCEEDED),
    ],
)
def test_classification_boundaries(spent, expected):
    assert evaluate_budget(_limit("1"), Decimal(spent)).state == expected


def test_overage_gives_negative_remaining():
    status = evaluate_budget(_limit("200"), Decimal("260"))

    assert status.remaining == Decimal("-60")
    assert status.percentage == Decimal("130")
    assert status.state == BudgetState.EXCEEDED


def test_zero_limit_without_spending_is_on_track():
    status = evaluate_budget(_limit("0"), Decimal("0"))

    assert status.percentage == 0
    assert status.state == BudgetState.ON_TRACK


def test_zero_limit_with_spending_is_exceeded():
    status = evaluate_budget(_limit("0"), Decimal("5"))

    assert status.percentage == 0
    assert status.remaining == Decimal("-5")
    assert status.state == BudgetState.EXCEEDED


def test_classify_budget_thresholds():
    assert classify_budget(Decimal("79.99")) == BudgetState.ON_TRACK
    assert classify_budget(Decimal("80")) == BudgetState.WARNING
    assert classify_budget(Decimal("100")) == BudgetState.EXCEEDED


def test_spent_by_category_counts_only_expenses_in_period():
    records = [
        make_record(1, "30", MoneyKind.EXPENSE, date(2024, 3, 1), category_id=2),
        make_record(2, "20", MoneyKind.EXPENSE, date(2024, 3, 31), category_id=2),
        make_record(3, "999", MoneyKind.INCOME, date(2024, 3, 10), category_id=2),
        make_record(4, "15", MoneyKind.EXPENSE, date(2024, 4, 1), category_id=2),
        make_record(5, "7", MoneyKind.EXPENSE, date(2024, 3, 9), category_id=3),
    ]

    spent = spent_by_category(records, date(2024, 3, 1), date(2024, 3, 31))

    assert spent == {2: Decimal("50"), 3: Decimal("7")}


def test_build_overview_totals():
    limits = [_limit("100", category_id=2, budget_id=1), _limit("300", category_id=3, budget_id=2)]
    records = [
        make_record(1, "90", MoneyKind.EXPENSE, date(2024, 3, 4), category_id=2),
        make_record(2, "10", MoneyKind.EXPENSE, date(2024, 3, 5), category_id=3),
    ]

    overview = build_overview(limits, records, 3, 2024)

    assert [s.state for s in overview.statuses] == [BudgetState.WARNING, BudgetState.ON_TRACK]
    assert overview.total_budget == Decimal("400")
    assert overview.total_spent == Decimal("100")
    assert overview.total_percentage == Decimal("25")


def test_build_overview_without_limits():
    overview = build_overview([], [], 3, 2024)

    assert overview.statuses == ()
    assert overview.total_percentage == 0


class TestBudgetService:
    def test_set_budget_upserts(self, budget_service, sample_categories):
        food = sample_categories["Food"]

        first_id = budget_service.set_budget(food, Decimal("400"), 3, 2024)
        second_id = budget_service.set_budget(food, Decimal("450"), 3, 2024)

        assert first_id == second_id
        budgets = budget_service.list_budgets(3, 2024)
        assert len(budgets) == 1
        assert budgets[0].amount == Decimal("450")

    def test_same_category_different_month_is_separate(self, budget_service, sample_categories):
        food = sample_categories["Food"]

        budget_service.set_budget(food, Decimal("400"), 3, 2024)
        budget_service.set_budget(food, Decimal("400"), 4, 2024)

        assert len(budget_service.list_budgets(3, 2024)) == 1
        assert len(budget_service.list_budgets(4, 2024)) == 1

    @pytest.mark.parametrize("month,year", [(0, 2024), (13, 2024), (5, 1999)])
    def test_rejects_invalid_period(self, budget_service, sample_categories, month, year):
        with pytest.raises(ValidationError):
            budget_service.set_budget(sample_categories["Food"], Decimal("10"), month, year)

    def test_rejects_negative_amount(self, budget_service, sample_categories):
        with pytest.raises(ValidationError):
            budget_service.set_budget(sample_categories["Food"], Decimal("-1"), 3, 2024)

    def test_rejects_income_category(self, budget_service, sample_categories):
        with pytest.raises(ValidationError, match="expense categories"):
            budget_service.set_budget(sample_categories["Salary"], Decimal("10"), 3, 2024)

    def test_rejects_unknown_category(self, budget_service):
        with pytest.raises(NotFoundError):
            budget_service.set_budget(12345, Decimal("10"), 3, 2024)

    def test_month_overview_uses_month_expenses(
        self, budget_service, transaction_service, sample_categories
    ):
        food = sample_categories["Food"]
        budget_service.set_budget(food, Decimal("500"), 3, 2024)
        transaction_service.create_transaction(Decimal("300"), "expense", food, date(2024, 3, 2))
        transaction_service.create_transaction(Decimal("150"), "expense", food, date(2024, 3, 28))
        transaction_service.create_transaction(Decimal("90"), "expense", food, date(2024, 2, 28))

        overview = budget_service.month_overview(3, 2024)

        assert len(overview.statuses) == 1
        status = overview.statuses[0]
        assert status.spent == Decimal("450")
        assert status.percentage == Decimal("90")
        assert status.remaining == Decimal("50")
        assert status.state == BudgetState.WARNING

    def test_delete_budget(self, budget_service, sample_categories):
        budget_id = budget_service.set_budget(sample_categories["Food"], Decimal("10"), 3, 2024)

        budget_service.delete_budget(budget_id)

        assert budget_service.get_budget(budget_id) is None
        with pytest.raises(NotFoundError):
            budget_service.delete_budget(budget_id)


def test_budget_set_cli(run_cli, sample_categories):
    result = run_cli("budget", "set", "--category", "Food", "--amount", "500", "--month", "3", "--year", "2024")

    assert result.exit_code == 0
    assert "Food limited to $500.00 for March 2024" in result.output


def test_budget_set_cli_income_category(run_cli, sample_categories):
    result = run_cli("budget", "set", "--category", "Salary", "--amount", "500", "--month", "3", "--year", "2024")

    assert result.exit_code == 1
    assert "expense categories" in result.output


def test_budget_set_cli_invalid_amount(run_cli, sample_categories):
    result = run_cli("budget", "set", "--category", "Food", "--amount", "lots")

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_budget_list_cli(run_cli, budget_service, transaction_service, sample_categories):
    food = sample_categories["Food"]
    transport = sample_categories["Transport"]
    budget_service.set_budget(food, Decimal("500"), 3, 2024)
    budget_service.set_budget(transport, Decimal("100"), 3, 2024)
    transaction_service.create_transaction(Decimal("450"), "expense", food, date(2024, 3, 2))
    transaction_service.create_transaction(Decimal("130"), "expense", transport, date(2024, 3, 3))

    result = run_cli("budget", "list", "--month", "3", "--year", "2024")

    assert result.exit_code == 0
    assert "Budgets for March 2024:" in result.output
    assert "Total: $580.00 of $600.00" in result.output
    assert "Warning" in result.output
    assert "$50.00 left" in result.output
    assert "Exceeded" in result.output
    assert "$30.00 over" in result.output


def test_budget_list_cli_empty(run_cli):
    result = run_cli("budget", "list", "--month", "3", "--year", "2024")

    assert result.exit_code == 0
    assert "No budgets set for March 2024." in result.output


def test_budget_delete_cli(run_cli, budget_service, sample_categories):
    budget_id = budget_service.set_budget(sample_categories["Food"], Decimal("10"), 3, 2024)

    result = run_cli("budget", "delete", str(budget_id))

    assert result.exit_code == 0
    assert f"Deleted budget {budget_id}" in result.output

    missing = run_cli("budget", "delete", str(budget_id))
    assert missing.exit_code == 1
    assert f"Budget {budget_id} not found" in missing.output
