"""Tests for budget evaluation."""

import pytest
from datetime import date
from decimal import Decimal

from expense_buddy.models import Category, Expense
from expense_buddy.services.budget_service import (
    evaluate_budgets,
    parse_budget_value,
    summarize_budgets,
)


def make_category(name, budget=None, active=True):
    return Category(name=name, budget=budget, active=active)


def make_expense(category, amount, day=15):
    return Expense(
        date=date(2024, 4, day),
        amount=Decimal(str(amount)),
        category=category,
        payment_method="Card",
        description=""
    )


class TestEvaluateBudgets:
    """Test per-category budget status."""

    def test_under_budget(self):
        statuses = evaluate_budgets(
            [make_category("Food", Decimal("100"))],
            [make_expense("Food", 50), make_expense("Food", 25)]
        )
        assert len(statuses) == 1
        status = statuses[0]
        assert status.category == "Food"
        assert status.spent == Decimal("75")
        assert status.remaining == Decimal("25")
        assert status.is_over_budget is False
        assert status.percent_used == 75.0

    def test_over_budget(self):
        status = evaluate_budgets(
            [make_category("Food", Decimal("100"))],
            [make_expense("Food", 150)]
        )[0]
        assert status.remaining == Decimal("-50")
        assert status.is_over_budget is True

    def test_exactly_at_budget_is_not_over(self):
        status = evaluate_budgets(
            [make_category("Food", Decimal("100"))],
            [make_expense("Food", 100)]
        )[0]
        assert status.remaining == Decimal("0")
        assert status.is_over_budget is False

    def test_unlimited_never_over(self):
        status = evaluate_budgets(
            [make_category("Fun", None)],
            [make_expense("Fun", 9999)]
        )[0]
        assert status.budget is None
        assert status.remaining is None
        assert status.is_over_budget is False
        assert status.percent_used is None

    def test_zero_budget_is_hard_ceiling(self):
        status = evaluate_budgets(
            [make_category("Gadgets", Decimal("0"))],
            [make_expense("Gadgets", 5)]
        )[0]
        assert status.budget == Decimal("0")
        assert status.remaining == Decimal("-5")
        assert status.is_over_budget is True
        assert status.percent_used is None

    def test_zero_budget_without_spend(self):
        status = evaluate_budgets([make_category("Gadgets", Decimal("0"))], [])[0]
        assert status.spent == Decimal("0")
        assert status.remaining == Decimal("0")
        assert status.is_over_budget is False

    def test_no_expenses_means_zero_spent(self):
        status = evaluate_budgets([make_category("Food", Decimal("100"))], [])[0]
        assert status.spent == Decimal("0")
        assert status.remaining == Decimal("100")

    def test_category_match_is_case_sensitive(self):
        """An expense filed under 'food' does not count toward 'Food'."""
        status = evaluate_budgets(
            [make_category("Food", Decimal("100"))],
            [make_expense("food", 80)]
        )[0]
        assert status.spent == Decimal("0")

    def test_inactive_categories_skipped(self):
        statuses = evaluate_budgets(
            [make_category("Food", Decimal("100")), make_category("Old", Decimal("10"), active=False)],
            [make_expense("Old", 50)]
        )
        assert [s.category for s in statuses] == ["Food"]

    def test_preserves_category_order(self):
        names = ["Rent", "Food", "Transport"]
        statuses = evaluate_budgets([make_category(n) for n in names], [])
        assert [s.category for s in statuses] == names

    def test_pure_and_repeatable(self):
        categories = [make_category("Food", Decimal("100")), make_category("Fun")]
        expenses = [make_expense("Food", 40), make_expense("Fun", 10)]
        assert evaluate_budgets(categories, expenses) == evaluate_budgets(categories, expenses)

    def test_fractional_amounts_sum_exactly(self):
        status = evaluate_budgets(
            [make_category("Food", Decimal("100"))],
            [make_expense("Food", "25.50"), make_expense("Food", "30.00"), make_expense("Food", "15.75")]
        )[0]
        assert status.spent == Decimal("71.25")
        assert status.remaining == Decimal("28.75")


class TestParseBudgetValue:
    """Test parsing of user-entered budgets."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_is_unlimited(self, raw):
        assert parse_budget_value(raw) is None

    def test_zero_is_kept(self):
        assert parse_budget_value("0") == Decimal("0")

    def test_number(self):
        assert parse_budget_value("250.5") == Decimal("250.50")
        assert parse_budget_value(125) == Decimal("125.00")

    @pytest.mark.parametrize("raw", ["abc", "-10", "NaN", "Infinity", True, "1e30", "10000000000"])
    def test_invalid_falls_back_to_unlimited(self, raw):
        assert parse_budget_value(raw) is None


class TestSummarizeBudgets:

    def test_totals(self):
        statuses = evaluate_budgets(
            [
                make_category("Food", Decimal("100")),
                make_category("Rent", Decimal("1200")),
                make_category("Fun"),
            ],
            [make_expense("Food", 150), make_expense("Rent", 1200), make_expense("Fun", 30)]
        )
        summary = summarize_budgets(statuses)
        assert summary.total_budget == Decimal("1300")
        assert summary.total_spent == Decimal("1380")
        assert summary.over_budget_count == 1
