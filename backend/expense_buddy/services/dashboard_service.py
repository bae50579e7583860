"""Dashboard aggregates: month totals, category breakdown and trends."""

from datetime import date
from decimal import Decimal
from typing import Any, Iterable, List

from expense_buddy.schemas.dashboard import DashboardSummary, MonthTrend
from expense_buddy.services.budget_service import evaluate_budgets, spending_by_category
from expense_buddy.services.month_service import (
    expenses_in_month,
    month_bounds,
    month_key,
    month_name,
    month_window,
    trailing_months,
)
from expense_buddy.services.recurring_service import generate_recurring_expenses
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore


def total_amount(expenses: Iterable[Any]) -> Decimal:
    return sum((Decimal(str(e.amount)) for e in expenses), Decimal("0"))


def build_summary(
    category_store: CategoryStore,
    expense_store: ExpenseStore,
    recurring_store: RecurringStore,
    year: int,
    month: int,
    today: date,
    auto_generate: bool = True,
) -> DashboardSummary:
    """
    Summary for one month.

    When viewing the current month, recurring templates are reconciled first
    (if enabled) so the totals and budget statuses include the generated
    expenses. Other months are only read; generating for them is an explicit
    POST /recurring/generate.
    """
    generated = []
    if auto_generate and (year, month) == (today.year, today.month):
        generated = generate_recurring_expenses(recurring_store, expense_store, year, month)

    last_year, last_month = month_window(date(year, month, 1), -1)

    current = expense_store.for_month(year, month)
    previous = expense_store.for_month(last_year, last_month)

    current_total = total_amount(current)
    last_total = total_amount(previous)

    return DashboardSummary(
        month=month_key(year, month),
        current_month_name=month_name(month),
        last_month_name=month_name(last_month),
        current_month_total=current_total,
        last_month_total=last_total,
        change=current_total - last_total,
        spending_by_category=spending_by_category(current),
        budget_status=evaluate_budgets(category_store.get_all(), current),
        recurring_generated=len(generated),
    )


def build_trends(expense_store: ExpenseStore, today: date, months: int) -> List[MonthTrend]:
    """Monthly totals for the `months` months ending with today's, oldest first."""
    window = trailing_months(today, months)
    (first_year, first_month), (end_year, end_month) = window[0], window[-1]

    start, _ = month_bounds(first_year, first_month)
    _, end = month_bounds(end_year, end_month)
    expenses = expense_store.between(start, end)

    return [
        MonthTrend(
            month=month_key(y, m),
            year=y,
            month_name=month_name(m),
            total=total_amount(expenses_in_month(expenses, y, m)),
        )
        for y, m in window
    ]
