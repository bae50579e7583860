"""
Budget evaluation for a single month.

A category budget has three states:
  * None      - unlimited, never over budget
  * 0         - hard zero ceiling, any spend is over budget
  * positive  - ceiling, over budget once spend exceeds it

Expenses are attributed to categories by exact, case-sensitive name match.
"""

import logging
from collections import defaultdict
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

from expense_buddy.schemas.dashboard import BudgetStatus, BudgetSummary

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Largest value a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def parse_budget_value(raw: Any) -> Optional[Decimal]:
    """
    Turn a user-entered budget into the stored tri-state value.

    Blank input means unlimited. Input that is not a finite, non-negative
    number also falls back to unlimited instead of raising.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        logger.warning("Ignoring boolean budget value %r, treating as unlimited", raw)
        return None

    text = str(raw).strip()
    if text == "":
        return None

    try:
        value = Decimal(text)
    except InvalidOperation:
        logger.warning("Unparseable budget value %r, treating as unlimited", raw)
        return None

    if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
        logger.warning("Out of range budget value %r, treating as unlimited", raw)
        return None

    return value.quantize(CENTS)


def spending_by_category(expenses: Iterable[Any]) -> Dict[str, Decimal]:
    """Sum expense amounts per category name."""
    totals: Dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
    for expense in expenses:
        totals[expense.category] += Decimal(str(expense.amount))
    return dict(totals)


def evaluate_category(name: str, budget: Optional[Decimal], spent: Decimal) -> BudgetStatus:
    """Budget status for one category given what was spent."""
    if budget is None:
        return BudgetStatus(
            category=name,
            budget=None,
            spent=spent,
            remaining=None,
            is_over_budget=False,
        )

    budget = Decimal(str(budget))
    percent_used = round(float(spent / budget * 100), 1) if budget > 0 else None

    return BudgetStatus(
        category=name,
        budget=budget,
        spent=spent,
        remaining=budget - spent,
        is_over_budget=spent > budget,
        percent_used=percent_used,
    )


def evaluate_budgets(categories: Iterable[Any], expenses_for_month: Iterable[Any]) -> List[BudgetStatus]:
    """
    Compute spent/remaining/over-budget status for each active category.

    `expenses_for_month` must already be restricted to the month being
    evaluated. Inactive categories are skipped; output follows input order.
    """
    totals = spending_by_category(expenses_for_month)

    return [
        evaluate_category(cat.name, cat.budget, totals.get(cat.name, Decimal("0")))
        for cat in categories
        if cat.active
    ]


def summarize_budgets(statuses: Iterable[BudgetStatus]) -> BudgetSummary:
    """Totals across categories for the budgets overview."""
    total_budget = Decimal("0")
    total_spent = Decimal("0")
    over_budget_count = 0

    for status in statuses:
        if status.budget is not None:
            total_budget += status.budget
        total_spent += status.spent
        if status.is_over_budget:
            over_budget_count += 1

    return BudgetSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        over_budget_count=over_budget_count,
    )
