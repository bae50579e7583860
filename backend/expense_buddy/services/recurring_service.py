"""Service for generating monthly expenses from recurring templates."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Set, Tuple

from expense_buddy.schemas.expense import ExpenseCreate
from expense_buddy.services.month_service import last_day_of_month, in_month

logger = logging.getLogger(__name__)

Fingerprint = Tuple[Decimal, str, str, date]


def template_target_date(template: Any, year: int, month: int) -> date:
    """
    Date a template's expense falls on in the given month.

    Days past the end of the month are clamped to the month's last day,
    so day 31 in February lands on the 28th or 29th, never in March.
    """
    day = min(template.day_of_month, last_day_of_month(year, month))
    return date(year, month, day)


def expense_fingerprint(amount: Any, category: str, description: Optional[str], on: date) -> Fingerprint:
    """
    Key used to decide whether a template already produced this month's expense.

    This is a heuristic: an unrelated expense sharing amount, category,
    description and date is treated as the generated one, and an expense whose
    date was edited afterwards no longer matches.
    """
    return (Decimal(str(amount)), category, description or "", on)


def reconcile_recurring(
    templates: Iterable[Any],
    existing_expenses: Iterable[Any],
    year: int,
    month: int,
) -> List[ExpenseCreate]:
    """
    Work out which active templates still need an expense in (year, month).

    Returns the new, unsaved expenses. Running it again with the returned
    expenses included in `existing_expenses` yields nothing.
    """
    seen: Set[Fingerprint] = {
        expense_fingerprint(e.amount, e.category, e.description, e.date)
        for e in existing_expenses
        if in_month(e.date, year, month)
    }

    created = []
    for template in templates:
        if not template.active:
            continue

        target = template_target_date(template, year, month)
        key = expense_fingerprint(template.amount, template.category, template.description, target)
        if key in seen:
            continue

        created.append(ExpenseCreate(
            date=target,
            amount=template.amount,
            category=template.category,
            payment_method=template.payment_method,
            description=template.description or "",
        ))
        # Identical templates in the same pass only fire once
        seen.add(key)

    return created


def generate_recurring_expenses(recurring_store, expense_store, year: int, month: int) -> List[Any]:
    """
    Reconcile all templates for a month and persist the resulting expenses.

    Returns the saved expense records.
    """
    templates = recurring_store.get_all()
    existing = expense_store.for_month(year, month)

    pending = reconcile_recurring(templates, existing, year, month)
    saved = [expense_store.add(expense.model_dump()) for expense in pending]

    if saved:
        logger.info("Generated %d recurring expense(s) for %04d-%02d", len(saved), year, month)
    return saved
