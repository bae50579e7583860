"""
Budget API endpoints.
"""

from datetime import date
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from expense_buddy.dependencies import get_category_store, get_expense_store
from expense_buddy.schemas.dashboard import BudgetOverview, BudgetSaveResponse
from expense_buddy.services.budget_service import evaluate_budgets, parse_budget_value, summarize_budgets
from expense_buddy.services.month_service import month_key, parse_month_key
from expense_buddy.services.store import CategoryStore, ExpenseStore

router = APIRouter(prefix="/budgets", tags=["budgets"])


def resolve_month(month: Optional[str]) -> tuple:
    """(year, month) from a YYYY-MM query value, defaulting to today."""
    if not month:
        today = date.today()
        return today.year, today.month
    try:
        return parse_month_key(month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=BudgetOverview)
def get_budgets(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    categories: CategoryStore = Depends(get_category_store),
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """Budget status of every active category for a month."""
    year, m = resolve_month(month)

    statuses = evaluate_budgets(categories.get_all(), expenses.for_month(year, m))

    return BudgetOverview(
        month=month_key(year, m),
        items=statuses,
        summary=summarize_budgets(statuses)
    )


@router.put("", response_model=BudgetSaveResponse)
def save_budgets(
    budgets: Dict[str, Any] = Body(..., description="category_id -> budget; blank means unlimited"),
    categories: CategoryStore = Depends(get_category_store)
):
    """
    Save budgets for several categories at once.

    Empty values mean unlimited, 0 means no spending allowed. Values that
    don't parse as a non-negative number are stored as unlimited.
    """
    updated = 0
    not_found = []

    for category_id, raw_value in budgets.items():
        if categories.update(category_id, {"budget": parse_budget_value(raw_value)}) is None:
            not_found.append(category_id)
        else:
            updated += 1

    return BudgetSaveResponse(updated=updated, not_found=not_found)
