"""
Dashboard API endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from expense_buddy.api.budgets import resolve_month
from expense_buddy.config import settings
from expense_buddy.dependencies import get_category_store, get_expense_store, get_recurring_store
from expense_buddy.schemas.dashboard import DashboardSummary, MonthTrend
from expense_buddy.services import dashboard_service
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
def get_dashboard_summary(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    categories: CategoryStore = Depends(get_category_store),
    expenses: ExpenseStore = Depends(get_expense_store),
    templates: RecurringStore = Depends(get_recurring_store)
):
    """
    Get dashboard summary for a month.
    Returns: current/last month totals, change, spending by category, budget status
    """
    year, m = resolve_month(month)

    return dashboard_service.build_summary(
        categories,
        expenses,
        templates,
        year,
        m,
        today=date.today(),
        auto_generate=settings.auto_generate_recurring,
    )


@router.get("/trends", response_model=list[MonthTrend])
def get_spending_trends(
    months: int = Query(settings.trend_months, ge=1, le=24),
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """
    Get spending totals over the trailing months.
    Returns: [{month, year, month_name, total}, ...]
    """
    return dashboard_service.build_trends(expenses, date.today(), months)
