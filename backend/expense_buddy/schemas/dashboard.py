"""
Dashboard and budget schemas.
"""

from pydantic import BaseModel
from decimal import Decimal
from typing import Dict, List, Optional


class BudgetStatus(BaseModel):
    category: str
    budget: Optional[Decimal]
    spent: Decimal
    remaining: Optional[Decimal]
    is_over_budget: bool
    percent_used: Optional[float] = None


class BudgetSummary(BaseModel):
    total_budget: Decimal
    total_spent: Decimal
    over_budget_count: int


class BudgetOverview(BaseModel):
    month: str
    items: List[BudgetStatus]
    summary: BudgetSummary


class BudgetSaveResponse(BaseModel):
    updated: int
    not_found: List[str]


class MonthTrend(BaseModel):
    month: str
    year: int
    month_name: str
    total: Decimal


class DashboardSummary(BaseModel):
    month: str
    current_month_name: str
    last_month_name: str
    current_month_total: Decimal
    last_month_total: Decimal
    change: Decimal
    spending_by_category: Dict[str, Decimal]
    budget_status: List[BudgetStatus]
    recurring_generated: int
