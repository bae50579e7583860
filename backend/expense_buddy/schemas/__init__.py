"""
Pydantic schemas package.
"""

from expense_buddy.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryList,
)
from expense_buddy.schemas.expense import (
    ExpenseBase,
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseListResponse,
)
from expense_buddy.schemas.recurring import (
    RecurringTemplateBase,
    RecurringTemplateCreate,
    RecurringTemplateUpdate,
    RecurringTemplateResponse,
    GenerateRequest,
    GenerateResponse,
)
from expense_buddy.schemas.dashboard import (
    BudgetStatus,
    BudgetSummary,
    BudgetOverview,
    BudgetSaveResponse,
    MonthTrend,
    DashboardSummary,
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryList",
    "ExpenseBase",
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseResponse",
    "ExpenseListResponse",
    "RecurringTemplateBase",
    "RecurringTemplateCreate",
    "RecurringTemplateUpdate",
    "RecurringTemplateResponse",
    "GenerateRequest",
    "GenerateResponse",
    "BudgetStatus",
    "BudgetSummary",
    "BudgetOverview",
    "BudgetSaveResponse",
    "MonthTrend",
    "DashboardSummary",
]
