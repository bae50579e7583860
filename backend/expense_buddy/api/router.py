"""
Main API router.
"""

from fastapi import APIRouter
from expense_buddy.api import categories, expenses, recurring, budgets, dashboard, data

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(expenses.router)
api_router.include_router(recurring.router)
api_router.include_router(budgets.router)
api_router.include_router(dashboard.router)
api_router.include_router(data.router)
