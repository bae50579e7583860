"""
Expense API endpoints.
"""

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from expense_buddy.config import settings
from expense_buddy.dependencies import get_db, get_category_store, get_expense_store
from expense_buddy.models import Expense
from expense_buddy.services.month_service import month_window
from expense_buddy.services.store import CategoryStore, ExpenseStore
from expense_buddy.schemas.expense import (
    ExpenseCreate,
    ExpenseUpdate,
    ExpenseResponse,
    ExpenseListResponse,
)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def require_active_category(categories: CategoryStore, name: str) -> None:
    category = categories.get_by_exact_name(name)
    if not category or not category.active:
        raise HTTPException(
            status_code=400,
            detail="Selected category does not exist or is inactive"
        )


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    category: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    search: Optional[str] = None,
    sort_by: Literal["date", "amount"] = "date",
    sort_order: Literal["asc", "desc"] = "desc",
    db: Session = Depends(get_db)
):
    """
    List expenses with filtering and sorting.

    Without a date range only the last few months are returned. A reversed
    range is swapped rather than rejected.
    """
    if start_date is None and end_date is None:
        year, month = month_window(date.today(), -settings.expense_default_window_months)
        start_date = date(year, month, 1)
    elif start_date and end_date and start_date > end_date:
        start_date, end_date = end_date, start_date

    query = db.query(Expense)

    if category and category != "all":
        query = query.filter(Expense.category == category)
    if start_date:
        query = query.filter(Expense.date >= start_date)
    if end_date:
        query = query.filter(Expense.date <= end_date)
    if search:
        search_term = f"%{search}%"
        query = query.filter(
            or_(
                Expense.description.ilike(search_term),
                Expense.category.ilike(search_term)
            )
        )

    column = Expense.amount if sort_by == "amount" else Expense.date
    ordering = column.asc() if sort_order == "asc" else column.desc()
    expenses = query.order_by(ordering, Expense.created_at).all()

    return ExpenseListResponse(
        items=[ExpenseResponse.model_validate(e) for e in expenses],
        total=len(expenses),
        amount_total=sum((e.amount for e in expenses), Decimal("0"))
    )


@router.post("", response_model=ExpenseResponse, status_code=201)
def create_expense(
    expense: ExpenseCreate,
    expenses: ExpenseStore = Depends(get_expense_store),
    categories: CategoryStore = Depends(get_category_store)
):
    """Create a new expense in an active category."""
    require_active_category(categories, expense.category)
    return expenses.add(expense.model_dump())


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(
    expense_id: str,
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """Get a single expense"""
    expense = expenses.get(expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.patch("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: str,
    update: ExpenseUpdate,
    expenses: ExpenseStore = Depends(get_expense_store),
    categories: CategoryStore = Depends(get_category_store)
):
    """Update an expense"""
    if not expenses.get(expense_id):
        raise HTTPException(status_code=404, detail="Expense not found")

    update_data = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}
    if "category" in update_data:
        require_active_category(categories, update_data["category"])

    return expenses.update(expense_id, update_data)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(
    expense_id: str,
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """Delete an expense"""
    if not expenses.remove(expense_id):
        raise HTTPException(status_code=404, detail="Expense not found")
    return None
