"""
Data management endpoints: CSV export/import and reset.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from expense_buddy.dependencies import get_category_store, get_expense_store, get_recurring_store
from expense_buddy.schemas.data import CsvImportRequest, CsvImportResponse, ResetResponse
from expense_buddy.services import csv_service
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export/csv")
def export_csv(expenses: ExpenseStore = Depends(get_expense_store)):
    """Download all expenses as CSV."""
    content = csv_service.export_expenses_csv(expenses.get_all())
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=expenses.csv"}
    )


@router.post("/import/csv", response_model=CsvImportResponse)
def import_csv(
    request: CsvImportRequest,
    categories: CategoryStore = Depends(get_category_store),
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """Import expenses from CSV text; bad rows are reported, not fatal."""
    imported, errors = csv_service.import_expenses_csv(request.csv_content, categories, expenses)

    message = f"Imported {imported} expense(s)."
    if errors:
        message += " Errors: " + "; ".join(errors)

    return CsvImportResponse(imported=imported, errors=errors, message=message)


@router.post("/reset", response_model=ResetResponse)
def reset_data(
    categories: CategoryStore = Depends(get_category_store),
    expenses: ExpenseStore = Depends(get_expense_store),
    templates: RecurringStore = Depends(get_recurring_store)
):
    """Delete all expenses, categories and recurring templates."""
    result = ResetResponse(
        expenses_deleted=expenses.clear(),
        recurring_deleted=templates.clear(),
        categories_deleted=categories.clear(),
    )
    logger.warning(
        "All data reset: %d expenses, %d categories, %d recurring templates deleted",
        result.expenses_deleted, result.categories_deleted, result.recurring_deleted
    )
    return result
