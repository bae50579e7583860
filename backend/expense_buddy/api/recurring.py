"""API endpoints for recurring expense templates."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from expense_buddy.dependencies import get_category_store, get_expense_store, get_recurring_store
from expense_buddy.schemas.expense import ExpenseResponse
from expense_buddy.schemas.recurring import (
    RecurringTemplateCreate,
    RecurringTemplateUpdate,
    RecurringTemplateResponse,
    GenerateRequest,
    GenerateResponse,
)
from expense_buddy.services import recurring_service
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore

router = APIRouter(prefix="/recurring", tags=["recurring"])


@router.get("", response_model=List[RecurringTemplateResponse])
def get_recurring_templates(
    include_inactive: bool = Query(True),
    templates: RecurringStore = Depends(get_recurring_store)
):
    """Get all recurring templates."""
    return templates.get_all() if include_inactive else templates.get_active()


@router.post("", response_model=RecurringTemplateResponse, status_code=201)
def create_recurring_template(
    data: RecurringTemplateCreate,
    templates: RecurringStore = Depends(get_recurring_store),
    categories: CategoryStore = Depends(get_category_store)
):
    """Create a recurring template; it starts out active."""
    if not categories.get_by_exact_name(data.category):
        raise HTTPException(status_code=400, detail="Category does not exist")

    return templates.add({**data.model_dump(), "active": True})


@router.post("/generate", response_model=GenerateResponse)
def generate_recurring(
    request: Optional[GenerateRequest] = None,
    templates: RecurringStore = Depends(get_recurring_store),
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """
    Generate this month's expenses from active templates.

    Safe to call repeatedly: templates that already produced an expense for
    the month are skipped.
    """
    today = date.today()
    year = request.year if request and request.year else today.year
    month = request.month if request and request.month else today.month

    created = recurring_service.generate_recurring_expenses(templates, expenses, year, month)

    return GenerateResponse(
        year=year,
        month=month,
        generated=len(created),
        items=[ExpenseResponse.model_validate(e) for e in created]
    )


@router.get("/{template_id}", response_model=RecurringTemplateResponse)
def get_recurring_template(
    template_id: str,
    templates: RecurringStore = Depends(get_recurring_store)
):
    """Get a single recurring template."""
    template = templates.get(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Recurring template not found")
    return template


@router.patch("/{template_id}", response_model=RecurringTemplateResponse)
def update_recurring_template(
    template_id: str,
    update: RecurringTemplateUpdate,
    templates: RecurringStore = Depends(get_recurring_store),
    categories: CategoryStore = Depends(get_category_store)
):
    """Update a recurring template (including pausing it via active=false)."""
    if not templates.get(template_id):
        raise HTTPException(status_code=404, detail="Recurring template not found")

    update_data = {k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None}
    if "category" in update_data and not categories.get_by_exact_name(update_data["category"]):
        raise HTTPException(status_code=400, detail="Category does not exist")

    return templates.update(template_id, update_data)


@router.delete("/{template_id}")
def delete_recurring_template(
    template_id: str,
    templates: RecurringStore = Depends(get_recurring_store)
):
    """Delete a recurring template. Expenses it generated are kept."""
    if not templates.remove(template_id):
        raise HTTPException(status_code=404, detail="Recurring template not found")
    return {"deleted": True}
