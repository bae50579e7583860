"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from expense_buddy.dependencies import get_category_store, get_expense_store
from expense_buddy.services.store import CategoryStore, ExpenseStore
from expense_buddy.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryList,
)

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(
    include_inactive: bool = Query(True),
    categories: CategoryStore = Depends(get_category_store)
):
    """List categories, optionally only the active ones."""
    items = categories.get_all() if include_inactive else categories.get_active()

    return CategoryList(
        items=[CategoryResponse.model_validate(c) for c in items],
        total=len(items)
    )


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    categories: CategoryStore = Depends(get_category_store)
):
    """Create a new category."""
    name = category.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Category name is required")

    if categories.find_by_name(name):
        raise HTTPException(status_code=409, detail="Category with this name already exists")

    return categories.add({"name": name, "budget": category.budget})


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    categories: CategoryStore = Depends(get_category_store)
):
    """Get a specific category."""
    category = categories.get(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    categories: CategoryStore = Depends(get_category_store)
):
    """
    Update a category.

    Sending "budget": null clears the budget (unlimited); leaving the key out
    keeps the current value.
    """
    category = categories.get(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    update_data = category_update.model_dump(exclude_unset=True)

    if "name" in update_data:
        name = (update_data["name"] or "").strip()
        if not name:
            raise HTTPException(status_code=400, detail="Category name is required")
        existing = categories.find_by_name(name)
        if existing and existing.id != category_id:
            raise HTTPException(status_code=409, detail="Category with this name already exists")
        update_data["name"] = name

    if "active" in update_data and update_data["active"] is None:
        del update_data["active"]

    return categories.update(category_id, update_data)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    categories: CategoryStore = Depends(get_category_store),
    expenses: ExpenseStore = Depends(get_expense_store)
):
    """Delete a category that no expense refers to."""
    category = categories.get(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    in_use = expenses.count_for_category(category.name)
    if in_use > 0:
        raise HTTPException(
            status_code=409,
            detail=(
                f'Cannot delete category "{category.name}" because {in_use} expense(s) '
                "are using it. Please reassign or delete those expenses first."
            )
        )

    categories.remove(category_id)
    return None
