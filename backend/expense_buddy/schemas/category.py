"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=100)
    budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)  # None = unlimited


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """Schema for updating a category."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    budget: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
    active: Optional[bool] = None


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: str
    active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[CategoryResponse]
    total: int
