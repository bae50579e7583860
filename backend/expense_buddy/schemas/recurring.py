"""Pydantic schemas for recurring expense templates."""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from expense_buddy.schemas.expense import ExpenseResponse


class RecurringTemplateBase(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=100)
    payment_method: str = Field(..., min_length=1, max_length=50)
    description: str = ""
    day_of_month: int = Field(1, ge=1, le=31)


class RecurringTemplateCreate(RecurringTemplateBase):
    pass


class RecurringTemplateUpdate(BaseModel):
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    payment_method: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = None
    day_of_month: Optional[int] = Field(None, ge=1, le=31)
    active: Optional[bool] = None


class RecurringTemplateResponse(RecurringTemplateBase):
    id: str
    active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class GenerateRequest(BaseModel):
    """Target month for generation; both default to the current month."""
    year: Optional[int] = Field(None, ge=1900, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)


class GenerateResponse(BaseModel):
    """Expenses created by one reconciliation pass."""
    year: int
    month: int
    generated: int
    items: List[ExpenseResponse]
