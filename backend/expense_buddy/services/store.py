"""
Record stores: get/add/update/remove over one model each.

Stores commit on every write so a single request sees its own changes.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from expense_buddy.models import Category, Expense, RecurringTemplate
from expense_buddy.services.month_service import month_bounds

ModelT = TypeVar("ModelT")


class RecordStore(Generic[ModelT]):
    """Generic CRUD over a single SQLAlchemy model."""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.created_at).all()

    def get(self, record_id: str) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def add(self, fields: Dict[str, Any]) -> ModelT:
        """Create a record, assigning id and created_at."""
        record = self.model(
            id=str(uuid.uuid4()),
            created_at=datetime.utcnow(),
            **fields
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[ModelT]:
        """Patch the given fields; returns None when the record doesn't exist."""
        record = self.get(record_id)
        if record is None:
            return None

        for field, value in fields.items():
            setattr(record, field, value)

        self.db.commit()
        self.db.refresh(record)
        return record

    def remove(self, record_id: str) -> bool:
        record = self.get(record_id)
        if record is None:
            return False

        self.db.delete(record)
        self.db.commit()
        return True

    def clear(self) -> int:
        """Delete every record, returning how many were removed."""
        deleted = self.db.query(self.model).delete()
        self.db.commit()
        return deleted


class CategoryStore(RecordStore[Category]):
    model = Category

    def get_active(self) -> List[Category]:
        return [c for c in self.get_all() if c.active]

    def find_by_name(self, name: str) -> Optional[Category]:
        """Case-insensitive lookup, used for uniqueness checks."""
        return self.db.query(Category).filter(
            func.lower(Category.name) == name.strip().lower()
        ).first()

    def get_by_exact_name(self, name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.name == name).first()


class ExpenseStore(RecordStore[Expense]):
    model = Expense

    def for_month(self, year: int, month: int) -> List[Expense]:
        first, last = month_bounds(year, month)
        return self.between(first, last)

    def between(self, start: date, end: date) -> List[Expense]:
        return self.db.query(Expense).filter(
            Expense.date >= start,
            Expense.date <= end
        ).order_by(Expense.date).all()

    def count_for_category(self, name: str) -> int:
        return self.db.query(Expense).filter(Expense.category == name).count()


class RecurringStore(RecordStore[RecurringTemplate]):
    model = RecurringTemplate

    def get_active(self) -> List[RecurringTemplate]:
        return self.db.query(RecurringTemplate).filter(
            RecurringTemplate.active == True  # noqa: E712
        ).order_by(RecurringTemplate.created_at).all()
