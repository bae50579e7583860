"""
FastAPI dependencies.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from expense_buddy.database import SessionLocal
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_category_store(db: Session = Depends(get_db)) -> CategoryStore:
    return CategoryStore(db)


def get_expense_store(db: Session = Depends(get_db)) -> ExpenseStore:
    return ExpenseStore(db)


def get_recurring_store(db: Session = Depends(get_db)) -> RecurringStore:
    return RecurringStore(db)
