"""
Database models package.
"""

from expense_buddy.models.category import Category
from expense_buddy.models.expense import Expense
from expense_buddy.models.recurring import RecurringTemplate

__all__ = [
    "Category",
    "Expense",
    "RecurringTemplate",
]
