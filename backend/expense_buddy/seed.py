"""
Seed script for default categories and optional sample data.

Run with: python -m expense_buddy.seed [--sample]
"""

import argparse
import logging
import random
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from expense_buddy.database import SessionLocal, init_db
from expense_buddy.services.month_service import month_window
from expense_buddy.services.store import CategoryStore, ExpenseStore, RecurringStore

logger = logging.getLogger(__name__)

# No budgets by default: every category starts out unlimited
DEFAULT_CATEGORIES = ["Food", "Transport", "Rent", "Utilities", "Entertainment", "Other"]

SAMPLE_BUDGETS = {
    "Food": Decimal("300"),
    "Transport": Decimal("150"),
    "Rent": Decimal("1200"),
    "Utilities": Decimal("100"),
    "Entertainment": Decimal("200"),
    "Other": Decimal("100"),
}

SAMPLE_SPENDING = [
    # category, count per month, min, max, payment method, description
    ("Food", 8, 10, 60, "Card", "Groceries"),
    ("Transport", 4, 5, 40, "Card", "Fuel"),
    ("Entertainment", 2, 15, 80, "Card", "Night out"),
    ("Utilities", 1, 60, 110, "Bank Transfer", "Electricity bill"),
]


def seed_categories(db: Session) -> int:
    """Insert the default categories into an empty table. Returns how many were added."""
    store = CategoryStore(db)

    existing_count = len(store.get_all())
    if existing_count > 0:
        logger.info("Categories already seeded (%d categories exist)", existing_count)
        return 0

    for name in DEFAULT_CATEGORIES:
        store.add({"name": name, "budget": None})

    logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)


def seed_sample_data(db: Session, today: date, months: int = 3, rng: random.Random = None) -> int:
    """Give categories budgets and add random expenses for the last few months."""
    rng = rng or random.Random()
    categories = CategoryStore(db)
    expenses = ExpenseStore(db)

    seed_categories(db)
    for category in categories.get_all():
        if category.name in SAMPLE_BUDGETS:
            categories.update(category.id, {"budget": SAMPLE_BUDGETS[category.name]})

    templates = RecurringStore(db)
    has_rent = any(
        t.category == "Rent" and t.description == "Monthly rent" for t in templates.get_all()
    )
    if not has_rent:
        templates.add({
            "amount": Decimal("1200"),
            "category": "Rent",
            "payment_method": "Bank Transfer",
            "description": "Monthly rent",
            "day_of_month": 1,
            "active": True,
        })

    added = 0
    for offset in range(months - 1, -1, -1):
        year, month = month_window(today, -offset)
        for category, count, low, high, method, description in SAMPLE_SPENDING:
            for _ in range(count):
                amount = Decimal(str(round(rng.uniform(low, high), 2)))
                expenses.add({
                    "date": date(year, month, rng.randint(1, 28)),
                    "amount": amount,
                    "category": category,
                    "payment_method": method,
                    "description": description,
                })
                added += 1

    logger.info("Seeded %d sample expenses over %d months", added, months)
    return added


def main():
    parser = argparse.ArgumentParser(description="Seed the Expense Buddy database")
    parser.add_argument("--sample", action="store_true", help="also add budgets and sample expenses")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    init_db()

    db = SessionLocal()
    try:
        if args.sample:
            seed_sample_data(db, date.today())
        else:
            seed_categories(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
