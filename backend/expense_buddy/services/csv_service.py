"""
CSV export and import of expenses.
"""

import csv
import io
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, List, Tuple

from expense_buddy.models import Expense
from expense_buddy.services.budget_service import CENTS, MAX_AMOUNT
from expense_buddy.services.store import CategoryStore, ExpenseStore

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Date", "Amount", "Category", "Payment Method", "Description"]

# Older exports used "Other" before the category was renamed; only applied
# when the name in the file isn't itself a category
LEGACY_CATEGORY_NAMES = {"Other": "Misc"}


def export_expenses_csv(expenses: Iterable[Expense]) -> str:
    """Render expenses as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for exp in expenses:
        writer.writerow([
            exp.date.isoformat(),
            f"{Decimal(exp.amount):.2f}",
            exp.category,
            exp.payment_method,
            exp.description or "",
        ])

    return buffer.getvalue()


def _is_header(row: List[str]) -> bool:
    joined = ",".join(row).lower()
    return "date" in joined and "amount" in joined


def _parse_amount(value: str) -> Decimal:
    """Parse a positive amount that fits the amount column, rounded to cents."""
    amount = Decimal(value.strip().replace("$", "").replace(",", ""))
    if not amount.is_finite() or amount > MAX_AMOUNT:
        raise InvalidOperation(value)

    amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if amount <= 0:
        raise InvalidOperation(value)
    return amount


def _read_rows(content: str) -> List[Tuple[int, List[str]]]:
    """Non-blank CSV records paired with the file line each one starts on."""
    reader = csv.reader(io.StringIO(content), skipinitialspace=True)
    rows = []
    next_line = 1
    for row in reader:
        line_number = next_line
        next_line = reader.line_num + 1
        if any(cell.strip() for cell in row):
            rows.append((line_number, row))
    return rows


def import_expenses_csv(
    content: str,
    category_store: CategoryStore,
    expense_store: ExpenseStore,
) -> Tuple[int, List[str]]:
    """
    Import expenses from CSV text.

    Each row needs Date (YYYY-MM-DD), Amount, Category and Payment Method,
    with an optional Description. Bad rows are skipped and reported as
    "Row N: ..." messages; good rows are saved.
    Returns (imported_count, errors).
    """
    rows = _read_rows(content)
    if not rows:
        return 0, ["CSV content is empty"]

    category_names = {c.name for c in category_store.get_all()}
    start = 1 if _is_header(rows[0][1]) else 0

    imported = 0
    errors: List[str] = []

    for row_number, row in rows[start:]:
        values = [v.strip() for v in row]

        if len(values) < 4:
            errors.append(
                f"Row {row_number}: Insufficient columns "
                "(expected at least 4: Date, Amount, Category, Payment Method)"
            )
            continue

        date_str, amount_str, category, payment_method = values[:4]
        description = values[4] if len(values) > 4 else ""

        try:
            expense_date = datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError:
            errors.append(f'Row {row_number}: Invalid date "{date_str}"')
            continue

        try:
            amount = _parse_amount(amount_str)
        except InvalidOperation:
            errors.append(f'Row {row_number}: Invalid amount "{amount_str}"')
            continue

        if not category:
            errors.append(f"Row {row_number}: Category is required")
            continue

        if not payment_method:
            errors.append(f"Row {row_number}: Payment method is required")
            continue

        if category not in category_names:
            category = LEGACY_CATEGORY_NAMES.get(category, category)
        if category not in category_names:
            available = ", ".join(sorted(category_names))
            errors.append(
                f'Row {row_number}: Category "{category}" does not exist. '
                f"Available categories: {available}"
            )
            continue

        expense_store.add({
            "date": expense_date,
            "amount": amount,
            "category": category,
            "payment_method": payment_method,
            "description": description,
        })
        imported += 1

    logger.info("CSV import finished: %d imported, %d error(s)", imported, len(errors))
    return imported, errors
