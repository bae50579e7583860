"""Calendar month helpers shared by budgets, recurring generation and trends."""

import calendar
from datetime import date
from typing import Iterable, List, Tuple, TypeVar

T = TypeVar("T")


def last_day_of_month(year: int, month: int) -> int:
    """Return the last valid day (28-31) of a 1-based month, leap-year aware."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return calendar.monthrange(year, month)[1]


def month_window(day: date, offset_months: int) -> Tuple[int, int]:
    """
    Shift the month of `day` by `offset_months` (negative = back in time).

    Returns (year, month), wrapping across year boundaries:
    January 2024 shifted by -1 gives (2023, 12).
    """
    index = day.year * 12 + (day.month - 1) + offset_months
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last date of a month, both inclusive."""
    return date(year, month, 1), date(year, month, last_day_of_month(year, month))


def trailing_months(day: date, count: int) -> List[Tuple[int, int]]:
    """The `count` months ending with the month of `day`, oldest first."""
    return [month_window(day, -offset) for offset in range(count - 1, -1, -1)]


def in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month


def expenses_in_month(expenses: Iterable[T], year: int, month: int) -> List[T]:
    """Keep expenses whose date falls inside the given month."""
    return [e for e in expenses if in_month(e.date, year, month)]


def month_key(year: int, month: int) -> str:
    """YYYY-MM label used by the API."""
    return f"{year:04d}-{month:02d}"


def parse_month_key(value: str) -> Tuple[int, int]:
    """Parse a YYYY-MM string, raising ValueError on anything else."""
    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    return year, month


def month_name(month: int) -> str:
    return calendar.month_name[month]
