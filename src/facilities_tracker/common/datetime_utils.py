from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a stored date value.

    Accepts ``date``/``datetime`` objects and ISO strings (a trailing time part
    is ignored). Returns ``None`` for anything else instead of raising.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and len(value.strip()) >= 10:
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            return None
    return None


def now_local() -> datetime:
    """Current local time, wrapped so tests can patch it."""
    return datetime.now()


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def shift_months(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def trailing_month_starts(today: date, count: int) -> list[date]:
    """Month starts for the last ``count`` months, oldest first, current included."""
    return [shift_months(today, -offset) for offset in range(count - 1, -1, -1)]
