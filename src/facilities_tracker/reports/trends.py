from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import end_of_month, to_date, trailing_month_starts
from ..common.numbers import safe_percentage
from ..core.constants import DEFAULT_TREND_MONTHS
from ..work_entries.model import EnrichedWorkEntry
from .model import TrendRow


def growth_percentage(current: float, previous: float) -> float:
    """Month-over-month change; 0 when there is nothing to compare against."""
    if not previous:
        return 0.0
    return round(safe_percentage(current - previous, previous), 1)


def compute_trends(
    rows: Sequence[EnrichedWorkEntry],
    *,
    today: date,
    months: int = DEFAULT_TREND_MONTHS,
    employees: int = 0,
) -> list[TrendRow]:
    """Entry count and cost per calendar month, oldest month first, current month last."""

    dated = [(to_date(r.entry.date), r) for r in rows]

    out: list[TrendRow] = []
    previous_cost = 0.0
    for index, month_start in enumerate(trailing_month_starts(today, max(months, 0))):
        month_end = end_of_month(month_start)
        bucket = [r for d, r in dated if d is not None and month_start <= d <= month_end]
        cost = sum(r.final_rate for r in bucket)

        out.append(
            TrendRow(
                period=month_start.strftime("%b %Y"),
                month_start=month_start,
                month_end=month_end,
                tasks=len(bucket),
                cost=cost,
                employees=employees,
                growth=growth_percentage(cost, previous_cost) if index else 0.0,
            )
        )
        previous_cost = cost
    return out
