from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PerformanceRow:
    college_id: int
    college: str
    total_tasks: int
    tasks_completed: int
    total_cost: float
    efficiency: float


@dataclass(frozen=True)
class TrendRow:
    period: str
    month_start: date
    month_end: date
    tasks: int
    cost: float
    employees: int
    growth: float


@dataclass(frozen=True)
class ReportSummary:
    """Headline figures for the reports page, grouped like the page shows them."""

    work_entries: dict
    employees: dict
    colleges: dict
    attendance: dict
