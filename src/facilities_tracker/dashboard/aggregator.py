"""Collection-level reduction of enriched work entries into ``DashboardStats``.

Everything here is a pure function of its arguments: callers pass the
snapshot of entries/colleges/employees and the reference day explicitly.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional, Sequence

from ..colleges.model import College
from ..common.datetime_utils import start_of_month, start_of_week, to_date
from ..common.numbers import safe_percentage, safe_ratio, to_number
from ..core.constants import EMPLOYEE_ESTIMATE_DIVISOR, LARGE_PROJECT_MIN_SQFT, SMALL_PROJECT_MAX_SQFT
from ..core.enums import EmployeeCountPolicy, WorkStatus
from ..employees.model import Employee
from ..work_entries.model import EnrichedWorkEntry
from .model import DashboardStats


def has_dimensions(row: EnrichedWorkEntry) -> bool:
    return to_number(row.entry.length) > 0 and to_number(row.entry.width) > 0


def active_college_ids(rows: Sequence[EnrichedWorkEntry]) -> set[str]:
    """College ids referenced by at least one entry, known to the college table or not."""
    return {str(r.entry.college_id) for r in rows if r.entry.college_id not in (None, "")}


def estimate_employees(total_tasks: int) -> int:
    return max(math.floor(total_tasks / EMPLOYEE_ESTIMATE_DIVISOR), 1)


def employee_total(
    total_tasks: int,
    employees: Optional[Sequence[Employee]],
    policy: EmployeeCountPolicy | str,
) -> int:
    if EmployeeCountPolicy(policy) == EmployeeCountPolicy.ESTIMATE:
        return estimate_employees(total_tasks)
    return len(employees or ())


def _cost_since(rows: Sequence[EnrichedWorkEntry], since: date) -> float:
    total = 0.0
    for r in rows:
        d = to_date(r.entry.date)
        if d is not None and d >= since:
            total += r.final_rate
    return total


def _mean(values: Sequence[float]) -> float:
    return safe_ratio(sum(values), len(values))


def compute_dashboard_stats(
    rows: Sequence[EnrichedWorkEntry],
    colleges: Sequence[College],
    employees: Optional[Sequence[Employee]] = None,
    *,
    today: date,
    employee_count_policy: EmployeeCountPolicy | str = EmployeeCountPolicy.ACTUAL,
) -> DashboardStats:
    total_tasks = len(rows)

    def count_status(status: WorkStatus) -> int:
        return sum(1 for r in rows if r.entry.status == status.value)

    total_cost = sum(r.final_rate for r in rows)

    dimensioned = [r for r in rows if has_dimensions(r)]
    areas = [r.square_feet for r in rows if r.square_feet > 0]

    return DashboardStats(
        total_colleges=len(colleges),
        active_colleges=len(active_college_ids(rows)),
        total_tasks=total_tasks,
        pending_tasks=count_status(WorkStatus.PENDING),
        in_progress_tasks=count_status(WorkStatus.IN_PROGRESS),
        completed_tasks=count_status(WorkStatus.COMPLETED),
        total_employees=employee_total(total_tasks, employees, employee_count_policy),
        total_cost_this_month=_cost_since(rows, start_of_month(today)),
        total_cost_all_time=total_cost,
        total_cost_this_week=_cost_since(rows, start_of_week(today)),
        avg_cost_per_task=safe_ratio(total_cost, total_tasks),
        total_square_feet=sum(r.square_feet for r in rows),
        entries_with_dimensions=len(dimensioned),
        entries_without_dimensions=total_tasks - len(dimensioned),
        avg_length=_mean([to_number(r.entry.length) for r in dimensioned]),
        avg_width=_mean([to_number(r.entry.width) for r in dimensioned]),
        avg_height=_mean([to_number(r.entry.height) for r in dimensioned]),
        avg_square_feet=_mean(areas),
        largest_area=max(areas, default=0.0),
        smallest_area=min(areas, default=0.0),
        small_projects=sum(1 for a in areas if a < SMALL_PROJECT_MAX_SQFT),
        medium_projects=sum(1 for a in areas if SMALL_PROJECT_MAX_SQFT <= a <= LARGE_PROJECT_MIN_SQFT),
        large_projects=sum(1 for a in areas if a > LARGE_PROJECT_MIN_SQFT),
        complete_dimension_percentage=safe_percentage(len(dimensioned), total_tasks),
    )
