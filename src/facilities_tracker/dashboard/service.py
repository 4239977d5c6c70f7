from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..colleges.repository import CollegeRepository
from ..common.datetime_utils import now_local
from ..core.enums import EmployeeCountPolicy
from ..employees.repository import EmployeeRepository
from ..work_entries.filters import WorkEntryFilter
from ..work_entries.service import WorkEntryService
from .aggregator import compute_dashboard_stats
from .model import DashboardStats


class DashboardService:
    def __init__(
        self,
        work_entries: WorkEntryService,
        colleges: CollegeRepository,
        employees: EmployeeRepository,
        *,
        employee_count_policy: EmployeeCountPolicy | str = EmployeeCountPolicy.ACTUAL,
        clock: Callable[[], datetime] = now_local,
    ):
        self._work_entries = work_entries
        self._colleges = colleges
        self._employees = employees
        self._policy = EmployeeCountPolicy(employee_count_policy)
        self._clock = clock

    def stats(self, flt: Optional[WorkEntryFilter] = None, *, today: Optional[date] = None) -> DashboardStats:
        rows = self._work_entries.list_entries(flt)
        employees = self._employees.list_all() if self._policy == EmployeeCountPolicy.ACTUAL else None
        return compute_dashboard_stats(
            rows,
            self._colleges.list_all(),
            employees,
            today=today or self._clock().date(),
            employee_count_policy=self._policy,
        )
