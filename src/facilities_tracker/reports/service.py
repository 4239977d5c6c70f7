from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional

from ..attendance.service import AttendanceService
from ..colleges.repository import CollegeRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_TREND_MONTHS
from ..dashboard.service import DashboardService
from ..employees.service import EmployeeService
from ..work_entries.filters import WorkEntryFilter
from ..work_entries.service import WorkEntryService
from .export import attendance_rows, college_rows, work_entry_rows
from .model import PerformanceRow, ReportSummary, TrendRow
from .performance import compute_performance
from .summary import build_report_summary
from .trends import compute_trends


class ReportService:
    def __init__(
        self,
        work_entries: WorkEntryService,
        colleges: CollegeRepository,
        employees: EmployeeService,
        attendance: AttendanceService,
        dashboard: DashboardService,
        *,
        trend_months: int = DEFAULT_TREND_MONTHS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._work_entries = work_entries
        self._colleges = colleges
        self._employees = employees
        self._attendance = attendance
        self._dashboard = dashboard
        self._trend_months = int(trend_months)
        self._clock = clock

    def performance(
        self,
        *,
        college_id: Optional[int | str] = None,
        flt: Optional[WorkEntryFilter] = None,
    ) -> list[PerformanceRow]:
        rows = self._work_entries.list_entries(flt)
        return compute_performance(rows, self._colleges.list_all(), college_id=college_id)

    def trends(self, flt: Optional[WorkEntryFilter] = None, *, today: Optional[date] = None) -> list[TrendRow]:
        today = today or self._clock().date()
        stats = self._dashboard.stats(flt, today=today)
        return compute_trends(
            self._work_entries.list_entries(flt),
            today=today,
            months=self._trend_months,
            employees=stats.total_employees,
        )

    def summary(
        self,
        flt: Optional[WorkEntryFilter] = None,
        *,
        today: Optional[date] = None,
    ) -> ReportSummary:
        stats = self._dashboard.stats(flt, today=today)
        start = flt.date_from if flt else None
        end = flt.date_to if flt else None
        return build_report_summary(
            stats,
            self._employees.summary(),
            self._attendance.summary(start=start, end=end),
        )

    def work_entry_export(self, flt: Optional[WorkEntryFilter] = None) -> list[dict]:
        return work_entry_rows(self._work_entries.list_entries(flt))

    def attendance_export(
        self, *, start=None, end=None, status=None, search=None, employee_id=None, check_in=None
    ) -> list[dict]:
        records = self._attendance.list_records(
            start=start,
            end=end,
            status=status,
            search=search,
            employee_id=employee_id,
            check_in=check_in,
        )
        return attendance_rows(records)

    def college_export(self) -> list[dict]:
        return college_rows(self._colleges.list_all())
