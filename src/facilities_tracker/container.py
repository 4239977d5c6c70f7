from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .colleges.mysql_college_repository import MySQLCollegeRepository
from .colleges.repository import CollegeRepository
from .colleges.service import CollegeService
from .core.constants import DEFAULT_TREND_MONTHS
from .core.enums import EmployeeCountPolicy, HeightPolicy
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import ReportService
from .work_entries.calculator.base import MetricsCalculator
from .work_entries.calculator.factory import build_calculator
from .work_entries.mysql_work_entry_repository import MySQLWorkEntryRepository
from .work_entries.repository import WorkEntryRepository
from .work_entries.service import WorkEntryService


@dataclass(frozen=True)
class Container:
    colleges_repo: CollegeRepository
    work_entries_repo: WorkEntryRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    calculator: MetricsCalculator

    college_service: CollegeService
    work_entry_service: WorkEntryService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    colleges_repo: CollegeRepository,
    work_entries_repo: WorkEntryRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    height_policy: HeightPolicy | str = HeightPolicy.ALWAYS,
    volume_types: Optional[Iterable[str]] = None,
    rates: Optional[Mapping[str, float]] = None,
    employee_count_policy: EmployeeCountPolicy | str = EmployeeCountPolicy.ACTUAL,
    trend_months: int = DEFAULT_TREND_MONTHS,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories.

    One calculator instance is shared by listing, preview, dashboard and export.
    """

    calculator = build_calculator(height_policy, rates=rates, volume_types=volume_types)

    college_service = CollegeService(colleges_repo)
    work_entry_service = WorkEntryService(work_entries_repo, colleges_repo, calculator)
    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    dashboard_service = DashboardService(
        work_entry_service,
        colleges_repo,
        employees_repo,
        employee_count_policy=employee_count_policy,
    )
    report_service = ReportService(
        work_entry_service,
        colleges_repo,
        employee_service,
        attendance_service,
        dashboard_service,
        trend_months=trend_months,
    )

    return Container(
        colleges_repo=colleges_repo,
        work_entries_repo=work_entries_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        calculator=calculator,
        college_service=college_service,
        work_entry_service=work_entry_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
        report_service=report_service,
        conn=conn,
    )


def build_container(*, db_config: dict, settings=None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire(
        colleges_repo=MySQLCollegeRepository(conn),
        work_entries_repo=MySQLWorkEntryRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        height_policy=getattr(settings, "HEIGHT_POLICY", HeightPolicy.ALWAYS),
        volume_types=getattr(settings, "VOLUME_WORK_TYPES", None),
        rates=getattr(settings, "DEFAULT_RATES", None),
        employee_count_policy=getattr(settings, "EMPLOYEE_COUNT_POLICY", EmployeeCountPolicy.ACTUAL),
        trend_months=int(getattr(settings, "TREND_MONTHS", DEFAULT_TREND_MONTHS)),
        conn=conn,
    )
