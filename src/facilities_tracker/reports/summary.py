from __future__ import annotations

from ..attendance.model import AttendanceSummary
from ..common.numbers import safe_percentage, safe_ratio
from ..dashboard.model import DashboardStats
from ..employees.model import EmployeeSummary
from .model import ReportSummary


def build_report_summary(
    stats: DashboardStats,
    employees: EmployeeSummary,
    attendance: AttendanceSummary,
) -> ReportSummary:
    return ReportSummary(
        work_entries={
            "total": stats.total_tasks,
            "completed": stats.completed_tasks,
            "pending": stats.pending_tasks,
            "in_progress": stats.in_progress_tasks,
            "total_value": stats.total_cost_all_time,
        },
        employees={
            "total": employees.total,
            "active": employees.active,
            "on_leave": employees.on_leave,
            "productivity": safe_percentage(stats.completed_tasks, stats.total_tasks),
        },
        colleges={
            "total": stats.total_colleges,
            "active": stats.active_colleges,
            "avg_cost_per_college": safe_ratio(stats.total_cost_all_time, stats.active_colleges),
        },
        attendance={
            "average_hours": attendance.average_hours,
            "overtime_hours": attendance.overtime_hours,
            "absence_rate": attendance.absence_rate,
        },
    )
