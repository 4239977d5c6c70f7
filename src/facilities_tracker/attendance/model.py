from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day's attendance for one employee.

    Employee name/email/role/department are joined in by the repository for
    listing and export; they are ``None`` when the employee row is gone.
    """

    attendance_id: int
    employee_id: int
    date: Union[date, str, None]
    status: str = "present"
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    total_hours: Union[float, Decimal, None] = 0
    overtime: Union[float, Decimal, None] = 0
    work_description: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee_name: Optional[str] = None
    employee_email: Optional[str] = None
    employee_role: Optional[str] = None
    employee_department: Optional[str] = None


@dataclass(frozen=True)
class AttendanceSummary:
    records: int
    present: int
    absent: int
    late: int
    half_day: int
    total_hours: float
    average_hours: float
    overtime_hours: float
    absence_rate: float
