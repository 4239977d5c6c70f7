from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class Employee:
    """Domain entity: a member of the facilities workforce."""

    employee_id: int
    name: str
    email: str
    role: str
    department: str
    salary: Union[float, Decimal] = 0
    status: str = "active"
    phone: Optional[str] = None
    join_date: Optional[date] = None
    address: Optional[str] = None
    skills: Optional[str] = None
    college_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    college_name: Optional[str] = None


@dataclass(frozen=True)
class EmployeeSummary:
    total: int
    active: int
    inactive: int
    on_leave: int
    average_salary: float
