from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import to_date
from ..common.numbers import safe_ratio, to_number
from ..common.validators import optional_text, require_choice, require_email, require_non_empty, require_non_negative
from ..core.enums import EmployeeRole, EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeSummary
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("phone", "address", "skills")
EDITABLE_FIELDS = (
    "name",
    "email",
    "role",
    "department",
    "salary",
    "join_date",
    "status",
    "college_id",
) + TEXT_FIELDS


def summarize(employees: Iterable[Employee]) -> EmployeeSummary:
    items = list(employees)
    total_salary = sum(to_number(e.salary) for e in items)
    return EmployeeSummary(
        total=len(items),
        active=sum(1 for e in items if e.status == EmployeeStatus.ACTIVE.value),
        inactive=sum(1 for e in items if e.status == EmployeeStatus.INACTIVE.value),
        on_leave=sum(1 for e in items if e.status == EmployeeStatus.ON_LEAVE.value),
        average_salary=round(safe_ratio(total_salary, len(items)), 2),
    )


def filter_employees(
    employees: Iterable[Employee],
    *,
    search: Optional[str] = None,
    role: Optional[str] = None,
    status: Optional[str] = None,
) -> list[Employee]:
    needle = (search or "").strip().lower()
    role = None if role in (None, "", "all") else role
    status = None if status in (None, "", "all") else status

    out = []
    for e in employees:
        if needle and not any(needle in (v or "").lower() for v in (e.name, e.email, e.department)):
            continue
        if role and e.role != role:
            continue
        if status and e.status != status:
            continue
        out.append(e)
    return out


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, search=None, role=None, status=None) -> list[Employee]:
        return filter_employees(self._employees.list_all(), search=search, role=role, status=status)

    def get(self, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return emp

    def summary(self) -> EmployeeSummary:
        return summarize(self._employees.list_all())

    def _clean(self, data: Mapping[str, Any], *, partial: bool) -> dict:
        out: dict = {}

        def wants(field: str) -> bool:
            return not partial or field in data

        if wants("name"):
            out["name"] = require_non_empty(data.get("name"), "Name")
        if wants("email"):
            out["email"] = require_email(data.get("email"))
        if wants("role"):
            out["role"] = require_choice(data.get("role") or EmployeeRole.WORKER.value, EmployeeRole, "Role").value
        if wants("department"):
            out["department"] = require_non_empty(data.get("department"), "Department")
        if wants("salary"):
            out["salary"] = require_non_negative(data.get("salary") or 0, "Salary")
        if wants("status"):
            out["status"] = require_choice(
                data.get("status") or EmployeeStatus.ACTIVE.value, EmployeeStatus, "Status"
            ).value
        if wants("join_date"):
            raw = data.get("join_date")
            out["join_date"] = to_date(raw)
            if raw not in (None, "") and out["join_date"] is None:
                raise ValidationError("Join date must be YYYY-MM-DD")
        if wants("college_id"):
            raw = optional_text(data.get("college_id"))
            try:
                out["college_id"] = int(raw) if raw else None
            except ValueError:
                raise ValidationError("College id must be a number")
        for field in TEXT_FIELDS:
            if wants(field):
                out[field] = optional_text(data.get(field))
        return out

    def _ensure_unique_email(self, email: str, *, employee_id: Optional[int] = None) -> None:
        existing = self._employees.get_by_email(email)
        if existing and existing.employee_id != employee_id:
            raise ValidationError(f"Email {email} is already in use")

    def create(self, data: Mapping[str, Any]) -> int:
        clean = self._clean(data, partial=False)
        self._ensure_unique_email(clean["email"])
        employee_id = self._employees.create(data=clean)
        logger.info("Created employee %s (%s)", employee_id, clean["email"])
        return employee_id

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> None:
        self.get(employee_id)
        editable = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        if not editable:
            raise ValidationError("No changes supplied")
        clean = self._clean(editable, partial=True)
        if "email" in clean:
            self._ensure_unique_email(clean["email"], employee_id=int(employee_id))
        self._employees.update(int(employee_id), changes=clean)
        logger.info("Updated employee %s fields=%s", employee_id, sorted(clean))

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        logger.info("Deleted employee %s", employee_id)
