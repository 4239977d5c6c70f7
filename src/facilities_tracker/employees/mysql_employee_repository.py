from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

COLUMNS = (
    "name",
    "email",
    "phone",
    "role",
    "department",
    "salary",
    "join_date",
    "status",
    "address",
    "skills",
    "college_id",
)

_SELECT = """
    SELECT
        e.employee_id, e.name, e.email, e.phone, e.role, e.department, e.salary,
        e.join_date, e.status, e.address, e.skills, e.college_id,
        e.created_at, e.updated_at,
        c.name AS college_name
    FROM employees e
    LEFT JOIN colleges c ON c.college_id = e.college_id
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        role=r.get("role") or "",
        department=r.get("department") or "",
        salary=r.get("salary") or 0,
        status=r.get("status") or "",
        phone=r.get("phone"),
        join_date=r.get("join_date"),
        address=r.get("address"),
        skills=r.get("skills"),
        college_id=r.get("college_id"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        college_name=r.get("college_name"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY e.created_at DESC, e.employee_id DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.email=%s", (email,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, *, data: Mapping[str, Any]) -> int:
        placeholders = ",".join(["%s"] * len(COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO employees({', '.join(COLUMNS)}) VALUES({placeholders})",
                tuple(data.get(c) for c in COLUMNS),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, changes: Mapping[str, Any]) -> bool:
        stmt = build_update("employees", "employee_id", int(employee_id), dict(changes), COLUMNS)
        if not stmt:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(*stmt)
            return cur.rowcount > 0

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
