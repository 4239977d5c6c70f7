from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

COLUMNS = (
    "employee_id",
    "date",
    "check_in",
    "check_out",
    "total_hours",
    "status",
    "work_description",
    "overtime",
    "notes",
)

_SELECT = """
    SELECT
        a.attendance_id, a.employee_id, a.date, a.check_in, a.check_out,
        a.total_hours, a.status, a.work_description, a.overtime, a.notes,
        a.created_at, a.updated_at,
        e.name AS employee_name, e.email AS employee_email,
        e.role AS employee_role, e.department AS employee_department
    FROM attendance a
    LEFT JOIN employees e ON e.employee_id = a.employee_id
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        date=r.get("date"),
        status=r.get("status") or "",
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        total_hours=r.get("total_hours"),
        overtime=r.get("overtime"),
        work_description=r.get("work_description"),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        employee_name=r.get("employee_name"),
        employee_email=r.get("employee_email"),
        employee_role=r.get("employee_role"),
        employee_department=r.get("employee_department"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY a.date DESC, a.attendance_id DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE a.attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, *, data: Mapping[str, Any]) -> int:
        placeholders = ",".join(["%s"] * len(COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO attendance({', '.join(COLUMNS)}) VALUES({placeholders})",
                tuple(data.get(c) for c in COLUMNS),
            )
            return int(cur.lastrowid)

    def update(self, attendance_id: int, *, changes: Mapping[str, Any]) -> bool:
        stmt = build_update("attendance", "attendance_id", int(attendance_id), dict(changes), COLUMNS)
        if not stmt:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(*stmt)
            return cur.rowcount > 0

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0
