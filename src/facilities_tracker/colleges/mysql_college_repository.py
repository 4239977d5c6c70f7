from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import College
from .repository import CollegeRepository

COLUMNS = ("name", "location", "contact_person", "phone", "email", "address")


def _to_college(r: dict) -> College:
    return College(
        college_id=int(r["college_id"]),
        name=r["name"],
        location=r.get("location"),
        contact_person=r.get("contact_person"),
        phone=r.get("phone"),
        email=r.get("email"),
        address=r.get("address"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLCollegeRepository(CollegeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[College]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT college_id, name, location, contact_person, phone, email, address, created_at, updated_at
                FROM colleges
                ORDER BY name
                """
            )
            return [_to_college(r) for r in fetchall(cur)]

    def get_by_id(self, college_id: int) -> Optional[College]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT college_id, name, location, contact_person, phone, email, address, created_at, updated_at
                FROM colleges
                WHERE college_id=%s
                """,
                (int(college_id),),
            )
            r = fetchone(cur)
            return _to_college(r) if r else None

    def create(self, *, data: Mapping[str, Any]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO colleges(name, location, contact_person, phone, email, address)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                tuple(data.get(c) for c in COLUMNS),
            )
            return int(cur.lastrowid)

    def update(self, college_id: int, *, changes: Mapping[str, Any]) -> bool:
        stmt = build_update("colleges", "college_id", int(college_id), dict(changes), COLUMNS)
        if not stmt:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(*stmt)
            return cur.rowcount > 0

    def delete(self, college_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM colleges WHERE college_id=%s", (int(college_id),))
            return cur.rowcount > 0
