from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import WorkEntry
from .repository import WorkEntryRepository

COLUMNS = (
    "college_id",
    "location",
    "block",
    "floor",
    "work_area_or_room",
    "work_description",
    "work_type",
    "date",
    "length",
    "width",
    "height",
    "quantity",
    "square_feet",
    "rate_per_sqft",
    "final_rate",
    "status",
)

_SELECT = """
    SELECT
        we.entry_id, we.college_id, we.location, we.block, we.floor, we.work_area_or_room,
        we.work_description, we.work_type, we.date,
        we.length, we.width, we.height, we.quantity,
        we.square_feet, we.rate_per_sqft, we.final_rate,
        we.status, we.created_at, we.updated_at,
        c.name AS college_name, c.location AS college_location
    FROM work_entries we
    LEFT JOIN colleges c ON c.college_id = we.college_id
"""


def _to_entry(r: dict) -> WorkEntry:
    return WorkEntry(
        entry_id=int(r["entry_id"]),
        college_id=r.get("college_id"),
        location=r.get("location") or "",
        work_description=r.get("work_description") or "",
        work_type=r.get("work_type") or "",
        date=r.get("date"),
        status=r.get("status") or "",
        block=r.get("block"),
        floor=r.get("floor"),
        work_area_or_room=r.get("work_area_or_room"),
        length=r.get("length"),
        width=r.get("width"),
        height=r.get("height"),
        quantity=r.get("quantity"),
        square_feet=r.get("square_feet"),
        rate_per_sqft=r.get("rate_per_sqft"),
        final_rate=r.get("final_rate"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        college_name=r.get("college_name"),
        college_location=r.get("college_location"),
    )


class MySQLWorkEntryRepository(WorkEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[WorkEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY we.created_at DESC, we.entry_id DESC")
            return [_to_entry(r) for r in fetchall(cur)]

    def get_by_id(self, entry_id: int) -> Optional[WorkEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE we.entry_id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def create(self, *, data: Mapping[str, Any]) -> int:
        placeholders = ",".join(["%s"] * len(COLUMNS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO work_entries({', '.join(COLUMNS)}) VALUES({placeholders})",
                tuple(data.get(c) for c in COLUMNS),
            )
            return int(cur.lastrowid)

    def update(self, entry_id: int, *, changes: Mapping[str, Any]) -> bool:
        stmt = build_update("work_entries", "entry_id", int(entry_id), dict(changes), COLUMNS)
        if not stmt:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(*stmt)
            return cur.rowcount > 0

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0
