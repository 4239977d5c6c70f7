from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import DataSourceError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.error("Database connection failed: %s", exc)
        raise DataSourceError("Database is unavailable") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.error("Database query failed: %s", exc)
        raise DataSourceError("Database query failed") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def build_update(table: str, key_column: str, key: Any, changes: Dict[str, Any], allowed: Sequence[str]):
    """Build an UPDATE statement for the whitelisted columns in ``changes``."""
    columns = [c for c in allowed if c in changes]
    if not columns:
        return None
    assignments = ", ".join(f"{c}=%s" for c in columns)
    params = tuple(changes[c] for c in columns) + (key,)
    return f"UPDATE {table} SET {assignments} WHERE {key_column}=%s", params
