from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional, Sequence

from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One short-lived connection + cursor; commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> int:
    """Run a write statement and return the affected row count."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return int(cur.rowcount or 0)


def normalize_mysql_date(value: Any) -> date:
    # DATE columns come back as date; DATETIME-typed legacy columns as datetime.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME columns arrive as time, timedelta or 'HH:MM[:SS]' depending on the connector."""

    if value is None or isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total = int(value.total_seconds()) % 86400
        return time(total // 3600, (total % 3600) // 60, total % 60)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return time(int(parts[0]), int(parts[1]), int(parts[2]) if len(parts) > 2 and parts[2] else 0)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
