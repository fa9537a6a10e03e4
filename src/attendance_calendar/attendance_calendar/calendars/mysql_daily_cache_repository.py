from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import DayStatusCode
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, normalize_mysql_date, normalize_mysql_time, query_one
from .model import CachedDailyRow
from .repository import DailyCacheStore


class MySQLDailyCacheRepository(DailyCacheStore):
    """`employee_attendance_daily`, unique on (employee_id, attendance_date).

    updated_at is maintained by MySQL (ON UPDATE CURRENT_TIMESTAMP), which only
    bumps it when a column value actually changes, so re-syncing identical
    inputs leaves the row untouched.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, row: CachedDailyRow) -> None:
        execute(
            self._conn_factory,
            """
            INSERT INTO employee_attendance_daily
                (employee_id, attendance_date, day_name, in_time, out_time,
                 in_out_display, day_status, status_color, working_minutes)
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE
                day_name=VALUES(day_name),
                in_time=VALUES(in_time),
                out_time=VALUES(out_time),
                in_out_display=VALUES(in_out_display),
                day_status=VALUES(day_status),
                status_color=VALUES(status_color),
                working_minutes=VALUES(working_minutes)
            """,
            (
                int(row.employee_id),
                row.attendance_date,
                row.day_name,
                row.first_in_time,
                row.last_out_time,
                row.display_string or None,
                row.status_code.value,
                row.color,
                int(row.working_minutes),
            ),
        )

    def get_for_employee_and_date(self, *, employee_id: int, attendance_date: date) -> Optional[CachedDailyRow]:
        r = query_one(
            self._conn_factory,
            """
            SELECT employee_id, attendance_date, day_name, in_time, out_time,
                   in_out_display, day_status, status_color, working_minutes, updated_at
            FROM employee_attendance_daily
            WHERE employee_id=%s AND attendance_date=%s
            """,
            (int(employee_id), attendance_date),
        )
        if not r:
            return None
        return CachedDailyRow(
            employee_id=int(r["employee_id"]),
            attendance_date=normalize_mysql_date(r["attendance_date"]),
            day_name=r["day_name"],
            first_in_time=normalize_mysql_time(r.get("in_time")),
            last_out_time=normalize_mysql_time(r.get("out_time")),
            display_string=r.get("in_out_display") or "",
            status_code=DayStatusCode(r["day_status"]),
            color=r["status_color"],
            working_minutes=int(r.get("working_minutes") or 0),
            updated_at=r.get("updated_at"),
        )
