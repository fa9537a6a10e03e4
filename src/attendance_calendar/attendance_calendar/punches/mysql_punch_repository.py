from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import normalize_mysql_date, query_all
from .model import Punch
from .repository import PunchSource


def _parse_punch_type(value) -> Optional[PunchType]:
    try:
        return PunchType(str(value or "").strip().upper())
    except ValueError:
        return None


class MySQLPunchRepository(PunchSource):
    """Raw IN/OUT events from `attendance_punch`.

    Rows with an unknown punch_type are dropped here; the aggregator would ignore them anyway.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_punches(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[Punch]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT employee_id, attendance_date, punch_time, punch_type
            FROM attendance_punch
            WHERE employee_id=%s AND attendance_date BETWEEN %s AND %s
            ORDER BY attendance_date ASC, punch_time ASC
            """,
            (int(employee_id), start_date, end_date),
        )

        out: list[Punch] = []
        for r in rows:
            punch_type = _parse_punch_type(r.get("punch_type"))
            if punch_type is None:
                continue
            out.append(
                Punch(
                    employee_id=int(r["employee_id"]),
                    work_date=normalize_mysql_date(r["attendance_date"]),
                    timestamp=r["punch_time"],
                    punch_type=punch_type,
                )
            )
        return out


class MySQLSwipeAttendanceRepository(PunchSource):
    """Legacy `attendance` table: one row per swipe-in with an optional swipe-out.

    Each row is expanded into an IN punch and, when present, an OUT punch.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_punches(self, *, employee_id: int, start_date: date, end_date: date) -> Sequence[Punch]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT emp_id, attendance_date, swipe_in_time, swipe_out_time
            FROM attendance
            WHERE emp_id=%s
            AND attendance_date BETWEEN %s AND %s
            AND swipe_in_time IS NOT NULL
            ORDER BY attendance_date, swipe_in_time ASC
            """,
            (int(employee_id), start_date, end_date),
        )

        out: list[Punch] = []
        for r in rows:
            work_date = normalize_mysql_date(r["attendance_date"])
            emp_id = int(r["emp_id"])
            out.append(Punch(emp_id, work_date, r["swipe_in_time"], PunchType.IN))
            if r.get("swipe_out_time") is not None:
                out.append(Punch(emp_id, work_date, r["swipe_out_time"], PunchType.OUT))
        return out
