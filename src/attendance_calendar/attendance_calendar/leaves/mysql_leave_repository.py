from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import normalize_mysql_date, query_all
from .model import LeaveRecord
from .repository import LeaveSource


class MySQLLeaveRepository(LeaveSource):
    """Reads the `leaves` table.

    The table shape (employee_id / status columns) is fixed at construction,
    from configuration, instead of being detected on every query.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, employee_scoped: bool = True, has_status: bool = True):
        self._conn_factory = conn_factory
        self._employee_scoped = bool(employee_scoped)
        self._has_status = bool(has_status)

    def get_leaves(self, *, employee_id: Optional[int], start_date: date, end_date: date) -> Sequence[LeaveRecord]:
        columns = ["from_date", "to_date", "leave_type"]
        clauses = ["from_date <= %s AND to_date >= %s"]
        params: list[object] = [end_date, start_date]

        if self._has_status:
            columns.append("status")
        if self._employee_scoped:
            columns.append("employee_id")
            if employee_id is not None:
                clauses.append("employee_id=%s")
                params.append(int(employee_id))

        rows = query_all(
            self._conn_factory,
            f"""
            SELECT {", ".join(columns)}
            FROM leaves
            WHERE {" AND ".join(clauses)}
            ORDER BY from_date ASC, id ASC
            """,
            params,
        )

        return [
            LeaveRecord(
                employee_id=int(r["employee_id"]) if r.get("employee_id") is not None else None,
                from_date=normalize_mysql_date(r["from_date"]),
                to_date=normalize_mysql_date(r["to_date"]),
                leave_type=r.get("leave_type") or "",
                status=r.get("status"),
            )
            for r in rows
        ]
