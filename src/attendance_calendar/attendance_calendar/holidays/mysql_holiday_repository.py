from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import normalize_mysql_date, query_all
from .model import HolidayRecord
from .repository import HolidaySource


class MySQLHolidayRepository(HolidaySource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_holidays(self, *, year: int, month: int) -> Sequence[HolidayRecord]:
        rows = query_all(
            self._conn_factory,
            """
            SELECT holiday_date, holiday_name, holiday_type
            FROM holidays
            WHERE YEAR(holiday_date)=%s AND MONTH(holiday_date)=%s
            ORDER BY holiday_date ASC, id ASC
            """,
            (int(year), int(month)),
        )

        return [
            HolidayRecord(
                holiday_date=normalize_mysql_date(r["holiday_date"]),
                name=r.get("holiday_name") or "",
                holiday_type=r.get("holiday_type"),
            )
            for r in rows
        ]
