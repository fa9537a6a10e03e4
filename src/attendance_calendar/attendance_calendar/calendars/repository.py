from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import CachedDailyRow


class DailyCacheStore(Protocol):
    def upsert(self, row: CachedDailyRow) -> None:
        """Write or replace the single row keyed by (employee_id, attendance_date)."""

        raise NotImplementedError

    def get_for_employee_and_date(self, *, employee_id: int, attendance_date: date) -> Optional[CachedDailyRow]:
        raise NotImplementedError
