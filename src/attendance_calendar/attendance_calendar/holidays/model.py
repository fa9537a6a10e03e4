from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

RESTRICTED_TYPES = frozenset({"restricted", "rh"})


@dataclass(frozen=True)
class HolidayRecord:
    """Organization-wide holiday; not scoped to an employee."""

    holiday_date: date
    name: str = ""
    holiday_type: Optional[str] = None

    @property
    def is_restricted(self) -> bool:
        return (self.holiday_type or "").strip().lower() in RESTRICTED_TYPES
