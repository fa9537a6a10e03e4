from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

APPROVED_STATUSES = frozenset({"approved", "approve"})


@dataclass(frozen=True)
class LeaveRecord:
    """Thực thể miền (domain): đơn nghỉ phép bao phủ from_date..to_date (bao gồm hai đầu).

    employee_id is None when the leave table is not employee-scoped.
    status is None when the table has no status column.
    """

    from_date: date
    to_date: date
    leave_type: str = ""
    status: Optional[str] = None
    employee_id: Optional[int] = None

    @property
    def is_effective(self) -> bool:
        """Approved, or no status recorded at all."""
        if self.status is None or not str(self.status).strip():
            return True
        return str(self.status).strip().lower() in APPROVED_STATUSES

    @property
    def is_sick(self) -> bool:
        return "sick" in (self.leave_type or "").lower()
