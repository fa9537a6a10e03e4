from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunchType


@dataclass(frozen=True)
class Punch:
    """Thực thể miền (domain): một lần quẹt thẻ vào/ra (chỉ thêm, không sửa)."""

    employee_id: int
    work_date: date
    timestamp: datetime
    punch_type: PunchType


@dataclass(frozen=True)
class DayWindow:
    """Earliest IN / latest OUT of one employee on one date.

    Either end may be missing; when both are present first_in <= last_out.
    """

    work_date: date
    first_in: Optional[datetime] = None
    last_out: Optional[datetime] = None
    punches: tuple[Punch, ...] = ()

    @property
    def has_punch(self) -> bool:
        return self.first_in is not None or self.last_out is not None or bool(self.punches)

    @property
    def is_complete(self) -> bool:
        return self.first_in is not None and self.last_out is not None
