from __future__ import annotations

from typing import Protocol


class EmployeeDirectory(Protocol):
    def exists(self, employee_id: int) -> bool:
        raise NotImplementedError
