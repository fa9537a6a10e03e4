from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .repository import EmployeeDirectory


class MySQLEmployeeRepository(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, employee_id: int) -> bool:
        row = query_one(self._conn_factory, "SELECT id FROM employees WHERE id=%s", (int(employee_id),))
        return row is not None
