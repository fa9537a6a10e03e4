from pathlib import Path

from src.attendance_calendar.attendance_calendar.database.bootstrap import (
    _iter_sql_statements,
    _strip_create_db_and_use,
)

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_schema_splits_into_create_table_statements():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 5
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_daily_cache_table_is_unique_per_employee_and_date():
    sql = SCHEMA.read_text(encoding="utf-8")
    assert "UNIQUE KEY uq_daily_emp_date (employee_id, attendance_date)" in sql
    assert "ON UPDATE CURRENT_TIMESTAMP" in sql


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "-- comment\nINSERT INTO t VALUES ('a;b');\nSELECT 1"
    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]
