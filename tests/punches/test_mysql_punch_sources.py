from datetime import date, datetime

import pytest

from src.attendance_calendar.attendance_calendar.core.enums import PunchType
from src.attendance_calendar.attendance_calendar.punches import mysql_punch_repository as repo_module
from src.attendance_calendar.attendance_calendar.punches.model import Punch


@pytest.fixture
def fake_rows(monkeypatch):
    calls = []

    def _install(rows):
        def fake_query_all(conn_factory, sql, params=()):
            calls.append((sql, tuple(params)))
            return list(rows)

        monkeypatch.setattr(repo_module, "query_all", fake_query_all)
        return calls

    return _install


def test_swipe_rows_expand_into_in_and_out_punches(fake_rows):
    calls = fake_rows(
        [
            {
                "emp_id": 7,
                "attendance_date": datetime(2025, 1, 7),
                "swipe_in_time": datetime(2025, 1, 7, 9, 15),
                "swipe_out_time": datetime(2025, 1, 7, 18, 30),
            },
            {
                "emp_id": 7,
                "attendance_date": date(2025, 1, 8),
                "swipe_in_time": datetime(2025, 1, 8, 9, 0),
                "swipe_out_time": None,
            },
        ]
    )

    punches = repo_module.MySQLSwipeAttendanceRepository(object()).get_punches(
        employee_id=7, start_date=date(2025, 1, 1), end_date=date(2025, 1, 31)
    )

    assert punches == [
        Punch(7, date(2025, 1, 7), datetime(2025, 1, 7, 9, 15), PunchType.IN),
        Punch(7, date(2025, 1, 7), datetime(2025, 1, 7, 18, 30), PunchType.OUT),
        Punch(7, date(2025, 1, 8), datetime(2025, 1, 8, 9, 0), PunchType.IN),
    ]
    sql, params = calls[0]
    assert "FROM attendance" in sql
    assert params == (7, date(2025, 1, 1), date(2025, 1, 31))


def test_punch_rows_drop_unknown_types(fake_rows):
    fake_rows(
        [
            {"employee_id": 3, "attendance_date": date(2025, 1, 7), "punch_time": datetime(2025, 1, 7, 9, 0), "punch_type": "in"},
            {"employee_id": 3, "attendance_date": date(2025, 1, 7), "punch_time": datetime(2025, 1, 7, 12, 0), "punch_type": "BREAK"},
            {"employee_id": 3, "attendance_date": date(2025, 1, 7), "punch_time": datetime(2025, 1, 7, 17, 0), "punch_type": " OUT "},
        ]
    )

    punches = repo_module.MySQLPunchRepository(object()).get_punches(
        employee_id=3, start_date=date(2025, 1, 1), end_date=date(2025, 1, 31)
    )

    assert [p.punch_type for p in punches] == [PunchType.IN, PunchType.OUT]
