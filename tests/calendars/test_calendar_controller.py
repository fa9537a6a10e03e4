from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.attendance_calendar.attendance_calendar.calendars.controller import register
from src.attendance_calendar.attendance_calendar.calendars.service import CalendarService


@pytest.fixture
def client_for():
    def _build(service):
        app = Flask(__name__)
        app.config["TESTING"] = True
        register(app, SimpleNamespace(calendar_service=service))
        return app.test_client()

    return _build


def test_get_calendar_returns_table(client_for, calendar_service, punches):
    punches.add_day(1, date(2025, 1, 7), "09:15:00", "18:30:00")
    client = client_for(calendar_service)

    resp = client.get("/api/calendar?employeeId=1&month=2025-01")

    assert resp.status_code == 200
    table = resp.get_json()["table"]
    assert len(table) == 31
    assert table[0] == {
        "dateLabel": "2025-01-01",
        "dayName": "Wednesday",
        "inOutTime": "",
        "dayStatus": "A",
        "backColor": "#ff0000",
        "workingMinutes": 0,
    }
    assert table[6]["dayStatus"] == "P"
    assert table[6]["inOutTime"] == "IN 09:15 AM\nOUT 06:30 PM"
    assert table[6]["workingMinutes"] == 555


@pytest.mark.parametrize(
    "query,error",
    [
        ("month=2025-01", "employeeId is required"),
        ("employeeId=1", "month is required (format: YYYY-MM)"),
        ("employeeId=1&month=2025/01", "Invalid month format. Use YYYY-MM format"),
        ("employeeId=x&month=2025-01", "employeeId is invalid"),
    ],
)
def test_get_calendar_bad_request(client_for, calendar_service, query, error):
    resp = client_for(calendar_service).get(f"/api/calendar?{query}")

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "error": error}


def test_get_calendar_unknown_employee(client_for, punches, employees):
    service = CalendarService(punches, employees=employees)

    resp = client_for(service).get("/api/calendar?employeeId=99&month=2025-01")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Employee not found"


def test_get_calendar_source_failure(client_for, failing_source):
    resp = client_for(CalendarService(failing_source)).get("/api/calendar?employeeId=1&month=2025-01")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Failed to fetch punch records"}


def test_sync_day_endpoint(client_for, calendar_service, punches, daily_cache):
    punches.add_day(1, date(2025, 1, 7), "09:15:00", "18:30:00")

    resp = client_for(calendar_service).post("/api/calendar/sync", json={"employeeId": 1, "date": "2025-01-07"})

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}
    assert (1, date(2025, 1, 7)) in daily_cache.rows


def test_sync_day_endpoint_requires_fields(client_for, calendar_service):
    resp = client_for(calendar_service).post("/api/calendar/sync", json={"employeeId": 1})
    assert resp.status_code == 400


def test_sync_day_endpoint_cache_failure(client_for, punches, failing_cache):
    punches.add_day(1, date(2025, 1, 7), "09:15:00", "18:30:00")
    service = CalendarService(punches, cache=failing_cache)

    resp = client_for(service).post("/api/calendar/sync", json={"employeeId": 1, "date": "2025-01-07"})

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False
