import calendar
from datetime import date

from src.attendance_calendar.attendance_calendar.common.datetime_utils import day_name, month_bounds


def test_day_name_ignores_localized_calendar_names(monkeypatch):
    monkeypatch.setattr(calendar, "day_name", ["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"])

    assert day_name(date(2025, 1, 5)) == "Sunday"
    assert day_name(date(2025, 1, 1)) == "Wednesday"


def test_month_bounds():
    assert month_bounds(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
