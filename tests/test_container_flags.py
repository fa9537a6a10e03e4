import pytest

from src.attendance_calendar.attendance_calendar import container as container_module
from src.attendance_calendar.attendance_calendar.core.exceptions import ValidationError
from src.attendance_calendar.attendance_calendar.punches.mysql_punch_repository import (
    MySQLPunchRepository,
    MySQLSwipeAttendanceRepository,
)


@pytest.fixture
def tables(monkeypatch):
    calls = []

    def _install(names):
        def fake_list_tables(db_config):
            calls.append(db_config)
            return list(names)

        monkeypatch.setattr(container_module, "list_tables", fake_list_tables)
        return calls

    return _install


def test_auto_flags_follow_existing_tables(tables):
    calls = tables(["attendance_punch", "Holidays"])

    flags = container_module.resolve_source_flags({"database": "x"})

    assert flags.holidays_enabled is True
    assert flags.leaves_enabled is False
    assert len(calls) == 1


def test_explicit_flags_skip_detection(tables):
    calls = tables([])

    flags = container_module.resolve_source_flags({}, holidays_enabled=False, leaves_enabled=True)

    assert flags == container_module.SourceFlags(holidays_enabled=False, leaves_enabled=True)
    assert calls == []


def test_build_container_uses_its_own_database_and_punch_source():
    first = container_module.build_container(
        db_config={"database": "calendar_a"},
        punch_source="SWIPES",
        half_day_mode="Duration",
        worked_time_basis="Span",
        holidays_enabled=True,
        leaves_enabled=False,
    )
    second = container_module.build_container(
        db_config={"database": "calendar_b"},
        holidays_enabled=False,
        leaves_enabled=False,
        cache_enabled=False,
    )

    assert first.conn.config.database == "calendar_a"
    assert second.conn.config.database == "calendar_b"
    assert isinstance(first.punches_repo, MySQLSwipeAttendanceRepository)
    assert isinstance(second.punches_repo, MySQLPunchRepository)
    assert first.daily_cache_repo is not None
    assert second.daily_cache_repo is None


def test_build_container_rejects_unknown_punch_source():
    with pytest.raises(ValidationError):
        container_module.build_container(
            db_config={}, punch_source="csv", holidays_enabled=False, leaves_enabled=False
        )
