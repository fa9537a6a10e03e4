from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .calendars.factory import HalfDayStrategyFactory
from .calendars.mysql_daily_cache_repository import MySQLDailyCacheRepository
from .calendars.resolver import DayStatusResolver
from .calendars.service import CalendarService
from .common.validators import parse_option
from .core.enums import HalfDayMode, PunchSourceKind, WorkedTimeBasis
from .database.bootstrap import list_tables
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .punches.mysql_punch_repository import MySQLPunchRepository, MySQLSwipeAttendanceRepository
from .punches.repository import PunchSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFlags:
    """Capability flags resolved once at startup."""

    holidays_enabled: bool
    leaves_enabled: bool


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    punches_repo: PunchSource
    leaves_repo: MySQLLeaveRepository
    holidays_repo: MySQLHolidayRepository
    employees_repo: Optional[MySQLEmployeeRepository]
    daily_cache_repo: Optional[MySQLDailyCacheRepository]

    flags: SourceFlags
    calendar_service: CalendarService


def resolve_source_flags(
    db_config: dict,
    *,
    holidays_enabled: Optional[bool] = None,
    leaves_enabled: Optional[bool] = None,
) -> SourceFlags:
    """Explicit flags win; None means "on if the table exists"."""

    if holidays_enabled is None or leaves_enabled is None:
        tables = {t.lower() for t in list_tables(db_config)}
        if holidays_enabled is None:
            holidays_enabled = "holidays" in tables
        if leaves_enabled is None:
            leaves_enabled = "leaves" in tables

    flags = SourceFlags(holidays_enabled=bool(holidays_enabled), leaves_enabled=bool(leaves_enabled))
    if not flags.holidays_enabled:
        logger.info("Holiday source disabled; calendars will not show holidays")
    if not flags.leaves_enabled:
        logger.info("Leave source disabled; calendars will not show leave")
    return flags


def build_container(
    *,
    db_config: dict,
    half_day_mode: HalfDayMode | str = HalfDayMode.LEAVE,
    worked_time_basis: WorkedTimeBasis | str = WorkedTimeBasis.SPAN,
    punch_source: PunchSourceKind | str = PunchSourceKind.PUNCHES,
    holidays_enabled: Optional[bool] = None,
    leaves_enabled: Optional[bool] = None,
    leaves_employee_scoped: bool = True,
    leaves_have_status: bool = True,
    cache_enabled: bool = True,
    verify_employee: bool = False,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    flags = resolve_source_flags(db_config, holidays_enabled=holidays_enabled, leaves_enabled=leaves_enabled)

    if parse_option(PunchSourceKind, punch_source, "punch source") == PunchSourceKind.SWIPES:
        punches_repo: PunchSource = MySQLSwipeAttendanceRepository(conn)
    else:
        punches_repo = MySQLPunchRepository(conn)

    leaves_repo = MySQLLeaveRepository(conn, employee_scoped=leaves_employee_scoped, has_status=leaves_have_status)
    holidays_repo = MySQLHolidayRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn) if verify_employee else None
    daily_cache_repo = MySQLDailyCacheRepository(conn) if cache_enabled else None

    resolver = DayStatusResolver(HalfDayStrategyFactory().for_mode(half_day_mode))
    calendar_service = CalendarService(
        punches_repo,
        leaves_repo,
        holidays_repo,
        daily_cache_repo,
        employees=employees_repo,
        resolver=resolver,
        worked_time_basis=worked_time_basis,
        leaves_enabled=flags.leaves_enabled,
        holidays_enabled=flags.holidays_enabled,
    )

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        employees_repo=employees_repo,
        daily_cache_repo=daily_cache_repo,
        flags=flags,
        calendar_service=calendar_service,
    )


def build_container_from_settings(settings) -> Container:
    return build_container(
        db_config=dict(getattr(settings, "DB_CONFIG")),
        half_day_mode=getattr(settings, "HALF_DAY_MODE", HalfDayMode.LEAVE),
        worked_time_basis=getattr(settings, "WORKED_TIME_BASIS", WorkedTimeBasis.SPAN),
        punch_source=getattr(settings, "PUNCH_SOURCE", PunchSourceKind.PUNCHES),
        holidays_enabled=getattr(settings, "HOLIDAYS_ENABLED", None),
        leaves_enabled=getattr(settings, "LEAVES_ENABLED", None),
        leaves_employee_scoped=bool(getattr(settings, "LEAVES_EMPLOYEE_SCOPED", True)),
        leaves_have_status=bool(getattr(settings, "LEAVES_HAVE_STATUS", True)),
        cache_enabled=bool(getattr(settings, "CACHE_ENABLED", True)),
        verify_employee=bool(getattr(settings, "VERIFY_EMPLOYEE", False)),
    )
