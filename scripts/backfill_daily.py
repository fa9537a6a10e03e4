"""Recompute and cache every punched day of a month for one or more employees.

Usage: python scripts/backfill_daily.py 2025-01 12 15 18
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_calendar.attendance_calendar.calendars.repository import DailyCacheStore
from src.attendance_calendar.attendance_calendar.calendars.service import CalendarService
from src.attendance_calendar.attendance_calendar.common.datetime_utils import iter_dates, month_bounds
from src.attendance_calendar.attendance_calendar.common.validators import parse_month
from src.attendance_calendar.attendance_calendar.container import build_container_from_settings
from src.attendance_calendar.attendance_calendar.core.exceptions import CacheWriteError, DomainError

logger = logging.getLogger("backfill_daily")


@dataclass
class BackfillSummary:
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0
    failed: int = 0


def backfill_employee(
    service: CalendarService,
    cache: DailyCacheStore,
    employee_id: int,
    dates: Iterable[date],
) -> BackfillSummary:
    """sync_day each date and classify the cached row by comparing it before and after."""

    summary = BackfillSummary()
    for work_date in dates:
        before = cache.get_for_employee_and_date(employee_id=employee_id, attendance_date=work_date)
        try:
            service.sync_day(employee_id, work_date)
        except CacheWriteError:
            summary.failed += 1
            logger.exception("Cache write failed for employee %s on %s", employee_id, work_date)
            continue
        except DomainError as e:
            summary.failed += 1
            logger.error("Skipping employee %s on %s: %s", employee_id, work_date, e)
            continue

        after = cache.get_for_employee_and_date(employee_id=employee_id, attendance_date=work_date)
        if after is None:
            summary.skipped += 1
        elif before is None:
            summary.created += 1
        elif before != after:
            summary.updated += 1
            logger.info(
                "employee %s %s: %s -> %s", employee_id, work_date, before.status_code.value, after.status_code.value
            )
        else:
            summary.unchanged += 1
    return summary


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Backfill employee_attendance_daily for a month.")
    parser.add_argument("month", help="Month to backfill, YYYY-MM")
    parser.add_argument("employee_ids", nargs="+", type=int, help="Employee ids to backfill")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        year, month = parse_month(args.month)
    except DomainError as e:
        logger.error("%s", e)
        return 2

    container = build_container_from_settings(settings)
    if container.daily_cache_repo is None:
        logger.error("CACHE_ENABLED is off; nothing to backfill")
        return 2

    start, end = month_bounds(year, month)
    failures = 0
    for employee_id in args.employee_ids:
        summary = backfill_employee(
            container.calendar_service, container.daily_cache_repo, employee_id, iter_dates(start, end)
        )
        failures += summary.failed
        logger.info(
            "employee %s %s: created=%d updated=%d unchanged=%d skipped=%d failed=%d",
            employee_id,
            args.month,
            summary.created,
            summary.updated,
            summary.unchanged,
            summary.skipped,
            summary.failed,
        )

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
