"""Ví dụ: dùng service layer (không qua Flask).

Build the container from the active settings and print one month of an
employee's calendar.
"""

import importlib
import logging

from config import get_settings_module

from src.attendance_calendar.attendance_calendar.container import build_container_from_settings

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container_from_settings(settings)

    data = container.calendar_service.get_calendar(1, 2025, 1, persist=False)
    for day in data.table:
        logger.info(
            "%s %-9s %-4s %s %s",
            day.date_label,
            day.day_name,
            day.status_code.value,
            day.color,
            day.display_string.replace("\n", " / "),
        )


if __name__ == "__main__":
    main()
