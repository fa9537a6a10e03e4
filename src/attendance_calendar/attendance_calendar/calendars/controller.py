from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..container import Container
from .model import DayStatus

logger = logging.getLogger(__name__)


def _to_json_row(day: DayStatus) -> dict:
    return {
        "dateLabel": day.date_label,
        "dayName": day.day_name,
        "inOutTime": day.display_string,
        "dayStatus": day.status_code.value,
        "backColor": day.color,
        "workingMinutes": day.working_minutes,
    }


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "error": message}), status

    def _handle_domain_error(e: DomainError):
        if isinstance(e, ValidationError):
            return _error(str(e), 400)
        if isinstance(e, NotFoundError):
            return _error(str(e), 404)
        logger.error("Calendar request failed: %s", e)
        return _error(str(e) or "Failed to fetch calendar", 500)

    @app.route("/api/calendar", methods=["GET"], endpoint="calendar_get")
    def calendar_get():
        """GET /api/calendar?employeeId={id}&month={YYYY-MM}"""
        employee_id = request.args.get("employeeId")
        month = request.args.get("month")
        if not employee_id:
            return _error("employeeId is required", 400)
        if not month:
            return _error("month is required (format: YYYY-MM)", 400)

        try:
            data = container.calendar_service.get_calendar_for_month(employee_id, month)
        except DomainError as e:
            return _handle_domain_error(e)

        return jsonify({"table": [_to_json_row(day) for day in data.table]}), 200

    @app.route("/api/calendar/sync", methods=["POST"], endpoint="calendar_sync_day")
    def calendar_sync_day():
        """Backfill one cached day: body {"employeeId": 1, "date": "YYYY-MM-DD"}."""
        payload = request.get_json(silent=True) or {}
        employee_id = payload.get("employeeId")
        work_date = payload.get("date")
        if not employee_id or not work_date:
            return _error("employeeId and date are required", 400)

        try:
            container.calendar_service.sync_day(employee_id, work_date)
        except DomainError as e:
            return _handle_domain_error(e)

        return jsonify({"success": True}), 200
