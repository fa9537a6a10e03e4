from __future__ import annotations

import re

from ..core.constants import MAX_CALENDAR_YEAR, MIN_CALENDAR_YEAR
from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def require_positive_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def require_year_month(year, month) -> tuple[int, int]:
    try:
        year_num = int(year)
        month_num = int(month)
    except (TypeError, ValueError):
        raise ValidationError("year and month are required")

    if not 1 <= month_num <= 12:
        raise ValidationError("month must be 1-12")
    if not MIN_CALENDAR_YEAR <= year_num <= MAX_CALENDAR_YEAR:
        raise ValidationError("year must be valid")
    return year_num, month_num


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM string into (year, month)."""
    match = _MONTH_RE.match((value or "").strip())
    if not match:
        raise ValidationError("Invalid month format. Use YYYY-MM format")
    return require_year_month(match.group(1), match.group(2))


def parse_option(enum_cls, value, field_name: str):
    """Case-insensitive lookup of a lowercase-valued config Enum."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown {field_name}: {value!r}")
