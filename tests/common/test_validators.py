import pytest

from src.attendance_calendar.attendance_calendar.common.validators import (
    parse_month,
    parse_option,
    require_positive_int,
    require_year_month,
)
from src.attendance_calendar.attendance_calendar.core.enums import WorkedTimeBasis
from src.attendance_calendar.attendance_calendar.core.exceptions import ValidationError


def test_positive_int_accepts_numeric_strings():
    assert require_positive_int("42", "employeeId") == 42
    assert require_positive_int(7, "employeeId") == 7


@pytest.mark.parametrize("value", [None, "", "abc", "1.5", 0, -1, False])
def test_positive_int_rejects(value):
    with pytest.raises(ValidationError, match="employeeId is invalid"):
        require_positive_int(value, "employeeId")


def test_year_month_bounds():
    assert require_year_month("2025", "1") == (2025, 1)
    assert require_year_month(2000, 12) == (2000, 12)
    assert require_year_month(2100, 1) == (2100, 1)

    with pytest.raises(ValidationError, match="month must be 1-12"):
        require_year_month(2025, 13)
    with pytest.raises(ValidationError, match="year must be valid"):
        require_year_month(2101, 1)
    with pytest.raises(ValidationError, match="year and month are required"):
        require_year_month(None, None)


@pytest.mark.parametrize("value", ["2025-1", "2025/01", "25-01", "", None, "2025-01-01"])
def test_parse_month_rejects_bad_format(value):
    with pytest.raises(ValidationError, match="Invalid month format"):
        parse_month(value)


def test_parse_month():
    assert parse_month("2025-01") == (2025, 1)
    assert parse_month(" 2024-12 ") == (2024, 12)
    with pytest.raises(ValidationError, match="month must be 1-12"):
        parse_month("2025-00")


@pytest.mark.parametrize("value", ["paired", "PAIRED", " Paired ", WorkedTimeBasis.PAIRED])
def test_parse_option_is_case_insensitive(value):
    assert parse_option(WorkedTimeBasis, value, "worked-time basis") is WorkedTimeBasis.PAIRED


def test_parse_option_rejects_unknown_value():
    with pytest.raises(ValidationError, match="Unknown worked-time basis"):
        parse_option(WorkedTimeBasis, "hourly", "worked-time basis")
