from datetime import datetime

import pytest

from medtransport.core.exceptions import RangeErrorCode, RangeValidationError
from medtransport.services.range_validator import validate_range


def code_for(from_raw, to_raw):
    with pytest.raises(RangeValidationError) as exc:
        validate_range(from_raw, to_raw)
    return exc.value.code


def test_invalid_from_wins_over_invalid_to():
    assert code_for("not-a-date", "not-a-date") is RangeErrorCode.INVALID_FROM


def test_invalid_to():
    assert code_for("2024-01-10T00:00:00Z", "tomorrow") is RangeErrorCode.INVALID_TO


def test_equal_bounds_are_rejected():
    assert code_for("2024-01-10T00:00:00Z", "2024-01-10T00:00:00Z") is RangeErrorCode.INVALID_RANGE


def test_backwards_range_is_rejected():
    assert code_for("2024-01-10T00:00:00Z", "2024-01-09T00:00:00Z") is RangeErrorCode.INVALID_RANGE


def test_backwards_range_wins_over_size():
    assert code_for("2024-03-01T00:00:00Z", "2024-01-01T00:00:00Z") is RangeErrorCode.INVALID_RANGE


def test_45_days_is_too_large():
    assert code_for("2024-01-01T00:00:00Z", "2024-02-15T00:00:00Z") is RangeErrorCode.RANGE_TOO_LARGE


def test_just_over_31_days_is_too_large():
    assert code_for("2024-01-01T00:00:00Z", "2024-02-01T00:00:00.001Z") is RangeErrorCode.RANGE_TOO_LARGE


def test_exactly_31_days_is_accepted():
    from_date, to_date = validate_range("2024-01-01T00:00:00Z", "2024-02-01T00:00:00Z")
    assert from_date == datetime(2024, 1, 1)
    assert to_date == datetime(2024, 2, 1)


def test_offsets_are_normalized_to_utc():
    from_date, to_date = validate_range("2024-01-10T02:00:00+02:00", "2024-01-11T00:00:00Z")
    assert from_date == datetime(2024, 1, 10, 0, 0)
    assert to_date == datetime(2024, 1, 11)


def test_length_is_measured_on_instants():
    # 31 days by the calendar, 31 days and 2 hours between the instants
    assert code_for("2024-01-01T00:00:00+01:00", "2024-02-01T00:00:00-01:00") is RangeErrorCode.RANGE_TOO_LARGE


def test_date_only_values_are_utc_midnight():
    from_date, to_date = validate_range("2024-01-10", "2024-01-17")
    assert from_date == datetime(2024, 1, 10)
    assert to_date == datetime(2024, 1, 17)


def test_custom_cap():
    with pytest.raises(RangeValidationError) as exc:
        validate_range("2024-01-01T00:00:00Z", "2024-01-09T00:00:00Z", max_days=7)
    assert exc.value.code is RangeErrorCode.RANGE_TOO_LARGE


@pytest.mark.parametrize("from_raw, to_raw, code", [
    ("0001-01-01T00:00:00+01:00", "0001-01-05T00:00:00Z", RangeErrorCode.INVALID_FROM),
    ("9999-12-31T00:00:00Z", "9999-12-31T23:59:59-01:00", RangeErrorCode.INVALID_TO),
])
def test_offsets_past_the_calendar_edges_are_invalid(from_raw, to_raw, code):
    assert code_for(from_raw, to_raw) is code
