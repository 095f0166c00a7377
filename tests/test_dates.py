from datetime import date, datetime, timedelta, timezone

import pytest

from personal_manager.utils.dates import parse_flexible_datetime


@pytest.mark.parametrize("value, expected", [
    ("2024-01-15", datetime(2024, 1, 15)),
    ("2024-01-15T10:30:00Z", datetime(2024, 1, 15, 10, 30)),
    ("2024-01-15T10:30:00.250Z", datetime(2024, 1, 15, 10, 30, 0, 250000)),
    ("2024-01-15 10:30:00", datetime(2024, 1, 15, 10, 30)),
    ("2024-03-01T10:00:00+02:00", datetime(2024, 3, 1, 8, 0)),
    (1700000000, datetime(2023, 11, 14, 22, 13, 20)),
    (1700000000000, datetime(2023, 11, 14, 22, 13, 20)),
    ("1700000000000", datetime(2023, 11, 14, 22, 13, 20)),
    (date(2024, 2, 29), datetime(2024, 2, 29)),
])
def test_accepted_formats(value, expected):
    assert parse_flexible_datetime(value) == expected


def test_aware_datetime_is_converted_to_naive_utc():
    value = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=6)))
    assert parse_flexible_datetime(value) == datetime(2024, 5, 1, 6, 0)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_values_mean_not_supplied(value):
    assert parse_flexible_datetime(value) is None


@pytest.mark.parametrize("value", [
    "yesterday",
    "15/01/2024",
    True,
    [2024, 1, 15],
    "99999999999999999999999",
    1e300,
    10 ** 400,
    float("nan"),
    float("inf"),
])
def test_unparseable_values_raise(value):
    with pytest.raises(ValueError, match="Unable to parse date"):
        parse_flexible_datetime(value)
