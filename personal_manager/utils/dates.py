from datetime import date, datetime, timezone
import math
from typing import Any, Optional, Union


# Epoch values at or above this magnitude are read as milliseconds (1e11 seconds is year 5138)
EPOCH_MILLIS_THRESHOLD = 100_000_000_000


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed to be UTC already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _from_epoch(value: Union[int, float]) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Unable to parse date: {value!r}")
    try:
        seconds = value / 1000 if abs(value) >= EPOCH_MILLIS_THRESHOLD else value
        return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(tzinfo=None)
    except (OverflowError, OSError, ValueError) as e:
        # Outside the range datetime can represent
        raise ValueError(f"Unable to parse date: {value!r}") from e


def parse_flexible_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a datetime from the formats mobile clients send.

    Accepts datetime/date objects, ISO-8601 / RFC 3339 strings (with or without
    offset, fractional seconds, "Z", or a space instead of "T"), bare YYYY-MM-DD
    dates, and epoch seconds or milliseconds given as numbers or numeric strings.
    Returns a naive UTC datetime, or None for None / empty strings.

    Raises:
        ValueError: if the value cannot be interpreted as a datetime
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return to_naive_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, bool):
        raise ValueError(f"Unable to parse date: {value!r}")

    if isinstance(value, (int, float)):
        return _from_epoch(value)

    if not isinstance(value, str):
        raise ValueError(f"Unable to parse date: {value!r}")

    text = value.strip()
    if not text:
        return None

    if text.lstrip("-").isdigit():
        return _from_epoch(int(text))

    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return to_naive_utc(datetime.fromisoformat(iso_text))
    except ValueError:
        pass

    for fmt in ("%Y-%m-%dT%H:%M:%S.%f", "%Y-%m-%d %H:%M:%S.%f", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValueError(f"Unable to parse date: {value}")
