from datetime import datetime, timedelta, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_naive_utc(value: datetime) -> datetime:
    # Naive values are already UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def start_of_day_utc(now: datetime) -> datetime:
    return to_naive_utc(now).replace(hour=0, minute=0, second=0, microsecond=0)


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def isoformat_utc(value: datetime) -> str:
    """Render a naive UTC instant the way browsers do: ``2024-01-10T00:00:00.000Z``."""
    return to_naive_utc(value).isoformat(timespec="milliseconds") + "Z"


def parse_instant(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time into a naive UTC datetime.
    Returns None when the string is not a valid instant, including offsets
    that push the UTC value outside the years datetime can hold.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return to_naive_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        return None
