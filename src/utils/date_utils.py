"""Date and time utility functions."""
from datetime import datetime, timezone
from typing import Callable, List, Optional, TypeVar

DATETIME_FORMAT = "%Y-%m-%d %H:%M"

T = TypeVar("T")


def parse_datetime(value: str) -> datetime:
    """
    Parse a scheduled date/time string.

    Args:
        value: "YYYY-MM-DD HH:MM" (e.g., "2026-12-01 14:00") or any
            ISO 8601 string accepted by datetime.fromisoformat

    Returns:
        datetime object

    Raises:
        ValueError: If the string is not a recognised date/time
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid date/time: {value!r}")

    text = value.strip()
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError as e:
        raise ValueError(f"Invalid date/time format: {value}") from e


def format_datetime(value: datetime) -> str:
    """Format a datetime the way parse_datetime reads it."""
    return value.strftime(DATETIME_FORMAT)


def to_aware(value: datetime) -> datetime:
    """
    Return value as an aware datetime, reading naive values as local time.

    Naive values too close to datetime.min/max for a local-time conversion
    are read as UTC instead.
    """
    if value.tzinfo is not None:
        return value

    try:
        return value.astimezone()
    except (OverflowError, ValueError, OSError):
        return value.replace(tzinfo=timezone.utc)


def _align(value: datetime, other: datetime) -> datetime:
    # Naive values are taken as local time when compared with aware ones.
    if value.tzinfo is None and other.tzinfo is not None:
        return to_aware(value)
    return value


def sort_by_datetime(items: List[T], key: Callable[[T], datetime]) -> List[T]:
    """
    Sort items ascending by a datetime attribute.

    Values are compared as they are unless naive and aware values are
    mixed; then naive values are read as local time. The sort is stable.
    """
    mixed = len({key(item).tzinfo is None for item in items}) > 1
    if not mixed:
        return sorted(items, key=key)
    return sorted(items, key=lambda item: to_aware(key(item)))


def is_future_datetime(value: datetime, now: Optional[datetime] = None) -> bool:
    """
    Check if a date/time lies strictly after now.

    Args:
        value: Date/time to check
        now: Reference time (defaults to datetime.now())

    Returns:
        True if value > now, False otherwise (including non-datetime input)
    """
    if not isinstance(value, datetime):
        return False
    if now is None:
        now = datetime.now()

    return _align(value, now) > _align(now, value)
