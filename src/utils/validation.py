"""Data validation utilities."""
from datetime import datetime
from typing import Any, Optional, Tuple

from src.utils.config import get_max_name_length
from src.utils.date_utils import is_future_datetime


def validate_name(name: Any) -> Tuple[bool, str]:
    """
    Validate a person's name.

    Args:
        name: Name to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Name cannot be empty") if missing or blank
        - (False, "Name cannot exceed N characters") if too long
    """
    if not isinstance(name, str) or not name.strip():
        return False, "Name cannot be empty"

    max_length = get_max_name_length()
    if len(name) > max_length:
        return False, f"Name cannot exceed {max_length} characters"
    return True, ""


def validate_title(title: Any) -> Tuple[bool, str]:
    """
    Validate an event title.

    Returns:
        (True, "") if title is a non-blank string,
        (False, "Title cannot be empty") otherwise
    """
    if not isinstance(title, str) or not title.strip():
        return False, "Title cannot be empty"
    return True, ""


def validate_event_datetime(value: Any, now: Optional[datetime] = None) -> Tuple[bool, str]:
    """
    Validate the scheduled date/time of a new event.

    Args:
        value: Scheduled date/time
        now: Reference time (defaults to datetime.now())

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if value is a datetime strictly after now
        - (False, "Date must be a datetime") if wrong type
        - (False, "Date must be in the future") if value <= now
    """
    if not isinstance(value, datetime):
        return False, "Date must be a datetime"

    if not is_future_datetime(value, now):
        return False, "Date must be in the future"
    return True, ""


def validate_capacity(capacity: Any) -> Tuple[bool, str]:
    """
    Validate the maximum participator count of a limited event.

    Returns:
        (True, "") for None (unlimited) or a positive integer,
        (False, "Capacity must be a positive integer") otherwise
    """
    if capacity is None:
        return True, ""

    # bool is an int subclass but never a meaningful capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        return False, "Capacity must be a positive integer"
    return True, ""
