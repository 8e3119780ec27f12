"""
Date helpers for persisted timestamps and API date strings.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """Render a date or datetime as YYYY-MM-DD."""
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as an ISO 8601 string."""
    if value is None:
        return None
    return value.isoformat()


def to_datetime(value: Union[date, datetime]) -> datetime:
    """Promote a date to midnight so it compares against stored timestamps."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)
