"""
utils/time_utils.py

Purpose: Timestamp helpers

- ISO-8601 UTC timestamps the way browser clients print them
"""

from datetime import datetime, timezone
from typing import Optional


def iso_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Formats a datetime as ISO-8601 UTC with millisecond precision and a Z suffix.
    e.g. 2024-05-01T12:30:45.123Z
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
