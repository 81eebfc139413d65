"""
Time helpers.

Timestamps are stored and exchanged as integer epoch milliseconds; calendar
days are always UTC ``YYYY-MM-DD`` keys.
"""

import datetime
import time
from typing import Optional

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def to_utc_datetime(timestamp_ms: int) -> datetime.datetime:
    # Integer arithmetic: exact up to 9999-12-31T23:59:59.999Z
    return _EPOCH + datetime.timedelta(milliseconds=timestamp_ms)


def day_key(timestamp_ms: int) -> str:
    """UTC calendar date of an epoch-ms timestamp as ``YYYY-MM-DD``."""
    return to_utc_datetime(timestamp_ms).date().isoformat()


def hour_key(timestamp_ms: int) -> str:
    """UTC hour bucket of an epoch-ms timestamp as ``YYYY-MM-DDTHH``."""
    return to_utc_datetime(timestamp_ms).strftime("%Y-%m-%dT%H")


def days_between(earlier: str, later: str) -> Optional[int]:
    """Calendar-day difference ``later - earlier`` between two day keys.

    Returns None if either key is empty or malformed.
    """
    try:
        start = datetime.date.fromisoformat(earlier)
        end = datetime.date.fromisoformat(later)
    except (TypeError, ValueError):
        return None
    return (end - start).days
