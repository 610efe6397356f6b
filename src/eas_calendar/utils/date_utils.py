"""Date and time utilities for the EAS calendar client."""

from datetime import datetime

import pytz

# Compact basic ISO 8601 form used by ActiveSync for calendar timestamps
EAS_DATETIME_FORMAT = "%Y%m%dT%H%M%SZ"


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime is in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        UTC datetime
    """
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def format_eas_datetime(dt: datetime) -> str:
    """Format a datetime as an EAS timestamp (naive values are taken as UTC)."""
    return ensure_utc(dt).strftime(EAS_DATETIME_FORMAT)

