"""Date formatting for feed documents.

Atom and JSON Feed use ISO-8601 timestamps in UTC with seconds precision;
RSS uses the RFC 822/1123 form. Naive datetimes are taken to be UTC and a
missing timestamp means "now".

Example:
    >>> from datetime import datetime, timezone
    >>> from feedscribe.utils.dates import to_atom_date, to_rss_date
    >>> ts = datetime(2020, 1, 1, tzinfo=timezone.utc)
    >>> to_atom_date(ts)
    '2020-01-01T00:00:00Z'
    >>> to_rss_date(ts)
    'Wed, 01 Jan 2020 00:00:00 GMT'
"""

from __future__ import annotations

from datetime import UTC, datetime
from email.utils import format_datetime


def to_utc(timestamp: datetime | None) -> datetime:
    """Normalize a timestamp to an aware UTC datetime.

    Args:
        timestamp: Timestamp to normalize, or None for the current time.

    Returns:
        Timezone-aware datetime in UTC.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> eastern = timezone(timedelta(hours=-5))
        >>> to_utc(datetime(2020, 1, 1, 7, tzinfo=eastern)).hour
        12
        >>> to_utc(datetime(2020, 1, 1, 7)).tzinfo is UTC
        True
    """
    if timestamp is None:
        return datetime.now(UTC)
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(UTC)


def to_atom_date(timestamp: datetime | None = None) -> str:
    """Format a timestamp as `YYYY-MM-DDTHH:MM:SSZ` in UTC.

    Sub-second precision is dropped. The year is always four digits.
    """
    utc = to_utc(timestamp).replace(microsecond=0, tzinfo=None)
    return utc.isoformat() + "Z"


def to_rss_date(timestamp: datetime | None = None) -> str:
    """Format a timestamp as an RFC 1123 string ending in `GMT`."""
    return format_datetime(to_utc(timestamp), usegmt=True)
