"""
Date and duration formatting for feed elements.

RSS 2.0 dates use the RFC 1123 layout with a numeric zone offset
(``Mon, 02 Jan 2006 15:04:05 -0700``). Formatting goes through
``email.utils`` so day and month names never depend on the process locale.
"""

from datetime import date, datetime, time, timezone
from email.utils import format_datetime
from typing import Optional, Union

from dateutil import parser as date_parser


DateLike = Union[datetime, date, str]


def to_datetime(value: DateLike) -> datetime:
    """
    Coerce a datetime, date or date string into a timezone-aware datetime.

    Strings are parsed with dateutil, so ISO-8601 and RFC 822 forms are both
    accepted. Naive values are assumed to be UTC.

    Args:
        value: datetime instance or date string

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the string cannot be parsed as a date
    """
    if isinstance(value, str):
        try:
            value = date_parser.parse(value)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unrecognized date '{value}': {exc}") from exc
    elif not isinstance(value, datetime):
        value = datetime.combine(value, time())

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_rfc1123z(value: Optional[DateLike] = None) -> str:
    """
    Format a date as RFC 1123 with a numeric zone.

    Args:
        value: datetime or date string; the current UTC time when omitted

    Returns:
        Formatted date string

    Example:
        >>> format_rfc1123z(datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc))
        'Mon, 15 Jan 2024 08:30:00 +0000'
    """
    if value is None:
        value = datetime.now(timezone.utc)
    return format_datetime(to_datetime(value))


def format_duration(seconds: int) -> str:
    """
    Format a duration in seconds as ``MM:SS`` or ``HH:MM:SS``.

    Example:
        >>> format_duration(5025)
        '01:23:45'
        >>> format_duration(90)
        '01:30'
    """
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
