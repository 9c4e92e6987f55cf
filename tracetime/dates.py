"""Timestamp formatting and relative date labels.

Timestamps are microseconds since the Unix epoch. Patterns are strftime
patterns with two extra fields, ``{day}`` for the unpadded day of month
and ``{millis}`` for zero-padded milliseconds.
"""

import logging
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo

from dateutil import parser
from dateutil.relativedelta import relativedelta

from tracetime.util import (
    ONE_MILLISECOND,
    ONE_SECOND,
    STANDARD_DATE_FORMAT,
    STANDARD_DATETIME_FORMAT,
    STANDARD_TIME_FORMAT,
)

logger = logging.getLogger(__name__)

TODAY = "Today"
YESTERDAY = "Yesterday"
INVALID_DATE = "Invalid date"


def format_pattern(moment: datetime, pattern: str) -> str:
    """Render ``moment`` with a strftime pattern.

    Besides the strftime directives, ``{day}`` expands to the unpadded day
    of month and ``{millis}`` to three-digit milliseconds.

    Example:
        >>> format_pattern(datetime(2025, 1, 6, 9, 5), "%b {day}, %H:%M")
        'Jan 6, 09:05'
    """
    return moment.strftime(pattern).format(
        day=moment.day, millis=f"{moment.microsecond // ONE_MILLISECOND:03d}"
    )


def _local_now() -> datetime:
    """Current wall-clock time in the local timezone."""
    return datetime.now()


def to_datetime(duration: float, tz: str | None = None) -> datetime:
    """Convert a microsecond epoch timestamp to a datetime.

    Args:
        duration: Microseconds since the Unix epoch
        tz: IANA timezone name, or None for the local timezone

    Raises:
        OverflowError, OSError, ValueError: If the timestamp is outside the
            range the platform can represent
    """
    zone = ZoneInfo(tz) if tz is not None else None
    seconds, micros = divmod(int(duration), ONE_SECOND)
    return datetime.fromtimestamp(seconds, tz=zone).replace(microsecond=micros)


def _format_timestamp(duration: float, pattern: str, tz: str | None) -> str:
    try:
        moment = to_datetime(duration, tz)
    except (OverflowError, OSError, ValueError) as exc:
        logger.warning("Cannot format timestamp %r: %s", duration, exc)
        return INVALID_DATE
    return format_pattern(moment, pattern)


def format_date(duration: float, tz: str | None = None) -> str:
    """Format a microsecond timestamp as ``YYYY-MM-DD``."""
    return _format_timestamp(duration, STANDARD_DATE_FORMAT, tz)


def format_time(duration: float, tz: str | None = None) -> str:
    """Format a microsecond timestamp as ``HH:mm``."""
    return _format_timestamp(duration, STANDARD_TIME_FORMAT, tz)


def format_datetime(duration: float, tz: str | None = None) -> str:
    """Format a microsecond timestamp as ``MMMM D YYYY, HH:mm:ss.SSS``."""
    return _format_timestamp(duration, STANDARD_DATETIME_FORMAT, tz)


def _coerce_datetime(value: Any) -> datetime:
    """Convert a date-like value to a datetime.

    Accepts:
    - datetime: Passed through as-is
    - date: Midnight of that day
    - int/float: Milliseconds since the Unix epoch, in local time
    - str: Anything dateutil's parser understands

    Raises:
        TypeError: If value is an unsupported type
        ValueError, OverflowError, OSError: If value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / ONE_MILLISECOND)
    if isinstance(value, str):
        parsed = parser.parse(value)
        logger.debug("Parsed %r as %s", value, parsed.isoformat())
        return parsed
    raise TypeError(
        f"Relative date value must be datetime, date, int, float, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  format_relative_date(datetime(2025, 1, 6, 9, 30))\n"
        f"  format_relative_date(date(2025, 1, 6))\n"
        f"  format_relative_date(1736155800000)  # epoch milliseconds\n"
        f'  format_relative_date("2025-01-06T09:30:00Z")'
    )


def format_relative_date(
    value: Any, full_month_name: bool = False, now: datetime | None = None
) -> str:
    """
    Label a date relative to the current day.

    Args:
        value: datetime, date, epoch milliseconds, or a date string
        full_month_name: Spell out the month ("January") instead of
            abbreviating it ("Jan")
        now: Reference time; defaults to the current local time, read
            once. Timezone-aware values are converted to this time's zone
            (local time when naive) before days are compared.

    Returns:
        "Today", "Yesterday", "Jan 6" for other days this year, or
        "Jan 6, 2024" for days in other years. Values that cannot be read
        as a date give "Invalid date".

    Raises:
        TypeError: If value is not a supported date-like type

    Example:
        >>> now = datetime(2025, 3, 1, 8, 0)
        >>> format_relative_date(datetime(2025, 2, 28, 23, 0), now=now)
        'Yesterday'
        >>> format_relative_date(date(2024, 12, 31), now=now)
        'Dec 31, 2024'
    """
    try:
        moment = _coerce_datetime(value)
    except (ValueError, OverflowError, OSError) as exc:
        logger.warning("Cannot read %r as a date: %s", value, exc)
        return INVALID_DATE

    if now is None:
        now = _local_now()
    # Compare on the viewer's calendar; a naive now is local time
    if moment.tzinfo is not None:
        moment = moment.astimezone(now.tzinfo)

    month_format = "%B" if full_month_name else "%b"
    if moment.year != now.year:
        return format_pattern(moment, f"{month_format} {{day}}, %Y")
    if (moment.month, moment.day) == (now.month, now.day):
        return TODAY

    # One calendar day back, not 24 hours
    yesterday = now - relativedelta(days=1)
    if (moment.month, moment.day) == (yesterday.month, yesterday.day):
        return YESTERDAY
    return format_pattern(moment, f"{month_format} {{day}}")
