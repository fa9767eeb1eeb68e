"""
Date formatting utilities for the Jira Slack formatter.
"""

import re
from datetime import datetime, tzinfo
from typing import Optional, Union

import pytz

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Jira sends offsets without a colon, e.g. 2017-01-12T15:00:00.000+0000
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")

SECONDS_PER_DAY = 86400


def parse_jira_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse a Jira timestamp string into a datetime."""
    if isinstance(value, datetime):
        return value
    normalized = value.strip().replace("Z", "+00:00")
    normalized = _COMPACT_OFFSET.sub(r"\1:\2", normalized)
    return datetime.fromisoformat(normalized)


def _wall_clock(value: datetime, tz: Optional[tzinfo]) -> datetime:
    """Naive wall-clock time of ``value`` in ``tz`` (system local time when None).

    Naive inputs are taken to already be wall-clock time in the target zone.
    """
    if value.tzinfo is None:
        return value
    if tz is None:
        return value.astimezone().replace(tzinfo=None)
    return value.astimezone(tz).replace(tzinfo=None)


def format_time(value: datetime) -> str:
    """Render the time of day as h:mm AM/PM."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def format_date(value: datetime) -> str:
    """Render the date as MM/DD/YYYY."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def format_calendar(
    value: Union[str, datetime],
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """Render a timestamp relative to today.

    Today/Yesterday/Tomorrow get a word, the surrounding week gets a weekday
    name ("Last Monday at 9:00 AM" behind, "Monday at 9:00 AM" ahead), and
    anything further away falls back to MM/DD/YYYY.
    """
    moment = _wall_clock(parse_jira_timestamp(value), tz)
    reference = _wall_clock(now if now is not None else datetime.now(pytz.utc), tz)
    start_of_day = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    diff = (moment - start_of_day).total_seconds() / SECONDS_PER_DAY

    time_part = format_time(moment)
    weekday = WEEKDAYS[moment.weekday()]

    if diff < -6:
        return format_date(moment)
    if diff < -1:
        return f"Last {weekday} at {time_part}"
    if diff < 0:
        return f"Yesterday at {time_part}"
    if diff < 1:
        return f"Today at {time_part}"
    if diff < 2:
        return f"Tomorrow at {time_part}"
    if diff < 7:
        return f"{weekday} at {time_part}"
    return format_date(moment)
