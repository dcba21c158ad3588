"""
Minute-of-day arithmetic.

Every time in the engine is minutes since local midnight (0-1439). Ranges
whose end is not after their start are read as crossing midnight.
"""

from datetime import date, datetime, timedelta

import pytz

MINUTES_PER_DAY = 24 * 60


def to_minutes(time_str: str) -> int:
    """
    Convert "HH:MM" to minutes since midnight.

    Hours wrap modulo 24 and a missing minute part counts as 0, so "24:00"
    is midnight and "7" is 07:00.
    """
    parts = time_str.split(":")
    hours = int(parts[0]) % 24
    minutes = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    return hours * 60 + minutes


def to_time(minutes: int) -> str:
    """Format minutes as zero-padded "HH:MM" (handles wrap-around and negatives)."""
    minutes = ((minutes % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_minutes(start: int, end: int) -> int:
    """
    Length of the range [start, end) in minutes.

    An end at or before the start crosses midnight, so equal endpoints
    describe a full day.
    """
    if end > start:
        return end - start
    return (MINUTES_PER_DAY - start) + end


def block_duration(start: str, end: str) -> int:
    """Duration between two "HH:MM" strings using the midnight rule."""
    return duration_minutes(to_minutes(start), to_minutes(end))


def is_asleep(minute: int, wake_minute: int, sleep_minute: int) -> bool:
    """
    True if `minute` falls in the sleep window [sleep, wake).

    When sleep is numerically later than wake (e.g. 23:00 / 07:00) the
    window wraps past midnight. Otherwise (e.g. 01:00 / 09:00) it does not.
    """
    if sleep_minute > wake_minute:
        return minute >= sleep_minute or minute < wake_minute
    return sleep_minute <= minute < wake_minute


def parse_date(date_str: str) -> date:
    """Parse "YYYY-MM-DD" to a date."""
    return date.fromisoformat(date_str)


def format_date(d: date) -> str:
    """Format a date as "YYYY-MM-DD"."""
    return d.isoformat()


def monday_of_week(d: date) -> date:
    """Return the ISO week start (Monday) of the week containing `d`."""
    return d - timedelta(days=d.weekday())


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Servers usually run in UTC, so "today" for a user has to be resolved in
    their own zone before deriving a week start.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current datetime in the specified timezone (naive, for local comparisons)
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)
