"""Timezone utilities.

Single source of truth for the date/time values log templates display.
Display settings (timezone, time_format) are read from user configuration.
"""

from datetime import datetime

from geolog.config import get_time_format, get_user_timezone

__all__ = [
    "UserTimeFormatter",
    "format_full_date",
    "format_time",
    "now_user",
    "to_user_tz",
]


def now_user() -> datetime:
    """Get current time in user timezone."""
    return datetime.now(get_user_timezone())


def to_user_tz(dt: datetime) -> datetime:
    """Convert any datetime to user timezone.

    Args:
        dt: Datetime to convert (must be timezone-aware)

    Returns:
        Datetime in user timezone
    """
    if dt.tzinfo is None:
        raise ValueError("Cannot convert naive datetime - must be timezone-aware")
    return dt.astimezone(get_user_timezone())


def format_full_date(dt: datetime) -> str:
    """Format date with year (e.g., 'October 18, 2026')."""
    local_dt = to_user_tz(dt)
    return f"{local_dt.strftime('%B')} {local_dt.day}, {local_dt.year}"


def format_time(dt: datetime) -> str:
    """Format time using the user's time format.

    Returns:
        '7:30 PM' for 12h, '19:30' for 24h
    """
    local_dt = to_user_tz(dt)

    if get_time_format() == "24h":
        return local_dt.strftime("%H:%M")

    hour = local_dt.hour % 12 or 12
    return f"{hour}:{local_dt.strftime('%M %p')}"


class UserTimeFormatter:
    """DateTimeFormatter backed by the configured timezone and time format."""

    def format_full_date(self, dt: datetime) -> str:
        return format_full_date(dt)

    def format_time(self, dt: datetime) -> str:
        return format_time(dt)
