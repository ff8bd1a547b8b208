"""Calendar date helpers pinned to a fixed time zone."""

from datetime import datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Ho_Chi_Minh"


def today_in_timezone(timezone: str = DEFAULT_TIMEZONE, now: datetime | None = None) -> str:
    """Return today's date as YYYY-MM-DD in the given time zone.

    Args:
        timezone: IANA zone name, independent of the host's local zone
        now: Instant to convert (defaults to the current time). Naive values are treated as UTC.

    Returns:
        ISO calendar date string
    """
    tz = ZoneInfo(timezone)
    if now is None:
        return datetime.now(tz).date().isoformat()
    if now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    return now.astimezone(tz).date().isoformat()


def format_display_date(date_str: str) -> str:
    """Reorder YYYY-MM-DD into DD/MM/YYYY without validating the calendar."""
    year, month, day = date_str.split("-")
    return f"{day}/{month}/{year}"
