"""Calendar date helpers.

Day records are keyed by the viewer's local calendar date, never the UTC date.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


def local_today(timezone_name: str | None = None, now: datetime | None = None) -> date:
    """Return today's date in the given timezone, or the host's local zone."""
    if timezone_name:
        tz = ZoneInfo(timezone_name)
        current = now.astimezone(tz) if now else datetime.now(tz=tz)
    else:
        current = now.astimezone() if now else datetime.now().astimezone()
    return current.date()
