"""UTC offset helpers: resolve IANA zone ids, parse `±HH:MM`, render GMT labels."""

import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_OFFSET_RE = re.compile(r"[+-][0-9]{2}:[0-9]{2}")


class FormatError(ValueError):
    """Raised when an offset string or zone identifier cannot be interpreted."""


def current_utc_offset(time_zone_id: str, now: datetime | None = None) -> str:
    """
    Return the UTC offset of `time_zone_id` at `now` formatted as `±HH:MM`.

    `now` defaults to the current time. Naive datetimes are treated as UTC.
    """
    try:
        tz = ZoneInfo(time_zone_id)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise FormatError(f"Unknown time zone id: {time_zone_id!r}") from e

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    raw = now.astimezone(tz).strftime("%z")  # e.g. "+0530"
    return f"{raw[:3]}:{raw[3:5]}"


def parse_utc_offset(offset: str) -> int:
    """
    Parse a `±HH:MM` offset into signed whole hours.

    Minutes are dropped, not rounded: "-05:30" -> -5.
    """
    if not isinstance(offset, str) or not _OFFSET_RE.fullmatch(offset):
        raise FormatError(f"Expected offset like '+08:00', got {offset!r}")
    return int(offset[:3])


def format_gmt_label(offset: int) -> str:
    """Render whole-hour offset as 'GMT+8', 'GMT+0' or 'GMT-5'."""
    return f"GMT+{offset}" if offset >= 0 else f"GMT{offset}"
