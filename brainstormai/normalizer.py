"""
Fills in and repairs the start/end times of model-produced event details.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from brainstormai.models.event import EventDateTime, NormalizedEventDetails
from brainstormai.utils.constants import DEFAULT_EVENT_DURATION_HOURS, DEFAULT_EVENT_HOUR
from brainstormai.utils.logger import logger

# YYYYMMDDTHHMMSS followed by an optional offset such as -0700 or Z
COMPACT_DATETIME_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})(.*)$")


def repair_datetime(value: str) -> str:
    """
    Rewrite a compact timestamp into ISO 8601, leaving anything else untouched.

    "20250810T100000-0700" becomes "2025-08-10T10:00:00-0700". The offset
    suffix is kept exactly as the model wrote it.
    """
    match = COMPACT_DATETIME_PATTERN.match(value)
    if not match:
        return value
    year, month, day, hour, minute, second, offset = match.groups()
    return f"{year}-{month}-{day}T{hour}:{minute}:{second}{offset}"


def _resolve_zone(time_zone: str):
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning(f"Unknown time zone {time_zone!r}, computing default times in UTC")
        return timezone.utc


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _event_time(value: Any) -> Optional[Dict[str, Any]]:
    if isinstance(value, dict) and isinstance(value.get("dateTime"), str) and value["dateTime"]:
        event_time = dict(value)
        event_time["timeZone"] = _as_text(event_time.get("timeZone"))
        return event_time
    return None


def default_event_window(time_zone: str, now: Optional[datetime] = None):
    """Tomorrow at 09:00 in the given zone, lasting one hour."""
    zone = _resolve_zone(time_zone)
    current = now.astimezone(zone) if now else datetime.now(zone)
    start = (current + timedelta(days=1)).replace(
        hour=DEFAULT_EVENT_HOUR, minute=0, second=0, microsecond=0
    )
    end = start + timedelta(hours=DEFAULT_EVENT_DURATION_HOURS)
    return start, end


def normalize(
    event_details: Dict[str, Any],
    fallback_time_zone: str,
    now: Optional[datetime] = None,
) -> NormalizedEventDetails:
    """
    Produce event details that are safe to send to the calendar API.

    If start, end or either of their dateTime values is missing, both are
    replaced with tomorrow 09:00-10:00 in the event's time zone (or the
    fallback zone). Compact timestamps are then repaired into ISO 8601.

    Args:
        event_details: eventDetails payload as produced by the model
        fallback_time_zone: Zone used when the payload names none
        now: Reference time for the defaults, mainly for tests

    Returns:
        NormalizedEventDetails
    """
    details = dict(event_details)
    for key in ("summary", "description", "timeZone"):
        details[key] = _as_text(details.get(key))
    start = _event_time(details.get("start"))
    end = _event_time(details.get("end"))

    if start is None or end is None:
        time_zone = details.get("timeZone") or fallback_time_zone
        default_start, default_end = default_event_window(time_zone, now)
        logger.info(f"Event is missing start/end, defaulting to {default_start.isoformat()}")
        start = {"dateTime": default_start.isoformat(), "timeZone": time_zone}
        end = {"dateTime": default_end.isoformat(), "timeZone": time_zone}

    start["dateTime"] = repair_datetime(start["dateTime"])
    end["dateTime"] = repair_datetime(end["dateTime"])

    details["start"] = EventDateTime(**start)
    details["end"] = EventDateTime(**end)
    return NormalizedEventDetails(**details)
