"""
Conversions between datetime-local input strings, zoned instants, and the
display and calendar formats used by the converter page.

All functions are pure apart from reading the system clock.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from zonehop.models import CalendarRange, ZonedInstant
from zonehop.timezone_utils import get_zone

DISPLAY_FORMAT = '%H:%M - %a %d %b'

EVENT_DURATION = timedelta(hours=1)

# Instants this close to datetime.min/max cannot be projected into every zone
# or given a one-hour calendar end.
RANGE_MARGIN = timedelta(days=1)
MIN_INSTANT = datetime.min.replace(tzinfo=timezone.utc) + RANGE_MARGIN
MAX_INSTANT = datetime.max.replace(tzinfo=timezone.utc) - RANGE_MARGIN


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _with_year(dt: datetime, rest: str) -> str:
    # strftime('%Y') does not zero-pad years below 1000 on every platform.
    return f"{dt.year:04d}{dt.strftime(rest)}"


def in_supported_range(utc: datetime) -> bool:
    """Check whether an aware instant can be displayed in every zone."""
    return MIN_INSTANT <= utc <= MAX_INSTANT


def try_parse_in_zone(text: Optional[str], zone: str) -> Optional[ZonedInstant]:
    """
    Parse an ISO datetime string as wall-clock time in zone.

    Args:
        text: ISO datetime string, normally "YYYY-MM-DDTHH:mm"
        zone: IANA timezone identifier (e.g. "Europe/Dublin")

    Returns:
        ZonedInstant tagged with zone, or None if text does not parse or lies
        within a day of the ends of the datetime range.
        Text with an explicit offset keeps its instant and is re-expressed in zone.
    """
    tz = get_zone(zone)
    if not text or not isinstance(text, str):
        return None
    try:
        parsed = datetime.fromisoformat(text.strip())
        if parsed.tzinfo is None:
            # fold=0: gap times move forward, repeated times take the first occurrence.
            parsed = parsed.replace(tzinfo=tz, fold=0)
        utc = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None

    if not in_supported_range(utc):
        return None
    return ZonedInstant(utc=utc, zone=zone)


def parse_in_zone(text: Optional[str], zone: str) -> ZonedInstant:
    """Parse text as wall-clock time in zone, or return now in zone if it is unparseable."""
    parsed = try_parse_in_zone(text, zone)
    if parsed is None:
        return now_in_zone_truncated(zone)
    return parsed


def normalize_for_input(instant: ZonedInstant) -> str:
    """Format an instant for a datetime-local input ("YYYY-MM-DDTHH:mm") in its own zone."""
    return _with_year(instant.local, '-%m-%dT%H:%M')


def format_for_display(instant: ZonedInstant, zone: str) -> str:
    """
    Format an instant for display in another timezone.

    Args:
        instant: The instant to show
        zone: IANA timezone identifier to display the time in

    Returns:
        Formatted string like "18:09 - Fri 14 Nov"
    """
    return instant.in_zone(zone).strftime(DISPLAY_FORMAT)


def calendar_range(instant: ZonedInstant) -> CalendarRange:
    """UTC start and end of a one-hour calendar event starting at instant."""
    start_utc = instant.utc
    end_utc = start_utc + EVENT_DURATION
    return CalendarRange(
        start=_with_year(start_utc, '%m%dT%H%M%SZ'),
        end=_with_year(end_utc, '%m%dT%H%M%SZ'),
    )


def now_in_zone_truncated(zone: str) -> ZonedInstant:
    """Current time in zone with seconds and microseconds set to 0."""
    local = _utcnow().astimezone(get_zone(zone))
    return ZonedInstant.from_local(local.replace(second=0, microsecond=0), zone)


def clamp_to_hour(instant: ZonedInstant) -> ZonedInstant:
    """
    Round an instant down to the top of the hour in its own zone.

    When the top of the hour was skipped by a DST change shorter than an
    hour (e.g. Australia/Lord_Howe), the previous whole hour is used.
    """
    wall = instant.local.replace(minute=0, second=0, microsecond=0, tzinfo=None)
    clamped = ZonedInstant.from_local(wall, instant.zone)
    if clamped.local.replace(tzinfo=None) != wall:
        clamped = ZonedInstant.from_local(wall - timedelta(hours=1), instant.zone)
    return clamped


def shift(instant: ZonedInstant, hours: int = 0, days: int = 0) -> ZonedInstant:
    """
    Move an instant by whole hours and/or calendar days.

    Hours are absolute durations. Days keep the wall-clock time, so a day
    across a DST change is 23 or 25 hours long.

    Raises:
        OverflowError: If the result leaves the supported datetime range
    """
    moved = instant
    if days:
        local = (instant.local + timedelta(days=days)).replace(fold=0)
        moved = ZonedInstant.from_local(local, instant.zone)
    if hours:
        moved = ZonedInstant(utc=moved.utc + timedelta(hours=hours), zone=moved.zone)
    if not in_supported_range(moved.utc):
        raise OverflowError("shifted time is outside the supported range")
    return moved
