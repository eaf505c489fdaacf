"""
Google Calendar "add event" links.
"""

from typing import Iterable
from urllib.parse import quote, urlencode

from zonehop.models import TimezoneOption, ZonedInstant
from zonehop.time_conversion import calendar_range, format_for_display

GOOGLE_CALENDAR_URL = 'https://calendar.google.com/calendar/render'
DEFAULT_EVENT_TITLE = 'Boys Time'


def describe_conversions(instant: ZonedInstant, timezones: Iterable[TimezoneOption]) -> str:
    """One "Label: HH:mm - Dow DD Mon" line per timezone, for the event details."""
    return '\n'.join(
        f"{option.label}: {format_for_display(instant, option.tz)}"
        for option in timezones
    )


def build_calendar_url(
    instant: ZonedInstant,
    title: str = DEFAULT_EVENT_TITLE,
    details: str = ''
) -> str:
    """
    Build a pre-filled Google Calendar event URL for a one-hour event.

    Args:
        instant: Event start
        title: Event title (defaults to DEFAULT_EVENT_TITLE)
        details: Free-text event description

    Returns:
        URL that opens the calendar's event template
    """
    dates = calendar_range(instant)
    params = [
        ('action', 'TEMPLATE'),
        ('text', title or DEFAULT_EVENT_TITLE),
        ('dates', f"{dates.start}/{dates.end}"),
        ('details', details),
        ('sf', 'true'),
        ('output', 'xml'),
        ('ctz', instant.zone),
    ]
    return f"{GOOGLE_CALENDAR_URL}?{urlencode(params, safe='/', quote_via=quote)}"
