"""
Zonehop

Convert a wall-clock time in one timezone to a short list of others and
build "add to calendar" links for it.
"""

from zonehop.calendar_link import build_calendar_url, describe_conversions
from zonehop.config_loader import ConverterSettings, load_config
from zonehop.models import CalendarRange, TimezoneOption, ZonedInstant
from zonehop.time_conversion import (
    calendar_range,
    clamp_to_hour,
    format_for_display,
    normalize_for_input,
    now_in_zone_truncated,
    parse_in_zone,
)

__version__ = "0.1.0"
__all__ = [
    "ZonedInstant",
    "TimezoneOption",
    "CalendarRange",
    "ConverterSettings",
    "load_config",
    "parse_in_zone",
    "normalize_for_input",
    "format_for_display",
    "calendar_range",
    "now_in_zone_truncated",
    "clamp_to_hour",
    "build_calendar_url",
    "describe_conversions",
]
