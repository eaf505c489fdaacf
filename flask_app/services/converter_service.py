"""
Converter page state: selected zone, editable input, quick adjustments.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from flask import current_app

from zonehop.calendar_link import build_calendar_url, describe_conversions
from zonehop.config_loader import ConverterSettings
from zonehop.models import ZonedInstant
from zonehop.time_conversion import (
    calendar_range,
    clamp_to_hour,
    format_for_display,
    normalize_for_input,
    now_in_zone_truncated,
    shift,
    try_parse_in_zone,
)

ADJUSTMENTS = ('now', '-1h', '+1h', '-1d', '+1d', 'hour')


@dataclass
class ConverterState:
    """Resolved page state for one request."""

    zone: str
    instant: ZonedInstant
    input_reset: bool = False

    @property
    def input_value(self) -> str:
        return normalize_for_input(self.instant)


class ConverterService:
    """Service resolving converter requests against the configured timezones."""

    def __init__(self, settings: ConverterSettings):
        self.settings = settings

    def resolve_zone(self, zone: Optional[str]) -> str:
        """Return zone if it is configured, otherwise the default zone."""
        if zone and self.settings.has_zone(zone):
            return zone
        if zone:
            current_app.logger.info("Ignoring unconfigured timezone %r", zone)
        return self.settings.default_zone

    def resolve_state(
        self,
        zone: Optional[str] = None,
        text: Optional[str] = None,
        adjust: Optional[str] = None
    ) -> ConverterState:
        """
        Build the page state from request parameters.

        Args:
            zone: Selected IANA zone; unconfigured zones fall back to the default
            text: datetime-local input value, read as wall-clock time in zone
            adjust: Optional quick adjustment (see ADJUSTMENTS)

        Returns:
            ConverterState; bad or missing text resolves to now in zone
        """
        zone = self.resolve_zone(zone)
        input_reset = False

        instant = try_parse_in_zone(text, zone) if text else None
        if instant is None:
            if text:
                current_app.logger.info("Unparseable time %r; using current time in %s", text, zone)
                input_reset = True
            instant = now_in_zone_truncated(zone)

        if adjust:
            instant = self.apply_adjustment(instant, adjust)

        return ConverterState(zone=zone, instant=instant, input_reset=input_reset)

    @staticmethod
    def apply_adjustment(instant: ZonedInstant, adjust: str) -> ZonedInstant:
        """Apply one of the quick-adjust actions; unknown or out-of-range moves leave instant unchanged."""
        try:
            return ConverterService._adjust(instant, adjust)
        except OverflowError:
            current_app.logger.warning("Adjustment %r out of range for %r; ignored", adjust, instant)
            return instant

    @staticmethod
    def _adjust(instant: ZonedInstant, adjust: str) -> ZonedInstant:
        if adjust == 'now':
            return now_in_zone_truncated(instant.zone)
        if adjust == '-1h':
            return shift(instant, hours=-1)
        if adjust == '+1h':
            return shift(instant, hours=1)
        if adjust == '-1d':
            return shift(instant, days=-1)
        if adjust == '+1d':
            return shift(instant, days=1)
        if adjust == 'hour':
            return clamp_to_hour(instant)

        current_app.logger.warning("Unknown adjustment %r ignored", adjust)
        return instant

    def get_conversions(self, instant: ZonedInstant) -> List[Dict[str, str]]:
        """Display strings for the instant in every configured zone, in order."""
        return [
            {
                'label': option.label,
                'tz': option.tz,
                'display': format_for_display(instant, option.tz),
            }
            for option in self.settings.timezones
        ]

    def get_calendar_url(self, instant: ZonedInstant, title: Optional[str] = None) -> str:
        """Google Calendar link for a one-hour event starting at instant."""
        details = describe_conversions(instant, self.settings.timezones)
        return build_calendar_url(instant, title=title or self.settings.event_title, details=details)

    def to_dict(self, state: ConverterState, title: Optional[str] = None) -> Dict[str, Any]:
        """Serialize page state for the JSON API."""
        dates = calendar_range(state.instant)
        return {
            'zone': state.zone,
            'input': state.input_value,
            'input_reset': state.input_reset,
            'conversions': self.get_conversions(state.instant),
            'calendar': {
                'start': dates.start,
                'end': dates.end,
                'url': self.get_calendar_url(state.instant, title),
            },
        }
