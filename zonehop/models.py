"""
Data models for timezone conversion.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from zonehop.timezone_utils import get_zone


@dataclass(frozen=True)
class ZonedInstant:
    """An absolute instant paired with the IANA zone used to read it."""

    utc: datetime
    zone: str

    def __post_init__(self):
        if self.utc.tzinfo is None:
            raise ValueError("ZonedInstant requires a timezone-aware datetime")
        # Validates the zone and stores the instant in UTC.
        get_zone(self.zone)
        object.__setattr__(self, 'utc', self.utc.astimezone(timezone.utc))

    @classmethod
    def from_local(cls, local: datetime, zone: str) -> 'ZonedInstant':
        """Build from a wall-clock datetime; naive values are read in zone."""
        if local.tzinfo is None:
            local = local.replace(tzinfo=get_zone(zone))
        return cls(utc=local.astimezone(timezone.utc), zone=zone)

    @property
    def local(self) -> datetime:
        """Wall-clock datetime in the instant's own zone."""
        return self.utc.astimezone(get_zone(self.zone))

    @property
    def is_valid(self) -> bool:
        return self.utc.tzinfo is not None

    def in_zone(self, zone: str) -> datetime:
        """Wall-clock datetime in another zone."""
        return self.utc.astimezone(get_zone(zone))

    def __repr__(self) -> str:
        return f"ZonedInstant('{self.local.isoformat()}', zone='{self.zone}')"


@dataclass(frozen=True)
class TimezoneOption:
    """A selectable timezone: display label and IANA identifier."""

    label: str
    tz: str


@dataclass(frozen=True)
class CalendarRange:
    """UTC start/end of a calendar event in compact YYYYMMDDTHHmmssZ form."""

    start: str
    end: str
