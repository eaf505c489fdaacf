"""
Timezone utilities shared across the app.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class UnknownTimezoneError(ValueError):
    """Raised when a zone identifier is not in the IANA database."""

    def __init__(self, zone):
        super().__init__(f"Unknown IANA timezone: {zone!r}")
        self.zone = zone


def get_zone(zone: str) -> ZoneInfo:
    """Return the ZoneInfo for an IANA identifier or raise UnknownTimezoneError."""
    if not zone or not isinstance(zone, str):
        raise UnknownTimezoneError(zone)
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise UnknownTimezoneError(zone) from None


def is_known_zone(zone: str) -> bool:
    """Check whether zone resolves in the timezone database."""
    try:
        get_zone(zone)
    except UnknownTimezoneError:
        return False
    return True
