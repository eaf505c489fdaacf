"""
Configuration loader for Zonehop.

Supports loading configuration from:
1. config.ini file (recommended)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from dataclasses import dataclass, field
from typing import List, Optional

from zonehop.calendar_link import DEFAULT_EVENT_TITLE
from zonehop.models import TimezoneOption
from zonehop.timezone_utils import is_known_zone

DEFAULT_TIMEZONES = [
    TimezoneOption(label='Dublin', tz='Europe/Dublin'),
    TimezoneOption(label='Amsterdam', tz='Europe/Amsterdam'),
    TimezoneOption(label='Perth', tz='Australia/Perth'),
]


@dataclass
class ConverterSettings:
    """Settings for the converter page."""

    timezones: List[TimezoneOption] = field(default_factory=lambda: list(DEFAULT_TIMEZONES))
    event_title: str = DEFAULT_EVENT_TITLE
    default_timezone: Optional[str] = None

    @property
    def default_zone(self) -> str:
        """Zone selected when a request names none (first configured zone unless overridden)."""
        if self.default_timezone and self.has_zone(self.default_timezone):
            return self.default_timezone
        return self.timezones[0].tz

    def has_zone(self, zone: Optional[str]) -> bool:
        return any(option.tz == zone for option in self.timezones)


def parse_timezone_list(value: str) -> List[TimezoneOption]:
    """
    Parse a "Label=Zone,Label=Zone" string.

    Raises:
        ValueError: If an entry is malformed
    """
    options = []
    for entry in value.split(','):
        entry = entry.strip()
        if not entry:
            continue
        label, sep, zone = entry.partition('=')
        if not sep or not label.strip() or not zone.strip():
            raise ValueError(f"Invalid timezone entry {entry!r}; expected Label=Area/City")
        options.append(TimezoneOption(label=label.strip(), tz=zone.strip()))
    return options


def validate_timezones(timezones: List[TimezoneOption]) -> List[str]:
    """
    Validate a timezone table.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    if not timezones:
        errors.append('At least one timezone must be configured.')

    seen = set()
    for option in timezones:
        if not is_known_zone(option.tz):
            errors.append(f'Unknown IANA timezone "{option.tz}" for "{option.label}".')
        if option.tz in seen:
            errors.append(f'Timezone "{option.tz}" is listed more than once.')
        seen.add(option.tz)

    return errors


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not self.config_file or not os.path.exists(self.config_file):
            return False

        # Keys are timezone labels, so keep their case.
        self.config = configparser.ConfigParser()
        self.config.optionxform = str
        self.config.read(self.config_file, encoding='utf-8')
        return True

    def get_timezones(self) -> List[TimezoneOption]:
        """
        Get the ordered timezone table.

        Returns:
            List of TimezoneOption; the built-in table if nothing is configured

        Raises:
            ValueError: If the configured table is invalid
        """
        if self.config and self.config.has_section('Timezones'):
            timezones = [
                TimezoneOption(label=label, tz=zone.strip())
                for label, zone in self.config.items('Timezones')
            ]
        elif os.getenv('ZONEHOP_TIMEZONES'):
            timezones = parse_timezone_list(os.getenv('ZONEHOP_TIMEZONES'))
        else:
            return list(DEFAULT_TIMEZONES)

        errors = validate_timezones(timezones)
        if errors:
            raise ValueError("Invalid timezone configuration:\n  " + "\n  ".join(errors))
        return timezones

    def get_settings(self) -> ConverterSettings:
        """
        Get converter settings.

        Returns:
            ConverterSettings with configured values
        """
        settings = ConverterSettings(timezones=self.get_timezones())

        # Try config file first
        if self.config and self.config.has_section('Settings'):
            settings.event_title = self.config.get('Settings', 'event_title', fallback=DEFAULT_EVENT_TITLE)
            settings.default_timezone = self.config.get('Settings', 'default_timezone', fallback=None)
        else:
            settings.event_title = os.getenv('ZONEHOP_EVENT_TITLE', DEFAULT_EVENT_TITLE)
            settings.default_timezone = os.getenv('ZONEHOP_DEFAULT_TIMEZONE')

        if settings.default_timezone and not settings.has_zone(settings.default_timezone):
            raise ValueError(
                f"Default timezone {settings.default_timezone!r} is not in the configured timezone list"
            )

        return settings


def load_config(config_file: str = "config.ini") -> ConverterSettings:
    """
    Convenience function to load all configuration.

    Args:
        config_file: Path to config file

    Returns:
        ConverterSettings

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_settings()
