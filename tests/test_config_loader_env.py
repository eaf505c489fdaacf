import os
import tempfile
import unittest

from zonehop.calendar_link import DEFAULT_EVENT_TITLE
from zonehop.config_loader import (
    DEFAULT_TIMEZONES,
    ConfigLoader,
    load_config,
    parse_timezone_list,
)
from zonehop.models import TimezoneOption


class ConfigLoaderEnvTests(unittest.TestCase):
    def setUp(self):
        self.env_keys = [
            'ZONEHOP_TIMEZONES',
            'ZONEHOP_EVENT_TITLE',
            'ZONEHOP_DEFAULT_TIMEZONE',
        ]
        self.original_env = {k: os.environ.get(k) for k in self.env_keys}
        for key in self.env_keys:
            os.environ.pop(key, None)

    def tearDown(self):
        for key, value in self.original_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    def test_defaults_when_nothing_configured(self):
        settings = load_config(config_file='config-does-not-exist.ini')

        self.assertEqual(settings.timezones, DEFAULT_TIMEZONES)
        self.assertEqual(settings.event_title, DEFAULT_EVENT_TITLE)
        self.assertEqual(settings.default_zone, 'Europe/Dublin')

    def test_env_timezones_and_settings(self):
        os.environ['ZONEHOP_TIMEZONES'] = 'New York=America/New_York, Tokyo=Asia/Tokyo'
        os.environ['ZONEHOP_EVENT_TITLE'] = 'Game night'
        os.environ['ZONEHOP_DEFAULT_TIMEZONE'] = 'Asia/Tokyo'

        settings = load_config(config_file='config-does-not-exist.ini')

        self.assertEqual(settings.timezones, [
            TimezoneOption(label='New York', tz='America/New_York'),
            TimezoneOption(label='Tokyo', tz='Asia/Tokyo'),
        ])
        self.assertEqual(settings.event_title, 'Game night')
        self.assertEqual(settings.default_zone, 'Asia/Tokyo')

    def test_env_unknown_zone_is_rejected(self):
        os.environ['ZONEHOP_TIMEZONES'] = 'Home=Europe/Dublin,Moon=Moon/Tranquility'

        with self.assertRaises(ValueError) as ctx:
            ConfigLoader(config_file='config-does-not-exist.ini').get_timezones()
        self.assertIn('Moon/Tranquility', str(ctx.exception))

    def test_default_timezone_must_be_listed(self):
        os.environ['ZONEHOP_DEFAULT_TIMEZONE'] = 'Asia/Tokyo'

        with self.assertRaises(ValueError):
            load_config(config_file='config-does-not-exist.ini')

    def test_malformed_entry_is_rejected(self):
        with self.assertRaises(ValueError):
            parse_timezone_list('Dublin')

    def test_duplicate_zone_is_rejected(self):
        os.environ['ZONEHOP_TIMEZONES'] = 'Dublin=Europe/Dublin,Home=Europe/Dublin'

        with self.assertRaises(ValueError):
            ConfigLoader(config_file='config-does-not-exist.ini').get_timezones()


class ConfigLoaderFileTests(unittest.TestCase):
    def _write_config(self, text):
        handle = tempfile.NamedTemporaryFile('w', suffix='.ini', delete=False, encoding='utf-8')
        handle.write(text)
        handle.close()
        self.addCleanup(os.remove, handle.name)
        return handle.name

    def test_file_keeps_order_and_label_case(self):
        path = self._write_config(
            "[Timezones]\n"
            "Perth = Australia/Perth\n"
            "São Paulo = America/Sao_Paulo\n"
            "\n"
            "[Settings]\n"
            "event_title = Weekly sync\n"
            "default_timezone = America/Sao_Paulo\n"
        )

        settings = load_config(config_file=path)

        self.assertEqual([option.label for option in settings.timezones], ['Perth', 'São Paulo'])
        self.assertEqual(settings.event_title, 'Weekly sync')
        self.assertEqual(settings.default_zone, 'America/Sao_Paulo')

    def test_file_without_timezones_section_uses_defaults(self):
        path = self._write_config("[Settings]\nevent_title = Weekly sync\n")

        settings = load_config(config_file=path)

        self.assertEqual(settings.timezones, DEFAULT_TIMEZONES)
        self.assertIsNone(settings.default_timezone)


if __name__ == '__main__':
    unittest.main()
