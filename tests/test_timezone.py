import unittest

from zonehop.timezone_utils import UnknownTimezoneError, get_zone, is_known_zone


class TimezoneHandlingTests(unittest.TestCase):
    def test_get_zone_resolves_iana_names(self):
        self.assertEqual(get_zone('Europe/Amsterdam').key, 'Europe/Amsterdam')

    def test_get_zone_rejects_unknown_and_malformed_names(self):
        for name in ('Mars/Olympus_Mons', '', None, '../etc/passwd'):
            with self.subTest(name=name):
                with self.assertRaises(UnknownTimezoneError):
                    get_zone(name)

    def test_is_known_zone(self):
        self.assertTrue(is_known_zone('Australia/Perth'))
        self.assertFalse(is_known_zone('Australia/Atlantis'))


if __name__ == '__main__':
    unittest.main()
