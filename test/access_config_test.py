import sys
import os
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from ipaccess import decide
from ipaccess.data import AccessConfig, parse_bool, parse_ip_list

class TestAccessConfig(unittest.TestCase):

    def test_defaults(self):
        config = AccessConfig()
        self.assertFalse(config.enabled)
        self.assertEqual(config.allowed_ips, ())

    def test_list_is_kept_as_written(self):
        config = AccessConfig(True, ["10.0.0.1", " 10.0.0.2 ", ""])
        self.assertEqual(config.allowed_ips, ("10.0.0.1", " 10.0.0.2 ", ""))

    def test_blank_entries_are_not_an_empty_list(self):
        ## Only blank entries is still a configured allow-list, so nobody matches
        for config in [AccessConfig(True, [""]), AccessConfig(True, ("",)), AccessConfig.from_dict({"enabled": True, "allowed_ips": ["  "]})]:
            result = decide("8.8.8.8", config)
            self.assertFalse(result.allowed)
            self.assertIsNone(result.rule)

    def test_entries_are_not_trimmed(self):
        self.assertFalse(decide("10.0.0.5", AccessConfig(True, [" 10.0.0.5"])).allowed)
        self.assertFalse(decide("10.0.0.5", AccessConfig.from_dict({"enabled": True, "allowed_ips": [" 10.0.0.5"]})).allowed)

    def test_from_dict(self):
        config = AccessConfig.from_dict({"enabled": True, "allowed_ips": ["10.0.0.1", "192.168.*"]})
        self.assertTrue(config.enabled)
        self.assertEqual(config.allowed_ips, ("10.0.0.1", "192.168.*"))

    def test_from_dict_camel_case_and_string(self):
        config = AccessConfig.from_dict({"enabled": "yes", "allowedIps": "10.0.0.1, 10.0.1.0/24\n192.168.1.1-5"})
        self.assertTrue(config.enabled)
        self.assertEqual(config.allowed_ips, ("10.0.0.1", "10.0.1.0/24", "192.168.1.1-5"))

    def test_from_dict_missing_values(self):
        self.assertEqual(AccessConfig.from_dict({}), AccessConfig())
        self.assertEqual(AccessConfig.from_dict(None), AccessConfig())

    def test_from_dict_invalid(self):
        with self.assertRaises(ValueError):
            AccessConfig.from_dict({"enabled": True, "allowed_ips": 5})
        with self.assertRaises(ValueError):
            AccessConfig.from_dict(["10.0.0.1"])

    def test_parse_bool(self):
        for val in [True, "true", "TRUE", "1", "yes", "on", 1]:
            self.assertTrue(parse_bool(val))
        for val in [False, "false", "0", "no", "", None, 0, "enabled"]:
            self.assertFalse(parse_bool(val))

    def test_parse_ip_list(self):
        self.assertEqual(parse_ip_list(None), ())
        self.assertEqual(parse_ip_list(" , ,"), ())
        self.assertEqual(parse_ip_list(["10.0.0.1", " 10.0.0.2", ""]), ("10.0.0.1", " 10.0.0.2", ""))
        self.assertEqual(parse_ip_list(" 10.0.0.1 ,\n10.0.0.2"), ("10.0.0.1", "10.0.0.2"))

    def test_frozen(self):
        config = AccessConfig(True, ("10.0.0.1",))
        with self.assertRaises(Exception):
            config.enabled = False
