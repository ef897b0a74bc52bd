################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
################################################################################

import unittest

from parameterized import parameterized

from pytimeduration.common.duration_exception import (
    DurationParseException, MalformedDurationException, MissingNumberException,
    UnknownUnitException)
from pytimeduration.common.scanner import Scanner
from pytimeduration.common.unit_table import UnitTable


def default_tokens():
    return {
        "s": 1, "seconds": 1,
        "m": 60, "minutes": 60,
        "h": 3600, "hours": 3600,
        "d": 86400, "days": 86400,
        "mo": 2419200, "months": 2419200,
        "y": 31536000, "years": 31536000,
    }


class ScannerTest(unittest.TestCase):

    def setUp(self):
        self.table = UnitTable(default_tokens(), 60)

    def scan(self, text):
        return Scanner(text, self.table).scan_tokens()

    def test_single_unit(self):
        self.assertEqual({1: 5}, self.scan("5s"))

    def test_multiple_units(self):
        self.assertEqual({3600: 2, 60: 30, 1: 15}, self.scan("2h 30m 15s"))

    def test_long_form_units(self):
        self.assertEqual({3600: 1, 60: 30, 1: 45}, self.scan("1 hours 30 minutes 45 seconds"))

    def test_days_and_larger_units(self):
        self.assertEqual({31536000: 1, 2419200: 2, 86400: 3}, self.scan("1y 2mo 3d"))

    def test_large_numbers(self):
        self.assertEqual({3600: 999, 1: 123456}, self.scan("999h 123456s"))

    def test_duplicate_units_accumulate(self):
        self.assertEqual({60: 15}, self.scan("5m 10m"))

    def test_short_and_long_forms_share_a_bucket(self):
        self.assertEqual({1: 12, 60: 3}, self.scan("5s 7seconds 1m 2minutes"))

    @parameterized.expand(["", "   ", "\t\n"])
    def test_blank_text(self, text):
        self.assertEqual({}, self.scan(text))

    def test_number_without_unit_uses_default(self):
        self.assertEqual({60: 120}, self.scan("120"))

    def test_mixed_formats(self):
        self.assertEqual({3600: 1, 60: 90, 1: 30}, self.scan("1h 90 30s"))

    def test_bare_numbers_accumulate(self):
        self.assertEqual({60: 10}, self.scan("5 5"))

    def test_pairs_without_whitespace(self):
        self.assertEqual({86400: 1, 3600: 2, 60: 3, 1: 4}, self.scan("1d2h3m4s"))

    def test_surrounding_whitespace(self):
        self.assertEqual({3600: 2}, self.scan("  2 h  "))

    def test_months_token_is_not_minutes(self):
        self.assertEqual({2419200: 1}, self.scan("1mo"))

    def test_custom_default_multiplier(self):
        table = self.table.with_default_multiplier(1)
        self.assertEqual({1: 90}, Scanner("90", table).scan_tokens())

    def test_custom_table(self):
        table = UnitTable({"w": 604800, "fortnight": 1209600}, 604800)
        self.assertEqual({604800: 3, 1209600: 1}, Scanner("2w 1fortnight 1", table).scan_tokens())

    def test_default_table_when_none(self):
        self.assertEqual({3600: 1}, Scanner("1h").scan_tokens())

    def test_unknown_unit(self):
        with self.assertRaises(UnknownUnitException) as context:
            self.scan("5 weeks")
        self.assertEqual("weeks", context.exception.token)
        self.assertEqual(2, context.exception.position)
        self.assertEqual("5 weeks", context.exception.text)
        self.assertIn("weeks", str(context.exception))

    def test_tokens_are_case_sensitive(self):
        with self.assertRaises(UnknownUnitException) as context:
            self.scan("5H")
        self.assertEqual("H", context.exception.token)

    def test_unknown_prefix_of_known_token(self):
        # maximal letter run "ms" is not split into "m" + "s"
        with self.assertRaises(UnknownUnitException) as context:
            self.scan("500ms")
        self.assertEqual("ms", context.exception.token)

    def test_letters_without_number(self):
        with self.assertRaises(UnknownUnitException) as context:
            self.scan("bogus")
        self.assertEqual("bogus", context.exception.token)
        self.assertEqual(0, context.exception.position)

    def test_known_unit_without_number(self):
        with self.assertRaises(MissingNumberException) as context:
            self.scan("1h m")
        self.assertEqual("m", context.exception.token)
        self.assertEqual(3, context.exception.position)
        self.assertIn("unit 'm' has no number", str(context.exception))
        self.assertNotIn("does not match", str(context.exception))

    def test_known_unit_at_start(self):
        with self.assertRaises(MissingNumberException) as context:
            self.scan("hours")
        self.assertEqual(0, context.exception.position)

    @parameterized.expand([
        ("-5m", "-", 0),
        ("1.5h", ".", 1),
        ("1h, 30m", ",", 2),
        ("+1h", "+", 0),
    ])
    def test_malformed_text(self, text, char, position):
        with self.assertRaises(MalformedDurationException) as context:
            self.scan(text)
        self.assertEqual(char, context.exception.char)
        self.assertEqual(position, context.exception.position)

    def test_parse_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            self.scan("1x")
        with self.assertRaises(DurationParseException):
            self.scan("1x")

    def test_none_text(self):
        with self.assertRaises(ValueError):
            Scanner(None, self.table)

    def test_scan_is_repeatable(self):
        scanner = Scanner("1h 1h", self.table)
        self.assertEqual(scanner.scan_tokens(), scanner.scan_tokens())


if __name__ == '__main__':
    unittest.main()
