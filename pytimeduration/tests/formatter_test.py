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

from pytimeduration.common.formatter import format_human, format_sql_interval
from pytimeduration.common.normalizer import Breakdown, normalize


class NormalizerTest(unittest.TestCase):

    @parameterized.expand([
        (0, (0, 0, 0, 0)),
        (59, (0, 0, 0, 59)),
        (60, (0, 0, 1, 0)),
        (3599, (0, 0, 59, 59)),
        (3600, (0, 1, 0, 0)),
        (86399, (0, 23, 59, 59)),
        (86400, (1, 0, 0, 0)),
        (99125, (1, 3, 32, 5)),
    ])
    def test_normalize(self, total, expected):
        breakdown = normalize(total)
        self.assertEqual(Breakdown(*expected), breakdown)
        self.assertEqual(total, breakdown.total_seconds())

    def test_named_fields(self):
        breakdown = normalize(90061)
        self.assertEqual(1, breakdown.days)
        self.assertEqual(1, breakdown.hours)
        self.assertEqual(1, breakdown.minutes)
        self.assertEqual(1, breakdown.seconds)

    def test_negative(self):
        with self.assertRaises(ValueError):
            normalize(-1)


class FormatterTest(unittest.TestCase):
    """Pins which segments appear: d, h and m only when non-zero, s always."""

    @parameterized.expand([
        (0, "0s"),
        (5, "5s"),
        (60, "1m 0s"),
        (61, "1m 1s"),
        (3600, "1h 0s"),
        (3601, "1h 1s"),
        (3660, "1h 1m 0s"),
        (86400, "1d 0s"),
        (86401, "1d 1s"),
        (86460, "1d 1m 0s"),
        (90000, "1d 1h 0s"),
        (90061, "1d 1h 1m 1s"),
        (86400 * 1000 + 59, "1000d 59s"),
    ])
    def test_format_human(self, total, expected):
        self.assertEqual(expected, format_human(total))

    def test_format_sql_interval(self):
        self.assertEqual("interval 3600 second", format_sql_interval(3600))
        self.assertEqual("interval 0 second", format_sql_interval(0))


if __name__ == '__main__':
    unittest.main()
