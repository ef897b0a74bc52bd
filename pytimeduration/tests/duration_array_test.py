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
from datetime import timedelta

import pyarrow as pa

from pytimeduration.arrow import (format_duration_array, parse_duration_array,
                                  total_seconds_array)
from pytimeduration.common.duration_exception import DurationParseException
from pytimeduration.common.unit_table import UnitTable


class DurationArrayTest(unittest.TestCase):

    def test_total_seconds_array(self):
        result = total_seconds_array(pa.array(["1h", None, "2h 30m", ""]))
        self.assertEqual(pa.int64(), result.type)
        self.assertEqual([3600, None, 9000, 0], result.to_pylist())

    def test_parse_duration_array(self):
        result = parse_duration_array(["30s", "1d"])
        self.assertEqual(pa.duration('s'), result.type)
        self.assertEqual(2, len(result))
        self.assertEqual([timedelta(seconds=30), timedelta(days=1)], result.to_pylist())

    def test_chunked_input(self):
        chunked = pa.chunked_array([["1m"], ["2m", None]])
        self.assertEqual([60, 120, None], total_seconds_array(chunked).to_pylist())

    def test_custom_unit_table(self):
        table = UnitTable.DEFAULT.with_units({"w": 604800})
        self.assertEqual([604800], total_seconds_array(["1w"], table).to_pylist())

    def test_parse_error(self):
        with self.assertRaises(DurationParseException):
            total_seconds_array(["1h", "soon"])

    def test_overflow(self):
        with self.assertRaises(OverflowError):
            total_seconds_array(["300000000000y"])

    def test_format_int_seconds(self):
        result = format_duration_array(pa.array([0, 5400, None, 90061], type=pa.int64()))
        self.assertEqual(pa.string(), result.type)
        self.assertEqual(["0s", "1h 30m 0s", None, "1d 1h 1m 1s"], result.to_pylist())

    def test_format_durations(self):
        durations = parse_duration_array(["1d 5h", "30m"])
        self.assertEqual(["1d 5h 0s", "30m 0s"], format_duration_array(durations).to_pylist())

    def test_format_millisecond_durations(self):
        durations = pa.array([3600000, None], type=pa.duration('ms'))
        self.assertEqual(["1h 0s", None], format_duration_array(durations).to_pylist())

    def test_format_durations_beyond_timedelta_range(self):
        durations = parse_duration_array(["3000000y"])
        self.assertEqual(["1095000000d 0s"], format_duration_array(durations).to_pylist())

    def test_format_negative_seconds(self):
        with self.assertRaises(ValueError) as context:
            format_duration_array(pa.array([60, -1], type=pa.int64()))
        self.assertIn("negative", str(context.exception))
        with self.assertRaises(ValueError):
            format_duration_array(pa.array([-5], type=pa.duration('s')))

    def test_format_unsupported_type(self):
        with self.assertRaises(TypeError):
            format_duration_array(pa.array(["1h"]))


if __name__ == '__main__':
    unittest.main()
