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

"""
TimePeriod is a representation of a number of elapsed seconds, viewable as
days, hours, minutes and seconds.

Parsing:
The period can be parsed from a text expression made of <number><unit> pairs,
for example "2h 30m 15s" or "1 hours 30 minutes". A number with no unit is
interpreted with the unit table's default unit (minutes unless configured).

Supported units of the default table:
- s or seconds
- m or minutes
- h or hours
- d or days
- mo or months (28 days)
- y or years (365 days)
"""

from datetime import timedelta
from typing import Optional

from pytimeduration.common.formatter import format_human, format_sql_interval
from pytimeduration.common.normalizer import Breakdown, normalize
from pytimeduration.common.scanner import Scanner
from pytimeduration.common.time_unit import (SECONDS_PER_DAY, SECONDS_PER_HOUR,
                                             SECONDS_PER_MINUTE)
from pytimeduration.common.unit_table import UnitTable


class TimePeriod:
    """TimePeriod is an immutable, non-negative count of seconds."""

    ZERO = None  # Will be set after class definition

    def __init__(self, seconds: int = 0):
        """
        Constructs a new TimePeriod.

        Args:
            seconds: The period, in seconds. Must be zero or larger.
        """
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise TypeError(f"seconds must be an int, got {type(seconds).__name__}")
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        self._seconds = seconds

    @staticmethod
    def of_seconds(seconds: int) -> 'TimePeriod':
        """Create a TimePeriod from a raw seconds count."""
        return TimePeriod(seconds)

    @staticmethod
    def of_components(seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> 'TimePeriod':
        """
        Create a TimePeriod from independent components.

        Components may exceed their usual range; the breakdown accessors
        normalize on read, so of_components(hours=25) has 1 day and 1 hour.
        """
        return TimePeriod(seconds + minutes * SECONDS_PER_MINUTE
                          + hours * SECONDS_PER_HOUR + days * SECONDS_PER_DAY)

    @staticmethod
    def from_timedelta(delta: timedelta) -> 'TimePeriod':
        if delta.microseconds:
            raise ValueError(f"TimePeriod has no sub-second precision: {delta}")
        return TimePeriod(delta.days * SECONDS_PER_DAY + delta.seconds)

    @staticmethod
    def parse(text: str, unit_table: Optional[UnitTable] = None) -> 'TimePeriod':
        """
        Parses the given string as a TimePeriod.

        Args:
            text: The string to parse
            unit_table: The units to accept, UnitTable.DEFAULT if None

        Returns:
            The parsed TimePeriod

        Raises:
            DurationParseException: If the expression cannot be parsed.
        """
        return TimePeriod(TimePeriod.parse_seconds(text, unit_table))

    @staticmethod
    def parse_seconds(text: str, unit_table: Optional[UnitTable] = None) -> int:
        """Parses the given string as a number of seconds."""
        counts = Scanner(text, unit_table).scan_tokens()
        return sum(multiplier * count for multiplier, count in counts.items())

    def get_total_seconds(self) -> int:
        return self._seconds

    def get_breakdown(self) -> Breakdown:
        return normalize(self._seconds)

    def get_days(self) -> int:
        return self.get_breakdown().days

    def get_hours(self) -> int:
        """Hours of the canonical breakdown, in [0, 23]."""
        return self.get_breakdown().hours

    def get_minutes(self) -> int:
        return self.get_breakdown().minutes

    def get_seconds(self) -> int:
        return self.get_breakdown().seconds

    def is_zero(self) -> bool:
        return self._seconds == 0

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self._seconds)

    def to_string(self) -> str:
        return format_human(self._seconds)

    def as_sql_interval(self) -> str:
        return format_sql_interval(self._seconds)

    def compare_to(self, other: 'TimePeriod') -> int:
        """Three-way comparison of the total seconds: -1, 0 or 1."""
        return (self._seconds > other._seconds) - (self._seconds < other._seconds)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other) -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) != 0

    def __lt__(self, other: 'TimePeriod') -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: 'TimePeriod') -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'TimePeriod') -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: 'TimePeriod') -> bool:
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __add__(self, other: 'TimePeriod') -> 'TimePeriod':
        if not isinstance(other, TimePeriod):
            return NotImplemented
        return TimePeriod(self._seconds + other._seconds)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TimePeriod({self._seconds})"


# Initialize TimePeriod constants
TimePeriod.ZERO = TimePeriod(0)
