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
TimeUnit names a unit of elapsed time and the tokens that spell it.

Months and years are fixed-length approximations (28 and 365 days), not
calendar-accurate lengths.
"""

from typing import List


class TimeUnit:
    """A unit of elapsed time: the tokens that spell it, short form first, and its length in seconds."""

    def __init__(self, units: List[str], multiplier: int):
        self.units = units
        self.multiplier = multiplier

    SECONDS = None  # Will be set after class definition
    MINUTES = None
    HOURS = None
    DAYS = None
    MONTHS = None
    YEARS = None

    @staticmethod
    def values() -> List['TimeUnit']:
        """All standard units, from the smallest to the largest."""
        return [TimeUnit.SECONDS, TimeUnit.MINUTES, TimeUnit.HOURS,
                TimeUnit.DAYS, TimeUnit.MONTHS, TimeUnit.YEARS]

    def short_name(self) -> str:
        return self.units[0]

    def __repr__(self) -> str:
        return f"TimeUnit({self.units}, {self.multiplier})"


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# Initialize TimeUnit constants
TimeUnit.SECONDS = TimeUnit(["s", "seconds"], 1)
TimeUnit.MINUTES = TimeUnit(["m", "minutes"], SECONDS_PER_MINUTE)
TimeUnit.HOURS = TimeUnit(["h", "hours"], SECONDS_PER_HOUR)
TimeUnit.DAYS = TimeUnit(["d", "days"], SECONDS_PER_DAY)
TimeUnit.MONTHS = TimeUnit(["mo", "months"], 28 * SECONDS_PER_DAY)
TimeUnit.YEARS = TimeUnit(["y", "years"], 365 * SECONDS_PER_DAY)
