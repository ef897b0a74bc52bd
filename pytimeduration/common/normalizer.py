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

from typing import NamedTuple

from pytimeduration.common.time_unit import (SECONDS_PER_DAY, SECONDS_PER_HOUR,
                                             SECONDS_PER_MINUTE)


class Breakdown(NamedTuple):
    """Canonical split of a seconds count: hours < 24, minutes < 60, seconds < 60."""
    days: int
    hours: int
    minutes: int
    seconds: int

    def total_seconds(self) -> int:
        return (self.days * SECONDS_PER_DAY + self.hours * SECONDS_PER_HOUR
                + self.minutes * SECONDS_PER_MINUTE + self.seconds)


def normalize(total_seconds: int) -> Breakdown:
    if total_seconds < 0:
        raise ValueError(f"total_seconds must be >= 0, got {total_seconds}")
    days, rest = divmod(total_seconds, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    return Breakdown(days, hours, minutes, seconds)
