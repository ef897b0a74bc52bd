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

from pytimeduration.common.normalizer import normalize


def format_human(total_seconds: int) -> str:
    """
    Render seconds as e.g. "1d 5h 0s".

    Days, hours and minutes are written only when non-zero, seconds always,
    so a zero duration is "0s" and 30 minutes is "30m 0s".
    """
    breakdown = normalize(total_seconds)
    segments = []
    for value, letter in ((breakdown.days, "d"), (breakdown.hours, "h"), (breakdown.minutes, "m")):
        if value:
            segments.append(f"{value}{letter}")
    segments.append(f"{breakdown.seconds}s")
    return " ".join(segments)


def format_sql_interval(total_seconds: int) -> str:
    """Fragment to append after a date expression, e.g. "NOW() - interval 3600 second"."""
    return f"interval {total_seconds} second"
