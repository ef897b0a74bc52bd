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

import logging
from typing import List, Optional

import pyarrow as pa

from pytimeduration.common.formatter import format_human
from pytimeduration.common.time_period import TimePeriod
from pytimeduration.common.unit_table import UnitTable

logger = logging.getLogger(__name__)

INT64_MAX = 2 ** 63 - 1
DURATION_SECONDS = pa.duration('s')


def total_seconds_array(values, unit_table: Optional[UnitTable] = None) -> pa.Array:
    """
    Parse a column of duration text into int64 seconds.

    Args:
        values: A pyarrow string array, chunked array or any iterable of str/None.
        unit_table: The units to accept, UnitTable.DEFAULT if None.

    Returns:
        An int64 array of the same length; nulls stay null.

    Raises:
        DurationParseException: If any value cannot be parsed.
        OverflowError: If a value exceeds the int64 range.
    """
    return pa.array(_parse_all(values, unit_table), type=pa.int64())


def parse_duration_array(values, unit_table: Optional[UnitTable] = None) -> pa.Array:
    """Parse a column of duration text into an Arrow duration("s") array."""
    return pa.array(_parse_all(values, unit_table), type=DURATION_SECONDS)


def format_duration_array(array) -> pa.Array:
    """
    Render a duration or integer-seconds column as text such as "1h 30m 0s".

    Durations of a finer unit must hold whole seconds; the cast to seconds
    raises pyarrow.ArrowInvalid otherwise.

    Raises:
        ValueError: If a value is negative.
        TypeError: If the column is neither a duration nor an integer type.
    """
    if isinstance(array, pa.ChunkedArray):
        array = array.combine_chunks()
    elif not isinstance(array, pa.Array):
        array = pa.array(array)

    if pa.types.is_duration(array.type):
        array = array.cast(DURATION_SECONDS).cast(pa.int64())
    elif not pa.types.is_integer(array.type):
        raise TypeError(f"Cannot format Arrow type {array.type} as durations")

    texts = [None if value is None else _format_seconds(value) for value in array.to_pylist()]
    return pa.array(texts, type=pa.string())


def _format_seconds(seconds: int) -> str:
    if seconds < 0:
        raise ValueError(f"Cannot format negative duration of {seconds}s")
    return format_human(seconds)


def _parse_all(values, unit_table: Optional[UnitTable]) -> List[Optional[int]]:
    if isinstance(values, (pa.Array, pa.ChunkedArray)):
        values = values.to_pylist()
    seconds = [_checked_seconds(text, unit_table) for text in values]
    logger.debug("Parsed %d duration values", len(seconds))
    return seconds


def _checked_seconds(text: Optional[str], unit_table: Optional[UnitTable]) -> Optional[int]:
    if text is None:
        return None
    seconds = TimePeriod.parse_seconds(text, unit_table)
    if seconds > INT64_MAX:
        raise OverflowError(f"Duration '{text}' ({seconds}s) does not fit in a 64bit Arrow value")
    return seconds
