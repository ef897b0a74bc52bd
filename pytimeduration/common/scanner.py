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
from typing import Dict, Optional

from pytimeduration.common.duration_exception import (
    MalformedDurationException, MissingNumberException, UnknownUnitException)
from pytimeduration.common.unit_table import UnitTable

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    # ASCII only, str.isdigit() also accepts superscripts
    return '0' <= ch <= '9'


class Scanner:
    """
    Tokenizes a duration text such as "2h 30m 15s" against a UnitTable.

    The text is a sequence of <digits>[whitespace]<unit> pairs. A number
    without a unit uses the table's default multiplier. Counts are summed per
    multiplier, so "5m 10minutes" yields {60: 15}.
    """

    def __init__(self, text: str, unit_table: Optional[UnitTable] = None):
        if text is None:
            raise ValueError("text cannot be None")
        self.text = text
        self.unit_table = unit_table if unit_table is not None else UnitTable.DEFAULT
        self._pos = 0

    def scan_tokens(self) -> Dict[int, int]:
        """
        Scan the whole text.

        Returns:
            Seconds-per-unit to accumulated count. Empty for blank text.

        Raises:
            UnknownUnitException: If a letter run is not a token of the table.
            MalformedDurationException: If the text contains any other character.
            MissingNumberException: If a known unit is not preceded by a number.
        """
        self._pos = 0
        counts: Dict[int, int] = {}

        self._skip_whitespace()
        while self._pos < len(self.text):
            start = self._pos
            ch = self.text[self._pos]
            if ch.isalpha():
                # a unit must follow a number
                token = self._read_while(str.isalpha)
                if self.unit_table.multiplier_of(token) is not None:
                    raise MissingNumberException(self.text, start, token)
                raise UnknownUnitException(self.text, start, token, self.unit_table.supported_units())
            if not _is_digit(ch):
                raise MalformedDurationException(self.text, start, ch)

            value = int(self._read_while(_is_digit))
            self._skip_whitespace()
            multiplier = self._read_unit()
            counts[multiplier] = counts.get(multiplier, 0) + value
            self._skip_whitespace()

        logger.debug("Scanned duration %r into %s", self.text, counts)
        return counts

    def _read_unit(self) -> int:
        if self._pos >= len(self.text) or not self.text[self._pos].isalpha():
            return self.unit_table.default_multiplier

        start = self._pos
        token = self._read_while(str.isalpha)
        multiplier = self.unit_table.multiplier_of(token)
        if multiplier is None:
            raise UnknownUnitException(self.text, start, token, self.unit_table.supported_units())
        return multiplier

    def _read_while(self, predicate) -> str:
        start = self._pos
        while self._pos < len(self.text) and predicate(self.text[self._pos]):
            self._pos += 1
        return self.text[start:self._pos]

    def _skip_whitespace(self):
        self._read_while(str.isspace)
