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

from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional

from pytimeduration.common.time_unit import TimeUnit


class UnitTable(Mapping):
    """
    An immutable mapping from unit token to its length in seconds, plus the
    multiplier applied to a number written without any unit.

    Tokens are matched exactly, so "H" is not the same unit as "h".
    """

    DEFAULT = None  # Will be set after class definition

    def __init__(self, units: Dict[str, int], default_multiplier: int):
        """
        Constructs a new UnitTable.

        Args:
            units: Token to seconds-per-unit. Tokens must be non-empty letter runs.
            default_multiplier: Seconds per unit for a bare number. Must be positive.
        """
        for token, multiplier in units.items():
            if not isinstance(token, str) or not token.isalpha():
                raise ValueError(f"unit token must be a non-empty run of letters, got {token!r}")
            _check_multiplier(multiplier, f"multiplier of unit '{token}'")
        _check_multiplier(default_multiplier, "default_multiplier")
        self._units = dict(units)
        self._default_multiplier = default_multiplier

    @staticmethod
    def of(units: List[TimeUnit], default_unit: TimeUnit) -> 'UnitTable':
        """Create a UnitTable accepting every token of the given units."""
        tokens = {}
        for unit in units:
            for token in unit.units:
                tokens[token] = unit.multiplier
        return UnitTable(tokens, default_unit.multiplier)

    @property
    def default_multiplier(self) -> int:
        return self._default_multiplier

    def multiplier_of(self, token: str) -> Optional[int]:
        """Returns the seconds per unit of the token, or None if the token is unknown."""
        return self._units.get(token)

    def with_default_multiplier(self, default_multiplier: int) -> 'UnitTable':
        return UnitTable(self._units, default_multiplier)

    def with_default_unit(self, token: str) -> 'UnitTable':
        """Use the multiplier of an existing token for bare numbers."""
        if token not in self._units:
            raise ValueError(
                f"default unit '{token}' is not one of the recognized units: {self.supported_units()}")
        return UnitTable(self._units, self._units[token])

    def with_units(self, units: Dict[str, int]) -> 'UnitTable':
        """Returns a new table with the given tokens added or overridden."""
        merged = dict(self._units)
        merged.update(units)
        return UnitTable(merged, self._default_multiplier)

    def supported_units(self) -> str:
        """Describe the accepted tokens, grouped by multiplier from the smallest unit up."""
        groups: Dict[int, List[str]] = {}
        for token, multiplier in self._units.items():
            groups.setdefault(multiplier, []).append(token)
        return " / ".join(
            "(" + " | ".join(groups[multiplier]) + ")" for multiplier in sorted(groups))

    def __getitem__(self, token: str) -> int:
        return self._units[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitTable):
            return False
        return self._units == other._units and self._default_multiplier == other._default_multiplier

    def __hash__(self) -> int:
        return hash((frozenset(self._units.items()), self._default_multiplier))

    def __repr__(self) -> str:
        return f"UnitTable({self._units}, default_multiplier={self._default_multiplier})"


def _check_multiplier(value, name: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")


# Initialize UnitTable constants
UnitTable.DEFAULT = UnitTable.of(TimeUnit.values(), TimeUnit.MINUTES)
