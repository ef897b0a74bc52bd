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
from typing import Dict

from pytimeduration.common.options.config_option import ConfigOption
from pytimeduration.common.options.config_options import ConfigOptions
from pytimeduration.common.options.options import Options
from pytimeduration.common.options.options_utils import OptionsUtils
from pytimeduration.common.time_unit import TimeUnit
from pytimeduration.common.unit_table import UnitTable

logger = logging.getLogger(__name__)


class DurationOptions:
    """Options controlling how duration text is parsed."""

    DEFAULT_UNIT: ConfigOption[str] = (
        ConfigOptions.key("duration.default-unit")
        .string_type()
        .default_value(TimeUnit.MINUTES.short_name())
        .with_description(
            "Unit token applied to a number written without a unit. "
            "The token must be one of the recognized units."
        )
    )

    UNITS: ConfigOption[Dict[str, str]] = (
        ConfigOptions.key("duration.units")
        .map_type()
        .no_default_value()
        .with_description(
            "Additional unit tokens and their length in seconds, "
            "for example 'w:604800,weeks:604800'. Overrides standard tokens of the same name."
        )
    )

    UNITS_INCLUDE_STANDARD: ConfigOption[bool] = (
        ConfigOptions.key("duration.units.include-standard")
        .boolean_type()
        .default_value(True)
        .with_description(
            "Whether the standard units (s, m, h, d, mo, y and their long forms) are recognized."
        )
    )

    def __init__(self, options: Options):
        self.options = options

    def default_unit(self, default=None):
        return self.options.get(DurationOptions.DEFAULT_UNIT, default)

    def units(self, default=None) -> Dict[str, int]:
        units = self.options.get(DurationOptions.UNITS, default)
        if not units:
            return {}
        result = {}
        for token, seconds in units.items():
            try:
                result[token] = OptionsUtils.convert_to_int(seconds)
            except ValueError:
                raise ValueError(
                    f"Invalid length for unit '{token}' in {DurationOptions.UNITS.key()}: {seconds}")
        return result

    def units_include_standard(self, default=None):
        return self.options.get(DurationOptions.UNITS_INCLUDE_STANDARD, default)

    def unit_table(self) -> UnitTable:
        """Build the UnitTable described by these options."""
        tokens: Dict[str, int] = dict(UnitTable.DEFAULT) if self.units_include_standard() else {}
        tokens.update(self.units())
        default_unit = self.default_unit()
        if default_unit not in tokens:
            raise ValueError(
                f"{DurationOptions.DEFAULT_UNIT.key()} '{default_unit}' is not a recognized unit, "
                f"known units: {sorted(tokens)}")
        table = UnitTable(tokens, tokens[default_unit])
        logger.debug("Configured duration units %s with default unit '%s'", table.supported_units(), default_unit)
        return table
