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

from typing import Dict, Generic, Type, TypeVar

from pytimeduration.common.options.config_option import ConfigOption
from pytimeduration.common.time_period import TimePeriod

T = TypeVar('T')


class ConfigOptions:
    """
    ConfigOptions are used to build a ConfigOption.

    Examples:
        # string-valued option with a default value
        default_unit = ConfigOptions.key("duration.default-unit").string_type().default_value("m")

        # duration-valued option, parsed from text such as "1h 30m"
        timeout = ConfigOptions.key("query.timeout").duration_type().default_value(TimePeriod.of_seconds(30))

        # option with no default value
        units = ConfigOptions.key("duration.units").map_type().no_default_value()
    """

    @staticmethod
    def key(key: str) -> 'OptionBuilder':
        if not key:
            raise ValueError("Key must not be None or empty.")
        return ConfigOptions.OptionBuilder(key)

    class OptionBuilder:
        """
        The option builder is used to create a ConfigOption. It is instantiated via
        ConfigOptions.key(str).
        """

        def __init__(self, key: str):
            self.key = key

        def boolean_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[bool]':
            return ConfigOptions.TypedConfigOptionBuilder(self.key, bool)

        def int_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[int]':
            return ConfigOptions.TypedConfigOptionBuilder(self.key, int)

        def float_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[float]':
            return ConfigOptions.TypedConfigOptionBuilder(self.key, float)

        def string_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[str]':
            return ConfigOptions.TypedConfigOptionBuilder(self.key, str)

        def duration_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[TimePeriod]':
            """Defines that the value of the option should be of TimePeriod type."""
            return ConfigOptions.TypedConfigOptionBuilder(self.key, TimePeriod)

        def map_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[Dict[str, str]]':
            """
            Defines that the value of the option should be a set of properties,
            written as "k1:v1,k2:v2".
            """
            return ConfigOptions.TypedConfigOptionBuilder(self.key, dict)

    class TypedConfigOptionBuilder(Generic[T]):
        """
        Builder for ConfigOption with a defined atomic type.
        """

        def __init__(self, key: str, clazz: Type[T]):
            self.key = key
            self.clazz = clazz

        def default_value(self, value: T) -> ConfigOption[T]:
            return ConfigOption(
                key=self.key,
                clazz=self.clazz,
                default_value=value
            )

        def no_default_value(self) -> ConfigOption[T]:
            return ConfigOption(
                key=self.key,
                clazz=self.clazz,
                default_value=None
            )
