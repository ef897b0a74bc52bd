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


# Exception classes
class DurationException(Exception):
    """Base duration exception"""


class DurationParseException(DurationException, ValueError):
    """Duration text could not be parsed"""

    def __init__(self, text: str, position: int, message: str):
        self.text = text
        self.position = position
        super().__init__(f"Cannot parse duration '{text}' at position {position}: {message}")


class UnknownUnitException(DurationParseException):
    """Unit token not present in the unit table"""

    def __init__(self, text: str, position: int, token: str, supported_units: str):
        self.token = token
        super().__init__(
            text, position,
            f"time unit label '{token}' does not match any of the recognized units: {supported_units}")


class MalformedDurationException(DurationParseException):
    """Character that is neither a digit, a letter nor whitespace"""

    def __init__(self, text: str, position: int, char: str):
        self.char = char
        super().__init__(text, position, f"unexpected character '{char}'")


class MissingNumberException(DurationParseException):
    """Recognized unit token that is not preceded by a number"""

    def __init__(self, text: str, position: int, token: str):
        self.token = token
        super().__init__(text, position, f"unit '{token}' has no number")
