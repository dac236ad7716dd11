# Copyright (C) 2025 Matrox Graphics Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Optional

from . import Config as CONFIG


class Attribute:
    """A generic a=<key>[:<value>] attribute."""

    def __init__(self, key: str, value: Optional[str] = None):
        self.key = key
        self.value = value

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}:{self.value}"

    def __repr__(self) -> str:
        return f"Attribute({self.key!r}, {self.value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Attribute):
            return self.key == other.key and self.value == other.value
        return False

    def marshal(self) -> str:
        return key_value_build(CONFIG.ATTRIBUTE_KEY, str(self))


def key_value_build(key: str, value: Optional[str]) -> str:
    """Render one "<key><value>\\r\\n" line, or nothing when value is None."""
    if value is None:
        return ""
    return f"{key}{value}{CONFIG.END_LINE}"
