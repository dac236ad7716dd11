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

import os

# Line framing
END_LINE = "\r\n"
ATTRIBUTE_KEY = "a="
TEXT_ENCODING = "utf-8"

# extmap ids accepted by the parser (inclusive)
EXTMAP_VALUE_MIN = 1
EXTMAP_VALUE_MAX = 246

# Payload types are carried in a single octet
PAYLOAD_TYPE_MAX = 255
CLOCK_RATE_MAX = 0xFFFFFFFF

# Location of the JSON schemas used to validate exported records
SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schemas")

# Print "Warning: ..." diagnostics for tolerated oddities
WARNINGS_ENABLED = True
