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

from typing import Optional, Union


class SdpError(Exception):
    """Base class of every error raised while parsing SDP attribute lines.

    ``fragment`` holds the offending raw text (or bytes) when one is known.
    """
    def __init__(self, message: str, fragment: Optional[Union[str, bytes]] = None):
        self.message = message
        self.fragment = fragment
        super().__init__(self.message)


class SdpSyntaxError(SdpError):
    """The type tag of a line is not a single letter followed by '='."""


class ExtMapParseError(SdpError):
    pass


class RtpmapParseError(SdpError):
    pass


class FmtpParseError(SdpError):
    pass


class RtcpFeedbackParseError(SdpError):
    pass


class ConnectionRoleParseError(SdpError):
    pass


class NumericConversionError(SdpError):
    pass


class TextEncodingError(SdpError):
    pass


class RecordValidationError(SdpError):
    """An exported or imported record does not match its JSON schema."""
