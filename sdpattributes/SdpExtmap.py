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

from typing import NamedTuple, Optional
from urllib.parse import urlparse

from . import Config as CONFIG
from .SdpAttribute import Attribute
from .SdpDirection import Direction
from .SdpErrors import ExtMapParseError, NumericConversionError
from .SdpLexer import parse_int

# Default extmap ids
DEF_EXT_MAP_VALUE_ABS_SEND_TIME = 1
DEF_EXT_MAP_VALUE_TRANSPORT_CC = 2
DEF_EXT_MAP_VALUE_SDES_MID = 3
DEF_EXT_MAP_VALUE_SDES_RTP_STREAM_ID = 4

ABS_SEND_TIME_URI = "http://www.webrtc.org/experiments/rtp-hdrext/abs-send-time"
TRANSPORT_CC_URI = "http://www.ietf.org/id/draft-holmer-rmcat-transport-wide-cc-extensions-01"
SDES_MID_URI = "urn:ietf:params:rtp-hdrext:sdes:mid"
SDES_RTP_STREAM_ID_URI = "urn:ietf:params:rtp-hdrext:sdes:rtp-stream-id"
AUDIO_LEVEL_URI = "urn:ietf:params:rtp-hdrext:ssrc-audio-level"

# Schemes whose URIs must name a host
_NETWORK_SCHEMES = ("http", "https", "ws", "wss", "ftp")


def parse_uri(text: str) -> str:
    """Check that text is an absolute URI and return it unchanged."""
    try:
        parsed = urlparse(text)
    except ValueError as err:
        raise ExtMapParseError(f"invalid extmap uri {text}: {err}", text) from err
    if not parsed.scheme:
        raise ExtMapParseError(f"invalid extmap uri {text}: relative URI without a scheme", text)
    if parsed.scheme.lower() in _NETWORK_SCHEMES and not parsed.hostname:
        raise ExtMapParseError(f"invalid extmap uri {text}: missing host", text)
    return text


class ExtMap(NamedTuple):
    """ExtMap represents the activation of a single RTP header extension
    (RFC 8285), as carried by an a=extmap line.
    """
    value: int
    direction: Direction = Direction.Unknown
    uri: Optional[str] = None
    ext_attr: Optional[str] = None

    def __str__(self) -> str:
        output = str(self.value)
        if self.direction is not Direction.Unknown:
            output += f"/{self.direction}"
        if self.uri is not None:
            output += f" {self.uri}"
        if self.ext_attr is not None:
            output += f" {self.ext_attr}"
        return output

    def convert(self) -> Attribute:
        """Convert this extmap to a generic attribute."""
        return Attribute("extmap", str(self))

    def marshal(self) -> str:
        return "extmap:" + str(self)

    @classmethod
    def unmarshal(cls, line: str) -> "ExtMap":
        """Parse "extmap:<value>[/<direction>] <uri> [<extension attributes>]"."""
        parts = line.strip().split(":", 1)
        if len(parts) != 2:
            raise ExtMapParseError(f"invalid extmap line {line!r}", line)

        fields = parts[1].split(None, 2)
        if len(fields) < 2:
            raise ExtMapParseError(f"invalid extmap line {line!r}", line)

        valdir = fields[0].split("/")
        if len(valdir) > 2:
            raise ExtMapParseError(f"invalid extmap value/direction {fields[0]}", fields[0])

        try:
            value = parse_int(valdir[0], -(2 ** 63), 2 ** 63 - 1, signed=True)
        except NumericConversionError as err:
            raise ExtMapParseError(f"{valdir[0]} -- invalid extmap key", valdir[0]) from err
        if not CONFIG.EXTMAP_VALUE_MIN <= value <= CONFIG.EXTMAP_VALUE_MAX:
            raise ExtMapParseError(
                f"{valdir[0]} -- extmap key must be in the range "
                f"{CONFIG.EXTMAP_VALUE_MIN}-{CONFIG.EXTMAP_VALUE_MAX}",
                valdir[0])

        direction = Direction.Unknown
        if len(valdir) == 2:
            direction = Direction.new(valdir[1])
            if direction is Direction.Unknown:
                raise ExtMapParseError(f"unknown direction from {valdir[1]}", valdir[1])

        uri = parse_uri(fields[1])

        ext_attr = None
        if len(fields) == 3:
            ext_attr = fields[2].strip()

        return cls(value, direction, uri, ext_attr)
