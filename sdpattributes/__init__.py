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

"""Parsing and reconciliation of SDP extmap, rtpmap, fmtp and rtcp-fb attribute lines."""

from .SdpAttribute import Attribute, key_value_build
from .SdpCodec import Codec, codecs_match, equivalent_fmtp, merge_codecs, parse_fmtp, parse_rtcp_fb, parse_rtpmap
from .SdpDirection import ConnectionRole, Direction
from .SdpErrors import (ConnectionRoleParseError, ExtMapParseError, FmtpParseError, NumericConversionError,
                        RecordValidationError, RtcpFeedbackParseError, RtpmapParseError, SdpError, SdpSyntaxError,
                        TextEncodingError)
from .SdpExtmap import ExtMap
from .SdpLexer import ByteCursor, read_type, read_value
from .SdpSchema import codec_from_json, codec_table_to_json, codec_to_json, extmap_from_json, extmap_to_json
