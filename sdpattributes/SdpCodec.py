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

from typing import Callable, Dict, List, Optional

from . import Config as CONFIG
from .SdpErrors import (FmtpParseError, NumericConversionError,
                        RtcpFeedbackParseError, RtpmapParseError)
from .SdpLexer import parse_int


class Codec:
    """A codec as described by the rtpmap, fmtp and rtcp-fb lines of one
    payload type. Records built from a single line are partial; empty
    strings and zero stand for unknown values.
    """
    def __init__(self,
                 payload_type: int = 0,
                 name: str = "",
                 clock_rate: int = 0,
                 encoding_parameters: str = "",
                 fmtp: str = "",
                 rtcp_feedback: Optional[List[str]] = None):
        self.payload_type = payload_type
        self.name = name
        self.clock_rate = clock_rate
        self.encoding_parameters = encoding_parameters
        self.fmtp = fmtp
        self.rtcp_feedback: List[str] = list(rtcp_feedback) if rtcp_feedback else []

    def __str__(self) -> str:
        return (f"{self.payload_type} {self.name}/{self.clock_rate}/{self.encoding_parameters} "
                f"({self.fmtp}) [{', '.join(self.rtcp_feedback)}]")

    def __repr__(self) -> str:
        return (f"Codec(payload_type={self.payload_type!r}, name={self.name!r}, "
                f"clock_rate={self.clock_rate!r}, encoding_parameters={self.encoding_parameters!r}, "
                f"fmtp={self.fmtp!r}, rtcp_feedback={self.rtcp_feedback!r})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Codec):
            return False
        return all(getattr(self, field) == getattr(other, field) for field in CODEC_MERGE_RULES)


def _payload_type(token: str, error: type) -> int:
    try:
        return parse_int(token, 0, CONFIG.PAYLOAD_TYPE_MAX)
    except NumericConversionError as err:
        raise error(f"invalid payload type {token}", token) from err


def parse_rtpmap(rtpmap: str) -> Codec:
    # rtpmap:<payload type> <encoding name>/<clock rate>[/<encoding parameters>]
    split = rtpmap.split()
    if len(split) != 2:
        raise RtpmapParseError(f"invalid rtpmap attribute {rtpmap!r}", rtpmap)

    pt_split = split[0].split(":")
    if len(pt_split) != 2:
        raise RtpmapParseError(f"invalid rtpmap payload {split[0]!r}", split[0])
    payload_type = _payload_type(pt_split[1], RtpmapParseError)

    split = split[1].split("/")
    name = split[0]
    clock_rate = 0
    if len(split) > 1:
        try:
            clock_rate = parse_int(split[1], 0, CONFIG.CLOCK_RATE_MAX)
        except NumericConversionError as err:
            raise RtpmapParseError(f"invalid rtpmap clock-rate {split[1]}", split[1]) from err
    encoding_parameters = ""
    if len(split) > 2:
        encoding_parameters = split[2]
        if len(split) > 3 and CONFIG.WARNINGS_ENABLED:
            print(f"Warning: ignoring extra encoding-params in rtpmap '{rtpmap}'")

    return Codec(payload_type=payload_type,
                 name=name,
                 clock_rate=clock_rate,
                 encoding_parameters=encoding_parameters)


def parse_fmtp(fmtp: str) -> Codec:
    # fmtp:<format> <format specific parameters>
    split = fmtp.split()
    if len(split) != 2:
        raise FmtpParseError(f"invalid fmtp attribute {fmtp!r}", fmtp)

    pt_split = split[0].split(":")
    if len(pt_split) != 2:
        raise FmtpParseError(f"invalid fmtp format {split[0]!r}", split[0])

    return Codec(payload_type=_payload_type(pt_split[1], FmtpParseError),
                 fmtp=split[1])


def parse_rtcp_fb(rtcp_fb: str) -> Codec:
    # rtcp-fb:<payload type> <RTCP feedback type> [<RTCP feedback parameter>]
    split = rtcp_fb.strip().split(None, 1)
    if len(split) != 2:
        raise RtcpFeedbackParseError(f"invalid rtcp-fb attribute {rtcp_fb!r}", rtcp_fb)

    pt_split = split[0].split(":")
    if len(pt_split) != 2:
        raise RtcpFeedbackParseError(f"invalid rtcp-fb payload {split[0]!r}", split[0])

    return Codec(payload_type=_payload_type(pt_split[1], RtcpFeedbackParseError),
                 rtcp_feedback=[split[1]])


def _fill_if_empty(saved, incoming):
    return incoming if not saved else saved


def _append(saved: List[str], incoming: List[str]) -> List[str]:
    return saved + incoming


# How a known value of each field combines with newly parsed data. Every
# Codec field must have an entry.
CODEC_MERGE_RULES: Dict[str, Callable] = {
    "payload_type":        _fill_if_empty,
    "name":                _fill_if_empty,
    "clock_rate":          _fill_if_empty,
    "encoding_parameters": _fill_if_empty,
    "fmtp":                _fill_if_empty,
    "rtcp_feedback":       _append,
}


def merge_codecs(codec: Codec, codecs: Dict[int, Codec]) -> None:
    """Fold a partial codec into the table keyed by payload type.

    Known values are never overwritten; feedback entries accumulate in
    arrival order.
    """
    saved = codecs.get(codec.payload_type)
    if saved is None:
        codecs[codec.payload_type] = codec
        return
    for field, rule in CODEC_MERGE_RULES.items():
        setattr(saved, field, rule(getattr(saved, field), getattr(codec, field)))


def equivalent_fmtp(want: str, got: str) -> bool:
    """Compare two fmtp parameter strings regardless of parameter order
    and of the whitespace around each parameter.
    """
    want_split = [part.strip() for part in want.split(";")]
    got_split = [part.strip() for part in got.split(";")]

    if len(want_split) != len(got_split):
        return False

    # trimmed before sorting, a leading space would sort first
    want_split.sort()
    got_split.sort()

    for want_part, got_part in zip(want_split, got_split):
        if want_part != got_part:
            return False

    return True


def codecs_match(wanted: Codec, got: Codec) -> bool:
    """True when got satisfies wanted; empty fields of wanted match anything."""
    if wanted.name and wanted.name.lower() != got.name.lower():
        return False
    if wanted.clock_rate and wanted.clock_rate != got.clock_rate:
        return False
    if wanted.encoding_parameters and wanted.encoding_parameters != got.encoding_parameters:
        return False
    if wanted.fmtp and not equivalent_fmtp(wanted.fmtp, got.fmtp):
        return False
    return True
