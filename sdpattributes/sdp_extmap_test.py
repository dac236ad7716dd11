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

import unittest

from sdpattributes.SdpAttribute import Attribute
from sdpattributes.SdpDirection import Direction
from sdpattributes.SdpErrors import ExtMapParseError, NumericConversionError
from sdpattributes.SdpExtmap import (ABS_SEND_TIME_URI, AUDIO_LEVEL_URI, DEF_EXT_MAP_VALUE_SDES_MID, SDES_MID_URI,
                                     ExtMap)

EXAMPLE_ATTR_EXTMAP1 = "extmap:1 http://example.com/082005/ext.htm#ttime"
EXAMPLE_ATTR_EXTMAP2 = "extmap:2/sendrecv http://example.com/082005/ext.htm#xmeta short"
FAILING_ATTR_EXTMAP1 = "extmap:257/sendrecv http://example.com/082005/ext.htm#xmeta short"
FAILING_ATTR_EXTMAP2 = "extmap:2/blorg http://example.com/082005/ext.htm#xmeta short"


class TestExtmapDecode(unittest.TestCase):
    def test_abs_send_time(self):
        line = "extmap:1 " + ABS_SEND_TIME_URI
        extmap = ExtMap.unmarshal(line)
        self.assertEqual(extmap.value, 1)
        self.assertIs(extmap.direction, Direction.Unknown)
        self.assertEqual(extmap.uri, ABS_SEND_TIME_URI)
        self.assertIsNone(extmap.ext_attr)
        self.assertEqual(extmap.marshal(), line)

    def test_fields(self):
        test_cases = [
            ("no direction", EXAMPLE_ATTR_EXTMAP1,
             ExtMap(1, Direction.Unknown, "http://example.com/082005/ext.htm#ttime", None)),
            ("sendrecv with attribute", EXAMPLE_ATTR_EXTMAP2,
             ExtMap(2, Direction.SendRecv, "http://example.com/082005/ext.htm#xmeta", "short")),
            ("sendonly urn", "extmap:1/sendonly " + AUDIO_LEVEL_URI,
             ExtMap(1, Direction.SendOnly, AUDIO_LEVEL_URI, None)),
            ("recvonly", "extmap:3/recvonly urn:ietf:params:rtp-hdrext:smpte-tc 3600@90000/25",
             ExtMap(3, Direction.RecvOnly, "urn:ietf:params:rtp-hdrext:smpte-tc", "3600@90000/25")),
            ("inactive upper bound", "extmap:246/inactive urn:x-nmos:rtp-hdrext:grain-duration",
             ExtMap(246, Direction.Inactive, "urn:x-nmos:rtp-hdrext:grain-duration", None)),
            ("attribute with spaces",
             "extmap:4 urn:ietf:params:rtp-hdrext:encrypt urn:ietf:params:rtp-hdrext:smpte-tc 25@600/24",
             ExtMap(4, Direction.Unknown, "urn:ietf:params:rtp-hdrext:encrypt",
                    "urn:ietf:params:rtp-hdrext:smpte-tc 25@600/24")),
            ("line terminator", "extmap:5 urn:x-nmos:rtp-hdrext:grain-flags\r\n",
             ExtMap(5, Direction.Unknown, "urn:x-nmos:rtp-hdrext:grain-flags", None)),
        ]
        for name, line, expected in test_cases:
            with self.subTest(name=name):
                self.assertEqual(ExtMap.unmarshal(line), expected)

    def test_round_trip(self):
        lines = [
            EXAMPLE_ATTR_EXTMAP1,
            EXAMPLE_ATTR_EXTMAP2,
            "extmap:1/sendonly " + AUDIO_LEVEL_URI,
            "extmap:3/recvonly urn:ietf:params:rtp-hdrext:smpte-tc 3600@90000/25",
            "extmap:7/inactive urn:x-nmos:rtp-hdrext:sync-timestamp",
            "extmap:4 urn:ietf:params:rtp-hdrext:encrypt urn:ietf:params:rtp-hdrext:smpte-tc 25@600/24",
        ]
        for line in lines:
            with self.subTest(line=line):
                self.assertEqual(ExtMap.unmarshal(line).marshal(), line)

    def test_value_range(self):
        for token in ("1", "246"):
            with self.subTest(value=token):
                extmap = ExtMap.unmarshal(f"extmap:{token} {SDES_MID_URI}")
                self.assertEqual(extmap.value, int(token))
        for token in ("0", "247", "-1", "257"):
            with self.subTest(value=token):
                with self.assertRaises(ExtMapParseError) as ctx:
                    ExtMap.unmarshal(f"extmap:{token} {SDES_MID_URI}")
                self.assertIn("range", ctx.exception.message)
                self.assertEqual(ctx.exception.fragment, token)

    def test_non_numeric_value(self):
        with self.assertRaises(ExtMapParseError) as ctx:
            ExtMap.unmarshal("extmap:one " + SDES_MID_URI)
        self.assertEqual(ctx.exception.fragment, "one")
        self.assertIsInstance(ctx.exception.__cause__, NumericConversionError)

    def test_invalid(self):
        test_cases = [
            ("missing colon", "extmap 1 foo"),
            ("missing uri", "extmap:1"),
            ("missing uri with direction", "extmap:1/sendonly"),
            ("empty value", "extmap:"),
            ("out of range", FAILING_ATTR_EXTMAP1),
            ("unknown direction", FAILING_ATTR_EXTMAP2),
            ("explicit unknown direction", "extmap:1/unknown " + SDES_MID_URI),
            ("empty direction", "extmap:1/ " + SDES_MID_URI),
            ("uppercase direction", "extmap:1/SENDONLY " + SDES_MID_URI),
            ("extra slash", "extmap:1/sendonly/x " + SDES_MID_URI),
            ("relative uri", "extmap:1 not-a-uri"),
            ("missing host", "extmap:1 http:///ext.htm"),
            ("broken ipv6 host", "extmap:1 http://[::1/ext"),
        ]
        for name, line in test_cases:
            with self.subTest(name=name):
                with self.assertRaises(ExtMapParseError):
                    ExtMap.unmarshal(line)


class TestExtmapEncode(unittest.TestCase):
    def test_unknown_direction_not_rendered(self):
        extmap = ExtMap(DEF_EXT_MAP_VALUE_SDES_MID, Direction.Unknown, SDES_MID_URI)
        self.assertEqual(str(extmap), "3 urn:ietf:params:rtp-hdrext:sdes:mid")

    def test_optional_parts(self):
        self.assertEqual(str(ExtMap(1)), "1")
        self.assertEqual(str(ExtMap(1, Direction.SendRecv)), "1/sendrecv")
        self.assertEqual(str(ExtMap(1, ext_attr="short")), "1 short")

    def test_convert(self):
        extmap = ExtMap.unmarshal(EXAMPLE_ATTR_EXTMAP2)
        self.assertEqual(extmap.convert(),
                         Attribute("extmap", "2/sendrecv http://example.com/082005/ext.htm#xmeta short"))

    def test_immutable(self):
        extmap = ExtMap.unmarshal(EXAMPLE_ATTR_EXTMAP1)
        with self.assertRaises(AttributeError):
            extmap.value = 2


if __name__ == '__main__':
    unittest.main()
