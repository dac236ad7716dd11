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

import io
import re
from typing import BinaryIO, Tuple, Union

from . import Config as CONFIG
from .SdpErrors import NumericConversionError, SdpSyntaxError, TextEncodingError

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class ByteCursor:
    """Two-phase lookahead over a seekable binary stream.

    Bytes are pulled one at a time; a pulled byte can be given back with
    rewind() before the next read.
    """
    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> bytes:
        return self.stream.read(1)

    def rewind(self, count: int = 1) -> None:
        self.stream.seek(-count, io.SEEK_CUR)

    def read_through(self, delimiter: bytes) -> bytes:
        """Read up to and including delimiter, or to the end of the stream."""
        buf = bytearray()
        while True:
            b = self.stream.read(1)
            if not b:
                break
            buf += b
            if b == delimiter:
                break
        return bytes(buf)

    def read_line(self) -> bytes:
        return self.stream.readline()


def _cursor(reader: Union[ByteCursor, BinaryIO]) -> ByteCursor:
    if isinstance(reader, ByteCursor):
        return reader
    return ByteCursor(reader)


def _decode(raw: bytes) -> str:
    try:
        return raw.decode(CONFIG.TEXT_ENCODING)
    except UnicodeDecodeError as err:
        raise TextEncodingError(f"invalid {CONFIG.TEXT_ENCODING} text: {raw!r}", raw) from err


def read_type(reader: Union[ByteCursor, BinaryIO]) -> Tuple[str, int]:
    """Read the "x=" type tag of the next line.

    Returns ("", 0) at the end of the input.
    """
    cursor = _cursor(reader)
    while True:
        b = cursor.read_byte()
        if not b:
            return "", 0
        if b in (b"\r", b"\n"):
            continue
        cursor.rewind()

        raw = cursor.read_through(b"=")
        if not raw:
            return "", 0

        key = _decode(raw)
        # one ASCII letter then "="
        if len(raw) != 2 or not raw[:1].isalpha() or raw[1:] != b"=":
            raise SdpSyntaxError(f"invalid line type {key!r}", raw)
        return key, len(raw)


def read_value(reader: Union[ByteCursor, BinaryIO]) -> Tuple[str, int]:
    """Read the rest of the current line.

    The byte count is taken before trimming.
    """
    raw = _cursor(reader).read_line()
    return _decode(raw).strip(), len(raw)


def parse_int(token: str, minimum: int, maximum: int, signed: bool = False) -> int:
    pattern = _SIGNED_INT if signed else _UNSIGNED_INT
    if not pattern.fullmatch(token):
        raise NumericConversionError(f"invalid number {token!r}", token)
    value = int(token)
    if value < minimum or value > maximum:
        raise NumericConversionError(f"number {token} out of range {minimum}-{maximum}", token)
    return value
