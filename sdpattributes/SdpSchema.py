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

import json
import os
from functools import lru_cache
from typing import Dict, List

from jsonschema import Draft7Validator, ValidationError

from . import Config as CONFIG
from .SdpCodec import Codec
from .SdpDirection import Direction
from .SdpErrors import RecordValidationError
from .SdpExtmap import ExtMap, parse_uri


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict:
    with open(os.path.join(CONFIG.SCHEMA_PATH, f"{name}.json"), encoding="utf-8") as f:
        schema = json.load(f)
    Draft7Validator.check_schema(schema)
    return schema


def validate_record(record: dict, name: str) -> None:
    try:
        Draft7Validator(load_schema(name)).validate(record)
    except ValidationError as e:
        raise RecordValidationError(f"{name} record does not match schema: {e.message}",
                                    json.dumps(record, default=str)) from e


def extmap_to_json(extmap: ExtMap) -> dict:
    record = {
        "value": extmap.value,
        "direction": str(extmap.direction),
        "uri": extmap.uri,
        "ext_attr": extmap.ext_attr,
    }
    validate_record(record, "extmap")
    return record


def extmap_from_json(record: dict) -> ExtMap:
    validate_record(record, "extmap")
    uri = record["uri"]
    if uri is not None:
        uri = parse_uri(uri)
    return ExtMap(record["value"], Direction(record["direction"]), uri, record["ext_attr"])


def codec_to_json(codec: Codec) -> dict:
    record = {
        "payload_type": codec.payload_type,
        "name": codec.name,
        "clock_rate": codec.clock_rate,
        "encoding_parameters": codec.encoding_parameters,
        "fmtp": codec.fmtp,
        "rtcp_feedback": list(codec.rtcp_feedback),
    }
    validate_record(record, "codec")
    return record


def codec_from_json(record: dict) -> Codec:
    validate_record(record, "codec")
    return Codec(**record)


def codec_table_to_json(codecs: Dict[int, Codec]) -> List[dict]:
    """Export a codec table ordered by payload type."""
    return [codec_to_json(codecs[pt]) for pt in sorted(codecs)]
