# Copyright 2025 CrownOps Engineering
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

"""Canonical JSON types and helpers used across jslintr.

Values cross the sandbox boundary as JSON text in both directions, so this
module owns the encode/decode rules for option values and diagnostic
payloads. It has no dependencies on logging, configuration, or CLI layers.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

__all__ = [
    "JSONValue",
    "decode_records",
    "encode_option_value",
    "normalize_enums_for_json",
]

JSONValue: TypeAlias = JsonValue
JSONList = list[JsonValue]


def encode_option_value(value: object) -> str:
    """Encode an option value as JSON text for injection into the sandbox.

    Values are passed through without validation. Anything the ``json``
    module cannot represent is sent as its string form.

    Args:
        value: Option value as stored in the configuration.

    Returns:
        JSON text that ``JSON.parse`` evaluates back to the value.
    """
    return json.dumps(normalize_enums_for_json(value), ensure_ascii=False)


def decode_records(payload: str) -> JSONList:
    """Parse the diagnostics payload reported from inside the sandbox.

    Args:
        payload: JSON text produced by ``JSON.stringify`` on the engine's
            error list.

    Returns:
        The decoded list of records (entries may be any JSON value).

    Raises:
        ValueError: If the payload is not valid JSON or not a JSON array.
    """
    data: object = json.loads(payload) if payload.strip() else []
    if data is None:
        return []
    if not isinstance(data, list):
        message = f"Expected a JSON array of diagnostics, got {type(data).__name__}"
        raise ValueError(message)  # noqa: TRY004
    return cast("JSONList", data)


def normalize_enums_for_json(value: object) -> JSONValue:
    """Make ``value`` safe for ``json.dumps``.

    Enum keys and values become their ``.value``, tuples become lists and
    anything else that JSON cannot hold becomes ``str(obj)``.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            mapping_obj = cast("dict[object, object]", obj)
            return {
                str(key.value) if isinstance(key, Enum) else str(key): _convert(raw_val)
                for key, raw_val in mapping_obj.items()
            }
        if isinstance(obj, (list, tuple)):
            return [_convert(item) for item in cast("list[object]", obj)]
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast("JSONValue", obj)
        return str(obj)

    return _convert(value)
