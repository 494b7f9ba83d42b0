# Copyright 2025 Google LLC
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
# ==============================================================================

import re
from dataclasses import fields
from typing import Any, Literal

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_to_camel(key: str) -> str:
    first, *rest = key.split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def camel_to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def convert_keys(
    data: Any, direction: Literal["snake_to_camel", "camel_to_snake"]
) -> Any:
    """
    Recursively converts the dictionary keys of `data` between snake_case
    (Python dataclasses) and camelCase (Firestore documents and client payloads).

    Values that are not dicts or lists, including Firestore sentinels such as
    SERVER_TIMESTAMP, are returned untouched.
    """
    if direction == "snake_to_camel":
        convert = snake_to_camel
    elif direction == "camel_to_snake":
        convert = camel_to_snake
    else:
        raise ValueError(f"Unknown key conversion direction: {direction}")

    def _convert(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                convert(k) if isinstance(k, str) else k: _convert(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [_convert(item) for item in value]
        return value

    return _convert(data)


def to_document(obj: Any) -> dict:
    """
    Converts a flat dataclass into Firestore document fields with camelCase keys.

    Unlike `dataclasses.asdict`, values are not deep-copied, so Firestore
    sentinels such as SERVER_TIMESTAMP keep their identity.
    """
    return {snake_to_camel(f.name): getattr(obj, f.name) for f in fields(obj)}
