# Copyright 2026 TIER IV, inc.
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

from __future__ import annotations

from typing import Any


FIELD_TYPES = (
    "string",
    "text",
    "integer",
    "bigint",
    "float",
    "decimal",
    "boolean",
    "datetime",
    "date",
    "time",
    "uuid",
    "json",
    "enum",
    "array",
    "bytes",
)

# Element types allowed for ``type: array``. Temporal, structured and binary
# types are excluded.
ARRAY_ELEMENT_TYPES = (
    "string",
    "text",
    "integer",
    "bigint",
    "float",
    "decimal",
    "boolean",
    "uuid",
)

ARRAY_TYPE = "array"
ENUM_TYPE = "enum"

HTTP_METHODS = ("GET", "POST", "PATCH", "DELETE")
COMPONENT_TEMPLATES = ("List", "Form", "Custom")
CREATOR_TYPES = ("human", "agent", "system")

DEFAULT_COMPONENT_TEMPLATE = "Custom"
DEFAULT_CREATOR_TYPE = "human"


def is_supported_field_type(type_name: Any) -> bool:
    return isinstance(type_name, str) and type_name in FIELD_TYPES
