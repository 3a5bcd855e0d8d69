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

"""Schema definition of the OpenIntent document format."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..utils.field_types import (
    ARRAY_ELEMENT_TYPES,
    ARRAY_TYPE,
    COMPONENT_TEMPLATES,
    CREATOR_TYPES,
    ENUM_TYPE,
    FIELD_TYPES,
    HTTP_METHODS,
    is_supported_field_type,
)
from ..utils.format_version import VERSION_PATTERN
from .schema_spec import (
    CONDITIONAL,
    DiscriminatedUnionSpec,
    EnumSpec,
    IntegerSpec,
    ListSpec,
    LiteralSpec,
    Location,
    MappingSpec,
    ObjectSpec,
    PropertySpec,
    SchemaIssue,
    StringSpec,
    TypeSpec,
    VariantSpec,
)


TIMESTAMP_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$"
EXTENSION_KIND_PATTERN = r"^x-[a-z0-9_.-]+$"
EXTENSION_KIND_PREFIX = "x-"
ENDPOINT_PATH_PATTERN = r"^/"

KIND_ADD_ENTITY = "add_entity"
KIND_ADD_FIELD = "add_field"
KIND_ADD_ENDPOINT = "add_endpoint"
KIND_ADD_COMPONENT = "add_component"

SCOPE_DATA = "data"
SCOPE_API = "api"
SCOPE_UI = "ui"


_STR = StringSpec()
_NON_EMPTY_STR = StringSpec(min_length=1)
_BOOL = TypeSpec((bool,))
_ANY = TypeSpec((object,))
_STR_LIST = ListSpec(_STR)


def _required(spec) -> PropertySpec:
    return PropertySpec(spec, required=True)


def _optional(spec) -> PropertySpec:
    return PropertySpec(spec, required=False)


# -------------------------
# FieldSpec
# -------------------------


def _field_spec_semantics(field_spec: Dict[str, Any], location: Location) -> Iterable[SchemaIssue]:
    """``array_type`` iff ``type == 'array'``; non-empty ``enum_values`` iff ``type == 'enum'``."""
    field_type = field_spec.get("type")
    if not is_supported_field_type(field_type):
        # The invalid type itself is already reported
        return []

    issues: List[SchemaIssue] = []

    if field_type == ARRAY_TYPE and "array_type" not in field_spec:
        issues.append(
            SchemaIssue(
                message="array_type is required when type is 'array'",
                location=location + ("array_type",),
                category=CONDITIONAL,
            )
        )
    elif field_type != ARRAY_TYPE and "array_type" in field_spec:
        issues.append(
            SchemaIssue(
                message=f"array_type is only allowed when type is 'array' (type is '{field_type}')",
                location=location + ("array_type",),
                category=CONDITIONAL,
            )
        )

    if field_type == ENUM_TYPE:
        enum_values = field_spec.get("enum_values")
        if "enum_values" not in field_spec:
            issues.append(
                SchemaIssue(
                    message="enum_values is required when type is 'enum'",
                    location=location + ("enum_values",),
                    category=CONDITIONAL,
                )
            )
        elif isinstance(enum_values, list) and not enum_values:
            issues.append(
                SchemaIssue(
                    message="enum_values must not be empty when type is 'enum'",
                    location=location + ("enum_values",),
                    category=CONDITIONAL,
                )
            )
    elif "enum_values" in field_spec:
        issues.append(
            SchemaIssue(
                message=f"enum_values is only allowed when type is 'enum' (type is '{field_type}')",
                location=location + ("enum_values",),
                category=CONDITIONAL,
            )
        )

    return issues


FIELD_SPEC_SCHEMA = ObjectSpec(
    properties={
        "name": _required(_NON_EMPTY_STR),
        "type": _required(EnumSpec(FIELD_TYPES)),
        "required": _optional(_BOOL),
        "unique": _optional(_BOOL),
        # Any value; not checked against "type"
        "default": _optional(_ANY),
        "max_length": _optional(IntegerSpec(positive=True)),
        "array_type": _optional(EnumSpec(ARRAY_ELEMENT_TYPES)),
        "enum_values": _optional(_STR_LIST),
    },
    allow_extra=True,
    semantic_checks=(_field_spec_semantics,),
)


# -------------------------
# Provenance
# -------------------------

CREATED_BY_SCHEMA = ObjectSpec(
    properties={
        "type": _optional(EnumSpec(CREATOR_TYPES)),
        "name": _optional(_STR),
        "id": _optional(_STR),
    },
    allow_extra=True,
)

PROVENANCE_SCHEMA = ObjectSpec(
    properties={
        "created_by": _optional(CREATED_BY_SCHEMA),
        "created_at": _optional(StringSpec(pattern=TIMESTAMP_PATTERN, pattern_message="ISO8601 UTC required")),
        "source": _optional(_STR),
        "model": _optional(_STR),
    },
)


# -------------------------
# Intents
# -------------------------

ADD_ENTITY_SCHEMA = ObjectSpec(
    properties={
        "kind": _required(LiteralSpec(KIND_ADD_ENTITY)),
        "scope": _required(LiteralSpec(SCOPE_DATA)),
        "entity": _required(_NON_EMPTY_STR),
        "fields": _required(ListSpec(FIELD_SPEC_SCHEMA, min_items=1)),
    },
)

ADD_FIELD_SCHEMA = ObjectSpec(
    properties={
        "kind": _required(LiteralSpec(KIND_ADD_FIELD)),
        "scope": _required(LiteralSpec(SCOPE_DATA)),
        "entity": _required(_NON_EMPTY_STR),
        "fields": _required(ListSpec(FIELD_SPEC_SCHEMA, min_items=1)),
    },
)

ENDPOINT_AUTH_SCHEMA = ObjectSpec(
    properties={
        "required": _optional(_BOOL),
        "roles": _optional(_STR_LIST),
    },
    allow_extra=True,
)

ADD_ENDPOINT_SCHEMA = ObjectSpec(
    properties={
        "kind": _required(LiteralSpec(KIND_ADD_ENDPOINT)),
        "scope": _required(LiteralSpec(SCOPE_API)),
        "method": _required(EnumSpec(HTTP_METHODS)),
        "path": _required(StringSpec(pattern=ENDPOINT_PATH_PATTERN, pattern_message="must start with '/'")),
        "entity": _optional(_STR),
        "fields": _optional(ListSpec(FIELD_SPEC_SCHEMA)),
        "auth": _optional(ENDPOINT_AUTH_SCHEMA),
    },
)

ADD_COMPONENT_SCHEMA = ObjectSpec(
    properties={
        "kind": _required(LiteralSpec(KIND_ADD_COMPONENT)),
        "scope": _required(LiteralSpec(SCOPE_UI)),
        "component": _required(_NON_EMPTY_STR),
        "template": _optional(EnumSpec(COMPONENT_TEMPLATES)),
        "entity": _optional(_STR),
        "display_fields": _optional(_STR_LIST),
        "route": _optional(_STR),
    },
)

EXTENSION_SCHEMA = ObjectSpec(
    properties={
        "kind": _required(
            StringSpec(
                pattern=EXTENSION_KIND_PATTERN,
                pattern_message=f"extension kind must match {EXTENSION_KIND_PATTERN}",
            )
        ),
        "scope": _required(_STR),
        "payload": _required(MappingSpec(_ANY)),
    },
)

# Variants are consulted in this order; tags are disjoint.
INTENT_SCHEMA = DiscriminatedUnionSpec(
    discriminator="kind",
    variants=(
        VariantSpec(ADD_ENTITY_SCHEMA, tag=KIND_ADD_ENTITY),
        VariantSpec(ADD_FIELD_SCHEMA, tag=KIND_ADD_FIELD),
        VariantSpec(ADD_ENDPOINT_SCHEMA, tag=KIND_ADD_ENDPOINT),
        VariantSpec(ADD_COMPONENT_SCHEMA, tag=KIND_ADD_COMPONENT),
        VariantSpec(EXTENSION_SCHEMA, tag_prefix=EXTENSION_KIND_PREFIX),
    ),
)


# -------------------------
# Document
# -------------------------

INTENT_DOCUMENT_SCHEMA = ObjectSpec(
    properties={
        "version": _required(StringSpec(pattern=VERSION_PATTERN, pattern_message="semver required")),
        "provenance": _optional(PROVENANCE_SCHEMA),
        "intents": _required(ListSpec(INTENT_SCHEMA, min_items=1)),
    },
)
