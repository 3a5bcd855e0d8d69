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

"""Declarative schema nodes and the tree walk that checks data against them.

Schema nodes are small frozen dataclasses. ``validate_spec`` walks a value
alongside a schema node and returns every issue it finds; malformed input is
reported, never raised. Only a malformed schema node raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..exceptions import SchemaDefinitionError


Location = Tuple[Union[str, int], ...]

# Issue categories
STRUCTURAL = "structural"
CONDITIONAL = "conditional"
PATTERN = "pattern"
DISCRIMINATION = "discrimination"

# Issue severities
ERROR = "error"
WARNING = "warning"


def format_path(location: Iterable[Union[str, int]]) -> str:
    """Render a location as ``intents[2].fields[0].name``."""
    path = ""
    for token in location:
        if isinstance(token, int):
            path += f"[{token}]"
        elif path:
            path += f".{token}"
        else:
            path = str(token)
    return path


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def format_pointer(location: Iterable[Union[str, int]]) -> str:
    """Render a location as a JSON pointer (``/intents/2/fields/0``)."""
    return "".join(f"/{_jp_escape(str(token))}" for token in location)


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    location: Location = ()
    category: str = STRUCTURAL
    severity: str = ERROR

    @property
    def path(self) -> str:
        return format_path(self.location)

    @property
    def pointer(self) -> str:
        return format_pointer(self.location)

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message, "category": self.category}

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


# -------------------------
# Schema nodes
# -------------------------


@dataclass(frozen=True)
class TypeSpec:
    types: Tuple[type, ...]


@dataclass(frozen=True)
class StringSpec:
    min_length: int = 0
    # ECMA-262 style pattern, searched (not full-matched) like JSON Schema does
    pattern: Optional[str] = None
    pattern_message: Optional[str] = None


@dataclass(frozen=True)
class IntegerSpec:
    positive: bool = False


@dataclass(frozen=True)
class EnumSpec:
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class LiteralSpec:
    value: Any


@dataclass(frozen=True)
class ListSpec:
    item: "SchemaSpec"
    min_items: int = 0


@dataclass(frozen=True)
class MappingSpec:
    value: "SchemaSpec"


@dataclass(frozen=True)
class PropertySpec:
    spec: "SchemaSpec"
    required: bool = False


SemanticCheck = Callable[[Dict[str, Any], Location], Iterable[SchemaIssue]]


@dataclass(frozen=True)
class ObjectSpec:
    properties: Dict[str, PropertySpec]

    # Unknown keys are errors unless allowed; allowed unknown keys are
    # reported as warnings and dropped from the typed value.
    allow_extra: bool = False

    # Cross-field rules, run after the per-property checks
    semantic_checks: Tuple[SemanticCheck, ...] = ()


@dataclass(frozen=True)
class VariantSpec:
    """One branch of a union, selected by an exact tag or a tag prefix."""

    spec: ObjectSpec
    tag: Optional[str] = None
    tag_prefix: Optional[str] = None

    def __post_init__(self):
        if (self.tag is None) == (self.tag_prefix is None):
            raise SchemaDefinitionError("VariantSpec needs exactly one of 'tag' or 'tag_prefix'")

    def matches(self, tag_value: Any) -> bool:
        if not isinstance(tag_value, str):
            return False
        if self.tag is not None:
            return tag_value == self.tag
        return tag_value.startswith(self.tag_prefix)

    def describe(self) -> str:
        if self.tag is not None:
            return repr(self.tag)
        return f"'{self.tag_prefix}...'"


@dataclass(frozen=True)
class DiscriminatedUnionSpec:
    discriminator: str
    variants: Tuple[VariantSpec, ...]

    def select(self, value: Dict[str, Any]) -> Optional[VariantSpec]:
        """Return the first variant whose tag matches, in declaration order."""
        tag_value = value.get(self.discriminator)
        for variant in self.variants:
            if variant.matches(tag_value):
                return variant
        return None

    def describe(self) -> str:
        return ", ".join(v.describe() for v in self.variants)


SchemaSpec = Union[
    TypeSpec,
    StringSpec,
    IntegerSpec,
    EnumSpec,
    LiteralSpec,
    ListSpec,
    MappingSpec,
    ObjectSpec,
    DiscriminatedUnionSpec,
]

SCHEMA_SPEC_TYPES = (
    TypeSpec,
    StringSpec,
    IntegerSpec,
    EnumSpec,
    LiteralSpec,
    ListSpec,
    MappingSpec,
    ObjectSpec,
    DiscriminatedUnionSpec,
)


# -------------------------
# Helpers
# -------------------------


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile an ECMA-262 style pattern for use with ``re.search``.

    ``\\d`` is ASCII-only and a trailing ``$`` anchors at the very end of the
    string, as in ECMA-262 without the multiline flag.
    """
    if pattern.endswith("$") and not pattern.endswith("\\$"):
        pattern = pattern[:-1] + r"\Z"
    return re.compile(pattern, re.ASCII)


def _is_instance(value: Any, types: Tuple[type, ...]) -> bool:
    # bool is an int subclass; only accept it where it was asked for
    if isinstance(value, bool) and bool not in types and object not in types:
        return False
    return isinstance(value, types)


def _type_name(types: Tuple[type, ...]) -> str:
    return " | ".join(t.__name__ for t in types)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _invalid_type(expected: str, value: Any, location: Location) -> List[SchemaIssue]:
    return [
        SchemaIssue(
            message=f"Invalid type: expected {expected}, received {_json_type_name(value)}",
            location=location,
        )
    ]


def is_integral(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


# -------------------------
# Tree walk
# -------------------------


def validate_spec(spec: SchemaSpec, value: Any, location: Location = ()) -> List[SchemaIssue]:
    """Check *value* against *spec* and return every issue found.

    Issues are ordered as the document reads: missing required keys of an
    object first, then each present key in input order, then the object's
    semantic checks.
    """
    if isinstance(spec, TypeSpec):
        if not _is_instance(value, spec.types):
            return _invalid_type(_type_name(spec.types), value, location)
        return []

    if isinstance(spec, StringSpec):
        if not isinstance(value, str):
            return _invalid_type("string", value, location)
        if len(value) < spec.min_length:
            return [
                SchemaIssue(
                    message=f"String must contain at least {spec.min_length} character(s)",
                    location=location,
                )
            ]
        if spec.pattern is not None and compile_pattern(spec.pattern).search(value) is None:
            message = spec.pattern_message or f"String does not match pattern '{spec.pattern}'"
            return [SchemaIssue(message=message, location=location, category=PATTERN)]
        return []

    if isinstance(spec, IntegerSpec):
        if not is_integral(value):
            return _invalid_type("integer", value, location)
        if spec.positive and value <= 0:
            return [SchemaIssue(message="Number must be greater than 0", location=location)]
        return []

    if isinstance(spec, EnumSpec):
        if not any(type(value) is type(v) and value == v for v in spec.values):
            allowed = " | ".join(repr(v) for v in spec.values)
            return [
                SchemaIssue(
                    message=f"Invalid enum value {value!r}: expected {allowed}",
                    location=location,
                )
            ]
        return []

    if isinstance(spec, LiteralSpec):
        if type(value) is not type(spec.value) or value != spec.value:
            return [
                SchemaIssue(
                    message=f"Invalid literal value {value!r}: expected {spec.value!r}",
                    location=location,
                    category=DISCRIMINATION,
                )
            ]
        return []

    if isinstance(spec, ListSpec):
        if not isinstance(value, list):
            return _invalid_type("array", value, location)
        issues: List[SchemaIssue] = []
        if len(value) < spec.min_items:
            issues.append(
                SchemaIssue(
                    message=f"Array must contain at least {spec.min_items} element(s)",
                    location=location,
                )
            )
        for idx, item in enumerate(value):
            issues.extend(validate_spec(spec.item, item, location + (idx,)))
        return issues

    if isinstance(spec, MappingSpec):
        if not isinstance(value, dict):
            return _invalid_type("object", value, location)
        issues = []
        for key, item in value.items():
            if not isinstance(key, str):
                issues.append(
                    SchemaIssue(message=f"Invalid key {key!r}: expected string", location=location)
                )
                continue
            issues.extend(validate_spec(spec.value, item, location + (key,)))
        return issues

    if isinstance(spec, ObjectSpec):
        if not isinstance(value, dict):
            return _invalid_type("object", value, location)
        issues = []
        for name, prop in spec.properties.items():
            if prop.required and name not in value:
                issues.append(
                    SchemaIssue(message=f"Missing required field '{name}'", location=location + (name,))
                )
        for name, item in value.items():
            prop = spec.properties.get(name) if isinstance(name, str) else None
            if prop is None:
                if spec.allow_extra:
                    issues.append(
                        SchemaIssue(
                            message=f"Unknown field '{name}' is ignored",
                            location=location + (str(name),),
                            severity=WARNING,
                        )
                    )
                else:
                    issues.append(
                        SchemaIssue(message=f"Unknown field '{name}'", location=location + (str(name),))
                    )
                continue
            issues.extend(validate_spec(prop.spec, item, location + (name,)))
        for check in spec.semantic_checks:
            issues.extend(check(value, location))
        return issues

    if isinstance(spec, DiscriminatedUnionSpec):
        if not isinstance(value, dict):
            return _invalid_type("object", value, location)
        variant = spec.select(value)
        if variant is None:
            # One report for the element, not one per variant
            if spec.discriminator not in value:
                message = f"Missing discriminator '{spec.discriminator}': expected one of {spec.describe()}"
            else:
                message = (
                    f"Unrecognized {spec.discriminator} {value[spec.discriminator]!r}: "
                    f"expected one of {spec.describe()}"
                )
            return [SchemaIssue(message=message, location=location, category=DISCRIMINATION)]
        return validate_spec(variant.spec, value, location)

    raise SchemaDefinitionError(f"Unknown schema spec type: {type(spec).__name__}")
