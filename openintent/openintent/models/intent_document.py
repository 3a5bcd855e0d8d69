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

"""Typed OpenIntent document model.

The classes here are built from data that already passed validation
(see ``openintent.validator``); ``from_dict`` does not re-check shapes.
Optional keys that are absent stay absent in ``to_dict`` output, except
for keys with a schema default (``created_by.type``, ``auth.required``,
``template``), which are filled in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from ..utils.field_types import DEFAULT_COMPONENT_TEMPLATE, DEFAULT_CREATOR_TYPE
from ..utils.format_version import SemanticVersion, parse_format_version
from .intent_schema import (
    EXTENSION_KIND_PREFIX,
    KIND_ADD_COMPONENT,
    KIND_ADD_ENDPOINT,
    KIND_ADD_ENTITY,
    KIND_ADD_FIELD,
    SCOPE_API,
    SCOPE_DATA,
    SCOPE_UI,
)


class _Unset:
    """Marker for an optional key that is absent (distinct from ``None``)."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Unset":
        return self


UNSET: Any = _Unset()

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _copy_json(value: Any) -> Any:
    """Copy nested dicts and lists with an explicit stack; other values are shared.

    ``payload`` and ``default`` have no depth limit. Shared and cyclic
    references keep their shape in the copy.
    """
    if not isinstance(value, (dict, list)):
        return value
    root: Any = {} if isinstance(value, dict) else []
    memo = {id(value): root}
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        items = source.items() if isinstance(source, dict) else enumerate(source)
        for key, item in items:
            child = item
            if isinstance(item, (dict, list)):
                child = memo.get(id(item))
                if child is None:
                    child = {} if isinstance(item, dict) else []
                    memo[id(item)] = child
                    stack.append((item, child))
            if isinstance(target, dict):
                target[key] = child
            else:
                target.append(child)
    return root


def _put(out: Dict[str, Any], key: str, value: Any) -> None:
    if value is not None and value is not UNSET:
        out[key] = value


def _str_tuple(values: Optional[List[str]]) -> Optional[Tuple[str, ...]]:
    return tuple(values) if values is not None else None


# -------------------------
# FieldSpec
# -------------------------


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: str
    required: Optional[bool] = None
    unique: Optional[bool] = None
    default: Any = UNSET
    max_length: Optional[int] = None
    array_type: Optional[str] = None
    enum_values: Optional[Tuple[str, ...]] = None

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldSpec":
        max_length = data.get("max_length")
        return cls(
            name=data["name"],
            type=data["type"],
            required=data.get("required"),
            unique=data.get("unique"),
            default=_copy_json(data["default"]) if "default" in data else UNSET,
            max_length=int(max_length) if max_length is not None else None,
            array_type=data.get("array_type"),
            enum_values=_str_tuple(data.get("enum_values")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "type": self.type}
        _put(out, "required", self.required)
        _put(out, "unique", self.unique)
        if self.has_default:
            # null is a legitimate default value
            out["default"] = _copy_json(self.default)
        _put(out, "max_length", self.max_length)
        _put(out, "array_type", self.array_type)
        if self.enum_values is not None:
            out["enum_values"] = list(self.enum_values)
        return out


def _fields_from(data: Optional[List[Dict[str, Any]]]) -> Optional[Tuple[FieldSpec, ...]]:
    if data is None:
        return None
    return tuple(FieldSpec.from_dict(item) for item in data)


def _fields_to(fields: Optional[Tuple[FieldSpec, ...]]) -> Optional[List[Dict[str, Any]]]:
    if fields is None:
        return None
    return [f.to_dict() for f in fields]


# -------------------------
# Provenance
# -------------------------


@dataclass(frozen=True)
class CreatedBy:
    type: str = DEFAULT_CREATOR_TYPE
    name: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CreatedBy":
        return cls(
            type=data.get("type", DEFAULT_CREATOR_TYPE),
            name=data.get("name"),
            id=data.get("id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        _put(out, "name", self.name)
        _put(out, "id", self.id)
        return out


@dataclass(frozen=True)
class Provenance:
    created_by: Optional[CreatedBy] = None
    created_at: Optional[str] = None
    source: Optional[str] = None
    model: Optional[str] = None

    @property
    def created_at_datetime(self) -> Optional[datetime]:
        """``created_at`` as an aware UTC datetime.

        Raises ValueError for pattern-valid but impossible dates
        (e.g. month 13), which the format itself does not reject.
        """
        if self.created_at is None:
            return None
        return datetime.strptime(self.created_at, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Provenance":
        created_by = data.get("created_by")
        return cls(
            created_by=CreatedBy.from_dict(created_by) if created_by is not None else None,
            created_at=data.get("created_at"),
            source=data.get("source"),
            model=data.get("model"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.created_by is not None:
            out["created_by"] = self.created_by.to_dict()
        _put(out, "created_at", self.created_at)
        _put(out, "source", self.source)
        _put(out, "model", self.model)
        return out


# -------------------------
# Intents
# -------------------------


@dataclass(frozen=True)
class AddEntityIntent:
    entity: str
    fields: Tuple[FieldSpec, ...]
    kind: str = field(default=KIND_ADD_ENTITY, init=False)
    scope: str = field(default=SCOPE_DATA, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddEntityIntent":
        return cls(entity=data["entity"], fields=_fields_from(data["fields"]))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "scope": self.scope,
            "entity": self.entity,
            "fields": _fields_to(self.fields),
        }


@dataclass(frozen=True)
class AddFieldIntent:
    entity: str
    fields: Tuple[FieldSpec, ...]
    kind: str = field(default=KIND_ADD_FIELD, init=False)
    scope: str = field(default=SCOPE_DATA, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddFieldIntent":
        return cls(entity=data["entity"], fields=_fields_from(data["fields"]))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "scope": self.scope,
            "entity": self.entity,
            "fields": _fields_to(self.fields),
        }


@dataclass(frozen=True)
class EndpointAuth:
    required: bool = False
    roles: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EndpointAuth":
        return cls(required=data.get("required", False), roles=_str_tuple(data.get("roles")))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"required": self.required}
        if self.roles is not None:
            out["roles"] = list(self.roles)
        return out


@dataclass(frozen=True)
class AddEndpointIntent:
    method: str
    path: str
    entity: Optional[str] = None
    fields: Optional[Tuple[FieldSpec, ...]] = None
    auth: Optional[EndpointAuth] = None
    kind: str = field(default=KIND_ADD_ENDPOINT, init=False)
    scope: str = field(default=SCOPE_API, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddEndpointIntent":
        auth = data.get("auth")
        return cls(
            method=data["method"],
            path=data["path"],
            entity=data.get("entity"),
            fields=_fields_from(data.get("fields")),
            auth=EndpointAuth.from_dict(auth) if auth is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "kind": self.kind,
            "scope": self.scope,
            "method": self.method,
            "path": self.path,
        }
        _put(out, "entity", self.entity)
        _put(out, "fields", _fields_to(self.fields))
        if self.auth is not None:
            out["auth"] = self.auth.to_dict()
        return out


@dataclass(frozen=True)
class AddComponentIntent:
    component: str
    template: str = DEFAULT_COMPONENT_TEMPLATE
    entity: Optional[str] = None
    display_fields: Optional[Tuple[str, ...]] = None
    route: Optional[str] = None
    kind: str = field(default=KIND_ADD_COMPONENT, init=False)
    scope: str = field(default=SCOPE_UI, init=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddComponentIntent":
        return cls(
            component=data["component"],
            template=data.get("template", DEFAULT_COMPONENT_TEMPLATE),
            entity=data.get("entity"),
            display_fields=_str_tuple(data.get("display_fields")),
            route=data.get("route"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "kind": self.kind,
            "scope": self.scope,
            "component": self.component,
            "template": self.template,
        }
        _put(out, "entity", self.entity)
        if self.display_fields is not None:
            out["display_fields"] = list(self.display_fields)
        _put(out, "route", self.route)
        return out


@dataclass(frozen=True)
class ExtensionIntent:
    """Vendor or project specific intent; ``payload`` is not interpreted."""

    kind: str
    scope: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def namespace(self) -> str:
        """The kind without its ``x-`` prefix."""
        return self.kind[len(EXTENSION_KIND_PREFIX):]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtensionIntent":
        return cls(kind=data["kind"], scope=data["scope"], payload=_copy_json(data["payload"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "scope": self.scope, "payload": _copy_json(self.payload)}


Intent = Union[AddEntityIntent, AddFieldIntent, AddEndpointIntent, AddComponentIntent, ExtensionIntent]

INTENT_TYPES: Dict[str, Type[Any]] = {
    KIND_ADD_ENTITY: AddEntityIntent,
    KIND_ADD_FIELD: AddFieldIntent,
    KIND_ADD_ENDPOINT: AddEndpointIntent,
    KIND_ADD_COMPONENT: AddComponentIntent,
}


def parse_intent(data: Dict[str, Any]) -> Intent:
    """Build the typed variant for a validated intent mapping."""
    kind = data["kind"]
    intent_type = INTENT_TYPES.get(kind)
    if intent_type is not None:
        return intent_type.from_dict(data)
    if kind.startswith(EXTENSION_KIND_PREFIX):
        return ExtensionIntent.from_dict(data)
    raise ValueError(f"Unknown intent kind: {kind!r}")


# -------------------------
# Document
# -------------------------


@dataclass(frozen=True)
class IntentDocument:
    version: str
    intents: Tuple[Intent, ...]
    provenance: Optional[Provenance] = None

    @property
    def semantic_version(self) -> SemanticVersion:
        return parse_format_version(self.version)

    @property
    def scopes(self) -> Tuple[str, ...]:
        """Scopes touched by the document, in first-seen order."""
        return tuple(dict.fromkeys(intent.scope for intent in self.intents))

    def intents_of(self, kind: str) -> Tuple[Intent, ...]:
        return tuple(intent for intent in self.intents if intent.kind == kind)

    @property
    def extensions(self) -> Tuple[ExtensionIntent, ...]:
        return tuple(intent for intent in self.intents if isinstance(intent, ExtensionIntent))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IntentDocument":
        provenance = data.get("provenance")
        return cls(
            version=data["version"],
            intents=tuple(parse_intent(item) for item in data["intents"]),
            provenance=Provenance.from_dict(provenance) if provenance is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"version": self.version}
        if self.provenance is not None:
            out["provenance"] = self.provenance.to_dict()
        out["intents"] = [intent.to_dict() for intent in self.intents]
        return out
