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

import copy

import pytest

from openintent.models.parsing.document_parser import document_parser


ORDER_DOCUMENT = {
    "version": "1.0.0",
    "intents": [
        {
            "kind": "add_entity",
            "scope": "data",
            "entity": "Order",
            "fields": [{"name": "id", "type": "uuid", "required": True}],
        }
    ],
}

FULL_DOCUMENT = {
    "version": "1.0.0",
    "provenance": {
        "created_by": {"type": "agent", "name": "planner", "id": "agent-7"},
        "created_at": "2024-01-15T10:30:00Z",
        "source": "builder-ui",
        "model": "planner-large",
    },
    "intents": [
        {
            "kind": "add_entity",
            "scope": "data",
            "entity": "Order",
            "fields": [
                {"name": "id", "type": "uuid", "required": True, "unique": True},
                {"name": "note", "type": "text", "default": None},
                {"name": "code", "type": "string", "max_length": 32, "default": "N/A"},
                {"name": "tags", "type": "array", "array_type": "string"},
                {"name": "status", "type": "enum", "enum_values": ["open", "closed"], "default": "open"},
            ],
        },
        {
            "kind": "add_field",
            "scope": "data",
            "entity": "Order",
            "fields": [{"name": "total", "type": "decimal", "required": False}],
        },
        {
            "kind": "add_endpoint",
            "scope": "api",
            "method": "POST",
            "path": "/orders",
            "entity": "Order",
            "fields": [],
            "auth": {"required": True, "roles": ["admin", "clerk"]},
        },
        {
            "kind": "add_component",
            "scope": "ui",
            "component": "OrderList",
            "template": "List",
            "entity": "Order",
            "display_fields": ["id", "status"],
            "route": "/orders",
        },
        {
            "kind": "x-acme.audit_log",
            "scope": "ops",
            "payload": {"retention_days": 30, "targets": ["Order"], "nested": {"a": [1, 2]}},
        },
    ],
}


@pytest.fixture
def order_document():
    return copy.deepcopy(ORDER_DOCUMENT)


@pytest.fixture
def full_document():
    return copy.deepcopy(FULL_DOCUMENT)


@pytest.fixture
def make_document():
    """Wrap intents in an otherwise valid document."""

    def _make(*intents, **top_level):
        document = {"version": "1.0.0", "intents": list(intents)}
        document.update(top_level)
        return document

    return _make


@pytest.fixture
def entity_with_field():
    """An add_entity intent holding a single field spec."""

    def _make(**field_spec):
        spec = {"name": "value"}
        spec.update(field_spec)
        return {"kind": "add_entity", "scope": "data", "entity": "Order", "fields": [spec]}

    return _make


@pytest.fixture(autouse=True)
def _clear_document_cache():
    document_parser.clear_cache()
    yield
    document_parser.clear_cache()
