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

"""Schema definitions and the typed document model.

Schema and model modules do no I/O so that validation stays independent
of how documents are stored or transported; file loading lives in
``models.parsing``.
"""

from .schema_spec import SchemaIssue, validate_spec
from .intent_schema import INTENT_DOCUMENT_SCHEMA, INTENT_SCHEMA, FIELD_SPEC_SCHEMA
from .intent_document import (
    UNSET,
    AddComponentIntent,
    AddEndpointIntent,
    AddEntityIntent,
    AddFieldIntent,
    CreatedBy,
    EndpointAuth,
    ExtensionIntent,
    FieldSpec,
    Intent,
    IntentDocument,
    Provenance,
    parse_intent,
)

__all__ = [
    "SchemaIssue",
    "validate_spec",
    "INTENT_DOCUMENT_SCHEMA",
    "INTENT_SCHEMA",
    "FIELD_SPEC_SCHEMA",
    "UNSET",
    "AddComponentIntent",
    "AddEndpointIntent",
    "AddEntityIntent",
    "AddFieldIntent",
    "CreatedBy",
    "EndpointAuth",
    "ExtensionIntent",
    "FieldSpec",
    "Intent",
    "IntentDocument",
    "Provenance",
    "parse_intent",
]
