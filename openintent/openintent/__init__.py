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

"""OpenIntent document schema and validator."""

# OpenIntent format version understood by this package
FORMAT_VERSION = "1.0.0"

from .exceptions import (  # noqa: E402
    DocumentLoadError,
    FormatVersionError,
    OpenIntentError,
    SchemaDefinitionError,
    ValidationError,
)
from .models import (  # noqa: E402
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
    SchemaIssue,
)
from .validator import (  # noqa: E402
    ValidationResult,
    check_document,
    check_field_spec,
    check_intent,
    is_valid_document,
    validate_document,
    validate_field_spec,
    validate_intent,
)

__all__ = [
    "FORMAT_VERSION",
    "DocumentLoadError",
    "FormatVersionError",
    "OpenIntentError",
    "SchemaDefinitionError",
    "ValidationError",
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
    "SchemaIssue",
    "ValidationResult",
    "check_document",
    "check_field_spec",
    "check_intent",
    "is_valid_document",
    "validate_document",
    "validate_field_spec",
    "validate_intent",
]
