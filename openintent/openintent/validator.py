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

"""Document validator.

``check_*`` functions never raise on malformed input; they return a
:class:`ValidationResult`. ``validate_*`` functions return the typed value
or raise :class:`~openintent.exceptions.ValidationError` carrying every
issue found. All of them are pure: no I/O, no logging, no mutation of the
input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .exceptions import SchemaDefinitionError, ValidationError
from .models.intent_document import FieldSpec, Intent, IntentDocument, parse_intent
from .models.intent_schema import FIELD_SPEC_SCHEMA, INTENT_DOCUMENT_SCHEMA, INTENT_SCHEMA
from .models.schema_spec import SCHEMA_SPEC_TYPES, WARNING, SchemaIssue, SchemaSpec, validate_spec


T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of one validation pass.

    ``issues`` are violations (any issue rejects the input); ``warnings``
    report keys that were accepted but dropped from the typed value.
    """

    value: Optional[T] = None
    issues: Tuple[SchemaIssue, ...] = ()
    warnings: Tuple[SchemaIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    def unwrap(self) -> T:
        """Return the typed value, or raise ValidationError with all issues."""
        if self.issues:
            raise ValidationError(issues=self.issues)
        return self.value


def validate_against_schema(data: Any, *, schema: SchemaSpec) -> List[SchemaIssue]:
    """Check data against a schema node and return all issues and warnings."""
    if not isinstance(schema, SCHEMA_SPEC_TYPES):
        raise SchemaDefinitionError(
            f"Expected a schema spec, got {type(schema).__name__}"
        )
    return validate_spec(schema, data)


def _check(data: Any, schema: SchemaSpec, build: Callable[[Any], T]) -> ValidationResult[T]:
    found = validate_against_schema(data, schema=schema)
    issues = tuple(i for i in found if i.severity != WARNING)
    warnings = tuple(i for i in found if i.severity == WARNING)
    if issues:
        return ValidationResult(issues=issues, warnings=warnings)
    return ValidationResult(value=build(data), warnings=warnings)


def check_document(data: Any) -> ValidationResult[IntentDocument]:
    return _check(data, INTENT_DOCUMENT_SCHEMA, IntentDocument.from_dict)


def check_intent(data: Any) -> ValidationResult[Intent]:
    return _check(data, INTENT_SCHEMA, parse_intent)


def check_field_spec(data: Any) -> ValidationResult[FieldSpec]:
    return _check(data, FIELD_SPEC_SCHEMA, FieldSpec.from_dict)


def validate_document(data: Any) -> IntentDocument:
    """Validate an untyped document (e.g. decoded JSON).

    Returns:
        The typed document.

    Raises:
        ValidationError: With every violation in the document, in order.
    """
    return check_document(data).unwrap()


def validate_intent(data: Any) -> Intent:
    """Validate a single intent; paths in issues are relative to the intent."""
    return check_intent(data).unwrap()


def validate_field_spec(data: Any) -> FieldSpec:
    """Validate a single field spec; paths in issues are relative to the field."""
    return check_field_spec(data).unwrap()


def is_valid_document(data: Any) -> bool:
    return check_document(data).ok
