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

"""Naming convention linter for OpenIntent documents.

Findings are warnings: code generators accept any non-empty name, but
consistent naming keeps generated identifiers predictable. The linter reads
the raw document so it still helps on documents that fail validation.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Set

from ..exceptions import DocumentLoadError
from ..models.intent_schema import KIND_ADD_COMPONENT, KIND_ADD_ENTITY, KIND_ADD_FIELD
from ..models.parsing.document_parser import document_parser
from .report import LintResult


class NamingLinter:
    """Linter for naming conventions."""

    def lint(self, file_path: Path, result: LintResult):
        """Lint naming conventions in the document.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        try:
            data = document_parser.load_document(file_path)
        except DocumentLoadError:
            # Already reported by DocumentLinter
            return

        if not isinstance(data, dict) or not isinstance(data.get('intents'), list):
            return

        intents = [i for i in data['intents'] if isinstance(i, dict)]
        declared_fields = self._declared_fields(intents)

        for idx, intent in enumerate(data['intents']):
            if not isinstance(intent, dict):
                continue
            path = f"intents[{idx}]"
            kind = intent.get('kind')

            entity = intent.get('entity')
            if isinstance(entity, str) and entity and not self._is_pascal_case(entity):
                result.add_warning(
                    f"Entity name '{entity}' should be in PascalCase format (e.g., 'Order', 'LineItem')",
                    path=f"{path}.entity",
                )

            fields = intent.get('fields')
            if isinstance(fields, list):
                for field_idx, field_spec in enumerate(fields):
                    if not isinstance(field_spec, dict):
                        continue
                    name = field_spec.get('name')
                    if isinstance(name, str) and name and not self._is_snake_case(name):
                        result.add_warning(
                            f"Field name '{name}' should be in snake_case format (e.g., 'id', 'created_at')",
                            path=f"{path}.fields[{field_idx}].name",
                        )

            if kind == KIND_ADD_COMPONENT:
                self._lint_component(intent, path, declared_fields, result)

    def _lint_component(
        self,
        intent: Dict[str, Any],
        path: str,
        declared_fields: Dict[str, Set[str]],
        result: LintResult,
    ):
        component = intent.get('component')
        if isinstance(component, str) and component and not self._is_pascal_case(component):
            result.add_warning(
                f"Component name '{component}' should be in PascalCase format (e.g., 'OrderList')",
                path=f"{path}.component",
            )

        # display_fields can only be checked against entities declared in this document
        entity = intent.get('entity')
        display_fields = intent.get('display_fields')
        if not isinstance(entity, str) or entity not in declared_fields or not isinstance(display_fields, list):
            return
        for idx, name in enumerate(display_fields):
            if isinstance(name, str) and name not in declared_fields[entity]:
                result.add_warning(
                    f"Display field '{name}' is not declared for entity '{entity}' in this document",
                    path=f"{path}.display_fields[{idx}]",
                )

    @staticmethod
    def _declared_fields(intents: List[Dict[str, Any]]) -> Dict[str, Set[str]]:
        """Field names per entity from add_entity/add_field intents."""
        declared: Dict[str, Set[str]] = {}
        for intent in intents:
            if intent.get('kind') not in (KIND_ADD_ENTITY, KIND_ADD_FIELD):
                continue
            entity = intent.get('entity')
            fields = intent.get('fields')
            if not isinstance(entity, str) or not isinstance(fields, list):
                continue
            names = declared.setdefault(entity, set())
            for field_spec in fields:
                if isinstance(field_spec, dict) and isinstance(field_spec.get('name'), str):
                    names.add(field_spec['name'])
        return declared

    @staticmethod
    def _is_pascal_case(name: str) -> bool:
        """Check if a string is in PascalCase format.

        PascalCase: Starts with uppercase letter, followed by alphanumeric characters.
        Examples: Order, LineItem, Invoice2
        """
        return bool(re.match(r'^[A-Z][a-zA-Z0-9]*$', name))

    @staticmethod
    def _is_snake_case(name: str) -> bool:
        """Check if a string is in snake_case format."""
        return bool(re.match(r'^[a-z][a-z0-9_]*$', name))
