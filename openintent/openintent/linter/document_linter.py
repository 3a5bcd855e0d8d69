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

"""Structure and schema linter for OpenIntent documents.

This linter runs the document validator and reports every issue with its
location in the source file when available.
"""

import logging
from pathlib import Path
from typing import Iterable

from ..exceptions import DocumentLoadError
from ..file_io.source_location import SourceMap, format_source, source_for_issue
from ..models.json_schema_loader import validate_against_json_schema
from ..models.parsing.document_parser import document_parser
from ..models.schema_spec import SchemaIssue
from ..utils.format_version import check_format_version, is_valid_format_version
from ..validator import check_document
from .report import LintResult

logger = logging.getLogger(__name__)

ENGINE_NATIVE = "native"
ENGINE_JSON_SCHEMA = "json-schema"
ENGINES = (ENGINE_NATIVE, ENGINE_JSON_SCHEMA)


class DocumentLinter:
    """Linter for structure and schema validation."""

    def __init__(self, engine: str = ENGINE_NATIVE):
        """Initialize the document linter.

        Args:
            engine: ``native`` (the package validator) or ``json-schema``
                (the published JSON Schema, via jsonschema)
        """
        if engine not in ENGINES:
            raise ValueError(f"Unknown validation engine '{engine}'. Expected one of: {', '.join(ENGINES)}")
        self.engine = engine

    def lint(self, file_path: Path, result: LintResult):
        """Lint structure and schema of the document.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        try:
            data, source_map = document_parser.load_document_with_source(file_path)
        except DocumentLoadError as e:
            result.add_error(f"Failed to load document: {str(e)}")
            return

        self._lint_format_version(data, file_path, source_map, result)

        if self.engine == ENGINE_JSON_SCHEMA:
            issues = validate_against_json_schema(data)
            warnings: Iterable[SchemaIssue] = ()
        else:
            validation = check_document(data)
            issues = validation.issues
            warnings = validation.warnings

        logger.debug(f"{file_path}: {len(issues)} issue(s) from {self.engine} validation")

        for issue in issues:
            self._report(issue, file_path, source_map, result.add_error)
        for issue in warnings:
            self._report(issue, file_path, source_map, result.add_warning)

    @staticmethod
    def _report(issue: SchemaIssue, file_path: Path, source_map: SourceMap, add) -> None:
        src = source_for_issue(issue, source_map, file_path)
        add(
            f"{issue.message}{format_source(src)}",
            line=src.line,
            column=src.column,
            path=issue.path,
        )

    def _lint_format_version(self, data, file_path: Path, source_map: SourceMap, result: LintResult):
        raw_version = data.get("version") if isinstance(data, dict) else None
        # Malformed or missing versions are reported by the validator
        if not is_valid_format_version(raw_version):
            return

        ver_result = check_format_version(raw_version)
        issue = SchemaIssue(message=ver_result.message, location=("version",))
        if not ver_result.compatible:
            self._report(issue, file_path, source_map, result.add_error)
        elif ver_result.minor_newer:
            self._report(issue, file_path, source_map, result.add_warning)
