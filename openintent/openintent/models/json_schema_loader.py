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

"""Loader for the published OpenIntent JSON Schema.

The JSON Schema under ``schema/<version>/`` describes the same format as
``intent_schema`` for tools outside Python (editors, other languages).
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema

from .. import FORMAT_VERSION
from ..exceptions import FormatVersionError
from ..utils.format_version import parse_format_version
from .schema_spec import CONDITIONAL, DISCRIMINATION, PATTERN, STRUCTURAL, SchemaIssue, format_pointer


SCHEMA_FILE_NAME = "intent_document.json"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}

_CATEGORY_BY_KEYWORD = {
    "pattern": PATTERN,
    "if": CONDITIONAL,
    "then": CONDITIONAL,
    "else": CONDITIONAL,
    "not": CONDITIONAL,
    "const": DISCRIMINATION,
    "anyOf": DISCRIMINATION,
}


def get_schema_dir() -> Path:
    return Path(__file__).parent.parent / "schema"


def get_schema_path(version: str) -> Path:
    """Get the path to the JSON Schema file for the given format version."""
    return get_schema_dir() / version / SCHEMA_FILE_NAME


def available_schema_versions() -> List[str]:
    """Return the published schema versions, oldest first."""
    versions = []
    for version_dir in get_schema_dir().iterdir():
        if not version_dir.is_dir() or not (version_dir / SCHEMA_FILE_NAME).exists():
            continue
        try:
            versions.append(parse_format_version(version_dir.name))
        except FormatVersionError:
            # Skip directories that don't match the version pattern
            continue
    return [str(v) for v in sorted(versions)]


def resolve_schema_version(version: str) -> str:
    """Resolve the schema version to load for a document version.

    Version resolution rules:
    - Major version must match exactly
    - If the exact version exists, use it
    - Otherwise prefer the largest patch of the same minor version, then the
      closest larger minor version, then the largest available version

    Returns:
        Resolved version string that exists, or the original version if none found
    """
    try:
        parsed_version = parse_format_version(version)
    except FormatVersionError:
        return version

    if get_schema_path(version).exists():
        return version

    available_versions = [
        parse_format_version(v)
        for v in available_schema_versions()
        if parse_format_version(v).major == parsed_version.major
    ]
    if not available_versions:
        # Will surface as a missing schema file
        return version

    same_minor_versions = [v for v in available_versions if v.minor == parsed_version.minor]
    if same_minor_versions:
        return str(max(same_minor_versions))

    larger_minor_versions = [v for v in available_versions if v.minor > parsed_version.minor]
    if larger_minor_versions:
        min_larger_minor = min(v.minor for v in larger_minor_versions)
        return str(max(v for v in larger_minor_versions if v.minor == min_larger_minor))

    return str(max(available_versions))


def load_schema(version: str = FORMAT_VERSION) -> dict:
    """Load the JSON Schema for the given format version.

    Raises:
        FileNotFoundError: If no schema exists for the version's major version
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    resolved_version = resolve_schema_version(version)

    if resolved_version in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[resolved_version]

    schema_path = get_schema_path(resolved_version)
    if not schema_path.exists():
        raise FileNotFoundError(
            f"Schema file not found for version {version} "
            f"(resolved to {resolved_version}): {schema_path}"
        )

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e

    _SCHEMA_CACHE[resolved_version] = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()


def validate_against_json_schema(data: Any, version: str = FORMAT_VERSION) -> List[SchemaIssue]:
    """Validate data against the published JSON Schema.

    Every error is reported, sorted by location.
    """
    schema = load_schema(version)
    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: format_pointer(e.absolute_path))
    return [
        SchemaIssue(
            message=error.message,
            location=tuple(error.absolute_path),
            category=_CATEGORY_BY_KEYWORD.get(error.validator, STRUCTURAL),
        )
        for error in errors
    ]
