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

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional

from ..models.schema_spec import SchemaIssue


SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    path: Optional[str] = None  # dotted document path, e.g. intents[0].fields[1]
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[SourceMap], pointer: Optional[str]) -> Dict[str, int]:
    """Find the line/column for a JSON pointer, falling back to the closest parent."""
    if not source_map or pointer is None:
        return {}

    while True:
        entry = source_map.get(pointer)
        if entry:
            return entry
        if not pointer:
            return {}
        pointer = pointer.rsplit("/", 1)[0]


def source_for_issue(
    issue: SchemaIssue,
    source_map: Optional[SourceMap] = None,
    file_path: Optional[Path] = None,
) -> SourceLocation:
    entry = lookup_source(source_map, issue.pointer)
    return SourceLocation(
        file_path=file_path,
        path=issue.path,
        line=entry.get("line"),
        column=entry.get("column"),
    )


def _format_file_path(path: Path) -> str:
    root = os.environ.get("OPENINTENT_SOURCE_ROOT")
    base = Path(root) if root else Path.cwd()
    try:
        return str(path.resolve().relative_to(base.resolve()))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.path:
        parts.append(f"path={loc.path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
