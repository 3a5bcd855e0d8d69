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

"""YAML/JSON document loader with caching and source locations."""

import json
import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ...config import linter_config
from ...exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings.

    Documents follow the JSON data model; an unquoted ``created_at`` must
    reach the validator as the string the author wrote.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DocumentParser:
    """Document parser with caching."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize document parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else linter_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, Dict[str, Dict[str, int]]]] = {}

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def _build_source_map(cls, content: str) -> Dict[str, Dict[str, int]]:
        """Build a mapping from JSON pointers to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose), which also reads JSON, so
        we can track locations without changing the parsed data.
        """
        source_map: Dict[str, Dict[str, int]] = {}

        try:
            root = yaml.compose(content, Loader=DocumentLoader)
        except yaml.YAMLError:
            # Locations are best effort; parse errors are reported by the loader
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    @staticmethod
    def _parse(content: str, fmt: str) -> Any:
        if fmt == "json":
            return json.loads(content)
        data = yaml.load(content, Loader=DocumentLoader)
        # An empty YAML document is an empty mapping
        return {} if data is None else data

    @staticmethod
    def detect_format(path: Path) -> str:
        return "json" if path.suffix.lower() in JSON_SUFFIXES else "yaml"

    def load_document_with_source(
        self, file_path: Union[str, Path]
    ) -> Tuple[Any, Dict[str, Dict[str, int]]]:
        """Load a document file and return (data, source_map).

        source_map keys are JSON pointers (e.g. "/intents/0/fields/1").
        Values contain 1-based line/column.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document file not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document file {path}: {exc}") from exc

        data, source_map = self.load_document_from_string_with_source(
            content, fmt=self.detect_format(path), origin=str(path)
        )

        if self.cache_enabled:
            self._cache[path] = (data, source_map)

        return data, source_map

    def load_document_from_string_with_source(
        self, content: str, fmt: str = "yaml", origin: str = "<string>"
    ) -> Tuple[Any, Dict[str, Dict[str, int]]]:
        """Load a document from string content and return (data, source_map)."""
        try:
            data = self._parse(content, fmt)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Failed to parse JSON document {origin}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML document {origin}: {exc}") from exc
        return data, self._build_source_map(content)

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load a document file.

        Returns:
            Parsed content (normally a mapping; not validated)

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        data, _ = self.load_document_with_source(file_path)
        return data

    def load_document_from_string(self, content: str, fmt: str = "yaml") -> Any:
        data, _ = self.load_document_from_string_with_source(content, fmt=fmt)
        return data

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Document cache cleared")


# Global parser instance
document_parser = DocumentParser()
