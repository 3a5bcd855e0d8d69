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

"""Custom exceptions for the OpenIntent schema package."""

from typing import Any, List, Optional, Sequence


class OpenIntentError(Exception):
    """Base exception for OpenIntent related errors."""
    pass


class SchemaDefinitionError(OpenIntentError):
    """Exception raised when the validator is invoked with a malformed schema object.

    This signals a programming error, never a problem with the document.
    """
    pass


class DocumentLoadError(OpenIntentError):
    """Exception raised when a document file cannot be read or parsed."""
    pass


class ValidationError(OpenIntentError):
    """Exception raised when a document fails validation.

    ``issues`` holds every violation found in the validation pass, in
    document order. Each issue exposes ``path`` and ``message``.
    """

    def __init__(self, message: str = "", issues: Optional[Sequence[Any]] = None):
        self.issues: List[Any] = list(issues) if issues else []
        if not message:
            message = self._format_issues(self.issues)
        super().__init__(message)

    @staticmethod
    def _format_issues(issues: Sequence[Any]) -> str:
        lines = [f"Validation failed with {len(issues)} issue(s):"]
        for issue in issues:
            path = getattr(issue, "path", "")
            message = getattr(issue, "message", str(issue))
            lines.append(f"  - {path}: {message}" if path else f"  - {message}")
        return "\n".join(lines)


class FormatVersionError(ValidationError):
    """Exception raised when a format version string is malformed."""
    pass
