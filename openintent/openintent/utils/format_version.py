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

"""Version field handling for OpenIntent documents.

``version`` is strict semver: three dot-separated non-negative integers
without leading zeros, e.g. ``1.0.0``. The validator only checks the shape;
the linter also compares it with ``FORMAT_VERSION`` via
:func:`check_format_version`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .. import FORMAT_VERSION
from ..exceptions import FormatVersionError


# ---- parsing ---------------------------------------------------------------

VERSION_PATTERN = r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$"

_VERSION_RE = re.compile(VERSION_PATTERN, re.ASCII)


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A parsed semantic version (major, minor, patch)."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def is_valid_format_version(raw: object) -> bool:
    return isinstance(raw, str) and _VERSION_RE.fullmatch(raw) is not None


def parse_format_version(raw: str) -> SemanticVersion:
    """Parse a strict version string like ``1.0.0``.

    Returns:
        A :class:`SemanticVersion` instance.

    Raises:
        FormatVersionError: If the string cannot be parsed.
    """
    if not isinstance(raw, str):
        raise FormatVersionError(
            f"Format version must be a string, got {type(raw).__name__}: {raw!r}"
        )

    m = _VERSION_RE.fullmatch(raw)
    if m is None:
        raise FormatVersionError(
            f"Invalid format version string: '{raw}'. "
            "Expected 'MAJOR.MINOR.PATCH' without leading zeros (e.g. '1.0.0')."
        )
    return SemanticVersion(int(m.group(1)), int(m.group(2)), int(m.group(3)))


# ---- supported version -----------------------------------------------------


@lru_cache(maxsize=None)
def get_supported_format_version() -> SemanticVersion:
    """The OpenIntent format version this package validates (``FORMAT_VERSION``)."""
    return parse_format_version(FORMAT_VERSION)


# ---- compatibility check ----------------------------------------------------


@dataclass(frozen=True)
class VersionCheckResult:
    compatible: bool
    message: str
    file_version: Optional[SemanticVersion] = None
    supported_version: Optional[SemanticVersion] = None
    minor_newer: bool = False


def check_format_version(raw_version: Optional[str]) -> VersionCheckResult:
    """Compare a document's ``version`` with ``FORMAT_VERSION``.

    A missing or malformed version, or a different major, is incompatible.
    A newer minor is compatible but flagged with ``minor_newer`` since the
    document may use intent kinds added after this release. Patch is ignored.
    """
    supported = get_supported_format_version()

    if raw_version is None:
        return VersionCheckResult(
            compatible=False,
            message=f"Missing 'version' field. OpenIntent documents declare 'version: \"{supported}\"'.",
            supported_version=supported,
        )

    try:
        document_version = parse_format_version(raw_version)
    except FormatVersionError as exc:
        return VersionCheckResult(compatible=False, message=str(exc), supported_version=supported)

    if document_version.major != supported.major:
        message = (
            f"Incompatible format version: document declares {document_version}, "
            f"openintent {supported} reads major version {supported.major} only."
        )
        compatible, minor_newer = False, False
    elif document_version.minor > supported.minor:
        message = (
            f"Document version {document_version} has a newer minor version than {supported}; "
            f"intent kinds added since may be rejected as unrecognized."
        )
        compatible, minor_newer = True, True
    else:
        message = f"Document version {document_version} is compatible with {supported}."
        compatible, minor_newer = True, False

    return VersionCheckResult(
        compatible=compatible,
        message=message,
        file_version=document_version,
        supported_version=supported,
        minor_newer=minor_newer,
    )
