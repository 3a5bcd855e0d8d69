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

"""File naming linter for OpenIntent documents."""

import re
from pathlib import Path
from typing import Optional

from .report import LintResult


# Valid document file extensions
DOCUMENT_EXTENSIONS = ('.intent.yaml', '.intent.yml', '.intent.json')


def document_extension(file_name: str) -> Optional[str]:
    for ext in DOCUMENT_EXTENSIONS:
        if file_name.endswith(ext):
            return ext
    return None


class FileLinter:
    """Linter for file naming conventions."""

    def lint(self, file_path: Path, result: LintResult):
        """Lint file naming conventions.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        file_name = file_path.name

        extension = document_extension(file_name)
        if not extension:
            result.add_error(
                f"File does not have a valid document extension. "
                f"Expected one of: {', '.join(DOCUMENT_EXTENSIONS)}"
            )
            return

        base_name = file_name[:-len(extension)]
        if not base_name:
            result.add_error(f"File name '{file_name}' has no name before '{extension}'")
        elif not self._is_kebab_or_snake_case(base_name):
            result.add_warning(
                f"File name '{base_name}' should be lowercase with '-' or '_' separators "
                f"(e.g., 'add-orders', 'user_profile')"
            )

    @staticmethod
    def _is_kebab_or_snake_case(name: str) -> bool:
        return bool(re.match(r'^[a-z0-9][a-z0-9_-]*$', name))
