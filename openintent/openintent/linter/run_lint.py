#!/usr/bin/env python3
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

"""CLI entry point for linting OpenIntent documents."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import linter_config
from . import lint_files, LintResult
from .document_linter import ENGINES, ENGINE_NATIVE
from .file_linter import DOCUMENT_EXTENSIONS, document_extension

logger = logging.getLogger(__name__)


def find_document_files(paths: List[str]) -> List[Path]:
    """Find all OpenIntent document files in given paths."""
    document_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            # Explicitly named files are linted even with a wrong extension;
            # the file linter reports it
            if not document_extension(path.name):
                logger.warning(f"File does not match document file pattern: {path}")
            document_files.append(path)
        elif path.is_dir():
            # Recursively find all document files
            for ext in DOCUMENT_EXTENSIONS:
                document_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(document_files))


def _print_human(results: List[LintResult]) -> None:
    for result in results:
        if result.errors or result.warnings:
            print(f"\n{result.file_path}:")
            for error in result.errors:
                line_info = f":{error['line']}" if 'line' in error else ""
                print(f"  ERROR{line_info}: {error['message']}")
            for warning in result.warnings:
                line_info = f":{warning['line']}" if 'line' in warning else ""
                print(f"  WARNING{line_info}: {warning['message']}")


def _print_json(results: List[LintResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[LintResult]) -> None:
    for result in results:
        for error in result.errors:
            print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
        for warning in result.warnings:
            print(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint OpenIntent documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--engine',
        choices=list(ENGINES),
        default=ENGINE_NATIVE,
        help='Validation engine (default: native)',
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Treat warnings as errors',
    )

    args = parser.parse_args(argv)
    # Keep stdout clean for machine-readable reports
    linter_config.set_logging(low_stream=sys.stderr if args.format != 'human' else None)

    if not args.paths:
        args.paths = ['.']

    document_files = find_document_files(args.paths)

    if not document_files:
        logger.error("No OpenIntent documents found.")
        sys.exit(1)

    results = lint_files(document_files, engine=args.engine)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    # Exit with error code if any errors found
    has_warnings = any(r.warnings for r in results)
    if any(r.has_errors for r in results) or (args.strict and has_warnings):
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
