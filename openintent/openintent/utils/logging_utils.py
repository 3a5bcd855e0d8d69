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

import logging
import sys
from typing import Optional, TextIO


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
    low_stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure logging so that records below ``stderr_level`` go to
    ``low_stream`` (stdout by default) and the rest go to stderr.

    Configures the root logger unless ``logger_name`` is given; a named
    logger stops propagating so records are not printed twice. Pass
    ``low_stream=sys.stderr`` when stdout carries a machine-readable report.
    """

    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.setLevel(level)
    if logger_name:
        logger.propagate = False

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    low_handler = logging.StreamHandler(stream=low_stream if low_stream is not None else sys.stdout)
    low_handler.setLevel(logging.DEBUG)
    low_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    low_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(low_handler)
    logger.addHandler(stderr_handler)
    return logger
