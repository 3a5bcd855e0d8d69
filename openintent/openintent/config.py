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

"""Configuration management for the OpenIntent tooling."""

import os
import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class LinterConfig:
    """Configuration for document loading and linting."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'LinterConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('OPENINTENT_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('OPENINTENT_PRINT_LEVEL', 'WARNING'),
            cache_enabled=os.getenv('OPENINTENT_CACHE_ENABLED', 'true').lower() == 'true',
        )

    def set_logging(self, low_stream: Optional[TextIO] = None) -> logging.Logger:
        """Setup logging for the ``openintent`` logger based on configuration.

        Args:
            low_stream: Stream for records below ``print_level`` (stdout if None)
        """
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name='openintent',
            low_stream=low_stream,
        )


# Global configuration instance
linter_config = LinterConfig.from_env()
