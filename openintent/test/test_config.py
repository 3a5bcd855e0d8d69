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

import pytest

from openintent.config import LinterConfig
from openintent.utils.logging_utils import configure_split_stream_logging


@pytest.fixture
def scratch_logger():
    name = "openintent.test.scratch"
    yield name
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = True


def test_defaults_from_empty_environment(monkeypatch):
    for var in ("OPENINTENT_LOG_LEVEL", "OPENINTENT_PRINT_LEVEL", "OPENINTENT_CACHE_ENABLED"):
        monkeypatch.delenv(var, raising=False)
    config = LinterConfig.from_env()
    assert config == LinterConfig(log_level="INFO", print_level="WARNING", cache_enabled=True)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENINTENT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("OPENINTENT_PRINT_LEVEL", "ERROR")
    monkeypatch.setenv("OPENINTENT_CACHE_ENABLED", "False")
    config = LinterConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.print_level == "ERROR"
    assert config.cache_enabled is False


def test_set_logging_configures_package_logger():
    logger = LinterConfig(log_level="debug").set_logging()
    try:
        assert logger.name == "openintent"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
    finally:
        logger.handlers.clear()
        logger.propagate = True


def test_unknown_level_falls_back_to_info():
    logger = LinterConfig(log_level="chatty").set_logging()
    try:
        assert logger.level == logging.INFO
    finally:
        logger.handlers.clear()
        logger.propagate = True


def test_split_streams(capsys, scratch_logger):
    logger = configure_split_stream_logging(
        level=logging.INFO,
        stderr_level=logging.WARNING,
        formatter=logging.Formatter("%(levelname)s %(message)s"),
        logger_name=scratch_logger,
    )
    assert logger.propagate is False
    logger.debug("hidden")
    logger.info("progress")
    logger.warning("careful")

    captured = capsys.readouterr()
    assert captured.out == "INFO progress\n"
    assert captured.err == "WARNING careful\n"


def test_low_records_can_be_sent_to_stderr(capsys, scratch_logger):
    logger = configure_split_stream_logging(
        level=logging.INFO,
        formatter=logging.Formatter("%(message)s"),
        logger_name=scratch_logger,
        low_stream=sys.stderr,
    )
    logger.info("progress")
    logger.error("failed")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "progress\nfailed\n"
