# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for the anonymizer audit logger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from anonymizer.utils.logger import AUDIT_HANDLER_NAME, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from pytest_django.fixtures import SettingsWrapper


def audit_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if handler.get_name() == AUDIT_HANDLER_NAME]


@pytest.fixture
def anonymizer_logger() -> Iterator[logging.Logger]:
    """Restore the handlers and level of the anonymizer logger after the test."""
    logger = logging.getLogger('anonymizer')
    handlers, level = list(logger.handlers), logger.level

    yield logger

    for handler in audit_handlers(logger):
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """The audit file is optional and the level belongs to ``LOGGING``."""

    def test_disabled_audit_log_writes_no_file(self, anonymizer_logger: logging.Logger) -> None:
        """Test runs never attach the audit file."""
        setup_logging()

        assert audit_handlers(anonymizer_logger) == []

    def test_enabled_audit_log(
        self,
        anonymizer_logger: logging.Logger,
        settings: SettingsWrapper,
        tmp_path: Path,
    ) -> None:
        settings.ANONYMIZER_AUDIT_LOG = True
        settings.ANONYMIZER_LOG_DIR = str(tmp_path / 'logs')
        anonymizer_logger.setLevel(logging.INFO)

        setup_logging()
        setup_logging()
        anonymizer_logger.info('User anonymized via CLI: UUID=%s', 'abc')

        (handler,) = audit_handlers(anonymizer_logger)
        handler.flush()
        assert 'User anonymized via CLI: UUID=abc' in (tmp_path / 'logs' / 'anonymizer.log').read_text()

    def test_level_is_left_to_logging_settings(self, anonymizer_logger: logging.Logger) -> None:
        anonymizer_logger.setLevel(logging.ERROR)

        setup_logging()

        assert anonymizer_logger.level == logging.ERROR

    def test_explicit_level(self, anonymizer_logger: logging.Logger) -> None:
        setup_logging('debug')

        assert anonymizer_logger.level == logging.DEBUG
