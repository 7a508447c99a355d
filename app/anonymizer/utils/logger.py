# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Logging setup utilities for the anonymizer.

Console output and the logger level are configured by Django's ``LOGGING``
setting, this module adds an audit file that records every anonymization run.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

from django.conf import settings

AUDIT_HANDLER_NAME = 'anonymizer-audit'


def _get_log_level(arg_log_level: str) -> int:
    """Get the numeric log level from its name."""
    return logging.getLevelName(arg_log_level.upper())


def _get_log_path() -> Path:
    """Get the audit log directory from the settings or the project data folder."""
    log_dir = getattr(settings, 'ANONYMIZER_LOG_DIR', None)
    if log_dir:
        return Path(log_dir)

    return Path(settings.BASE_DIR) / 'data' / 'logs'


def setup_logging(log_level: str | None = None) -> logging.Logger:
    """Return the anonymizer logger with the audit file handler attached once.

    The level is only changed when ``log_level`` is given, otherwise ``LOGGING`` decides.
    ``ANONYMIZER_AUDIT_LOG = False`` leaves the audit file out.
    """
    logger = logging.getLogger('anonymizer')
    if log_level:
        logger.setLevel(_get_log_level(log_level))

    if any(handler.get_name() == AUDIT_HANDLER_NAME for handler in logger.handlers):
        return logger

    if not getattr(settings, 'ANONYMIZER_AUDIT_LOG', True):
        return logger

    log_path = _get_log_path()
    try:
        log_path.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        warnings.warn(f'Cannot create log directory "{log_path}": {error}', stacklevel=2)
        return logger

    log_file_path = log_path / 'anonymizer.log'
    try:
        file_handler = logging.FileHandler(str(log_file_path), encoding='utf-8')
    except OSError as error:
        warnings.warn(f'Cannot create log file "{log_file_path}": {error}', stacklevel=2)
        return logger

    file_handler.set_name(AUDIT_HANDLER_NAME)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    file_handler.setLevel(logging.INFO)
    logger.addHandler(file_handler)

    return logger
