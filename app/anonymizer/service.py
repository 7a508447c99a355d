# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Entry points shared by the REST API and the management command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.apps import apps

from anonymizer.executor import AnonymizationExecutor
from anonymizer.subject import is_anonymized, resolve_subject

if TYPE_CHECKING:
    from collections.abc import Mapping

    from anonymizer.apps import AnonymizerConfig
    from anonymizer.options import Options
    from anonymizer.results import AggregateResult
    from anonymizer.subject import Subject


def _config() -> AnonymizerConfig:
    return apps.get_app_config('anonymizer')


def default_options() -> Options:
    """Return the configured default options."""
    return _config().conf.default_options


def get_executor() -> AnonymizationExecutor:
    """Build an executor from the validated registry."""
    return AnonymizationExecutor(_config().registry.handlers, default_options())


def list_handlers() -> list[tuple[str, str]]:
    """Return ``(identity, description)`` of every registered handler."""
    return _config().registry.describe()


def handler_count() -> int:
    return len(_config().registry)


def resolve(public_id: str) -> Subject:
    """Resolve a public identifier using the configured lookup."""
    return resolve_subject(public_id, _config().subject_lookup)


def is_subject_anonymized(subject: Subject) -> bool:
    """Check the subject against the configured prefix."""
    return is_anonymized(subject, _config().conf.prefix)


def run_execute(subject: Subject, options: Mapping[str, str] | None = None) -> AggregateResult:
    """Anonymize the subject with every registered handler."""
    return get_executor().execute(subject, options)


def run_analyze(subject: Subject, options: Mapping[str, str] | None = None) -> AggregateResult:
    """Dry-run every registered handler for the subject."""
    return get_executor().analyze(subject, options)
