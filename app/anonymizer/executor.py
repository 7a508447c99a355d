# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Executor that runs every registered handler against one subject.

Handlers run sequentially in registration order. Each handler is its own
failure boundary: an exception is recorded in ``errors`` and the run moves on
to the next handler. Changes committed by earlier handlers stay committed,
re-running is safe because handlers are idempotent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.utils import timezone

from anonymizer.options import make_options, merge_options
from anonymizer.results import AggregateResult, HandlerDetail, HandlerResult
from anonymizer.utils.logger import setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from anonymizer.handlers import AnonymizationHandler
    from anonymizer.options import Options
    from anonymizer.subject import Subject

logger = setup_logging()


class AnonymizationExecutor:
    """Orchestrate anonymization handlers and aggregate their results."""

    def __init__(
        self,
        handlers: Iterable[type[AnonymizationHandler]] = (),
        default_options: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the executor with validated handlers and default options."""
        self._handlers = tuple(handlers)
        self._default_options = merge_options(make_options() if default_options is None else default_options)

    @property
    def handlers(self) -> tuple[type[AnonymizationHandler], ...]:
        """Return the handlers in registration order."""
        return self._handlers

    @property
    def default_options(self) -> Options:
        """Return the read-only default options."""
        return self._default_options

    def execute(self, subject: Subject, options: Mapping[str, str] | None = None) -> AggregateResult:
        """Anonymize the subject with every handler."""
        return self._run(subject, options, dry_run=False)

    def analyze(self, subject: Subject, options: Mapping[str, str] | None = None) -> AggregateResult:
        """Report what every handler would anonymize (dry run)."""
        return self._run(subject, options, dry_run=True)

    def _run(self, subject: Subject, options: Mapping[str, str] | None, *, dry_run: bool) -> AggregateResult:
        """Run all handlers in order and merge their results."""
        merged_options = merge_options(self._default_options, options)
        action = 'analyzed' if dry_run else 'anonymized'

        details: list[HandlerDetail] = []
        errors: list[str] = []
        updated_by_category: dict[str, int] = {}

        for handler in self._handlers:
            identity = handler.identity()

            try:
                result = handler.analyze(subject, merged_options) if dry_run else handler.anonymize(subject, merged_options)

                if not isinstance(result, HandlerResult):
                    message = f'returned {type(result).__name__} instead of HandlerResult'
                    raise TypeError(message)

                detail = HandlerDetail(handler=identity, description=handler.describe(), result=result)

            except Exception as error:
                errors.append(f'Handler {identity} failed: {error}')
                logger.warning('Anonymization handler %s failed for user ID %s: %s', identity, subject.pk, error)
                continue

            details.append(detail)
            for category, count in result.updated_by_category.items():
                updated_by_category[category] = updated_by_category.get(category, 0) + count

            logger.info('Handler %s %s user ID %s', identity, action, subject.pk)

        if errors and not details:
            logger.error('All anonymization handlers failed for user ID %s: %s', subject.pk, ', '.join(errors))

        return AggregateResult(
            success=not errors or bool(details),
            updated_by_category=updated_by_category,
            details=tuple(details),
            errors=tuple(errors),
            timestamp=timezone.now(),
        )
