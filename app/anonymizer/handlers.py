# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Capability contract for anonymization handlers.

A handler owns the anonymization logic for one data domain, for example a group
of related tables. Handlers are stateless: every operation is a classmethod and
the registry stores the classes themselves, never instances.

Implementations must:
    - anonymize: overwrite the subject's identifying fields and report the
      records actually changed. A second call for the same subject changes
      nothing and reports zero.
    - analyze: report what ``anonymize`` would change, using the same targeting
      query, without writing anything.
    - describe: return a one-line human readable description.

A subject without records for the handler is not an error, the category is
simply absent from (or zero in) ``updated_by_category``. Backing failures are
raised as ``HandlerError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anonymizer.options import Options
    from anonymizer.results import HandlerResult
    from anonymizer.subject import Subject


class AnonymizationHandler(ABC):
    """Base class every configured handler must derive from."""

    @classmethod
    @abstractmethod
    def anonymize(cls, subject: Subject, options: Options) -> HandlerResult:
        """Anonymize the subject's data owned by this handler."""

    @classmethod
    @abstractmethod
    def analyze(cls, subject: Subject, options: Options) -> HandlerResult:
        """Report what ``anonymize`` would change without mutating storage."""

    @classmethod
    @abstractmethod
    def describe(cls) -> str:
        """Describe what this handler anonymizes."""

    @classmethod
    def identity(cls) -> str:
        """Return the dotted import path identifying this handler."""
        return f'{cls.__module__}.{cls.__qualname__}'
