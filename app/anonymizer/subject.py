# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Resolution of public identifiers to anonymization subjects."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from anonymizer.exceptions import InvalidSubjectIdError, SubjectNotFoundError
from anonymizer.options import EMAIL_MARKER
from anonymizer.utils.logger import setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable

logger = setup_logging()

UUID_PATTERN = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}', re.IGNORECASE)


@dataclass(frozen=True)
class Subject:
    """Identity of the entity whose personal data is anonymized."""

    pk: int
    public_id: str
    username: str | None = None
    email: str | None = None
    anonymized_flag: bool = False

    @classmethod
    def from_record(cls, record: Any, public_id: str) -> Subject:  # noqa: ANN401
        """Extract the subject identity from a looked-up record.

        The record must expose ``pk``; ``username``, ``email`` and the
        ``gdpr_deleted`` marker are read when present.
        """
        return cls(
            pk=int(record.pk),
            public_id=public_id,
            username=getattr(record, 'username', None),
            email=getattr(record, 'email', None),
            anonymized_flag=bool(getattr(record, 'gdpr_deleted', False)),
        )


def validate_public_id(public_id: str) -> str:
    """Check that the public identifier is a RFC 4122 v4 UUID."""
    if not public_id or not UUID_PATTERN.fullmatch(public_id):
        logger.warning('Invalid UUID format: %s', public_id)
        raise InvalidSubjectIdError(public_id)

    return public_id


def resolve_subject(public_id: str, lookup: Callable[[str], Any | None]) -> Subject:
    """Resolve a public identifier to a subject using the configured lookup."""
    validate_public_id(public_id)

    record = lookup(public_id)
    if record is None:
        logger.warning('User not found for UUID: %s', public_id)
        raise SubjectNotFoundError(public_id)

    return Subject.from_record(record, public_id)


def is_anonymized(subject: Subject, prefix: str) -> bool:
    """Check whether the subject already looks anonymized.

    First match wins:
      1. the anonymized marker is set.
      2. the username starts with the configured prefix.
      3. the email starts with the anonymized email marker.
    """
    if subject.anonymized_flag:
        return True

    if subject.username is not None and prefix and subject.username.startswith(prefix):
        return True

    return subject.email is not None and subject.email.startswith(EMAIL_MARKER)
