# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Exceptions raised by the anonymizer.

Configuration errors subclass ``ImproperlyConfigured`` so Django refuses to start,
resolution errors are raised to the front end that requested the subject and
handler errors are captured by the executor.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured


class HandlerNotFoundError(ImproperlyConfigured):
    """Raised when a configured handler path cannot be imported."""

    def __init__(self, handler_path: str, message: str = '') -> None:
        """Initialize the exception with the handler path."""
        self.handler_path = handler_path
        super().__init__(message or f"Anonymization handler '{handler_path}' not found")


class InvalidHandlerError(ImproperlyConfigured):
    """Raised when a configured handler does not implement the handler contract."""

    def __init__(self, handler_path: str, message: str = '') -> None:
        """Initialize the exception with the handler path."""
        self.handler_path = handler_path
        super().__init__(message or f"Anonymization handler '{handler_path}' does not implement AnonymizationHandler")


class SubjectResolutionError(Exception):
    """Base class for failures resolving a public identifier to a subject."""

    def __init__(self, public_id: str, message: str) -> None:
        """Initialize the exception with the identifier that failed."""
        self.public_id = public_id
        super().__init__(message)


class InvalidSubjectIdError(SubjectResolutionError):
    """Raised when a public identifier is not a RFC 4122 v4 UUID."""

    def __init__(self, public_id: str) -> None:
        """Initialize the exception with the rejected identifier."""
        super().__init__(public_id, 'Invalid UUID format. Expected RFC 4122 UUID v4 format.')


class SubjectNotFoundError(SubjectResolutionError):
    """Raised when no subject exists for a public identifier."""

    def __init__(self, public_id: str) -> None:
        """Initialize the exception with the unknown identifier."""
        super().__init__(public_id, f'User not found for UUID: {public_id}')


class HandlerError(Exception):
    """Raised by a handler when its backing operation fails."""
