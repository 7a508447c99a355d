# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Startup validation of the configured handlers and subject lookup.

Everything here runs from ``AnonymizerConfig.ready()``: a bad entry raises
``ImproperlyConfigured`` and the process never starts serving requests.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from anonymizer.exceptions import HandlerNotFoundError, InvalidHandlerError
from anonymizer.handlers import AnonymizationHandler
from anonymizer.utils.logger import setup_logging

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = setup_logging()


class HandlerRegistry:
    """Immutable, ordered collection of validated handler classes."""

    def __init__(self, handlers: tuple[type[AnonymizationHandler], ...] = ()) -> None:
        """Initialize the registry, only ``build_registry`` should call this."""
        self._handlers = handlers

    def __iter__(self) -> Iterator[type[AnonymizationHandler]]:
        """Iterate handlers in registration order."""
        return iter(self._handlers)

    def __len__(self) -> int:
        """Return the number of registered handlers."""
        return len(self._handlers)

    def __bool__(self) -> bool:
        """Check whether any handler is registered."""
        return bool(self._handlers)

    @property
    def handlers(self) -> tuple[type[AnonymizationHandler], ...]:
        """Return the handler classes in registration order."""
        return self._handlers

    def describe(self) -> list[tuple[str, str]]:
        """Return ``(identity, description)`` for every handler, in order."""
        return [(handler.identity(), handler.describe()) for handler in self._handlers]


def _import_handler(path: str) -> type[AnonymizationHandler]:
    """Import a handler class and check it satisfies the handler contract."""
    try:
        handler = import_string(path)
    except ImportError as error:
        message = (
            f"Anonymization handler class '{path}' not found. "
            'Please ensure the class exists and is importable.'
        )
        raise HandlerNotFoundError(path, message) from error

    if not inspect.isclass(handler) or not issubclass(handler, AnonymizationHandler):
        message = (
            f"Anonymization handler class '{path}' does not implement "
            f'{AnonymizationHandler.__module__}.{AnonymizationHandler.__qualname__}. '
            'All handlers must implement this interface.'
        )
        raise InvalidHandlerError(path, message)

    if inspect.isabstract(handler):
        abstract = ', '.join(sorted(handler.__abstractmethods__))
        message = f"Anonymization handler class '{path}' leaves abstract methods unimplemented: {abstract}"
        raise InvalidHandlerError(path, message)

    return handler


def build_registry(paths: Iterable[str]) -> HandlerRegistry:
    """Resolve and validate the configured handler paths, preserving their order."""
    handlers: list[type[AnonymizationHandler]] = []

    for path in paths:
        handler = _import_handler(path)

        if handler in handlers:
            message = f"Anonymization handler class '{path}' is configured more than once."
            raise InvalidHandlerError(path, message)

        handlers.append(handler)

    registry = HandlerRegistry(tuple(handlers))

    if registry:
        identities = ', '.join(handler.identity() for handler in registry)
        logger.info('Anonymizer initialized with %d handler(s): %s', len(registry), identities)
    else:
        logger.warning(
            'No anonymization handlers configured. '
            'Configure ANONYMIZER_HANDLERS in the settings to enable anonymization.',
        )

    return registry


def import_subject_lookup(path: str) -> Callable[[str], Any]:
    """Import the callable that resolves a public identifier to a subject record."""
    if not path:
        message = (
            'The "ANONYMIZER_SUBJECT_LOOKUP" setting must be set and must reference '
            'a callable taking a UUID string.'
        )
        raise ImproperlyConfigured(message)

    try:
        lookup = import_string(path)
    except ImportError as error:
        message = f"Subject lookup '{path}' does not exist."
        raise ImproperlyConfigured(message) from error

    if not callable(lookup):
        message = f"Subject lookup '{path}' must be a callable taking a UUID string."
        raise ImproperlyConfigured(message)

    return lookup
