# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for startup validation of handlers and the subject lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from accounts.handlers import AccountAnonymizationHandler
from accounts.lookup import find_user_by_uuid
from anonymizer.exceptions import HandlerNotFoundError, InvalidHandlerError
from anonymizer.registry import build_registry, import_subject_lookup
from stub_handlers import BrokenHandler, UsersHandler

if TYPE_CHECKING:
    from pytest_django.fixtures import SettingsWrapper


class TestBuildRegistry:
    """Handler paths are resolved and validated eagerly."""

    def test_preserves_configured_order(self) -> None:
        registry = build_registry(['stub_handlers.BrokenHandler', 'stub_handlers.UsersHandler'])

        assert registry.handlers == (BrokenHandler, UsersHandler)
        assert len(registry) == 2
        assert list(registry) == [BrokenHandler, UsersHandler]

    def test_describe_lists_identity_and_description(self) -> None:
        registry = build_registry(['stub_handlers.UsersHandler', 'stub_handlers.BrokenHandler'])

        assert registry.describe() == [
            ('stub_handlers.UsersHandler', 'Users table'),
            ('stub_handlers.BrokenHandler', 'Always broken'),
        ]

    def test_empty_registry(self) -> None:
        registry = build_registry([])

        assert not registry
        assert registry.describe() == []

    @pytest.mark.parametrize(
        'path',
        [
            'stub_handlers.DoesNotExist',
            'missing_module.Handler',
            'NoDotsAtAll',
        ],
    )
    def test_unknown_path_raises_not_found(self, path: str) -> None:
        """Unimportable handlers are a configuration error."""
        with pytest.raises(HandlerNotFoundError) as exc_info:
            build_registry([path])

        assert exc_info.value.handler_path == path
        assert isinstance(exc_info.value, ImproperlyConfigured)

    @pytest.mark.parametrize(
        'path',
        [
            'stub_handlers.NotAHandler',
            'stub_handlers.NOT_A_CLASS',
            'stub_handlers.IncompleteHandler',
            'anonymizer.handlers.AnonymizationHandler',
        ],
    )
    def test_contract_violation_raises_invalid(self, path: str) -> None:
        """Classes not implementing the full contract are rejected."""
        with pytest.raises(InvalidHandlerError) as exc_info:
            build_registry(['stub_handlers.UsersHandler', path])

        assert exc_info.value.handler_path == path
        assert isinstance(exc_info.value, ImproperlyConfigured)

    def test_duplicate_entry_is_rejected(self) -> None:
        with pytest.raises(InvalidHandlerError, match='more than once'):
            build_registry(['stub_handlers.UsersHandler', 'stub_handlers.UsersHandler'])


class TestImportSubjectLookup:
    """The subject lookup must resolve to a callable."""

    def test_valid_lookup(self) -> None:
        assert import_subject_lookup('accounts.lookup.find_user_by_uuid') is find_user_by_uuid

    @pytest.mark.parametrize(
        'path',
        [
            '',
            'accounts.lookup.missing',
            'stub_handlers.NOT_A_CLASS',
        ],
    )
    def test_invalid_lookup(self, path: str) -> None:
        with pytest.raises(ImproperlyConfigured):
            import_subject_lookup(path)


class TestAppStartup:
    """Misconfiguration prevents the app from becoming ready."""

    def test_default_configuration(self) -> None:
        config = apps.get_app_config('anonymizer')

        assert config.registry.handlers == (AccountAnonymizationHandler,)
        assert config.subject_lookup is find_user_by_uuid

    def test_unknown_handler_fails_startup(self, settings: SettingsWrapper) -> None:
        config = apps.get_app_config('anonymizer')
        registry = config.registry
        settings.ANONYMIZER_HANDLERS = ['accounts.handlers.Missing']

        with pytest.raises(HandlerNotFoundError):
            config.ready()

        assert config.registry is registry

    def test_unset_lookup_fails_startup(self, settings: SettingsWrapper) -> None:
        config = apps.get_app_config('anonymizer')
        settings.ANONYMIZER_SUBJECT_LOOKUP = ''

        with pytest.raises(ImproperlyConfigured, match='ANONYMIZER_SUBJECT_LOOKUP'):
            config.ready()
