# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Shared fixtures for the anonymizer tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from accounts.models import Profile, SocialAccount, UserAccount
from anonymizer.subject import Subject

if TYPE_CHECKING:
    from pytest_django.fixtures import SettingsWrapper


@pytest.fixture(autouse=True)
def fast_password_hasher(settings: SettingsWrapper) -> None:
    """Use a cheap hasher, the handler hashes a random password on every run."""
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def account(db: None) -> UserAccount:  # noqa: ARG001
    """Create a user with a profile and two social logins."""
    user = UserAccount.objects.create(
        username='jdoe',
        email='jdoe@example.com',
        password_hash='known-hash',
        auth_key='known-auth-key',
        unconfirmed_email='john.doe@example.org',
        registration_ip='192.168.1.10',
    )
    Profile.objects.create(
        user=user,
        name='John Doe',
        public_email='john@example.com',
        gravatar_email='john@gravatar.com',
        gravatar_id='abc123',
        location='Amsterdam',
        website='https://johndoe.example.com',
        bio='Hello, I am John.',
    )
    SocialAccount.objects.create(
        user=user,
        provider='github',
        client_id='1001',
        username='johnd',
        email='john@github.example.com',
        data={'login': 'johnd', 'name': 'John Doe'},
    )
    SocialAccount.objects.create(
        user=user,
        provider='google',
        client_id='2002',
        username='john.doe',
        email='john.doe@gmail.example.com',
        data={'name': 'John Doe'},
    )
    return user


@pytest.fixture
def bystander(db: None) -> UserAccount:  # noqa: ARG001
    """Create an unrelated user that must never be touched."""
    user = UserAccount.objects.create(username='alice', email='alice@example.com')
    Profile.objects.create(user=user, name='Alice', bio='Not me.')
    SocialAccount.objects.create(user=user, provider='github', client_id='3003', username='alice', email='a@x.org')
    return user


@pytest.fixture
def subject(account: UserAccount) -> Subject:
    """Subject resolved from the account fixture."""
    return Subject.from_record(account, str(account.uuid))
