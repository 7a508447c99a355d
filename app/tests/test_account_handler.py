# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for the account anonymization handler."""

from __future__ import annotations

import pytest
from django.db import DatabaseError
from django.db.models import QuerySet

from accounts.handlers import ANONYMIZED_BIO, AccountAnonymizationHandler
from accounts.models import Profile, SocialAccount, UserAccount
from anonymizer.exceptions import HandlerError
from anonymizer.executor import AnonymizationExecutor
from anonymizer.options import make_options
from anonymizer.subject import Subject

pytestmark = pytest.mark.django_db

OPTIONS = make_options()
EXPECTED_COUNTS = {'user': 1, 'profile': 1, 'social_account': 2}


def snapshot(user: UserAccount) -> dict:
    """Collect every stored value of a user and its related records."""
    user.refresh_from_db()
    profile = Profile.objects.get(user=user)
    return {
        'user': (user.username, user.email, user.password_hash, user.auth_key, user.gdpr_deleted),
        'profile': (profile.name, profile.public_email, profile.location, profile.bio),
        'social': list(SocialAccount.objects.filter(user=user).order_by('pk').values_list('username', 'email', 'data')),
    }


# ---------------------------------- ANONYMIZE ------------------------------------ #


class TestAnonymize:
    """Identifying fields are replaced with placeholders."""

    def test_reports_updated_records(self, subject: Subject) -> None:
        result = AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert result.success is True
        assert result.updated_by_category == EXPECTED_COUNTS

    def test_user_fields(self, account: UserAccount, subject: Subject) -> None:
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)
        account.refresh_from_db()

        assert account.username == f'anon_{account.pk}'
        assert account.email == f'anonymized_{account.pk}@anonymized.local'
        assert account.unconfirmed_email is None
        assert account.registration_ip is None
        assert account.gdpr_deleted is True

    def test_credentials_are_replaced_with_random_secrets(self, account: UserAccount, subject: Subject) -> None:
        """Secrets are never emptied and never derivable."""
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)
        account.refresh_from_db()

        assert account.password_hash
        assert account.password_hash != 'known-hash'
        assert len(account.auth_key) == 32
        assert account.auth_key != 'known-auth-key'

    def test_profile_fields(self, account: UserAccount, subject: Subject) -> None:
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)
        profile = Profile.objects.get(user=account)

        assert profile.name == f'anon_{account.pk}'
        assert profile.public_email is None
        assert profile.gravatar_email is None
        assert profile.gravatar_id is None
        assert profile.location is None
        assert profile.website is None
        assert profile.bio == ANONYMIZED_BIO

    def test_social_account_fields(self, account: UserAccount, subject: Subject) -> None:
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        for social in SocialAccount.objects.filter(user=account):
            assert social.username == f'anonymized_{account.pk}'
            assert social.email == f'anonymized_{account.pk}@anonymized.local'
            assert social.data['anonymized'] is True
            assert 'anonymized_at' in social.data
            assert 'login' not in social.data

    def test_custom_options(self, account: UserAccount, subject: Subject) -> None:
        AccountAnonymizationHandler.anonymize(subject, make_options(prefix='gone_', domain='example.invalid'))
        account.refresh_from_db()

        assert account.username == f'gone_{account.pk}'
        assert account.email == f'anonymized_{account.pk}@example.invalid'

    def test_other_users_are_untouched(self, bystander: UserAccount, subject: Subject) -> None:
        before = snapshot(bystander)

        AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert snapshot(bystander) == before

    def test_idempotent(self, subject: Subject) -> None:
        """A second run changes nothing and still succeeds."""
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        second = AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert second.success is True
        assert all(count == 0 for count in second.updated_by_category.values())

    def test_subject_without_records(self, db: None) -> None:  # noqa: ARG002
        subject = Subject(pk=999_999, public_id='0b7e3f4a-9c1d-4e2f-8a3b-5c6d7e8f9a0b')

        result = AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert result.success is True
        assert result.updated_by_category == {}

    def test_failure_rolls_back_every_category(
        self,
        account: UserAccount,
        subject: Subject,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """A failing write leaves the earlier categories of the run uncommitted."""
        original_update = QuerySet.update

        def failing_update(queryset: QuerySet, **kwargs: object) -> int:
            if queryset.model is SocialAccount:
                message = 'disk full'
                raise DatabaseError(message)
            return original_update(queryset, **kwargs)

        before = snapshot(account)
        monkeypatch.setattr(QuerySet, 'update', failing_update)

        with pytest.raises(HandlerError, match='disk full'):
            AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        monkeypatch.undo()
        assert snapshot(account) == before


# ----------------------------------- ANALYZE ------------------------------------- #


class TestAnalyze:
    """Dry run reports without writing."""

    def test_does_not_mutate(self, account: UserAccount, subject: Subject) -> None:
        before = snapshot(account)

        result = AccountAnonymizationHandler.analyze(subject, OPTIONS)

        assert snapshot(account) == before
        assert result.data == {'mode': 'dry-run', 'user_id': account.pk}

    def test_counts_match_anonymize(self, subject: Subject) -> None:
        analysis = AccountAnonymizationHandler.analyze(subject, OPTIONS)
        execution = AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert analysis.updated_by_category == execution.updated_by_category == EXPECTED_COUNTS

    def test_after_anonymize_reports_nothing(self, subject: Subject) -> None:
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)

        assert AccountAnonymizationHandler.analyze(subject, OPTIONS).updated_by_category == {}

    def test_partially_anonymized_profile_is_counted(self, account: UserAccount, subject: Subject) -> None:
        """A record with any identifying value left is still a target."""
        AccountAnonymizationHandler.anonymize(subject, OPTIONS)
        Profile.objects.filter(user=account).update(location='Utrecht')

        assert AccountAnonymizationHandler.analyze(subject, OPTIONS).updated_by_category == {'profile': 1}
        assert AccountAnonymizationHandler.anonymize(subject, OPTIONS).updated_by_category == {'profile': 1}


# -------------------------------- END TO END ------------------------------------- #


class TestEndToEnd:
    """Analyze, execute and re-execute through the executor."""

    def test_scenario(self, account: UserAccount, subject: Subject) -> None:
        executor = AnonymizationExecutor([AccountAnonymizationHandler], OPTIONS)

        analysis = executor.analyze(subject)
        assert analysis.success is True
        assert analysis.executed_count == 1
        assert analysis.updated_by_category == EXPECTED_COUNTS

        execution = executor.execute(subject)
        assert execution.success is True
        assert execution.updated_by_category == analysis.updated_by_category

        account.refresh_from_db()
        assert account.username == f'anon_{account.pk}'
        assert account.email == f'anonymized_{account.pk}@anonymized.local'

        again = executor.execute(subject)
        assert again.success is True
        assert again.updated_by_category == {}
