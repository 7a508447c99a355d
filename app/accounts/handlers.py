# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Anonymization handler for the account tables.

Handles anonymization of:
    - user: core user data (username, email, password, auth key, IP).
    - profile: user profile data (name, bio, location, website).
    - social_account: social login data (username, email, data payload).

Anonymized rows are left out of the targeting querysets, so repeated runs
update nothing and ``analyze`` counts exactly what ``anonymize`` would update.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.contrib.auth.hashers import make_password
from django.db import DatabaseError, transaction
from django.utils import timezone
from django.utils.crypto import get_random_string

from accounts.models import Profile, SocialAccount, UserAccount
from anonymizer.exceptions import HandlerError
from anonymizer.handlers import AnonymizationHandler
from anonymizer.options import DEFAULT_DOMAIN, DEFAULT_PREFIX, EMAIL_MARKER
from anonymizer.results import HandlerResult
from anonymizer.utils.logger import setup_logging

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from anonymizer.options import Options
    from anonymizer.subject import Subject

logger = setup_logging()

CATEGORY_USER = 'user'
CATEGORY_PROFILE = 'profile'
CATEGORY_SOCIAL_ACCOUNT = 'social_account'

ANONYMIZED_BIO = 'This profile has been anonymized'
SECRET_LENGTH = 32


def anonymized_username(user_id: int, prefix: str) -> str:
    """Return the replacement username, e.g. ``anon_42``."""
    return f'{prefix}{user_id}'


def anonymized_email(user_id: int, domain: str) -> str:
    """Return the replacement email, e.g. ``anonymized_42@anonymized.local``."""
    return f'{EMAIL_MARKER}{user_id}@{domain}'


class AccountAnonymizationHandler(AnonymizationHandler):
    """Anonymize the user, profile and social account tables."""

    @classmethod
    def describe(cls) -> str:
        """Describe what this handler anonymizes."""
        return 'Anonymizes account tables (user, profile, social_account)'

    @classmethod
    def _targets(cls, user_id: int, prefix: str, domain: str) -> dict[str, QuerySet]:
        """Return the querysets of records still holding personal data, per category."""
        return {
            CATEGORY_USER: UserAccount.objects.filter(pk=user_id, gdpr_deleted=False),
            CATEGORY_PROFILE: Profile.objects.filter(user_id=user_id).exclude(
                name=anonymized_username(user_id, prefix),
                public_email=None,
                gravatar_email=None,
                gravatar_id=None,
                location=None,
                website=None,
                bio=ANONYMIZED_BIO,
            ),
            CATEGORY_SOCIAL_ACCOUNT: SocialAccount.objects.filter(user_id=user_id).exclude(
                username=f'{EMAIL_MARKER}{user_id}',
                email=anonymized_email(user_id, domain),
            ),
        }

    @classmethod
    def _replacements(cls, user_id: int, prefix: str, domain: str) -> dict[str, dict]:
        """Return the field values written per category."""
        now = timezone.now()

        return {
            CATEGORY_USER: {
                'username': anonymized_username(user_id, prefix),
                'email': anonymized_email(user_id, domain),
                'password_hash': make_password(get_random_string(SECRET_LENGTH)),
                'auth_key': get_random_string(SECRET_LENGTH),
                'unconfirmed_email': None,
                'registration_ip': None,
                'updated_at': now,
                'gdpr_deleted': True,
            },
            CATEGORY_PROFILE: {
                'name': anonymized_username(user_id, prefix),
                'public_email': None,
                'gravatar_email': None,
                'gravatar_id': None,
                'location': None,
                'website': None,
                'bio': ANONYMIZED_BIO,
            },
            CATEGORY_SOCIAL_ACCOUNT: {
                'username': f'{EMAIL_MARKER}{user_id}',
                'email': anonymized_email(user_id, domain),
                'data': {'anonymized': True, 'anonymized_at': now.isoformat()},
            },
        }

    @classmethod
    def anonymize(cls, subject: Subject, options: Options) -> HandlerResult:
        """Overwrite the subject's account data in one transaction."""
        prefix = options.get('prefix', DEFAULT_PREFIX)
        domain = options.get('domain', DEFAULT_DOMAIN)

        targets = cls._targets(subject.pk, prefix, domain)
        replacements = cls._replacements(subject.pk, prefix, domain)
        records_updated: dict[str, int] = {}

        try:
            with transaction.atomic():
                for category, queryset in targets.items():
                    count = queryset.update(**replacements[category])
                    if count > 0:
                        records_updated[category] = count

        except DatabaseError as error:
            logger.exception('Account anonymization failed for user ID %s', subject.pk)
            message = f'Anonymization failed: {error}'
            raise HandlerError(message) from error

        logger.info('Account tables anonymized for user ID %s: %s', subject.pk, records_updated)

        return HandlerResult(
            success=True,
            message='Account data anonymized successfully',
            updated_by_category=records_updated,
        )

    @classmethod
    def analyze(cls, subject: Subject, options: Options) -> HandlerResult:
        """Count the records ``anonymize`` would update."""
        prefix = options.get('prefix', DEFAULT_PREFIX)
        domain = options.get('domain', DEFAULT_DOMAIN)
        records_updated: dict[str, int] = {}

        try:
            for category, queryset in cls._targets(subject.pk, prefix, domain).items():
                count = queryset.count()
                if count > 0:
                    records_updated[category] = count

        except DatabaseError as error:
            message = f'Analysis failed: {error}'
            raise HandlerError(message) from error

        return HandlerResult(
            success=True,
            message='Analysis complete - dry run mode, no changes made',
            updated_by_category=records_updated,
            data={'mode': 'dry-run', 'user_id': subject.pk},
        )
