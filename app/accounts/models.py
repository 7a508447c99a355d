# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Account models holding the personal data of a user."""

import uuid

from django.db import models


class UserAccount(models.Model):
    """Core user data: credentials, contact address and the anonymized marker."""

    uuid = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    username = models.CharField(max_length=255, unique=True)
    email = models.CharField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255, blank=True)
    auth_key = models.CharField(max_length=32, blank=True)
    unconfirmed_email = models.CharField(max_length=255, null=True, blank=True)
    registration_ip = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    gdpr_deleted = models.BooleanField(default=False)

    def __str__(self) -> str:
        """Return a string representation of the user."""
        return f'User {self.pk} - {self.username}'


class Profile(models.Model):
    """Public profile of a user."""

    user = models.OneToOneField(UserAccount, on_delete=models.CASCADE, primary_key=True, related_name='profile')
    name = models.CharField(max_length=255, blank=True, default='')
    public_email = models.CharField(max_length=255, null=True, blank=True)
    gravatar_email = models.CharField(max_length=255, null=True, blank=True)
    gravatar_id = models.CharField(max_length=32, null=True, blank=True)
    location = models.CharField(max_length=255, null=True, blank=True)
    website = models.CharField(max_length=255, null=True, blank=True)
    bio = models.TextField(null=True, blank=True)

    def __str__(self) -> str:
        """Return a string representation of the profile."""
        return f'Profile {self.user_id} - {self.name}'


class SocialAccount(models.Model):
    """Social login linked to a user."""

    user = models.ForeignKey(
        UserAccount,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='social_accounts',
    )
    provider = models.CharField(max_length=255)
    client_id = models.CharField(max_length=255)
    username = models.CharField(max_length=255, null=True, blank=True)
    email = models.CharField(max_length=255, null=True, blank=True)
    data = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = (models.UniqueConstraint(fields=('provider', 'client_id'), name='unique_provider_client'),)

    def __str__(self) -> str:
        """Return a string representation of the social account."""
        return f'{self.provider} account {self.client_id}'
