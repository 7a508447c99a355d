# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Access control for the anonymizer endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.apps import apps
from rest_framework.permissions import BasePermission

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView


class HasAnonymizerAccess(BasePermission):
    """Allow authenticated users, restricted to ``ANONYMIZER_REQUIRED_GROUP`` when set."""

    message = 'You do not have permission to anonymize user data.'

    def has_permission(self, request: Request, view: APIView) -> bool:  # noqa: ARG002
        """Check authentication and group membership."""
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required_group = apps.get_app_config('anonymizer').conf.required_group
        if not required_group or user.is_superuser:
            return True

        return user.groups.filter(name=required_group).exists()
