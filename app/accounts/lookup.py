# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Default subject lookup for ``ANONYMIZER_SUBJECT_LOOKUP``."""

from __future__ import annotations

from accounts.models import UserAccount


def find_user_by_uuid(public_id: str) -> UserAccount | None:
    """Return the user with the given UUID, or None."""
    return UserAccount.objects.filter(uuid=public_id).first()
