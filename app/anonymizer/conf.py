# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Anonymizer settings read from the Django configuration."""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings

from anonymizer.options import DEFAULT_DOMAIN, DEFAULT_PREFIX, Options, make_options


@dataclass(frozen=True)
class AnonymizerSettings:
    """Snapshot of the ``ANONYMIZER_*`` settings."""

    handlers: tuple[str, ...]
    subject_lookup: str
    prefix: str = DEFAULT_PREFIX
    domain: str = DEFAULT_DOMAIN
    required_group: str | None = None

    @property
    def default_options(self) -> Options:
        """Return the default options for every run."""
        return make_options(prefix=self.prefix, domain=self.domain)


def load_settings() -> AnonymizerSettings:
    """Read the anonymizer settings."""
    return AnonymizerSettings(
        handlers=tuple(getattr(settings, 'ANONYMIZER_HANDLERS', ())),
        subject_lookup=getattr(settings, 'ANONYMIZER_SUBJECT_LOOKUP', ''),
        prefix=getattr(settings, 'ANONYMIZER_PREFIX', DEFAULT_PREFIX),
        domain=getattr(settings, 'ANONYMIZER_DOMAIN', DEFAULT_DOMAIN),
        required_group=getattr(settings, 'ANONYMIZER_REQUIRED_GROUP', None) or None,
    )
