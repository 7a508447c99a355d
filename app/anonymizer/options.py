# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Anonymization options shared by every handler in a run."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_PREFIX = 'anon_'
DEFAULT_DOMAIN = 'anonymized.local'

# Marker every anonymized email-like value starts with, independent of the prefix
EMAIL_MARKER = 'anonymized_'

Options = MappingProxyType


def make_options(prefix: str = DEFAULT_PREFIX, domain: str = DEFAULT_DOMAIN) -> Options:
    """Build a read-only options mapping."""
    return MappingProxyType({'prefix': prefix, 'domain': domain})


def merge_options(defaults: Mapping[str, str], overrides: Mapping[str, str] | None = None) -> Options:
    """Merge call-time overrides over the defaults, key by key.

    A key present in ``overrides`` replaces the default entirely, absent keys keep
    the default value. The result is read-only.
    """
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)

    return MappingProxyType(merged)
