# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Anonymizer app for the Django project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.apps import AppConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from anonymizer.conf import AnonymizerSettings
    from anonymizer.registry import HandlerRegistry


class AnonymizerConfig(AppConfig):
    """Validate the handler registry and subject lookup at startup."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'anonymizer'

    conf: AnonymizerSettings
    registry: HandlerRegistry
    subject_lookup: Callable[[str], Any]

    def ready(self) -> None:
        """Build the registry once all apps and models are loaded."""
        from anonymizer.conf import load_settings
        from anonymizer.registry import build_registry, import_subject_lookup

        conf = load_settings()
        subject_lookup = import_subject_lookup(conf.subject_lookup)
        registry = build_registry(conf.handlers)

        self.conf, self.subject_lookup, self.registry = conf, subject_lookup, registry
