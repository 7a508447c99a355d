# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Anonymizer package.

This package orchestrates GDPR anonymization of a single user across pluggable
handlers. The main modules include the handler contract, the executor that
aggregates handler results, startup validation of the handler registry and
subject resolution.
"""
