# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""API views package.

This package contains the views for analysis, anonymization and the handler listing.
"""

from api.views.anonymization import AnalyzeView, AnonymizeView
from api.views.handlers import HandlerListView
from api.views.root import APIRootView

__all__ = ['APIRootView', 'AnalyzeView', 'AnonymizeView', 'HandlerListView']
