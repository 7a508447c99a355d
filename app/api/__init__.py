# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""API package for Django backend.

This package contains the REST endpoints exposing the anonymizer.
The API is designed to be used with the Django REST framework.
"""
