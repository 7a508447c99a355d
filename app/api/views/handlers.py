# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""View listing the configured anonymization handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from anonymizer import service
from api.schemas import HANDLERS_SCHEMA, HandlerListSerializer
from api.views.root import ApiTags

if TYPE_CHECKING:
    from rest_framework.request import Request


@extend_schema(tags=[ApiTags.HANDLERS])
@HANDLERS_SCHEMA
class HandlerListView(APIView):
    """List the handlers in the order they run."""

    def get(self, request: Request) -> Response:  # noqa: ARG002
        """Return identity and description of every handler."""
        handlers = [
            {'handler': identity, 'description': description} for identity, description in service.list_handlers()
        ]
        return Response(HandlerListSerializer(handlers, many=True).data)
