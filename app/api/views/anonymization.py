# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Views for dry-run analysis and anonymization of a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ParseError
from rest_framework.response import Response
from rest_framework.views import APIView

from anonymizer import service
from anonymizer.exceptions import InvalidSubjectIdError, SubjectNotFoundError
from anonymizer.utils.logger import setup_logging
from api.schemas import ANALYZE_SCHEMA, ANONYMIZE_SCHEMA
from api.views.root import ApiTags

if TYPE_CHECKING:
    from rest_framework.request import Request

    from anonymizer.subject import Subject

logger = setup_logging()


class AnonymizationFailed(APIException):
    """Every configured handler failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Anonymization failed.'
    default_code = 'anonymization_failed'


def resolve_or_raise(uuid: str) -> Subject:
    """Resolve the UUID, translating resolution errors to HTTP errors."""
    try:
        return service.resolve(uuid)
    except InvalidSubjectIdError as error:
        raise ParseError(str(error)) from error
    except SubjectNotFoundError as error:
        message = 'User not found for provided UUID.'
        raise NotFound(message) from error


@extend_schema(tags=[ApiTags.ANONYMIZATION])
@ANALYZE_SCHEMA
class AnalyzeView(APIView):
    """GET: report what would be anonymized for a user (dry run)."""

    def get(self, request: Request, uuid: str) -> Response:  # noqa: ARG002
        """Run every handler in dry-run mode."""
        subject = resolve_or_raise(uuid)
        result = service.run_analyze(subject)

        logger.info('User analyzed via REST: UUID=%s', uuid)

        return Response(
            {
                'success': True,
                'message': 'Analysis completed',
                'data': {
                    'user_id': subject.pk,
                    'user_uuid': uuid,
                    'is_anonymized': service.is_subject_anonymized(subject),
                    'handlers_configured': service.handler_count(),
                    'result': result.to_dict(),
                },
                'timestamp': result.timestamp.isoformat(),
            },
        )


@extend_schema(tags=[ApiTags.ANONYMIZATION])
@ANONYMIZE_SCHEMA
class AnonymizeView(APIView):
    """DELETE: anonymize all personal data of a user."""

    def delete(self, request: Request, uuid: str) -> Response:  # noqa: ARG002
        """Run every handler and report the merged result."""
        subject = resolve_or_raise(uuid)

        if service.is_subject_anonymized(subject):
            logger.info('User already anonymized: ID=%s', subject.pk)

        result = service.run_execute(subject)
        logger.info('User anonymized via REST: UUID=%s', uuid)

        if result.all_failed:
            logger.error('Anonymization failed for UUID=%s: %s', uuid, ', '.join(result.errors))
            message = f'Anonymization failed: {", ".join(result.errors)}'
            raise AnonymizationFailed(message)

        return Response(
            {
                'success': result.success,
                'message': 'User data removed successfully',
                'data': {
                    'user_id': subject.pk,
                    'user_uuid': uuid,
                    'removed_at': result.timestamp.isoformat(),
                    'result': result.to_dict(),
                },
                'timestamp': result.timestamp.isoformat(),
            },
        )
