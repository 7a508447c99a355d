# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""OpenAPI schema definitions for the API views."""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers


class APIRootResponseSerializer(serializers.Serializer):
    """Response serializer for API root view."""

    v1_handlers = serializers.URLField(source='v1/handlers', help_text='URL to the configured handlers')
    v1_docs = serializers.URLField(
        source='v1/docs',
        required=False,
        help_text='URL to the API documentation (only available in debug mode)',
    )
    v1_schema = serializers.URLField(
        source='v1/schema',
        required=False,
        help_text='URL to the API schema (only available in debug mode)',
    )


class HandlerResultSerializer(serializers.Serializer):
    """Outcome of a single handler."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    updated_by_category = serializers.DictField(child=serializers.IntegerField(min_value=0))
    data = serializers.DictField()


class HandlerDetailSerializer(serializers.Serializer):
    """A handler that ran without raising."""

    handler = serializers.CharField()
    description = serializers.CharField()
    result = HandlerResultSerializer()


class AggregateResultSerializer(serializers.Serializer):
    """Merged outcome of all handlers."""

    success = serializers.BooleanField()
    executed_count = serializers.IntegerField()
    updated_by_category = serializers.DictField(child=serializers.IntegerField(min_value=0))
    details = HandlerDetailSerializer(many=True)
    errors = serializers.ListField(child=serializers.CharField())
    timestamp = serializers.DateTimeField()


class AnalyzeDataSerializer(serializers.Serializer):
    """Payload of an analysis response."""

    user_id = serializers.IntegerField()
    user_uuid = serializers.UUIDField()
    is_anonymized = serializers.BooleanField()
    handlers_configured = serializers.IntegerField()
    result = AggregateResultSerializer()


class AnalyzeResponseSerializer(serializers.Serializer):
    """Response serializer for the dry-run analysis."""

    success = serializers.BooleanField()
    message = serializers.CharField(default='Analysis completed')
    data = AnalyzeDataSerializer()
    timestamp = serializers.DateTimeField()


class AnonymizeDataSerializer(serializers.Serializer):
    """Payload of an anonymization response."""

    user_id = serializers.IntegerField()
    user_uuid = serializers.UUIDField()
    removed_at = serializers.DateTimeField()
    result = AggregateResultSerializer()


class AnonymizeResponseSerializer(serializers.Serializer):
    """Response serializer for the anonymization."""

    success = serializers.BooleanField()
    message = serializers.CharField(default='User data removed successfully')
    data = AnonymizeDataSerializer()
    timestamp = serializers.DateTimeField()


class HandlerListSerializer(serializers.Serializer):
    """A configured handler."""

    handler = serializers.CharField()
    description = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    """Response serializer for failed requests."""

    detail = serializers.CharField()


UUID_PARAMETER = OpenApiParameter(
    name='uuid',
    type=str,
    location=OpenApiParameter.PATH,
    description='RFC 4122 version 4 UUID of the user',
)


# Schema definitions for endpoints
API_ROOT_SCHEMA = extend_schema(
    responses={
        200: APIRootResponseSerializer,
    },
)

ANALYZE_SCHEMA = extend_schema(
    parameters=[UUID_PARAMETER],
    responses={
        200: AnalyzeResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
)

ANONYMIZE_SCHEMA = extend_schema(
    parameters=[UUID_PARAMETER],
    responses={
        200: AnonymizeResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
)

HANDLERS_SCHEMA = extend_schema(
    responses={
        200: HandlerListSerializer(many=True),
    },
)
