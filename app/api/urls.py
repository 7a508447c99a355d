# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""URL configuration for the API (Django Rest Framework)."""

from django.conf import settings
from django.urls import path

from api.views import AnalyzeView, AnonymizeView, APIRootView, HandlerListView

urlpatterns = [
    path('', APIRootView.as_view(), name='api-root'),
    path('v1/analyze/<str:uuid>/', AnalyzeView.as_view(), name='analyze'),
    path('v1/anonymize/<str:uuid>/', AnonymizeView.as_view(), name='anonymize'),
    path('v1/handlers/', HandlerListView.as_view(), name='handlers-list'),
]

if settings.DEBUG:
    from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

    urlpatterns += [
        path('docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
        path('schema/', SpectacularAPIView.as_view(), name='schema'),
    ]
