"""Authorization switch for the API.

The catalog endpoints are public by default.  Setting
``API_REQUIRE_AUTH=True`` turns on authentication for every DRF view
without touching the views themselves.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework.permissions import BasePermission


class IsAuthenticatedWhenRequired(BasePermission):
    """Allow everyone unless ``settings.API_REQUIRE_AUTH`` is enabled.

    The setting is read per request, so it can be toggled in tests.
    """

    def has_permission(self, request, view) -> bool:
        if not getattr(settings, "API_REQUIRE_AUTH", False):
            return True
        return bool(request.user and request.user.is_authenticated)
