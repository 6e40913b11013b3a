"""Bearer token authentication backed by the external auth service."""
from __future__ import annotations

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from pawcast.api import clients
from pawcast.core.providers.base import ProviderError
from pawcast.core.providers.supabase import AuthError


logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """Resolve ``Authorization: Bearer <token>`` to a :class:`CurrentUser`.

    Requests without the header stay anonymous; the view's permission
    classes decide whether that is acceptable.
    """

    keyword = b"bearer"

    def authenticate(self, request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword:
            return None
        if len(parts) != 2:
            raise exceptions.AuthenticationFailed("Invalid Authorization header")

        token = parts[1].decode("utf-8", errors="replace")
        try:
            user = clients.get_auth_provider().get_user(token)
        except AuthError as exc:
            raise exceptions.AuthenticationFailed(str(exc)) from exc
        except ProviderError as exc:
            logger.error("Auth service unavailable: %s", exc)
            raise exceptions.AuthenticationFailed("auth service unavailable") from exc
        return user, token

    def authenticate_header(self, request) -> str:
        return 'Bearer realm="api"'


__all__ = ["BearerTokenAuthentication"]
