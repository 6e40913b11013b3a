"""Supabase auth: resolve a bearer token to the account that owns it."""
from __future__ import annotations

from typing import Optional

from requests import Response

from pawcast.core.abstractions import CurrentUser
from pawcast.core.providers.base import HttpProvider, ProviderError


class AuthError(ProviderError):
    """Raised when the auth service rejects a token."""


class SupabaseAuthProvider(HttpProvider):
    name = "supabase-auth"

    def __init__(self, *, url: Optional[str], anon_key: Optional[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self.url = (url or "").rstrip("/")
        self.anon_key = anon_key

    def get_user(self, access_token: str) -> CurrentUser:
        if not access_token:
            raise AuthError("missing access token")
        self._require(url=self.url, anon_key=self.anon_key)
        data = self._get_json(
            f"{self.url}/auth/v1/user",
            headers={"apikey": self.anon_key, "Authorization": f"Bearer {access_token}"},
        )
        user_id = data.get("id") if isinstance(data, dict) else None
        if not user_id:
            raise AuthError("auth service returned no user id")
        return CurrentUser(id=str(user_id), email=data.get("email"))

    def _handle_response(self, response: Response) -> Response:
        if response.status_code in (401, 403):
            self._log.info("Rejected access token (%s)", response.status_code)
            raise AuthError("invalid or expired access token")
        return super()._handle_response(response)


__all__ = ["AuthError", "SupabaseAuthProvider"]
