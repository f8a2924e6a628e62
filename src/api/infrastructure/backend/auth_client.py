"""Client for the managed backend's auth interface.

The backend issues user access tokens (JWTs) at sign-in. Rather than
validating signatures locally, the token is presented to
``GET /auth/v1/user``, which answers with the user record only when the
token is valid and unexpired.
"""

from __future__ import annotations

from typing import Any

import httpx

from infrastructure.backend.exceptions import (
    BackendConnectionError,
    BackendQueryError,
)
from infrastructure.observability.probes import (
    BackendClientProbe,
    DefaultBackendClientProbe,
)
from infrastructure.settings import BackendSettings

_USER_RESOURCE = "auth.user"

# Statuses meaning "this token does not identify a user", as opposed to
# the auth service itself failing.
_REJECTED_STATUSES = frozenset({400, 401, 403, 404})


class BackendAuthClient:
    """Async client verifying user access tokens against the backend.

    Like PostgRESTClient, it owns its ``httpx.AsyncClient`` unless one
    is passed in.
    """

    def __init__(
        self,
        settings: BackendSettings,
        http_client: httpx.AsyncClient | None = None,
        probe: BackendClientProbe | None = None,
    ):
        self._settings = settings
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=settings.timeout_seconds
        )
        self._probe = probe or DefaultBackendClientProbe()

    async def get_user(self, access_token: str) -> dict[str, Any] | None:
        """Return the user identified by ``access_token``.

        Args:
            access_token: Bearer token issued by the backend at sign-in

        Returns:
            The user record (it carries the user's ``id``), or None when
            the token is rejected

        Raises:
            BackendConnectionError: If the auth service cannot be reached
            BackendQueryError: On any other error status or a malformed body
        """
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        key = self._settings.anon_key.get_secret_value()
        if key:
            headers["apikey"] = key

        try:
            response = await self._http.get(
                f"{self._settings.auth_url}/user", headers=headers
            )
        except httpx.HTTPError as e:
            self._probe.connection_failed(table=_USER_RESOURCE, error=e)
            raise BackendConnectionError(f"Failed to verify access token: {e!r}") from e

        if response.status_code in _REJECTED_STATUSES:
            self._probe.access_token_rejected(status_code=response.status_code)
            return None

        if response.status_code >= 400:
            self._probe.query_rejected(
                table=_USER_RESOURCE,
                status_code=response.status_code,
                body=response.text,
            )
            raise BackendQueryError(
                f"HTTP {response.status_code} verifying access token",
                table=_USER_RESOURCE,
                status_code=response.status_code,
            )

        try:
            user = response.json()
        except ValueError as e:
            self._probe.invalid_response(table=_USER_RESOURCE, error=e)
            raise BackendQueryError(
                "Undecodable user record", table=_USER_RESOURCE
            ) from e

        if not isinstance(user, dict) or not user.get("id"):
            self._probe.invalid_response(table=_USER_RESOURCE)
            raise BackendQueryError(
                "User record without an id", table=_USER_RESOURCE
            )

        return user

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client:
            await self._http.aclose()
            self._probe.client_closed()
