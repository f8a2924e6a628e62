"""Override cache backed by a browser cookie.

For the HTTP surface the "client-side" cache lives in the visitor's
browser: the cached tenant id is read from the request cookie and
writes are sent back as Set-Cookie on the response.
"""

from __future__ import annotations

from fastapi import Request, Response

from tenancy.ports.override_store import OVERRIDE_KEY

ONE_YEAR_SECONDS = 365 * 24 * 60 * 60

_UNSET = object()


class CookieTenantOverrideStore:
    """ITenantOverrideStore over one request/response pair.

    Reads after a write in the same request observe the written value.
    """

    def __init__(
        self,
        request: Request,
        response: Response,
        secure: bool = True,
        max_age: int = ONE_YEAR_SECONDS,
    ):
        self._request = request
        self._response = response
        self._secure = secure
        self._max_age = max_age
        self._pending: object = _UNSET

    def get(self) -> str | None:
        if self._pending is not _UNSET:
            return self._pending  # type: ignore[return-value]
        return self._request.cookies.get(OVERRIDE_KEY) or None

    def set(self, tenant_id: str) -> None:
        self._pending = tenant_id
        self._response.set_cookie(
            key=OVERRIDE_KEY,
            value=tenant_id,
            max_age=self._max_age,
            httponly=True,
            samesite="lax",
            secure=self._secure,
        )

    def clear(self) -> None:
        self._pending = None
        self._response.delete_cookie(key=OVERRIDE_KEY)
