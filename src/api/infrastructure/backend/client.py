"""REST client for the managed backend's PostgREST query interface.

Only equality-filtered reads are needed by the tenancy core, so this
client exposes a single ``select`` operation. Row-level security is
enforced by the backend based on the key sent with each request.
"""

from __future__ import annotations

from typing import Any, Mapping

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

FilterValue = str | bool | int


def _format_filter_value(value: FilterValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PostgRESTClient:
    """Async client issuing ``GET /rest/v1/{table}`` queries.

    The client owns its ``httpx.AsyncClient`` unless one is passed in,
    in which case the caller is responsible for closing it.
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

    @property
    def _request_headers(self) -> dict[str, str]:
        key = self._settings.anon_key.get_secret_value()
        headers = {"Accept": "application/json"}
        if key:
            headers["apikey"] = key
            headers["Authorization"] = f"Bearer {key}"
        return headers

    async def select(
        self,
        table: str,
        filters: Mapping[str, FilterValue],
        columns: str = "*",
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Select rows matching all equality filters.

        Args:
            table: Table (or view) name
            filters: Column -> value equality filters, ANDed together
            columns: PostgREST ``select`` expression
            limit: Maximum number of rows to return

        Returns:
            Matching rows as dictionaries, possibly empty

        Raises:
            BackendConnectionError: If the backend cannot be reached
            BackendQueryError: On an error status or a non-list body
        """
        params: dict[str, str] = {"select": columns}
        for column, value in filters.items():
            params[column] = f"eq.{_format_filter_value(value)}"
        if limit is not None:
            params["limit"] = str(limit)

        url = f"{self._settings.rest_url}/{table}"
        try:
            response = await self._http.get(
                url, params=params, headers=self._request_headers
            )
        except httpx.HTTPError as e:
            self._probe.connection_failed(table=table, error=e)
            raise BackendConnectionError(f"Failed to query {table}: {e!r}") from e

        if response.status_code >= 400:
            self._probe.query_rejected(
                table=table, status_code=response.status_code, body=response.text
            )
            raise BackendQueryError(
                f"HTTP {response.status_code} querying {table}",
                table=table,
                status_code=response.status_code,
            )

        try:
            rows = response.json()
        except ValueError as e:
            self._probe.invalid_response(table=table, error=e)
            raise BackendQueryError(
                f"Undecodable response querying {table}", table=table
            ) from e

        if not isinstance(rows, list):
            self._probe.invalid_response(table=table)
            raise BackendQueryError(
                f"Expected a row list querying {table}", table=table
            )

        self._probe.query_completed(
            table=table, status_code=response.status_code, row_count=len(rows)
        )
        return rows

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client:
            await self._http.aclose()
            self._probe.client_closed()
