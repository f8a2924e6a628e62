"""Tenant membership adapter over the managed backend."""

from __future__ import annotations

from infrastructure.backend import BackendError, PostgRESTClient
from tenancy.ports.exceptions import DirectoryQueryError

TENANT_USERS_TABLE = "tenant_users"


class MembershipRepository:
    """Reads membership roles from the ``tenant_users`` table.

    Implements IMembershipRepository.
    """

    def __init__(self, client: PostgRESTClient):
        self._client = client

    async def get_role(self, tenant_id: str, user_id: str) -> str | None:
        try:
            rows = await self._client.select(
                TENANT_USERS_TABLE,
                filters={"tenant_id": tenant_id, "user_id": user_id},
                columns="role",
                limit=1,
            )
        except BackendError as e:
            raise DirectoryQueryError(
                str(e), status_code=getattr(e, "status_code", None)
            ) from e

        if not rows:
            return None
        return rows[0].get("role")
