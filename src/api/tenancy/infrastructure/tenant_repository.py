"""Tenant directory adapter over the managed backend."""

from __future__ import annotations

from infrastructure.backend import BackendError, PostgRESTClient
from tenancy.domain.entities import Tenant
from tenancy.domain.value_objects import TenantStatus
from tenancy.ports.exceptions import DirectoryQueryError

TENANTS_TABLE = "tenants"


class TenantRepository:
    """Reads active tenants from the ``tenants`` table.

    Implements ITenantRepository.
    """

    def __init__(self, client: PostgRESTClient):
        self._client = client

    async def get_active(self, tenant_id: str) -> Tenant | None:
        try:
            rows = await self._client.select(
                TENANTS_TABLE,
                filters={"id": tenant_id, "status": TenantStatus.ACTIVE.value},
                limit=1,
            )
        except BackendError as e:
            raise DirectoryQueryError(
                str(e), status_code=getattr(e, "status_code", None)
            ) from e

        if not rows:
            return None

        try:
            return Tenant.from_record(rows[0])
        except KeyError as e:
            raise DirectoryQueryError(f"Malformed tenant record: {e!r}") from e
