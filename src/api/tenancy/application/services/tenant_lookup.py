"""Active tenant lookup.

Absence of a tenant and failure to look one up collapse into the same
None result: the only valid reaction to either is "not resolved".
"""

from __future__ import annotations

from tenancy.application.observability import (
    DefaultTenantLookupProbe,
    TenantLookupProbe,
)
from tenancy.domain.entities import Tenant
from tenancy.ports.repositories import ITenantRepository


class TenantLookupService:
    """Fetches tenants by id, filtered to active status. Never raises."""

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        probe: TenantLookupProbe | None = None,
    ):
        self._tenant_repository = tenant_repository
        self._probe = probe or DefaultTenantLookupProbe()

    async def fetch_active_tenant(self, tenant_id: str) -> Tenant | None:
        """Return the active tenant with this id, or None.

        Args:
            tenant_id: The tenant identifier

        Returns:
            The active Tenant, or None on no match, query error or any
            other exception
        """
        try:
            tenant = await self._tenant_repository.get_active(tenant_id)
        except Exception as e:
            self._probe.tenant_lookup_failed(tenant_id=tenant_id, error=e)
            return None

        # Guard against adapters that do not filter on status
        if tenant is None or not tenant.is_active:
            self._probe.tenant_not_found(tenant_id=tenant_id)
            return None

        self._probe.tenant_found(tenant_id=tenant_id)
        return tenant
