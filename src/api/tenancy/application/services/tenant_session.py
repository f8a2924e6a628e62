"""Session tenant binding owner.

Holds the binding the rest of the application reads and is its only
writer. Tenant resolution runs on startup and on explicit refresh; a
change of authenticated user only recomputes the role.
"""

from __future__ import annotations

from tenancy.application.observability import (
    DefaultTenantSessionProbe,
    TenantSessionProbe,
)
from tenancy.application.services.role_lookup import RoleLookupService
from tenancy.application.services.tenant_resolution_service import (
    TenantResolutionService,
)
from tenancy.domain.binding import TenantBinding


class TenantSession:
    """Tenant binding of one application session.

    Overlapping refreshes are not sequenced; the last one to finish wins.
    """

    def __init__(
        self,
        resolution_service: TenantResolutionService,
        role_lookup: RoleLookupService,
        user_id: str | None = None,
        probe: TenantSessionProbe | None = None,
    ):
        self._resolution_service = resolution_service
        self._role_lookup = role_lookup
        self._user_id = user_id
        self._binding = TenantBinding()
        self._probe = probe or DefaultTenantSessionProbe()

    @property
    def binding(self) -> TenantBinding:
        """Current binding snapshot."""
        return self._binding

    @property
    def user_id(self) -> str | None:
        return self._user_id

    async def refresh(self, hostname: str) -> TenantBinding:
        """Re-resolve the tenant for ``hostname`` and recompute the role.

        Returns:
            The new binding
        """
        self._binding = TenantBinding(
            tenant=self._binding.tenant,
            domain=self._binding.domain,
            role=self._binding.role,
            loading=True,
        )

        result = await self._resolution_service.resolve(hostname)
        self._binding = TenantBinding.from_result(result)
        self._probe.binding_refreshed(
            tenant_id=self._binding.tenant_id,
            error=result.error.value if result.error else None,
            reason=result.reason.value,
        )

        return await self._recompute_role()

    async def set_user(self, user_id: str | None) -> TenantBinding:
        """Record a sign-in or sign-out and recompute the role only.

        Args:
            user_id: The newly authenticated user, None after sign-out

        Returns:
            The new binding
        """
        self._user_id = user_id
        self._probe.user_changed(user_id=user_id)
        return await self._recompute_role()

    async def _recompute_role(self) -> TenantBinding:
        tenant_id = self._binding.tenant_id
        if tenant_id is None or self._user_id is None:
            self._binding = self._binding.with_role(None)
        else:
            self._binding = self._binding.with_role(None, loading=True)
            role = await self._role_lookup.fetch_role(tenant_id, self._user_id)
            self._binding = self._binding.with_role(role)

        self._probe.role_recomputed(
            tenant_id=tenant_id,
            user_id=self._user_id,
            role=self._binding.role.value if self._binding.role else None,
        )
        return self._binding
