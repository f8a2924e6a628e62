"""Membership role lookup for a resolved tenant."""

from __future__ import annotations

from tenancy.application.observability import (
    DefaultRoleLookupProbe,
    RoleLookupProbe,
)
from tenancy.domain.value_objects import TenantRole
from tenancy.ports.repositories import IMembershipRepository


class RoleLookupService:
    """Fetches a user's role within a tenant. Never raises."""

    def __init__(
        self,
        membership_repository: IMembershipRepository,
        probe: RoleLookupProbe | None = None,
    ):
        self._membership_repository = membership_repository
        self._probe = probe or DefaultRoleLookupProbe()

    async def fetch_role(self, tenant_id: str, user_id: str) -> TenantRole | None:
        """Return the user's role within the tenant.

        Args:
            tenant_id: The resolved tenant
            user_id: The authenticated user

        Returns:
            The role, or None when the user is not a member, the stored
            role is unknown, or the lookup fails
        """
        try:
            raw_role = await self._membership_repository.get_role(tenant_id, user_id)
        except Exception as e:
            self._probe.role_lookup_failed(
                tenant_id=tenant_id, user_id=user_id, error=e
            )
            return None

        if raw_role is None:
            self._probe.membership_not_found(tenant_id=tenant_id, user_id=user_id)
            return None

        role = TenantRole.parse(raw_role)
        if role is None:
            self._probe.unknown_role(
                tenant_id=tenant_id, user_id=user_id, raw_role=str(raw_role)
            )
            return None

        self._probe.role_found(tenant_id=tenant_id, user_id=user_id, role=role.value)
        return role
