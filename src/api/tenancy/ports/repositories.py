"""Repository protocols (ports) for Tenancy bounded context.

The directories are owned by the managed backend; the core only reads
them. Implementations raise DirectoryQueryError when a query cannot be
answered and return empty results when nothing matches.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.value_objects import DomainType


@runtime_checkable
class IDomainRepository(Protocol):
    """Read access to the domain directory."""

    async def find_verified(
        self, hostname: str, domain_type: DomainType
    ) -> list[Domain]:
        """Find verified domain records for a hostname and type.

        Args:
            hostname: Lowercased hostname to match exactly
            domain_type: Domain type the hostname was classified as

        Returns:
            Matching verified records, in directory order (usually 0 or 1)

        Raises:
            DirectoryQueryError: If the directory cannot be queried
        """
        ...


@runtime_checkable
class ITenantRepository(Protocol):
    """Read access to the tenant directory."""

    async def get_active(self, tenant_id: str) -> Tenant | None:
        """Retrieve a tenant by id, only if its status is active.

        Args:
            tenant_id: The tenant identifier

        Returns:
            The active Tenant, or None if missing or not active

        Raises:
            DirectoryQueryError: If the directory cannot be queried
        """
        ...


@runtime_checkable
class IMembershipRepository(Protocol):
    """Read access to tenant memberships."""

    async def get_role(self, tenant_id: str, user_id: str) -> str | None:
        """Retrieve the stored role of a user within a tenant.

        Args:
            tenant_id: The tenant identifier
            user_id: The authenticated user's identifier

        Returns:
            The raw stored role string, or None if the user is not a member

        Raises:
            DirectoryQueryError: If the directory cannot be queried
        """
        ...
