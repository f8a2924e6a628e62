"""Infrastructure adapters for Tenancy bounded context."""

from tenancy.infrastructure.domain_repository import DomainRepository
from tenancy.infrastructure.membership_repository import MembershipRepository
from tenancy.infrastructure.override_stores import (
    InMemoryTenantOverrideStore,
    JsonFileTenantOverrideStore,
)
from tenancy.infrastructure.tenant_repository import TenantRepository

__all__ = [
    "DomainRepository",
    "InMemoryTenantOverrideStore",
    "JsonFileTenantOverrideStore",
    "MembershipRepository",
    "TenantRepository",
]
