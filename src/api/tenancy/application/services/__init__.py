"""Application services for the Tenancy bounded context."""

from tenancy.application.services.domain_resolver import DomainResolverService
from tenancy.application.services.role_lookup import RoleLookupService
from tenancy.application.services.tenant_lookup import TenantLookupService
from tenancy.application.services.tenant_resolution_service import (
    TenantResolutionService,
)
from tenancy.application.services.tenant_session import TenantSession

__all__ = [
    "DomainResolverService",
    "RoleLookupService",
    "TenantLookupService",
    "TenantResolutionService",
    "TenantSession",
]
