"""Domain-Oriented Observability for Tenancy application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from tenancy.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from tenancy.application.observability.domain_resolver_probe import (
    DefaultDomainResolverProbe,
    DomainResolverProbe,
)
from tenancy.application.observability.lookup_probe import (
    DefaultRoleLookupProbe,
    DefaultTenantLookupProbe,
    RoleLookupProbe,
    TenantLookupProbe,
)
from tenancy.application.observability.tenant_resolution_probe import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)
from tenancy.application.observability.tenant_session_probe import (
    DefaultTenantSessionProbe,
    TenantSessionProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "DomainResolverProbe",
    "DefaultDomainResolverProbe",
    "TenantLookupProbe",
    "DefaultTenantLookupProbe",
    "RoleLookupProbe",
    "DefaultRoleLookupProbe",
    "TenantResolutionProbe",
    "DefaultTenantResolutionProbe",
    "TenantSessionProbe",
    "DefaultTenantSessionProbe",
]
