"""Hostname to tenant resolution through the domain directory."""

from __future__ import annotations

from tenancy.application.observability import (
    DefaultDomainResolverProbe,
    DomainResolverProbe,
)
from tenancy.application.services.tenant_lookup import TenantLookupService
from tenancy.domain.host_classifier import classify_domain_type, normalize_hostname
from tenancy.domain.resolution import DomainResolution, select_domain
from tenancy.domain.value_objects import ResolutionErrorCode
from tenancy.ports.exceptions import DirectoryQueryError
from tenancy.ports.repositories import IDomainRepository


class DomainResolverService:
    """Resolves a hostname to its owning tenant via verified domain records.

    The hostname's classified type must match the record's type, and only
    verified records participate. Failures are returned as error codes;
    this service never raises.
    """

    def __init__(
        self,
        domain_repository: IDomainRepository,
        tenant_lookup: TenantLookupService,
        probe: DomainResolverProbe | None = None,
    ):
        self._domain_repository = domain_repository
        self._tenant_lookup = tenant_lookup
        self._probe = probe or DefaultDomainResolverProbe()

    async def resolve_by_hostname(self, hostname: str) -> DomainResolution:
        """Resolve a hostname against the domain directory.

        Args:
            hostname: Requesting hostname, any case

        Returns:
            DomainResolution with tenant and domain on success; otherwise an
            error code (DOMAIN_QUERY_ERROR, DOMAIN_NOT_FOUND, TENANT_NOT_FOUND
            with the matched domain, or RESOLUTION_ERROR)
        """
        host = normalize_hostname(hostname)
        try:
            domain_type = classify_domain_type(host)

            try:
                candidates = await self._domain_repository.find_verified(
                    host, domain_type
                )
            except DirectoryQueryError as e:
                self._probe.domain_query_failed(hostname=host, error=e)
                return DomainResolution(error=ResolutionErrorCode.DOMAIN_QUERY_ERROR)

            # Adapters filter on these already; re-check so an unverified or
            # mistyped record can never resolve.
            candidates = [
                d for d in candidates if d.verified and d.type == domain_type
            ]
            domain = select_domain(candidates)
            if domain is None:
                self._probe.domain_not_found(
                    hostname=host, domain_type=domain_type.value
                )
                return DomainResolution(error=ResolutionErrorCode.DOMAIN_NOT_FOUND)

            if len(candidates) > 1:
                self._probe.duplicate_domains_found(
                    hostname=host,
                    count=len(candidates),
                    selected_domain_id=domain.id,
                )

            tenant = await self._tenant_lookup.fetch_active_tenant(domain.tenant_id)
            if tenant is None:
                self._probe.domain_tenant_not_found(
                    hostname=host, domain_id=domain.id, tenant_id=domain.tenant_id
                )
                return DomainResolution(
                    domain=domain, error=ResolutionErrorCode.TENANT_NOT_FOUND
                )

            self._probe.domain_resolved(
                hostname=host, domain_id=domain.id, tenant_id=tenant.id
            )
            return DomainResolution(tenant=tenant, domain=domain)

        except Exception as e:
            self._probe.resolution_error(hostname=host, error=e)
            return DomainResolution(error=ResolutionErrorCode.RESOLUTION_ERROR)
