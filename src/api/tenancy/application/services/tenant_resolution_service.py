"""Tenant resolution engine.

Produces one authoritative tenant binding per session from the hostname
the application is served on. Resolution paths are tried in a fixed
priority order, each awaited before the next:

1. Domain directory (any environment). Success always overwrites the
   local override cache; domain truth outranks any cached value.
2. Local override cache (non-production only).
3. Static development fallback tenant (non-production only). Success
   seeds the cache so later sessions take path 2.

A production hostname whose domain resolution fails stops at step 1:
a misconfigured or unverified production domain must never silently
bind to a stale cached tenant or the development tenant.
"""

from __future__ import annotations

from tenancy.application.observability import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)
from tenancy.application.services.domain_resolver import DomainResolverService
from tenancy.application.services.tenant_lookup import TenantLookupService
from tenancy.application.value_objects import ResolutionConfig
from tenancy.domain.entities import Tenant
from tenancy.domain.host_classifier import classify_environment, normalize_hostname
from tenancy.domain.resolution import ResolutionResult
from tenancy.domain.value_objects import ResolutionErrorCode, ResolutionReason
from tenancy.ports.override_store import ITenantOverrideStore


class TenantResolutionService:
    """Resolves the tenant for a hostname. Never raises.

    Each call performs fresh lookups; nothing is memoized between calls,
    so calling ``resolve`` again is the retry and refresh mechanism.
    """

    def __init__(
        self,
        domain_resolver: DomainResolverService,
        tenant_lookup: TenantLookupService,
        override_store: ITenantOverrideStore,
        config: ResolutionConfig,
        probe: TenantResolutionProbe | None = None,
    ):
        """Initialize TenantResolutionService with dependencies.

        Args:
            domain_resolver: Resolves hostnames via the domain directory
            tenant_lookup: Fetches active tenants by id
            override_store: Client-scoped cache of the last resolved tenant id
            config: Fallback tenant id and dev-build flag
            probe: Optional domain probe for observability
        """
        self._domain_resolver = domain_resolver
        self._tenant_lookup = tenant_lookup
        self._override_store = override_store
        self._config = config
        self._probe = probe or DefaultTenantResolutionProbe()

    async def resolve(self, hostname: str) -> ResolutionResult:
        """Resolve the tenant for a hostname.

        Args:
            hostname: Hostname the application is served on, any case

        Returns:
            ResolutionResult carrying either a tenant or an error code,
            tagged with the path that produced it
        """
        host = normalize_hostname(hostname)
        environment = classify_environment(host)
        self._probe.resolution_started(
            hostname=host, is_dev=environment.is_dev, is_prod=environment.is_prod
        )

        by_domain = await self._domain_resolver.resolve_by_hostname(host)
        if by_domain.succeeded:
            assert by_domain.tenant is not None
            self._write_override(by_domain.tenant.id)
            return self._succeed(
                host,
                ResolutionResult.success(
                    tenant=by_domain.tenant,
                    domain=by_domain.domain,
                    reason=ResolutionReason.DOMAINS,
                ),
            )

        if environment.is_prod:
            error = by_domain.error or ResolutionErrorCode.RESOLUTION_ERROR
            self._probe.production_resolution_failed(hostname=host, error=error.value)
            return ResolutionResult.failure(error=error, domain=by_domain.domain)

        cached_tenant = await self._resolve_from_override(host)
        if cached_tenant is not None:
            return self._succeed(
                host,
                ResolutionResult.success(
                    tenant=cached_tenant, reason=ResolutionReason.LOCAL_OVERRIDE
                ),
            )

        fallback_id = self._config.fallback_tenant_id
        fallback_tenant = await self._tenant_lookup.fetch_active_tenant(fallback_id)
        if fallback_tenant is not None:
            self._write_override(fallback_tenant.id)
            return self._succeed(
                host,
                ResolutionResult.success(
                    tenant=fallback_tenant, reason=ResolutionReason.DEV_FALLBACK
                ),
            )

        self._probe.all_methods_failed(hostname=host, fallback_tenant_id=fallback_id)
        return ResolutionResult.failure(
            error=ResolutionErrorCode.ALL_RESOLUTION_METHODS_FAILED
        )

    async def _resolve_from_override(self, hostname: str) -> Tenant | None:
        tenant_id = self._read_override()
        if not tenant_id:
            return None

        tenant = await self._tenant_lookup.fetch_active_tenant(tenant_id)
        if tenant is None:
            self._probe.override_rejected(hostname=hostname, tenant_id=tenant_id)
        return tenant

    def _read_override(self) -> str | None:
        # An unreadable cache is an empty cache.
        try:
            return self._override_store.get()
        except Exception as e:
            self._probe.override_store_failed(operation="read", error=e)
            return None

    def _write_override(self, tenant_id: str) -> None:
        try:
            self._override_store.set(tenant_id)
        except Exception as e:
            self._probe.override_store_failed(operation="write", error=e)

    def _succeed(self, hostname: str, result: ResolutionResult) -> ResolutionResult:
        assert result.tenant is not None
        self._probe.tenant_resolved(
            hostname=hostname,
            tenant_id=result.tenant.id,
            reason=result.reason.value,
        )
        if self._config.is_dev_build:
            self._probe.resolution_details(
                hostname=hostname,
                tenant_id=result.tenant.id,
                tenant_name=result.tenant.name,
                domain_type=result.domain.type.value if result.domain else None,
            )
        return result
