"""Unit tests for TenantResolutionService.

Covers the fixed resolution order (domains, local override, dev fallback),
production gating and the override cache side effects.
"""

from unittest.mock import Mock

import pytest

from tenancy.application.observability import TenantResolutionProbe
from tenancy.application.services import (
    DomainResolverService,
    TenantLookupService,
    TenantResolutionService,
)
from tenancy.application.value_objects import ResolutionConfig
from tenancy.domain.value_objects import ResolutionErrorCode, ResolutionReason
from tenancy.infrastructure.override_stores import InMemoryTenantOverrideStore
from tenancy.ports.exceptions import DirectoryQueryError
from tenancy.ports.override_store import ITenantOverrideStore

FALLBACK_ID = "a0000000-0000-0000-0000-000000000001"
VIAFATTO_ID = "f136543f-0000-4000-8000-00000000982f"
CACHED_ID = "c0000000-0000-0000-0000-0000000000cc"


@pytest.fixture
def tenants(make_tenant):
    """Active tenants known to the directory, keyed by id."""
    return {
        FALLBACK_ID: make_tenant(tenant_id=FALLBACK_ID, name="Dev Tenant"),
        VIAFATTO_ID: make_tenant(tenant_id=VIAFATTO_ID, name="Via Fatto"),
        CACHED_ID: make_tenant(tenant_id=CACHED_ID, name="Cached Tenant"),
    }


@pytest.fixture
def tenant_repo(mock_tenant_repo, tenants):
    mock_tenant_repo.get_active.side_effect = lambda tenant_id: tenants.get(tenant_id)
    return mock_tenant_repo


@pytest.fixture
def override_store():
    return InMemoryTenantOverrideStore()


@pytest.fixture
def mock_probe():
    return Mock(spec=TenantResolutionProbe)


@pytest.fixture
def make_service(mock_domain_repo, tenant_repo, override_store, mock_probe):
    def _make(store=None, is_dev_build=False):
        tenant_lookup = TenantLookupService(tenant_repo)
        return TenantResolutionService(
            domain_resolver=DomainResolverService(mock_domain_repo, tenant_lookup),
            tenant_lookup=tenant_lookup,
            override_store=store if store is not None else override_store,
            config=ResolutionConfig(
                fallback_tenant_id=FALLBACK_ID, is_dev_build=is_dev_build
            ),
            probe=mock_probe,
        )

    return _make


def fetched_ids(tenant_repo) -> list[str]:
    return [c.args[0] for c in tenant_repo.get_active.await_args_list]


class TestDomainResolution:
    """Domain directory hits, in any environment."""

    @pytest.mark.asyncio
    async def test_production_admin_domain(
        self, make_service, mock_domain_repo, override_store, make_domain
    ):
        mock_domain_repo.find_verified.return_value = [make_domain()]
        service = make_service()

        result = await service.resolve("painel.viafatto.com.br")

        assert result.tenant.id == VIAFATTO_ID
        assert result.reason == ResolutionReason.DOMAINS
        assert result.domain.hostname == "painel.viafatto.com.br"
        assert result.error is None
        assert override_store.get() == VIAFATTO_ID

    @pytest.mark.asyncio
    async def test_domain_hit_overwrites_cached_tenant(
        self, make_service, mock_domain_repo, make_domain
    ):
        """Domain truth outranks whatever the cache held before."""
        store = InMemoryTenantOverrideStore(tenant_id=CACHED_ID)
        mock_domain_repo.find_verified.return_value = [
            make_domain(hostname="painel.localhost")
        ]
        service = make_service(store=store)

        result = await service.resolve("painel.localhost")

        assert result.reason == ResolutionReason.DOMAINS
        assert result.tenant.id == VIAFATTO_ID
        assert store.get() == VIAFATTO_ID

    @pytest.mark.asyncio
    async def test_hostname_case_is_ignored(
        self, make_service, mock_domain_repo, make_domain
    ):
        mock_domain_repo.find_verified.return_value = [
            make_domain(hostname="painel.example.com")
        ]
        service = make_service()

        upper = await service.resolve("Painel.Example.com")
        lower = await service.resolve("painel.example.com")

        assert upper == lower
        assert upper.reason == ResolutionReason.DOMAINS
        for call in mock_domain_repo.find_verified.await_args_list:
            assert call.args[0] == "painel.example.com"


class TestIdempotence:
    """Repeated resolution with unchanged directory and cache."""

    @pytest.mark.asyncio
    async def test_domain_hit_is_stable(
        self, make_service, mock_domain_repo, make_domain
    ):
        mock_domain_repo.find_verified.return_value = [make_domain()]
        service = make_service()

        first = await service.resolve("painel.viafatto.com.br")
        second = await service.resolve("painel.viafatto.com.br")

        assert first == second
        assert first.reason == ResolutionReason.DOMAINS

    @pytest.mark.asyncio
    async def test_seeded_override_is_stable(self, make_service, tenant_repo):
        store = InMemoryTenantOverrideStore(tenant_id=CACHED_ID)
        service = make_service(store=store)

        first = await service.resolve("localhost")
        second = await service.resolve("localhost")

        assert first == second
        assert first.reason == ResolutionReason.LOCAL_OVERRIDE
        assert first.tenant.id == CACHED_ID
        assert store.get() == CACHED_ID
        assert FALLBACK_ID not in fetched_ids(tenant_repo)


class TestProductionGating:
    """Production hostnames never fall back to the cache or dev tenant."""

    @pytest.mark.asyncio
    async def test_unknown_production_domain_fails(
        self, make_service, tenant_repo, mock_probe
    ):
        store = Mock(spec=ITenantOverrideStore)
        store.get.return_value = CACHED_ID
        service = make_service(store=store)

        result = await service.resolve("unknown-customer.com.br")

        assert result.tenant is None
        assert result.error == ResolutionErrorCode.DOMAIN_NOT_FOUND
        assert result.reason == ResolutionReason.ERROR
        store.get.assert_not_called()
        store.set.assert_not_called()
        tenant_repo.get_active.assert_not_awaited()
        mock_probe.production_resolution_failed.assert_called_once_with(
            hostname="unknown-customer.com.br", error="DOMAIN_NOT_FOUND"
        )

    @pytest.mark.asyncio
    async def test_production_tenant_not_found_keeps_domain(
        self, make_service, mock_domain_repo, tenant_repo, make_domain
    ):
        domain = make_domain(tenant_id="deleted-tenant", verify_token="tok-1")
        mock_domain_repo.find_verified.return_value = [domain]
        service = make_service()

        result = await service.resolve("painel.viafatto.com.br")

        assert result.error == ResolutionErrorCode.TENANT_NOT_FOUND
        assert result.domain is domain
        assert fetched_ids(tenant_repo) == ["deleted-tenant"]

    @pytest.mark.asyncio
    async def test_production_query_error(
        self, make_service, mock_domain_repo, override_store
    ):
        mock_domain_repo.find_verified.side_effect = DirectoryQueryError("down")
        override_store.set(CACHED_ID)
        service = make_service()

        result = await service.resolve("painel.viafatto.com.br")

        assert result.error == ResolutionErrorCode.DOMAIN_QUERY_ERROR
        assert override_store.get() == CACHED_ID


class TestNonProductionChain:
    """Local override cache, then the static dev fallback."""

    @pytest.mark.asyncio
    async def test_localhost_uses_dev_fallback_and_seeds_cache(
        self, make_service, override_store, tenant_repo
    ):
        service = make_service()

        result = await service.resolve("localhost")

        assert result.tenant.id == FALLBACK_ID
        assert result.reason == ResolutionReason.DEV_FALLBACK
        assert result.domain is None
        assert override_store.get() == FALLBACK_ID
        assert fetched_ids(tenant_repo) == [FALLBACK_ID]

    @pytest.mark.asyncio
    async def test_second_resolution_uses_local_override(
        self, make_service, override_store, tenant_repo
    ):
        service = make_service()

        first = await service.resolve("localhost")
        second = await service.resolve("localhost")

        assert first.reason == ResolutionReason.DEV_FALLBACK
        assert second.reason == ResolutionReason.LOCAL_OVERRIDE
        assert second.tenant == first.tenant
        # One fetch per resolution; the fallback is not looked up again.
        assert fetched_ids(tenant_repo) == [FALLBACK_ID, FALLBACK_ID]

    @pytest.mark.asyncio
    async def test_cached_tenant_preferred_over_fallback(
        self, make_service, override_store, tenant_repo
    ):
        override_store.set(CACHED_ID)
        service = make_service()

        result = await service.resolve("preview-1.lovable.app")

        assert result.reason == ResolutionReason.LOCAL_OVERRIDE
        assert result.tenant.id == CACHED_ID
        assert fetched_ids(tenant_repo) == [CACHED_ID]

    @pytest.mark.asyncio
    async def test_stale_cache_falls_through_to_fallback(
        self, make_service, override_store, mock_probe
    ):
        override_store.set("no-longer-active")
        service = make_service()

        result = await service.resolve("localhost")

        assert result.reason == ResolutionReason.DEV_FALLBACK
        assert override_store.get() == FALLBACK_ID
        mock_probe.override_rejected.assert_called_once_with(
            hostname="localhost", tenant_id="no-longer-active"
        )

    @pytest.mark.asyncio
    async def test_bare_hostname_is_non_production(self, make_service):
        service = make_service()

        result = await service.resolve("intranet")

        assert result.reason == ResolutionReason.DEV_FALLBACK

    @pytest.mark.asyncio
    async def test_all_methods_failed(
        self, make_service, tenants, override_store, mock_probe
    ):
        tenants.clear()
        service = make_service()

        result = await service.resolve("localhost")

        assert result.tenant is None
        assert result.error == ResolutionErrorCode.ALL_RESOLUTION_METHODS_FAILED
        assert result.reason == ResolutionReason.ERROR
        assert override_store.get() is None
        mock_probe.all_methods_failed.assert_called_once_with(
            hostname="localhost", fallback_tenant_id=FALLBACK_ID
        )


class TestOverrideStoreFailures:
    """A broken cache never breaks resolution."""

    @pytest.mark.asyncio
    async def test_unreadable_cache_is_empty(self, make_service, mock_probe):
        error = OSError("read-only profile")
        store = Mock(spec=ITenantOverrideStore)
        store.get.side_effect = error
        service = make_service(store=store)

        result = await service.resolve("localhost")

        assert result.reason == ResolutionReason.DEV_FALLBACK
        mock_probe.override_store_failed.assert_called_once_with(
            operation="read", error=error
        )

    @pytest.mark.asyncio
    async def test_unwritable_cache_keeps_result(
        self, make_service, mock_domain_repo, mock_probe, make_domain
    ):
        error = OSError("disk full")
        store = Mock(spec=ITenantOverrideStore)
        store.set.side_effect = error
        mock_domain_repo.find_verified.return_value = [make_domain()]
        service = make_service(store=store)

        result = await service.resolve("painel.viafatto.com.br")

        assert result.reason == ResolutionReason.DOMAINS
        mock_probe.override_store_failed.assert_called_once_with(
            operation="write", error=error
        )


class TestObservability:
    @pytest.mark.asyncio
    async def test_reports_resolved_tenant(self, make_service, mock_probe):
        service = make_service()

        await service.resolve("localhost")

        mock_probe.resolution_started.assert_called_once_with(
            hostname="localhost", is_dev=True, is_prod=False
        )
        mock_probe.tenant_resolved.assert_called_once_with(
            hostname="localhost", tenant_id=FALLBACK_ID, reason="devFallback"
        )
        mock_probe.resolution_details.assert_not_called()

    @pytest.mark.asyncio
    async def test_dev_build_reports_details(self, make_service, mock_probe):
        service = make_service(is_dev_build=True)

        await service.resolve("localhost")

        mock_probe.resolution_details.assert_called_once_with(
            hostname="localhost",
            tenant_id=FALLBACK_ID,
            tenant_name="Dev Tenant",
            domain_type=None,
        )
