"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock

import pytest

from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.value_objects import DomainType
from tenancy.ports.repositories import (
    IDomainRepository,
    IMembershipRepository,
    ITenantRepository,
)

VIAFATTO_TENANT_ID = "f136543f-0000-4000-8000-00000000982f"
FALLBACK_TENANT_ID = "a0000000-0000-0000-0000-000000000001"


@pytest.fixture
def make_tenant():
    """Factory for active tenants."""

    def _make(
        tenant_id: str = VIAFATTO_TENANT_ID,
        name: str = "Via Fatto Imoveis",
        status: str = "active",
    ) -> Tenant:
        return Tenant(
            id=tenant_id,
            name=name,
            slug=name.lower().replace(" ", "-"),
            status=status,
        )

    return _make


@pytest.fixture
def make_domain():
    """Factory for verified domain records."""

    def _make(
        hostname: str = "painel.viafatto.com.br",
        tenant_id: str = VIAFATTO_TENANT_ID,
        domain_type: DomainType = DomainType.ADMIN,
        domain_id: str = "dom-1",
        is_primary: bool = True,
        verified: bool = True,
        verify_token: str | None = None,
    ) -> Domain:
        return Domain(
            id=domain_id,
            tenant_id=tenant_id,
            hostname=hostname,
            type=domain_type,
            is_primary=is_primary,
            verified=verified,
            verify_token=verify_token,
        )

    return _make


@pytest.fixture
def mock_domain_repo():
    """Mock DomainRepository with no domains by default."""
    repo = AsyncMock(spec=IDomainRepository)
    repo.find_verified.return_value = []
    return repo


@pytest.fixture
def mock_tenant_repo():
    """Mock TenantRepository with no tenants by default."""
    repo = AsyncMock(spec=ITenantRepository)
    repo.get_active.return_value = None
    return repo


@pytest.fixture
def mock_membership_repo():
    """Mock MembershipRepository with no memberships by default."""
    repo = AsyncMock(spec=IMembershipRepository)
    repo.get_role.return_value = None
    return repo
