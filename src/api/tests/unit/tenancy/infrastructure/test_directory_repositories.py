"""Unit tests for directory repositories over the managed backend."""

from unittest.mock import AsyncMock, Mock

import pytest

from infrastructure.backend import (
    BackendConnectionError,
    BackendQueryError,
    PostgRESTClient,
)
from tenancy.domain.value_objects import DomainType
from tenancy.infrastructure import (
    DomainRepository,
    MembershipRepository,
    TenantRepository,
)
from tenancy.ports.exceptions import DirectoryQueryError
from tenancy.ports.repositories import (
    IDomainRepository,
    IMembershipRepository,
    ITenantRepository,
)


@pytest.fixture
def mock_client():
    client = Mock(spec=PostgRESTClient)
    client.select = AsyncMock(return_value=[])
    return client


DOMAIN_ROW = {
    "id": "d1",
    "tenant_id": "t1",
    "hostname": "painel.viafatto.com.br",
    "type": "admin",
    "is_primary": True,
    "verified": True,
    "verify_token": None,
    "created_at": "2025-01-10T09:30:00+00:00",
}


class TestDomainRepository:
    def test_implements_protocol(self, mock_client):
        assert isinstance(DomainRepository(mock_client), IDomainRepository)

    @pytest.mark.asyncio
    async def test_queries_verified_domains_of_type(self, mock_client):
        mock_client.select.return_value = [DOMAIN_ROW]
        repo = DomainRepository(mock_client)

        domains = await repo.find_verified("Painel.ViaFatto.com.br", DomainType.ADMIN)

        assert [d.id for d in domains] == ["d1"]
        mock_client.select.assert_awaited_once_with(
            "domains",
            filters={
                "hostname": "painel.viafatto.com.br",
                "type": "admin",
                "verified": True,
            },
        )

    @pytest.mark.asyncio
    async def test_backend_error_becomes_query_error(self, mock_client):
        mock_client.select.side_effect = BackendQueryError(
            "HTTP 503", table="domains", status_code=503
        )
        repo = DomainRepository(mock_client)

        with pytest.raises(DirectoryQueryError) as exc_info:
            await repo.find_verified("viafatto.com.br", DomainType.PUBLIC)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_malformed_row_becomes_query_error(self, mock_client):
        mock_client.select.return_value = [{"id": "d1", "type": "admin"}]
        repo = DomainRepository(mock_client)

        with pytest.raises(DirectoryQueryError):
            await repo.find_verified("viafatto.com.br", DomainType.ADMIN)


class TestTenantRepository:
    def test_implements_protocol(self, mock_client):
        assert isinstance(TenantRepository(mock_client), ITenantRepository)

    @pytest.mark.asyncio
    async def test_filters_on_active_status(self, mock_client):
        mock_client.select.return_value = [
            {"id": "t1", "name": "Via Fatto", "slug": "via-fatto", "status": "active"}
        ]
        repo = TenantRepository(mock_client)

        tenant = await repo.get_active("t1")

        assert tenant is not None
        assert tenant.name == "Via Fatto"
        mock_client.select.assert_awaited_once_with(
            "tenants", filters={"id": "t1", "status": "active"}, limit=1
        )

    @pytest.mark.asyncio
    async def test_no_rows_returns_none(self, mock_client):
        repo = TenantRepository(mock_client)

        assert await repo.get_active("missing") is None

    @pytest.mark.asyncio
    async def test_connection_error_becomes_query_error(self, mock_client):
        mock_client.select.side_effect = BackendConnectionError("refused")
        repo = TenantRepository(mock_client)

        with pytest.raises(DirectoryQueryError) as exc_info:
            await repo.get_active("t1")

        assert exc_info.value.status_code is None


class TestMembershipRepository:
    def test_implements_protocol(self, mock_client):
        assert isinstance(MembershipRepository(mock_client), IMembershipRepository)

    @pytest.mark.asyncio
    async def test_returns_stored_role(self, mock_client):
        mock_client.select.return_value = [{"role": "agent"}]
        repo = MembershipRepository(mock_client)

        assert await repo.get_role("t1", "u1") == "agent"
        mock_client.select.assert_awaited_once_with(
            "tenant_users",
            filters={"tenant_id": "t1", "user_id": "u1"},
            columns="role",
            limit=1,
        )

    @pytest.mark.asyncio
    async def test_non_member_returns_none(self, mock_client):
        repo = MembershipRepository(mock_client)

        assert await repo.get_role("t1", "u1") is None
