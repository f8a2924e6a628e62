"""Pydantic models for tenancy API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tenancy.domain.access_gate import GateOutcome
from tenancy.domain.binding import TenantBinding
from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.value_objects import HostEnvironment


class TenantResponse(BaseModel):
    """Response model for a tenant."""

    id: str = Field(..., description="Tenant ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL-friendly name")
    status: str = Field(..., description="Lifecycle status")
    settings: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantResponse:
        return cls(**tenant.to_dict())


class DomainResponse(BaseModel):
    """Response model for a domain record."""

    id: str
    tenant_id: str
    hostname: str
    type: str = Field(..., description="public or admin")
    is_primary: bool
    verified: bool
    verify_token: str | None = None

    @classmethod
    def from_domain(cls, domain: Domain) -> DomainResponse:
        return cls(**domain.to_dict())


class EnvironmentResponse(BaseModel):
    is_dev: bool
    is_prod: bool
    domain_type: str


class ResolutionResponse(BaseModel):
    """Response model for a tenant resolution.

    An unresolved tenant is reported in the body, not as an HTTP error.
    """

    hostname: str
    tenant: TenantResponse | None = None
    domain: DomainResponse | None = None
    error: str | None = Field(default=None, description="Resolution error code")
    reason: str | None = Field(
        default=None, description="domains, localOverride, devFallback or error"
    )
    is_resolved: bool
    environment: EnvironmentResponse

    @classmethod
    def from_binding(
        cls,
        hostname: str,
        binding: TenantBinding,
        environment: HostEnvironment,
        domain_type: str,
    ) -> ResolutionResponse:
        return cls(
            hostname=hostname,
            tenant=TenantResponse.from_domain(binding.tenant) if binding.tenant else None,
            domain=DomainResponse.from_domain(binding.domain) if binding.domain else None,
            error=binding.error.value if binding.error else None,
            reason=binding.reason.value if binding.reason else None,
            is_resolved=binding.is_resolved,
            environment=EnvironmentResponse(
                is_dev=environment.is_dev,
                is_prod=environment.is_prod,
                domain_type=domain_type,
            ),
        )


class RoleResponse(BaseModel):
    """Response model for the user's role within the resolved tenant."""

    tenant_id: str | None
    user_id: str
    role: str | None = Field(default=None, description="owner, admin or agent")
    is_tenant_member: bool
    is_owner_or_admin: bool
    can_manage_users: bool

    @classmethod
    def from_binding(cls, user_id: str, binding: TenantBinding) -> RoleResponse:
        return cls(
            tenant_id=binding.tenant_id,
            user_id=user_id,
            role=binding.role.value if binding.role else None,
            is_tenant_member=binding.is_tenant_member,
            is_owner_or_admin=binding.is_owner_or_admin,
            can_manage_users=binding.can_manage_users,
        )


class GateResponse(BaseModel):
    """Response model for the admin access gate."""

    decision: str = Field(
        ...,
        description="loading, domain_not_configured, access_denied or allowed",
    )
    allowed: bool
    user_id: str | None = Field(
        default=None,
        description="Signed-in user the decision was made for; None when signed out",
    )
    verify_token: str | None = None
    tenant_name: str | None = None
    error: str | None = None

    @classmethod
    def from_outcome(
        cls,
        outcome: GateOutcome,
        binding: TenantBinding,
        user_id: str | None = None,
    ) -> GateResponse:
        return cls(
            user_id=user_id,
            decision=outcome.decision.value,
            allowed=outcome.allowed,
            verify_token=outcome.verify_token,
            tenant_name=outcome.tenant_name,
            error=binding.error.value if binding.error else None,
        )


class RoutingResponse(BaseModel):
    """Response model for domain-based routing of one path."""

    is_admin_subdomain: bool
    redirect_to: str | None = None
    public_url: str
    admin_url: str
