"""Session tenant binding.

The binding is the snapshot the rest of the application reads: which
tenant the session is bound to, how it got there, and the signed-in
user's role within it. A new snapshot replaces the old one on every
change; consumers never mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.resolution import ResolutionResult
from tenancy.domain.value_objects import (
    ResolutionErrorCode,
    ResolutionReason,
    TenantRole,
)


def is_owner_or_admin(role: TenantRole | None) -> bool:
    return role in (TenantRole.OWNER, TenantRole.ADMIN)


@dataclass(frozen=True)
class TenantBinding:
    """Current tenant binding of one application session.

    Attributes:
        tenant: Resolved tenant, None until resolution succeeds.
        domain: Domain record involved in the resolution, if any.
        error: Resolution error code, None when resolved.
        reason: Which path produced the binding, None before the first resolve.
        loading: True while a resolution is in flight.
        role: Signed-in user's role within the tenant.
        role_loading: True while the role lookup is in flight.
    """

    tenant: Tenant | None = None
    domain: Domain | None = None
    error: ResolutionErrorCode | None = None
    reason: ResolutionReason | None = None
    loading: bool = True
    role: TenantRole | None = None
    role_loading: bool = False

    @classmethod
    def from_result(cls, result: ResolutionResult) -> TenantBinding:
        return cls(
            tenant=result.tenant,
            domain=result.domain,
            error=result.error,
            reason=result.reason,
            loading=False,
        )

    @property
    def tenant_id(self) -> str | None:
        return self.tenant.id if self.tenant else None

    @property
    def is_resolved(self) -> bool:
        return self.tenant is not None

    @property
    def is_tenant_member(self) -> bool:
        return self.role is not None

    @property
    def is_owner_or_admin(self) -> bool:
        return is_owner_or_admin(self.role)

    @property
    def can_manage_users(self) -> bool:
        return self.is_owner_or_admin

    def with_role(self, role: TenantRole | None, loading: bool = False) -> TenantBinding:
        return replace(self, role=role, role_loading=loading)
