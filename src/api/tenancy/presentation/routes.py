"""HTTP routes for Tenancy bounded context.

Exposes the session tenant binding to the front-end. The hostname is
taken from the request, so each route answers for the domain it was
called on.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tenancy.application.services import TenantSession
from tenancy.dependencies import (
    get_authenticated_user_id,
    get_optional_user_id,
    get_request_hostname,
    get_tenant_session,
)
from tenancy.domain.access_gate import evaluate_access
from tenancy.domain.host_classifier import (
    classify_domain_type,
    classify_environment,
)
from tenancy.domain.routing import (
    ADMIN_ROOT,
    admin_url,
    is_admin_subdomain,
    public_url,
    should_redirect_to_admin,
)
from tenancy.presentation.models import (
    GateResponse,
    ResolutionResponse,
    RoleResponse,
    RoutingResponse,
)

router = APIRouter(prefix="/tenant", tags=["tenant"])


@router.get("/resolution")
async def get_resolution(
    hostname: Annotated[str, Depends(get_request_hostname)],
    session: Annotated[TenantSession, Depends(get_tenant_session)],
) -> ResolutionResponse:
    """Resolve the tenant for the requesting hostname.

    Sets the ``active_tenant_id`` cookie whenever resolution updates the
    local override.
    """
    binding = await session.refresh(hostname)
    return ResolutionResponse.from_binding(
        hostname=hostname.lower(),
        binding=binding,
        environment=classify_environment(hostname),
        domain_type=classify_domain_type(hostname).value,
    )


@router.get("/role")
async def get_role(
    hostname: Annotated[str, Depends(get_request_hostname)],
    session: Annotated[TenantSession, Depends(get_tenant_session)],
    user_id: Annotated[str, Depends(get_authenticated_user_id)],
) -> RoleResponse:
    """Resolve the tenant and return the signed-in user's role within it.

    The user is taken from the bearer token; anonymous calls get 401.
    """
    await session.set_user(user_id)
    binding = await session.refresh(hostname)
    return RoleResponse.from_binding(user_id=user_id, binding=binding)


@router.get("/gate")
async def get_gate(
    hostname: Annotated[str, Depends(get_request_hostname)],
    session: Annotated[TenantSession, Depends(get_tenant_session)],
    user_id: Annotated[str | None, Depends(get_optional_user_id)],
) -> GateResponse:
    """Decide whether the admin panel may be shown on this hostname.

    Without a bearer token the caller is a signed-out visitor: the gate
    lets them through to sign in, and no membership is looked up.
    """
    await session.set_user(user_id)
    binding = await session.refresh(hostname)
    outcome = evaluate_access(binding, user_id=user_id)
    return GateResponse.from_outcome(outcome, binding, user_id=user_id)


@router.get("/routing")
def get_routing(
    hostname: Annotated[str, Depends(get_request_hostname)],
    path: Annotated[str, Query(description="Path being visited")] = "/",
) -> RoutingResponse:
    """Describe where ``path`` belongs for the requesting hostname."""
    return RoutingResponse(
        is_admin_subdomain=is_admin_subdomain(hostname),
        redirect_to=ADMIN_ROOT if should_redirect_to_admin(hostname, path) else None,
        public_url=public_url(hostname, path),
        admin_url=admin_url(hostname, path),
    )
