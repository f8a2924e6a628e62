"""Dependency injection for Tenancy bounded context.

Composes the shared backend client with tenancy-specific repositories,
services and the override cache, and resolves the authenticated caller
from the backend-issued bearer token. ``create_tenant_session`` builds
the same graph without FastAPI for in-process hosts.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from infrastructure.backend import BackendAuthClient, BackendError, PostgRESTClient
from infrastructure.dependencies import get_backend_auth_client, get_backend_client
from infrastructure.settings import TenancySettings, get_tenancy_settings
from tenancy.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from tenancy.application.services import (
    DomainResolverService,
    RoleLookupService,
    TenantLookupService,
    TenantResolutionService,
    TenantSession,
)
from tenancy.application.value_objects import ResolutionConfig
from tenancy.infrastructure import (
    DomainRepository,
    JsonFileTenantOverrideStore,
    MembershipRepository,
    TenantRepository,
)
from tenancy.infrastructure.cookie_store import CookieTenantOverrideStore
from tenancy.ports.override_store import ITenantOverrideStore

# auto_error=False so signed-out visitors reach routes that allow them
bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Access token issued by the managed backend's auth service",
)

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance."""
    return DefaultAuthenticationProbe()


async def get_optional_user_id(
    auth_client: Annotated[BackendAuthClient, Depends(get_backend_auth_client)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> str | None:
    """Resolve the signed-in user from the bearer token, if one was sent.

    Returns:
        The verified user id, or None for a request without a token

    Raises:
        HTTPException: 401 if the token is rejected, 503 if it cannot be
            verified
    """
    if credentials is None:
        return None

    try:
        user = await auth_client.get_user(credentials.credentials)
    except BackendError as e:
        auth_probe.authentication_unavailable(error=e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service unavailable",
        ) from e

    if user is None:
        auth_probe.authentication_failed(reason="access token rejected")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
            headers=_BEARER_CHALLENGE,
        )

    user_id = str(user["id"])
    auth_probe.user_authenticated(user_id=user_id)
    return user_id


async def get_authenticated_user_id(
    user_id: Annotated[str | None, Depends(get_optional_user_id)],
    auth_probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> str:
    """Resolve the signed-in user, rejecting anonymous requests with 401."""
    if user_id is None:
        auth_probe.authentication_failed(reason="missing bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_BEARER_CHALLENGE,
        )
    return user_id


def get_resolution_config(
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> ResolutionConfig:
    """Build the engine configuration from TenancySettings."""
    return ResolutionConfig(
        fallback_tenant_id=settings.fallback_tenant_id,
        is_dev_build=settings.is_dev_build,
    )


def get_tenant_lookup_service(
    client: Annotated[PostgRESTClient, Depends(get_backend_client)],
) -> TenantLookupService:
    """Get TenantLookupService instance."""
    return TenantLookupService(tenant_repository=TenantRepository(client))


def get_role_lookup_service(
    client: Annotated[PostgRESTClient, Depends(get_backend_client)],
) -> RoleLookupService:
    """Get RoleLookupService instance."""
    return RoleLookupService(membership_repository=MembershipRepository(client))


def get_domain_resolver_service(
    client: Annotated[PostgRESTClient, Depends(get_backend_client)],
    tenant_lookup: Annotated[TenantLookupService, Depends(get_tenant_lookup_service)],
) -> DomainResolverService:
    """Get DomainResolverService instance."""
    return DomainResolverService(
        domain_repository=DomainRepository(client),
        tenant_lookup=tenant_lookup,
    )


def _is_secure_request(request: Request) -> bool:
    """Whether the visitor reached us over HTTPS.

    Behind a TLS-terminating proxy the ASGI scheme is ``http``; the
    proxy's ``X-Forwarded-Proto`` (first hop) takes precedence.
    """
    forwarded = request.headers.get("x-forwarded-proto", "")
    client_proto = forwarded.split(",")[0].strip().lower()
    return (client_proto or request.url.scheme) == "https"


def get_override_store(
    request: Request,
    response: Response,
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> ITenantOverrideStore:
    """Get the request-scoped, cookie-backed override cache."""
    secure = settings.secure_cookies
    if secure is None:
        secure = _is_secure_request(request)
    return CookieTenantOverrideStore(request=request, response=response, secure=secure)


def get_tenant_resolution_service(
    domain_resolver: Annotated[
        DomainResolverService, Depends(get_domain_resolver_service)
    ],
    tenant_lookup: Annotated[TenantLookupService, Depends(get_tenant_lookup_service)],
    override_store: Annotated[ITenantOverrideStore, Depends(get_override_store)],
    config: Annotated[ResolutionConfig, Depends(get_resolution_config)],
) -> TenantResolutionService:
    """Get request-scoped TenantResolutionService instance."""
    return TenantResolutionService(
        domain_resolver=domain_resolver,
        tenant_lookup=tenant_lookup,
        override_store=override_store,
        config=config,
    )


def get_tenant_session(
    resolution_service: Annotated[
        TenantResolutionService, Depends(get_tenant_resolution_service)
    ],
    role_lookup: Annotated[RoleLookupService, Depends(get_role_lookup_service)],
) -> TenantSession:
    """Get a request-scoped TenantSession with no user bound yet."""
    return TenantSession(resolution_service=resolution_service, role_lookup=role_lookup)


def get_request_hostname(request: Request) -> str:
    """Hostname the request was addressed to, without port."""
    return request.url.hostname or ""


def get_file_override_store(
    settings: TenancySettings | None = None,
) -> JsonFileTenantOverrideStore:
    """Get the JSON file override cache at ``override_store_path``."""
    settings = settings or get_tenancy_settings()
    return JsonFileTenantOverrideStore(settings.override_store_path)


def create_tenant_session(
    client: PostgRESTClient,
    settings: TenancySettings,
    override_store: ITenantOverrideStore | None = None,
    user_id: str | None = None,
) -> TenantSession:
    """Compose a TenantSession for hosts that do not run under FastAPI.

    Args:
        client: Managed backend client
        settings: Tenancy settings (fallback tenant, dev-build flag,
            override file location)
        override_store: Client-scoped override cache; defaults to the
            JSON file at ``settings.override_store_path``
        user_id: Initially authenticated user, if any

    Returns:
        A TenantSession whose binding is still loading; call ``refresh``.
    """
    if override_store is None:
        override_store = get_file_override_store(settings)

    tenant_lookup = TenantLookupService(tenant_repository=TenantRepository(client))
    resolution_service = TenantResolutionService(
        domain_resolver=DomainResolverService(
            domain_repository=DomainRepository(client),
            tenant_lookup=tenant_lookup,
        ),
        tenant_lookup=tenant_lookup,
        override_store=override_store,
        config=ResolutionConfig(
            fallback_tenant_id=settings.fallback_tenant_id,
            is_dev_build=settings.is_dev_build,
        ),
    )
    return TenantSession(
        resolution_service=resolution_service,
        role_lookup=RoleLookupService(
            membership_repository=MembershipRepository(client)
        ),
        user_id=user_id,
    )
