"""Protocols for tenant and role lookup observability.

Both lookups are total functions: failures are swallowed into a None
result, so these probes are the only place those failures surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantLookupProbe(Protocol):
    """Domain probe for active-tenant lookups."""

    def tenant_found(self, tenant_id: str) -> None:
        """Record that an active tenant was found."""
        ...

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that no active tenant exists with this id."""
        ...

    def tenant_lookup_failed(self, tenant_id: str, error: Exception) -> None:
        """Record that the tenant lookup failed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantLookupProbe:
        """Create a new probe with observation context bound."""
        ...


class RoleLookupProbe(Protocol):
    """Domain probe for membership role lookups."""

    def role_found(self, tenant_id: str, user_id: str, role: str) -> None:
        """Record that the user's role within the tenant was found."""
        ...

    def membership_not_found(self, tenant_id: str, user_id: str) -> None:
        """Record that the user is not a member of the tenant."""
        ...

    def unknown_role(self, tenant_id: str, user_id: str, raw_role: str) -> None:
        """Record that the stored role is outside the known set."""
        ...

    def role_lookup_failed(
        self, tenant_id: str, user_id: str, error: Exception
    ) -> None:
        """Record that the membership lookup failed."""
        ...

    def with_context(self, context: ObservationContext) -> RoleLookupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantLookupProbe:
    """Default implementation of TenantLookupProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantLookupProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantLookupProbe(logger=self._logger, context=context)

    def tenant_found(self, tenant_id: str) -> None:
        self._logger.debug(
            "active_tenant_found",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, tenant_id: str) -> None:
        self._logger.info(
            "active_tenant_not_found",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_lookup_failed(self, tenant_id: str, error: Exception) -> None:
        self._logger.error(
            "tenant_lookup_failed",
            tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )


class DefaultRoleLookupProbe:
    """Default implementation of RoleLookupProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRoleLookupProbe:
        """Create a new probe with observation context bound."""
        return DefaultRoleLookupProbe(logger=self._logger, context=context)

    def role_found(self, tenant_id: str, user_id: str, role: str) -> None:
        self._logger.debug(
            "tenant_role_found",
            tenant_id=tenant_id,
            user_id=user_id,
            role=role,
            **self._get_context_kwargs(),
        )

    def membership_not_found(self, tenant_id: str, user_id: str) -> None:
        self._logger.info(
            "tenant_membership_not_found",
            tenant_id=tenant_id,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def unknown_role(self, tenant_id: str, user_id: str, raw_role: str) -> None:
        self._logger.warning(
            "tenant_role_unknown",
            tenant_id=tenant_id,
            user_id=user_id,
            raw_role=raw_role,
            **self._get_context_kwargs(),
        )

    def role_lookup_failed(
        self, tenant_id: str, user_id: str, error: Exception
    ) -> None:
        self._logger.error(
            "tenant_role_lookup_failed",
            tenant_id=tenant_id,
            user_id=user_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
