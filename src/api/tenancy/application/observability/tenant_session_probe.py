"""Protocol for tenant session observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantSessionProbe(Protocol):
    """Domain probe for session tenant binding changes."""

    def binding_refreshed(
        self, tenant_id: str | None, error: str | None, reason: str
    ) -> None:
        """Record that the tenant binding was recomputed."""
        ...

    def user_changed(self, user_id: str | None) -> None:
        """Record that the authenticated user changed."""
        ...

    def role_recomputed(
        self, tenant_id: str | None, user_id: str | None, role: str | None
    ) -> None:
        """Record that the user's role was recomputed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantSessionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantSessionProbe:
    """Default implementation of TenantSessionProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantSessionProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantSessionProbe(logger=self._logger, context=context)

    def binding_refreshed(
        self, tenant_id: str | None, error: str | None, reason: str
    ) -> None:
        self._logger.info(
            "tenant_binding_refreshed",
            tenant_id=tenant_id,
            error=error,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def user_changed(self, user_id: str | None) -> None:
        self._logger.debug(
            "tenant_session_user_changed",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def role_recomputed(
        self, tenant_id: str | None, user_id: str | None, role: str | None
    ) -> None:
        self._logger.debug(
            "tenant_session_role_recomputed",
            tenant_id=tenant_id,
            user_id=user_id,
            role=role,
            **self._get_context_kwargs(),
        )
