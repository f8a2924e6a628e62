"""Domain probe for tenant resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the resolution procedure: which path won,
why production resolution stopped, and cache read/write problems.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantResolutionProbe(Protocol):
    """Domain probe for tenant resolution operations."""

    def resolution_started(self, hostname: str, is_dev: bool, is_prod: bool) -> None:
        """Record that a resolution attempt started."""
        ...

    def tenant_resolved(self, hostname: str, tenant_id: str, reason: str) -> None:
        """Record that a tenant was resolved and by which path."""
        ...

    def resolution_details(
        self,
        hostname: str,
        tenant_id: str,
        tenant_name: str,
        domain_type: str | None,
    ) -> None:
        """Record verbose details of a successful resolution (dev builds)."""
        ...

    def production_resolution_failed(self, hostname: str, error: str) -> None:
        """Record that domain resolution failed for a production hostname."""
        ...

    def override_rejected(self, hostname: str, tenant_id: str) -> None:
        """Record that the cached tenant id no longer resolves."""
        ...

    def all_methods_failed(self, hostname: str, fallback_tenant_id: str) -> None:
        """Record that domain, override and fallback resolution all failed."""
        ...

    def override_store_failed(self, operation: str, error: Exception) -> None:
        """Record that reading or writing the override cache failed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantResolutionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantResolutionProbe:
    """Default implementation of TenantResolutionProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantResolutionProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantResolutionProbe(logger=self._logger, context=context)

    def resolution_started(self, hostname: str, is_dev: bool, is_prod: bool) -> None:
        self._logger.debug(
            "tenant_resolution_started",
            hostname=hostname,
            is_dev=is_dev,
            is_prod=is_prod,
            **self._get_context_kwargs(),
        )

    def tenant_resolved(self, hostname: str, tenant_id: str, reason: str) -> None:
        self._logger.info(
            "tenant_resolved",
            hostname=hostname,
            tenant_id=tenant_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def resolution_details(
        self,
        hostname: str,
        tenant_id: str,
        tenant_name: str,
        domain_type: str | None,
    ) -> None:
        self._logger.debug(
            "tenant_resolution_details",
            hostname=hostname,
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            domain_type=domain_type,
            **self._get_context_kwargs(),
        )

    def production_resolution_failed(self, hostname: str, error: str) -> None:
        self._logger.error(
            "tenant_resolution_failed_in_production",
            hostname=hostname,
            error=error,
            message="Production hostnames never fall back to cached or dev tenants",
            **self._get_context_kwargs(),
        )

    def override_rejected(self, hostname: str, tenant_id: str) -> None:
        self._logger.info(
            "tenant_override_rejected",
            hostname=hostname,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def all_methods_failed(self, hostname: str, fallback_tenant_id: str) -> None:
        self._logger.error(
            "tenant_resolution_exhausted",
            hostname=hostname,
            fallback_tenant_id=fallback_tenant_id,
            **self._get_context_kwargs(),
        )

    def override_store_failed(self, operation: str, error: Exception) -> None:
        self._logger.warning(
            "tenant_override_store_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
