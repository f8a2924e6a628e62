"""Protocol for domain resolver observability.

Defines the interface for domain probes that capture domain events
while a hostname is matched against the domain directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DomainResolverProbe(Protocol):
    """Domain probe for hostname-to-domain resolution."""

    def domain_resolved(self, hostname: str, domain_id: str, tenant_id: str) -> None:
        """Record that a verified domain and its active tenant were found."""
        ...

    def domain_not_found(self, hostname: str, domain_type: str) -> None:
        """Record that no verified domain matched the hostname."""
        ...

    def domain_query_failed(self, hostname: str, error: Exception) -> None:
        """Record that the domain directory could not be queried."""
        ...

    def duplicate_domains_found(
        self, hostname: str, count: int, selected_domain_id: str
    ) -> None:
        """Record that several verified records matched and one was picked."""
        ...

    def domain_tenant_not_found(
        self, hostname: str, domain_id: str, tenant_id: str
    ) -> None:
        """Record that a domain matched but its tenant is missing or inactive."""
        ...

    def resolution_error(self, hostname: str, error: Exception) -> None:
        """Record an unexpected error while resolving a hostname."""
        ...

    def with_context(self, context: ObservationContext) -> DomainResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDomainResolverProbe:
    """Default implementation of DomainResolverProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultDomainResolverProbe:
        """Create a new probe with observation context bound."""
        return DefaultDomainResolverProbe(logger=self._logger, context=context)

    def domain_resolved(self, hostname: str, domain_id: str, tenant_id: str) -> None:
        self._logger.debug(
            "domain_resolved",
            hostname=hostname,
            domain_id=domain_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def domain_not_found(self, hostname: str, domain_type: str) -> None:
        self._logger.info(
            "domain_not_found",
            hostname=hostname,
            domain_type=domain_type,
            **self._get_context_kwargs(),
        )

    def domain_query_failed(self, hostname: str, error: Exception) -> None:
        self._logger.error(
            "domain_query_failed",
            hostname=hostname,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def duplicate_domains_found(
        self, hostname: str, count: int, selected_domain_id: str
    ) -> None:
        self._logger.warning(
            "duplicate_domains_found",
            hostname=hostname,
            count=count,
            selected_domain_id=selected_domain_id,
            **self._get_context_kwargs(),
        )

    def domain_tenant_not_found(
        self, hostname: str, domain_id: str, tenant_id: str
    ) -> None:
        self._logger.warning(
            "domain_tenant_not_found",
            hostname=hostname,
            domain_id=domain_id,
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def resolution_error(self, hostname: str, error: Exception) -> None:
        self._logger.error(
            "domain_resolution_error",
            hostname=hostname,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
