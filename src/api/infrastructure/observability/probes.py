"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class BackendClientProbe(Protocol):
    """Domain probe for managed backend query observability.

    This probe captures domain-significant events related to directory
    queries without exposing logging implementation details.
    """

    def query_completed(self, table: str, status_code: int, row_count: int) -> None:
        """Record that a directory query returned rows."""
        ...

    def query_rejected(self, table: str, status_code: int, body: str) -> None:
        """Record that the backend answered a query with an error status."""
        ...

    def connection_failed(self, table: str, error: Exception) -> None:
        """Record that the backend could not be reached."""
        ...

    def invalid_response(self, table: str, error: Exception | None = None) -> None:
        """Record that the backend returned a body that is not a row list."""
        ...

    def access_token_rejected(self, status_code: int) -> None:
        """Record that the auth service refused a user access token."""
        ...

    def client_closed(self) -> None:
        """Record that the HTTP client was closed."""
        ...

    def with_context(self, context: ObservationContext) -> BackendClientProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultBackendClientProbe:
    """Default implementation of BackendClientProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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

    def with_context(self, context: ObservationContext) -> DefaultBackendClientProbe:
        """Create a new probe with observation context bound."""
        return DefaultBackendClientProbe(logger=self._logger, context=context)

    def query_completed(self, table: str, status_code: int, row_count: int) -> None:
        self._logger.debug(
            "backend_query_completed",
            table=table,
            status_code=status_code,
            row_count=row_count,
            **self._get_context_kwargs(),
        )

    def query_rejected(self, table: str, status_code: int, body: str) -> None:
        self._logger.error(
            "backend_query_rejected",
            table=table,
            status_code=status_code,
            body=body,
            **self._get_context_kwargs(),
        )

    def connection_failed(self, table: str, error: Exception) -> None:
        self._logger.error(
            "backend_connection_failed",
            table=table,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def invalid_response(self, table: str, error: Exception | None = None) -> None:
        self._logger.error(
            "backend_invalid_response",
            table=table,
            error=str(error) if error else None,
            **self._get_context_kwargs(),
        )

    def client_closed(self) -> None:
        self._logger.info(
            "backend_client_closed",
            **self._get_context_kwargs(),
        )

    def access_token_rejected(self, status_code: int) -> None:
        self._logger.info(
            "backend_access_token_rejected",
            status_code=status_code,
            **self._get_context_kwargs(),
        )
