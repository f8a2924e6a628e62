"""Protocol for caller authentication observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for resolving the caller behind a tenancy request."""

    def user_authenticated(self, user_id: str) -> None:
        """Record that the access token identified a user."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that the caller could not be authenticated."""
        ...

    def authentication_unavailable(self, error: Exception) -> None:
        """Record that the auth service could not verify the token."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def user_authenticated(self, user_id: str) -> None:
        self._logger.debug(
            "tenant_user_authenticated",
            authenticated_user_id=user_id,
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        self._logger.warning(
            "tenant_authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def authentication_unavailable(self, error: Exception) -> None:
        self._logger.error(
            "tenant_authentication_unavailable",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
