"""Access gate for the admin panel.

Decides what an admin screen should show given the session binding and
the authentication state: a loading state, a "panel not configured"
notice, an access-denied notice, or the panel itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tenancy.domain.binding import TenantBinding


class GateDecision(StrEnum):
    LOADING = "loading"
    DOMAIN_NOT_CONFIGURED = "domain_not_configured"
    ACCESS_DENIED = "access_denied"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class GateOutcome:
    """Gate decision plus the details an error screen displays.

    Attributes:
        decision: What to render.
        verify_token: Ownership token of the matched domain, if known.
        tenant_name: Name of the tenant the user was denied access to.
    """

    decision: GateDecision
    verify_token: str | None = None
    tenant_name: str | None = None

    @property
    def allowed(self) -> bool:
        return self.decision == GateDecision.ALLOWED


def evaluate_access(
    binding: TenantBinding,
    user_id: str | None,
    auth_loading: bool = False,
) -> GateOutcome:
    """Evaluate the gate for one session.

    Args:
        binding: Current session tenant binding.
        user_id: Authenticated user, None when signed out.
        auth_loading: Whether the auth state is still being determined.

    Returns:
        The gate outcome. Signed-out visitors of a resolved tenant are
        allowed through; the login screen handles them.
    """
    if binding.loading or auth_loading or (user_id and binding.role_loading):
        return GateOutcome(decision=GateDecision.LOADING)

    if binding.tenant is None:
        return GateOutcome(
            decision=GateDecision.DOMAIN_NOT_CONFIGURED,
            verify_token=binding.domain.verify_token if binding.domain else None,
        )

    if user_id and not binding.is_tenant_member:
        return GateOutcome(
            decision=GateDecision.ACCESS_DENIED,
            tenant_name=binding.tenant.name,
        )

    return GateOutcome(decision=GateDecision.ALLOWED)
