"""Resolution outcomes and the duplicate-domain tie-break."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.value_objects import ResolutionErrorCode, ResolutionReason


@dataclass(frozen=True)
class DomainResolution:
    """Outcome of resolving a hostname against the domain directory.

    Unlike ResolutionResult this may carry a domain without a tenant
    (``TENANT_NOT_FOUND``), so callers can show which record matched.
    """

    tenant: Tenant | None = None
    domain: Domain | None = None
    error: ResolutionErrorCode | None = None

    @property
    def succeeded(self) -> bool:
        return self.tenant is not None and self.error is None


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of one tenant resolution attempt.

    Exactly one of the following holds: a tenant is set and error is None,
    or the tenant is None and error is set. The reason is ERROR exactly
    when error is set.

    Raises:
        ValueError: On construction with any other combination.
    """

    tenant: Tenant | None
    domain: Domain | None
    error: ResolutionErrorCode | None
    reason: ResolutionReason

    def __post_init__(self) -> None:
        if (self.tenant is None) == (self.error is None):
            raise ValueError("ResolutionResult needs either a tenant or an error")
        if (self.error is None) == (self.reason == ResolutionReason.ERROR):
            raise ValueError(
                f"Reason {self.reason.value!r} is inconsistent with error {self.error}"
            )

    @classmethod
    def success(
        cls,
        tenant: Tenant,
        reason: ResolutionReason,
        domain: Domain | None = None,
    ) -> ResolutionResult:
        return cls(tenant=tenant, domain=domain, error=None, reason=reason)

    @classmethod
    def failure(
        cls,
        error: ResolutionErrorCode,
        domain: Domain | None = None,
    ) -> ResolutionResult:
        return cls(
            tenant=None, domain=domain, error=error, reason=ResolutionReason.ERROR
        )

    @property
    def is_resolved(self) -> bool:
        return self.tenant is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "tenant": self.tenant.to_dict() if self.tenant else None,
            "domain": self.domain.to_dict() if self.domain else None,
            "error": self.error.value if self.error else None,
            "reason": self.reason.value,
        }


def _recency_key(domain: Domain) -> tuple[int, float]:
    if domain.created_at is None:
        return (1, 0.0)
    return (0, -domain.created_at.timestamp())


def select_domain(candidates: Sequence[Domain]) -> Domain | None:
    """Pick one record when several verified domains match a hostname.

    Prefers the primary domain, then the most recently created record,
    then directory order.
    """
    if not candidates:
        return None
    return min(candidates, key=lambda d: (not d.is_primary, _recency_key(d)))
