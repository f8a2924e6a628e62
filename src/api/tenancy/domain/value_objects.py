"""Value objects for the tenancy domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for the closed vocabularies used during tenant resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DomainType(StrEnum):
    """Which surface a hostname serves."""

    PUBLIC = "public"
    ADMIN = "admin"


class TenantStatus(StrEnum):
    """Lifecycle status of a tenant.

    Only ACTIVE tenants are resolvable.
    """

    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"


class TenantRole(StrEnum):
    """Role of a user within a tenant."""

    OWNER = "owner"
    ADMIN = "admin"
    AGENT = "agent"

    @classmethod
    def parse(cls, value: object) -> TenantRole | None:
        """Map a stored role string onto the enum, None when unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class ResolutionReason(StrEnum):
    """Which resolution path produced a result."""

    DOMAINS = "domains"
    LOCAL_OVERRIDE = "localOverride"
    DEV_FALLBACK = "devFallback"
    ERROR = "error"


class ResolutionErrorCode(StrEnum):
    """Closed taxonomy of tenant resolution failures."""

    DOMAIN_QUERY_ERROR = "DOMAIN_QUERY_ERROR"
    DOMAIN_NOT_FOUND = "DOMAIN_NOT_FOUND"
    TENANT_NOT_FOUND = "TENANT_NOT_FOUND"
    RESOLUTION_ERROR = "RESOLUTION_ERROR"
    ALL_RESOLUTION_METHODS_FAILED = "ALL_RESOLUTION_METHODS_FAILED"


@dataclass(frozen=True)
class HostEnvironment:
    """Environment classification of a hostname.

    A hostname can be neither dev nor prod (e.g. a bare internal name);
    such hosts are treated as non-production.
    """

    is_dev: bool
    is_prod: bool
