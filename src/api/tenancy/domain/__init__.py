"""Tenancy domain module.

Contains entities, value objects and pure decision procedures for the
Tenancy bounded context.
"""

from tenancy.domain.access_gate import GateDecision, GateOutcome, evaluate_access
from tenancy.domain.binding import TenantBinding
from tenancy.domain.entities import Domain, Tenant
from tenancy.domain.host_classifier import classify_domain_type, classify_environment
from tenancy.domain.resolution import DomainResolution, ResolutionResult
from tenancy.domain.value_objects import (
    DomainType,
    HostEnvironment,
    ResolutionErrorCode,
    ResolutionReason,
    TenantRole,
    TenantStatus,
)

__all__ = [
    "Domain",
    "DomainResolution",
    "DomainType",
    "GateDecision",
    "GateOutcome",
    "HostEnvironment",
    "ResolutionErrorCode",
    "ResolutionReason",
    "ResolutionResult",
    "Tenant",
    "TenantBinding",
    "TenantRole",
    "TenantStatus",
    "classify_domain_type",
    "classify_environment",
    "evaluate_access",
]
